"""Services for the golf trip planner."""
from .llm_client import LLMClient
from .catalog import CatalogService
from .concierge import ConciergeService
from .planner import DeterministicTripPlanner, LLMTripPlanner, plan_trip
from .assembler import render_summary

__all__ = [
    "LLMClient",
    "CatalogService",
    "ConciergeService",
    "DeterministicTripPlanner",
    "LLMTripPlanner",
    "plan_trip",
    "render_summary",
]

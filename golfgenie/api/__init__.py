"""HTTP API for the golf trip planner."""
from .routes import router

__all__ = ["router"]

"""Data models for the golf trip planner."""
from .trip import TripConstraints
from .catalog import (
    Catalog,
    CatalogCategory,
    CatalogItem,
    Experience,
    GolfCourse,
    Hotel,
    Restaurant,
    Vehicle,
)
from .itinerary import (
    Activity,
    ActivityCategory,
    CostBreakdown,
    DayPlan,
    Diagnostic,
    DiagnosticKind,
    Transportation,
    TripPlan,
)

__all__ = [
    "TripConstraints",
    "Catalog",
    "CatalogCategory",
    "CatalogItem",
    "Experience",
    "GolfCourse",
    "Hotel",
    "Restaurant",
    "Vehicle",
    "Activity",
    "ActivityCategory",
    "CostBreakdown",
    "DayPlan",
    "Diagnostic",
    "DiagnosticKind",
    "Transportation",
    "TripPlan",
]

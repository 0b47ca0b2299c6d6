"""
Itinerary models - Structured output for golf trip plans.
"""
import datetime as dt
from decimal import Decimal
from enum import Enum
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, computed_field, model_validator

from .catalog import Experience, GolfCourse, Hotel, Restaurant


CENTS = Decimal("0.01")


def _money_to_json(amount: Decimal) -> str:
    return str(amount.quantize(CENTS))


# Exact in memory, fixed-point "1234.50" strings on the wire
Money = Annotated[Decimal, PlainSerializer(_money_to_json, return_type=str, when_used="json")]


class ActivityCategory(str, Enum):
    """Types of activities in an itinerary."""
    GOLF = "golf"
    HOTEL = "hotel"
    RESTAURANT = "restaurant"
    EXPERIENCE = "experience"
    TRANSPORTATION = "transportation"
    OTHER = "other"


class DiagnosticKind(str, Enum):
    """Non-fatal degradations reported alongside a plan."""
    DATA_DEFICIENCY = "data_deficiency"
    TIME_PARSE = "time_parse"
    LLM_FALLBACK = "llm_fallback"


class Activity(BaseModel):
    """A single scheduled event within a day."""
    model_config = ConfigDict(frozen=True)

    time: str = Field(..., description="Clock time, e.g. '8:30 AM'")
    description: str
    category: ActivityCategory
    item_id: Optional[str] = None
    item_name: Optional[str] = None
    notes: Optional[str] = None


class DayPlan(BaseModel):
    """Plan for a single day."""
    model_config = ConfigDict(frozen=True)

    day_number: int = Field(..., ge=1, description="Day number in the trip")
    date: dt.date
    activities: list[Activity] = Field(default_factory=list)

    def has_category(self, category: ActivityCategory) -> bool:
        return any(a.category == category for a in self.activities)


class Transportation(BaseModel):
    """Rental vehicle arrangement."""
    model_config = ConfigDict(frozen=True)

    type: str
    pickup_location: str
    dropoff_location: str
    cost_per_day: Money
    total_cost: Money


class CostBreakdown(BaseModel):
    """Category subtotals of a plan."""
    model_config = ConfigDict(frozen=True)

    golf: Money = Decimal("0")
    hotel: Money = Decimal("0")
    restaurant: Money = Decimal("0")
    experience: Money = Decimal("0")
    transportation: Money = Decimal("0")

    @computed_field
    @property
    def total(self) -> Money:
        return self.golf + self.hotel + self.restaurant + self.experience + self.transportation


class Diagnostic(BaseModel):
    """A degradation that did not prevent the plan from being produced."""
    model_config = ConfigDict(frozen=True)

    kind: DiagnosticKind
    message: str
    day_number: Optional[int] = None


class TripPlan(BaseModel):
    """Complete golf trip plan."""
    model_config = ConfigDict(frozen=True)

    days: list[DayPlan] = Field(default_factory=list)
    golf_courses: list[GolfCourse] = Field(default_factory=list)
    hotels: list[Hotel] = Field(default_factory=list)
    restaurants: list[Restaurant] = Field(default_factory=list)
    experiences: list[Experience] = Field(default_factory=list)
    transportation: Optional[Transportation] = None
    cost_breakdown: CostBreakdown = Field(default_factory=CostBreakdown)
    total_cost: Money = Decimal("0")
    diagnostics: list[Diagnostic] = Field(default_factory=list)
    source: str = "deterministic"

    @model_validator(mode="after")
    def check_invariants(self):
        if self.total_cost != self.cost_breakdown.total:
            raise ValueError(
                f"total_cost {self.total_cost} does not match subtotals {self.cost_breakdown.total}"
            )
        expected = list(range(1, len(self.days) + 1))
        if [day.day_number for day in self.days] != expected:
            raise ValueError("day numbers must be contiguous starting at 1")
        return self

    @property
    def degraded(self) -> bool:
        """Whether anything was omitted or recovered while planning."""
        return bool(self.diagnostics)

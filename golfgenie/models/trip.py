"""
Trip constraints - User-supplied parameters bounding a plan.
"""
import math
from datetime import date, timedelta
from decimal import Decimal
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class TripConstraints(BaseModel):
    """
    Trip constraints submitted by the trip-planning form.
    Accepts both snake_case and the web form's camelCase field names.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    start_date: date = Field(
        ...,
        validation_alias=AliasChoices("start_date", "startDate"),
        description="First day of the trip"
    )
    end_date: date = Field(
        ...,
        validation_alias=AliasChoices("end_date", "endDate"),
        description="Last day of the trip"
    )
    golfer_count: int = Field(
        ...,
        validation_alias=AliasChoices("golfer_count", "golferCount", "golfers"),
        description="Number of golfers in the party"
    )
    budget_min: Decimal = Field(
        Decimal("0"),
        validation_alias=AliasChoices("budget_min", "budgetMin")
    )
    budget_max: Optional[Decimal] = Field(
        None,
        validation_alias=AliasChoices("budget_max", "budgetMax")
    )
    desired_activity_categories: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices(
            "desired_activity_categories", "desiredActivityCategories", "activities"
        ),
        description="Activity tags the party is interested in"
    )
    needs_vehicle_rental: bool = Field(
        False,
        validation_alias=AliasChoices("needs_vehicle_rental", "needsVehicleRental", "needsRental")
    )
    vehicle_type: str = Field(
        "car",
        validation_alias=AliasChoices("vehicle_type", "vehicleType")
    )
    destination: str = "Myrtle Beach, SC"

    @field_validator("desired_activity_categories", mode="before")
    @classmethod
    def split_categories(cls, v):
        if v is None:
            return []
        if isinstance(v, str):
            return [tag.strip() for tag in v.split(",") if tag.strip()]
        return v

    @property
    def trip_duration_days(self) -> int:
        """
        Number of scheduled days: the span between the dates rounded up,
        with a same-day trip counted as one day.
        """
        span = self.end_date - self.start_date
        days = math.ceil(span.total_seconds() / timedelta(days=1).total_seconds())
        if span >= timedelta(0):
            return max(days, 1)
        return days

    def get_problems(self) -> list[str]:
        """Return the reasons these constraints cannot be planned."""
        problems = []
        if self.end_date < self.start_date:
            problems.append("end_date must not be before start_date")
        if self.golfer_count < 1:
            problems.append("golfer_count must be at least 1")
        if self.budget_min < 0 or (self.budget_max is not None and self.budget_max < 0):
            problems.append("budget values must not be negative")
        if self.budget_max is not None and self.budget_min > self.budget_max:
            problems.append("budget_min must not exceed budget_max")
        return problems

"""Tests for trip constraints and plan models."""
from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError

from golfgenie.models.itinerary import CostBreakdown
from golfgenie.models.trip import TripConstraints


class TestTripConstraints:
    """Test TripConstraints parsing and checks."""

    def test_camel_case_form_fields(self):
        constraints = TripConstraints.model_validate({
            "startDate": "2026-04-01",
            "endDate": "2026-04-05",
            "golferCount": 4,
            "budgetMin": 1000,
            "budgetMax": 2000,
            "desiredActivityCategories": ["dining", "fishing"],
            "needsVehicleRental": True,
            "vehicleType": "van",
        })

        assert constraints.start_date == date(2026, 4, 1)
        assert constraints.golfer_count == 4
        assert constraints.needs_vehicle_rental
        assert constraints.vehicle_type == "van"
        assert constraints.trip_duration_days == 4

    def test_comma_separated_categories(self):
        constraints = TripConstraints(
            start_date=date(2026, 4, 1), end_date=date(2026, 4, 2), golfer_count=1,
            desired_activity_categories="dining, fishing,"
        )

        assert constraints.desired_activity_categories == ["dining", "fishing"]

    def test_same_day_trip_is_one_day(self):
        constraints = TripConstraints(start_date=date(2026, 4, 1), end_date=date(2026, 4, 1), golfer_count=2)

        assert constraints.trip_duration_days == 1
        assert constraints.get_problems() == []

    def test_problems(self):
        constraints = TripConstraints(
            start_date=date(2026, 4, 5), end_date=date(2026, 4, 1), golfer_count=0,
            budget_min=500, budget_max=100
        )

        problems = constraints.get_problems()

        assert "end_date must not be before start_date" in problems
        assert "golfer_count must be at least 1" in problems
        assert "budget_min must not exceed budget_max" in problems

    def test_open_ended_budget(self):
        constraints = TripConstraints(
            start_date=date(2026, 4, 1), end_date=date(2026, 4, 3), golfer_count=2, budget_min=800
        )

        assert constraints.get_problems() == []

    def test_constraints_are_immutable(self):
        constraints = TripConstraints(start_date=date(2026, 4, 1), end_date=date(2026, 4, 3), golfer_count=2)

        with pytest.raises(ValidationError):
            constraints.golfer_count = 5


class TestMoneySerialization:
    """Test how plan amounts appear in JSON."""

    def test_amounts_are_fixed_point_strings(self):
        costs = CostBreakdown(golf=Decimal("1234.5"), hotel=Decimal("0.1"), restaurant=Decimal("0.2"))

        data = costs.model_dump(mode="json")

        assert data["golf"] == "1234.50"
        assert data["total"] == "1234.80"
        assert costs.model_dump()["total"] == Decimal("1234.8")

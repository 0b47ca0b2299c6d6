"""
Cost Aggregator - Estimates what a trip will cost.

All amounts are Decimal so the total is exactly the sum of its parts.
"""
from decimal import Decimal
from typing import Optional

from ..config import Settings, settings as default_settings
from ..models.itinerary import CostBreakdown, Transportation
from ..models.trip import TripConstraints
from .scheduler import Selections


def calculate_costs(
    constraints: TripConstraints,
    selections: Selections,
    config: Optional[Settings] = None
) -> CostBreakdown:
    """
    Compute category subtotals.

    Golf and experiences are charged per golfer; the hotel per night for the
    whole trip; dinners use a flat per-person estimate rather than
    restaurant prices; a rental car costs a flat daily rate.
    """
    config = config or default_settings
    golfers = constraints.golfer_count
    duration = constraints.trip_duration_days

    golf = sum((course.price * golfers for course in selections.golf_courses), Decimal("0"))
    hotel = selections.hotel.price_per_night * duration if selections.hotel else Decimal("0")
    restaurant = len(selections.restaurants) * config.meal_cost_estimate * golfers
    experience = sum((exp.price * golfers for exp in selections.experiences), Decimal("0"))
    transportation = (
        config.rental_cost_per_day * duration if constraints.needs_vehicle_rental else Decimal("0")
    )

    return CostBreakdown(
        golf=golf,
        hotel=hotel,
        restaurant=restaurant,
        experience=experience,
        transportation=transportation
    )


def build_transportation(
    constraints: TripConstraints,
    config: Optional[Settings] = None
) -> Optional[Transportation]:
    """Rental arrangement for the trip, or None when no rental is needed."""
    if not constraints.needs_vehicle_rental:
        return None
    config = config or default_settings
    return Transportation(
        type=constraints.vehicle_type,
        pickup_location=config.rental_location,
        dropoff_location=config.rental_location,
        cost_per_day=config.rental_cost_per_day,
        total_cost=config.rental_cost_per_day * constraints.trip_duration_days
    )

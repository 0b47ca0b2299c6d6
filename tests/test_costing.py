"""Tests for trip cost estimation."""
import random
from decimal import Decimal

from conftest import make_catalog, make_constraints
from golfgenie.config import Settings
from golfgenie.models.catalog import Catalog, Experience, GolfCourse, Hotel, Restaurant
from golfgenie.services.costing import build_transportation, calculate_costs
from golfgenie.services.scheduler import select_candidates


def _costs(constraints, catalog, config=None):
    return calculate_costs(constraints, select_candidates(constraints, catalog), config)


class TestCalculateCosts:
    """Test the cost formulas."""

    def test_three_golfer_three_day_trip(self):
        """3 golfers, 3 courses, oceanfront hotel, 2 dinners and a rental car."""
        constraints = make_constraints(days=3, golfers=3, needs_vehicle_rental=True)
        catalog = make_catalog(golf_prices=(189, 159, 175), hotel_prices=(389,), restaurant_count=2)

        costs = _costs(constraints, catalog)

        assert costs.golf == Decimal("1569")
        assert costs.hotel == Decimal("1167")
        assert costs.restaurant == Decimal("600")
        assert costs.experience == Decimal("0")
        assert costs.transportation == Decimal("150")
        assert costs.total == Decimal("3486")

    def test_empty_restaurants_and_experiences(self):
        constraints = make_constraints(days=2, golfers=2, desired_activity_categories=["spa"])
        catalog = make_catalog(golf_prices=(120,), hotel_prices=(200,), restaurant_count=0)

        costs = _costs(constraints, catalog)

        assert costs.restaurant == 0
        assert costs.experience == 0
        assert costs.total == Decimal("240") + Decimal("400")

    def test_experiences_charged_per_golfer(self):
        constraints = make_constraints(days=4, golfers=2, desired_activity_categories=["fishing"])
        catalog = make_catalog(experience_prices=(150, 16, 89))

        costs = _costs(constraints, catalog)

        assert costs.experience == Decimal("332")

    def test_no_hotel_costs_nothing(self):
        costs = _costs(make_constraints(days=3), make_catalog(hotel_prices=()))

        assert costs.hotel == 0

    def test_one_day_trip_charges_one_night_and_one_rental_day(self):
        constraints = make_constraints(days=0, golfers=1, needs_vehicle_rental=True)
        catalog = make_catalog(golf_prices=(100,), hotel_prices=(250,), restaurant_count=0)

        costs = _costs(constraints, catalog)

        assert costs.hotel == Decimal("250")
        assert costs.transportation == Decimal("50")
        assert costs.total == Decimal("400")

    def test_configured_estimates(self):
        config = Settings(meal_cost_estimate=Decimal("80"), rental_cost_per_day=Decimal("65"), _env_file=None)
        constraints = make_constraints(days=2, golfers=4, needs_vehicle_rental=True)

        costs = _costs(constraints, make_catalog(restaurant_count=1), config)

        assert costs.restaurant == Decimal("320")
        assert costs.transportation == Decimal("130")

    def test_total_matches_subtotals_for_random_trips(self):
        """No rounding drift across randomized catalogs with cent prices."""
        rng = random.Random(20261019)

        def price():
            return Decimal(rng.randint(0, 99999)) / 100

        for _ in range(100):
            days = rng.randint(0, 10)
            golfers = rng.randint(1, 8)
            tags = ["fishing"] if rng.random() < 0.5 else []
            constraints = make_constraints(
                days=days,
                golfers=golfers,
                desired_activity_categories=tags,
                needs_vehicle_rental=rng.random() < 0.5,
            )
            catalog = Catalog(
                golf_courses=[GolfCourse(id=str(i), name=f"c{i}", price=price()) for i in range(rng.randint(0, 5))],
                hotels=[Hotel(id=str(i), name=f"h{i}", price_per_night=price()) for i in range(rng.randint(0, 2))],
                restaurants=[Restaurant(id=str(i), name=f"r{i}") for i in range(rng.randint(0, 5))],
                experiences=[Experience(id=str(i), name=f"e{i}", price=price()) for i in range(rng.randint(0, 4))],
            )
            selections = select_candidates(constraints, catalog)
            duration = constraints.trip_duration_days

            costs = calculate_costs(constraints, selections)

            expected_golf = sum((c.price * golfers for c in selections.golf_courses), Decimal("0"))
            expected_hotel = selections.hotel.price_per_night * duration if selections.hotel else Decimal("0")
            expected_experience = sum((e.price * golfers for e in selections.experiences), Decimal("0"))
            assert costs.golf == expected_golf
            assert costs.hotel == expected_hotel
            assert costs.restaurant == len(selections.restaurants) * 100 * golfers
            assert costs.experience == expected_experience
            assert costs.total == (
                costs.golf + costs.hotel + costs.restaurant + costs.experience + costs.transportation
            )


class TestTransportation:
    """Test rental car arrangements."""

    def test_rental_details(self):
        constraints = make_constraints(days=4, needs_vehicle_rental=True, vehicle_type="suv")

        transportation = build_transportation(constraints)

        assert transportation.type == "suv"
        assert transportation.pickup_location == "Myrtle Beach International Airport"
        assert transportation.dropoff_location == transportation.pickup_location
        assert transportation.cost_per_day == Decimal("50")
        assert transportation.total_cost == Decimal("200")

    def test_no_rental_means_no_transportation(self):
        assert build_transportation(make_constraints(needs_vehicle_rental=False)) is None

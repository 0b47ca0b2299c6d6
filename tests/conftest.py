"""Shared builders for planner tests."""
from datetime import date, timedelta

import pytest

from golfgenie.config import Settings
from golfgenie.models.catalog import Catalog, Experience, GolfCourse, Hotel, Restaurant
from golfgenie.models.trip import TripConstraints


def make_constraints(days: int = 3, golfers: int = 3, **overrides) -> TripConstraints:
    start = overrides.pop("start_date", date(2026, 3, 10))
    data = {
        "start_date": start,
        "end_date": start + timedelta(days=days),
        "golfer_count": golfers,
        "budget_min": 1000,
        "budget_max": 2000,
        "desired_activity_categories": [],
        "needs_vehicle_rental": False,
    }
    data.update(overrides)
    return TripConstraints(**data)


def make_catalog(
    golf_prices=(189, 159, 175),
    hotel_prices=(389,),
    restaurant_count: int = 2,
    experience_prices=()
) -> Catalog:
    return Catalog(
        golf_courses=[
            GolfCourse(id=f"g{i + 1}", name=f"Course {i + 1}", price=p, difficulty="Championship", holes=18)
            for i, p in enumerate(golf_prices)
        ],
        hotels=[
            Hotel(id=f"h{i + 1}", name=f"Hotel {i + 1}", price_per_night=p)
            for i, p in enumerate(hotel_prices)
        ],
        restaurants=[
            Restaurant(id=f"r{i + 1}", name=f"Restaurant {i + 1}", cuisine_type="Seafood")
            for i in range(restaurant_count)
        ],
        experiences=[
            Experience(id=f"e{i + 1}", name=f"Experience {i + 1}", price=p, duration="2 hours")
            for i, p in enumerate(experience_prices)
        ],
    )


@pytest.fixture
def demo_settings() -> Settings:
    return Settings(llm_provider="mock", catalog_api_key="demo-key", _env_file=None)

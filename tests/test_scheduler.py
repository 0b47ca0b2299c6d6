"""Tests for the day scheduler."""
from datetime import date

from conftest import make_catalog, make_constraints
from golfgenie.models.catalog import Catalog
from golfgenie.models.itinerary import ActivityCategory, DiagnosticKind
from golfgenie.services.scheduler import build_days, select_candidates


def _descriptions(day):
    return [a.description for a in day.activities]


class TestSelection:
    """Test which catalog items a trip uses."""

    def test_caps_golf_and_restaurants_at_three(self):
        catalog = make_catalog(golf_prices=(1, 2, 3, 4, 5), restaurant_count=5)

        selections = select_candidates(make_constraints(days=6), catalog)

        assert [c.id for c in selections.golf_courses] == ["g1", "g2", "g3"]
        assert [r.id for r in selections.restaurants] == ["r1", "r2", "r3"]
        assert selections.hotel.id == "h1"

    def test_short_trip_limits_selection(self):
        selections = select_candidates(make_constraints(days=2), make_catalog(restaurant_count=3))

        assert len(selections.golf_courses) == 2
        assert len(selections.restaurants) == 2

    def test_experiences_only_when_activities_requested(self):
        catalog = make_catalog(experience_prices=(10, 20, 30))

        without = select_candidates(make_constraints(), catalog)
        with_tags = select_candidates(
            make_constraints(desired_activity_categories=["fishing"]), catalog
        )

        assert without.experiences == []
        assert [e.id for e in with_tags.experiences] == ["e1", "e2"]


class TestBuildDays:
    """Test per-day construction rules."""

    def test_day_count_and_dates(self):
        result = build_days(make_constraints(days=4), make_catalog())

        assert [d.day_number for d in result.days] == [1, 2, 3, 4]
        assert [d.date for d in result.days] == [
            date(2026, 3, 10), date(2026, 3, 11), date(2026, 3, 12), date(2026, 3, 13)
        ]

    def test_three_day_trip_layout(self):
        result = build_days(make_constraints(days=3), make_catalog(restaurant_count=2))
        first, second, last = result.days

        assert set(_descriptions(first)) == {
            "Check-in at Hotel 1", "Dinner at Restaurant 1",
            "Tee time at Course 1", "Lunch at the clubhouse",
        }
        assert set(_descriptions(second)) == {
            "Tee time at Course 2", "Lunch at the clubhouse", "Dinner at Restaurant 2",
        }
        assert _descriptions(last) == ["Check-out from Hotel 1"]

    def test_golf_notes_and_references(self):
        result = build_days(make_constraints(days=2), make_catalog())
        golf = next(a for a in result.days[0].activities if a.category == ActivityCategory.GOLF)

        assert golf.time == "8:30 AM"
        assert golf.item_id == "g1"
        assert golf.item_name == "Course 1"
        assert golf.notes == "Championship course, 18 holes"

    def test_no_golf_on_last_day(self):
        result = build_days(make_constraints(days=2), make_catalog())

        assert not result.days[-1].has_category(ActivityCategory.GOLF)

    def test_one_day_trip_gets_golf_and_check_in_only(self):
        constraints = make_constraints(days=0)
        result = build_days(constraints, make_catalog())

        assert len(result.days) == 1
        day = result.days[0]
        assert day.has_category(ActivityCategory.GOLF)
        assert "Check-in at Hotel 1" in _descriptions(day)
        assert not any(d.startswith("Check-out") for d in _descriptions(day))
        assert "Lunch at the clubhouse" in _descriptions(day)

    def test_experiences_fill_days_without_golf(self):
        constraints = make_constraints(days=5, desired_activity_categories=["sightseeing"])
        catalog = make_catalog(golf_prices=(100,), experience_prices=(50, 60))

        result = build_days(constraints, catalog)

        experience_days = [
            (d.day_number, a.item_id)
            for d in result.days for a in d.activities
            if a.category == ActivityCategory.EXPERIENCE
        ]
        assert experience_days == [(2, "e1"), (3, "e2")]
        experience = next(a for a in result.days[1].activities if a.category == ActivityCategory.EXPERIENCE)
        assert experience.time == "2:00 PM"
        assert experience.notes == "2 hours activity"

    def test_empty_catalog_does_not_crash(self):
        result = build_days(make_constraints(days=3), Catalog())

        assert len(result.days) == 3
        assert all(day.activities == [] for day in result.days)
        kinds = {d.kind for d in result.diagnostics}
        assert kinds == {DiagnosticKind.DATA_DEFICIENCY}
        assert len(result.diagnostics) == 3

    def test_missing_hotel_omits_check_in_and_out(self):
        catalog = make_catalog(hotel_prices=())

        result = build_days(make_constraints(days=3), catalog)

        assert not any(day.has_category(ActivityCategory.HOTEL) for day in result.days)
        assert any("No hotel" in d.message for d in result.diagnostics)

    def test_undersized_catalog_reported(self):
        result = build_days(make_constraints(days=4), make_catalog(golf_prices=(100,), restaurant_count=1))

        messages = [d.message for d in result.diagnostics]
        assert "Only 1 of 3 golf courses available" in messages
        assert "Only 1 of 3 restaurants available" in messages

    def test_no_null_references(self):
        result = build_days(make_constraints(days=3, desired_activity_categories=["x"]), Catalog())

        for day in result.days:
            for activity in day.activities:
                assert activity.item_id is not None or activity.category == ActivityCategory.OTHER

"""
Day Scheduler - Lays out golf rounds, hotel stays, meals and experiences
across the days of a trip.
"""
import logging
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Optional

from ..models.catalog import Catalog, Experience, GolfCourse, Hotel, Restaurant
from ..models.itinerary import Activity, ActivityCategory, DayPlan, Diagnostic, DiagnosticKind
from ..models.trip import TripConstraints

logger = logging.getLogger(__name__)

MAX_GOLF_ROUNDS = 3
MAX_DINNERS = 3
MAX_EXPERIENCES = 2

CHECK_IN_TIME = "3:00 PM"
CHECK_OUT_TIME = "11:00 AM"
TEE_TIME = "8:30 AM"
LUNCH_TIME = "1:30 PM"
EXPERIENCE_TIME = "2:00 PM"
DINNER_TIME = "7:00 PM"


@dataclass
class Selections:
    """Catalog items chosen for a trip, in catalog order."""
    golf_courses: list[GolfCourse] = field(default_factory=list)
    hotel: Optional[Hotel] = None
    restaurants: list[Restaurant] = field(default_factory=list)
    experiences: list[Experience] = field(default_factory=list)


@dataclass
class ScheduleResult:
    """Scheduler output. Activities within each day are not yet time-ordered."""
    days: list[DayPlan]
    selections: Selections
    diagnostics: list[Diagnostic] = field(default_factory=list)


def select_candidates(constraints: TripConstraints, catalog: Catalog) -> Selections:
    """Pick the venues the trip will use."""
    duration = constraints.trip_duration_days
    experiences = []
    if constraints.desired_activity_categories:
        experiences = catalog.experiences[:MAX_EXPERIENCES]
    return Selections(
        golf_courses=catalog.golf_courses[:min(duration, MAX_GOLF_ROUNDS)],
        hotel=catalog.hotels[0] if catalog.hotels else None,
        restaurants=catalog.restaurants[:min(duration, MAX_DINNERS)],
        experiences=experiences,
    )


def _deficiencies(constraints: TripConstraints, selections: Selections) -> list[Diagnostic]:
    duration = constraints.trip_duration_days
    messages = []

    wanted_rounds = min(duration, MAX_GOLF_ROUNDS)
    if not selections.golf_courses:
        messages.append("No golf courses available; no tee times scheduled")
    elif len(selections.golf_courses) < wanted_rounds:
        messages.append(
            f"Only {len(selections.golf_courses)} of {wanted_rounds} golf courses available"
        )

    if selections.hotel is None:
        messages.append("No hotel available; check-in and check-out omitted")

    wanted_dinners = min(duration, MAX_DINNERS)
    if not selections.restaurants:
        messages.append("No restaurants available; no dinners scheduled")
    elif len(selections.restaurants) < wanted_dinners:
        messages.append(
            f"Only {len(selections.restaurants)} of {wanted_dinners} restaurants available"
        )

    if constraints.desired_activity_categories and not selections.experiences:
        messages.append("Activities requested but no experiences available")

    return [Diagnostic(kind=DiagnosticKind.DATA_DEFICIENCY, message=m) for m in messages]


def _golf_activity(course: GolfCourse) -> Activity:
    details = f"{course.holes} holes"
    if course.difficulty:
        details = f"{course.difficulty} course, {details}"
    return Activity(
        time=TEE_TIME,
        description=f"Tee time at {course.name}",
        category=ActivityCategory.GOLF,
        item_id=course.id,
        item_name=course.name,
        notes=details
    )


def _dinner_activity(restaurant: Restaurant) -> Activity:
    return Activity(
        time=DINNER_TIME,
        description=f"Dinner at {restaurant.name}",
        category=ActivityCategory.RESTAURANT,
        item_id=restaurant.id,
        item_name=restaurant.name,
        notes=f"{restaurant.cuisine_type} cuisine" if restaurant.cuisine_type else None
    )


def _experience_activity(experience: Experience) -> Activity:
    return Activity(
        time=EXPERIENCE_TIME,
        description=experience.name,
        category=ActivityCategory.EXPERIENCE,
        item_id=experience.id,
        item_name=experience.name,
        notes=f"{experience.duration} activity" if experience.duration else None
    )


def build_days(constraints: TripConstraints, catalog: Catalog) -> ScheduleResult:
    """
    Build one DayPlan per trip day.

    For day i (0-based) of an N-day trip, in order:
      1. first day: hotel check-in, plus dinner at the first restaurant
      2. otherwise, last day: hotel check-out
      3. a tee time if a course is left for day i and it is not the last
         day (a 1-day trip still gets its round)
      4. lunch at the clubhouse on golf days
      5. the next unscheduled experience on days without golf
      6. after the first day, dinner at restaurant i if there is one

    A 1-day trip gets the check-in only. Missing venues are left out and
    reported as diagnostics.
    """
    duration = constraints.trip_duration_days
    selections = select_candidates(constraints, catalog)
    diagnostics = _deficiencies(constraints, selections)
    hotel = selections.hotel
    pending_experiences = list(selections.experiences)

    days = []
    for i in range(duration):
        activities = []
        is_last = i == duration - 1

        if i == 0:
            if hotel is not None:
                activities.append(Activity(
                    time=CHECK_IN_TIME,
                    description=f"Check-in at {hotel.name}",
                    category=ActivityCategory.HOTEL,
                    item_id=hotel.id,
                    item_name=hotel.name,
                    notes="Your home for the duration of your stay"
                ))
            if selections.restaurants:
                activities.append(_dinner_activity(selections.restaurants[0]))
        elif is_last and hotel is not None:
            activities.append(Activity(
                time=CHECK_OUT_TIME,
                description=f"Check-out from {hotel.name}",
                category=ActivityCategory.HOTEL,
                item_id=hotel.id,
                item_name=hotel.name
            ))

        if i < len(selections.golf_courses) and (not is_last or duration == 1):
            activities.append(_golf_activity(selections.golf_courses[i]))

        plays_golf = any(a.category == ActivityCategory.GOLF for a in activities)
        if plays_golf:
            activities.append(Activity(
                time=LUNCH_TIME,
                description="Lunch at the clubhouse",
                category=ActivityCategory.OTHER,
                notes="Casual dining after your round"
            ))
        elif pending_experiences:
            activities.append(_experience_activity(pending_experiences.pop(0)))

        if i > 0 and i < len(selections.restaurants):
            activities.append(_dinner_activity(selections.restaurants[i]))

        days.append(DayPlan(
            day_number=i + 1,
            date=constraints.start_date + timedelta(days=i),
            activities=activities
        ))

    for diagnostic in diagnostics:
        logger.warning(diagnostic.message)

    return ScheduleResult(days=days, selections=selections, diagnostics=diagnostics)

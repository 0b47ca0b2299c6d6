"""
Trip Planner - Produces day-by-day golf trip plans.

Two strategies share one interface (``async generate(constraints, catalog)``):
the deterministic engine, which is always available, and an LLM planner
that asks the configured model for a plan and falls back to the engine
whenever the model is unavailable or returns something unusable.
"""
import json
import logging
from datetime import timedelta
from typing import Optional, Protocol

from pydantic import ValidationError

from ..config import Settings, settings as default_settings
from ..errors import InputError, TimeParseError
from ..models.catalog import Catalog
from ..models.itinerary import Activity, ActivityCategory, DayPlan, Diagnostic, DiagnosticKind, TripPlan
from ..models.trip import TripConstraints
from .assembler import assemble
from .costing import build_transportation, calculate_costs
from .llm_client import LLMClient, get_llm_client
from .scheduler import Selections, build_days
from .time_sorter import format_clock_time, parse_clock_time, sort_activities

logger = logging.getLogger(__name__)


PLANNER_SYSTEM_PROMPT = """You are GolfGenie AI, an expert golf trip planning assistant. Create a detailed, day-by-day itinerary for a golf trip using ONLY the available options provided.

RULES:
- Produce exactly one day per trip day, numbered from 1
- Every activity needs a time formatted like "8:30 AM"
- Reference catalog items by their "id" in item_id
- Account for hotel check-in on the first day and check-out on the last day
- Leave realistic gaps for tee times, meals and travel between venues

OUTPUT FORMAT - Return ONLY valid JSON:
{
  "days": [
    {
      "day": 1,
      "activities": [
        {
          "time": "8:30 AM",
          "description": "Tee time at ...",
          "type": "golf|hotel|restaurant|experience|transportation|other",
          "item_id": "catalog id or null",
          "notes": "optional"
        }
      ]
    }
  ]
}"""


class TripPlanner(Protocol):
    """Anything that can turn constraints and a catalog into a plan."""

    async def generate(self, constraints: TripConstraints, catalog: Catalog) -> TripPlan:
        ...


def validate_constraints(constraints: TripConstraints) -> None:
    """Reject constraints that cannot be planned."""
    problems = constraints.get_problems()
    if problems:
        raise InputError(problems)


def _normalize_time(value: str) -> str:
    """'13:30' or '8:30am' become '1:30 PM' / '8:30 AM'; anything else is kept for the sorter to report."""
    try:
        return format_clock_time(parse_clock_time(value))
    except TimeParseError:
        return value


def _order_days(days: list[DayPlan]) -> tuple[list[DayPlan], list[Diagnostic]]:
    ordered_days = []
    diagnostics = []
    for day in days:
        ordered, issues = sort_activities(day.activities, day.day_number)
        ordered_days.append(day.model_copy(update={"activities": ordered}))
        diagnostics.extend(issues)
    return ordered_days, diagnostics


def plan_trip(
    constraints: TripConstraints,
    catalog: Catalog,
    config: Optional[Settings] = None
) -> TripPlan:
    """
    Deterministically plan a trip.

    Args:
        constraints: Validated trip constraints
        catalog: Candidate venues, in preference order

    Returns:
        TripPlan with time-ordered days, selected venues and total cost

    Raises:
        InputError: if the constraints cannot be planned
    """
    validate_constraints(constraints)
    config = config or default_settings

    schedule = build_days(constraints, catalog)
    days, time_issues = _order_days(schedule.days)
    costs = calculate_costs(constraints, schedule.selections, config)
    transportation = build_transportation(constraints, config)

    return assemble(
        days,
        schedule.selections,
        transportation,
        costs,
        schedule.diagnostics + time_issues
    )


class DeterministicTripPlanner:
    """Rule-based planner. Needs no network access."""

    def __init__(self, config: Optional[Settings] = None):
        self.config = config or default_settings

    def plan(self, constraints: TripConstraints, catalog: Catalog) -> TripPlan:
        return plan_trip(constraints, catalog, self.config)

    async def generate(self, constraints: TripConstraints, catalog: Catalog) -> TripPlan:
        return self.plan(constraints, catalog)


class LLMTripPlanner:
    """Asks the LLM for a plan; falls back to the deterministic planner."""

    def __init__(
        self,
        llm: Optional[LLMClient] = None,
        fallback: Optional[DeterministicTripPlanner] = None,
        config: Optional[Settings] = None
    ):
        self.config = config or default_settings
        self.llm = llm or get_llm_client()
        self.fallback = fallback or DeterministicTripPlanner(self.config)

    async def generate(self, constraints: TripConstraints, catalog: Catalog) -> TripPlan:
        validate_constraints(constraints)

        if self.llm.is_mock:
            return self._fall_back(constraints, catalog, "No LLM provider configured")

        messages = [
            {"role": "system", "content": PLANNER_SYSTEM_PROMPT},
            {"role": "user", "content": self._format_request(constraints, catalog)}
        ]
        try:
            result = await self.llm.chat_json(messages, temperature=0.7, max_tokens=3000)
        except Exception as e:
            logger.error(f"LLM trip plan generation error: {e}")
            return self._fall_back(constraints, catalog, f"LLM request failed: {e}")

        plan = self._parse_plan(result, constraints, catalog)
        if plan is None:
            return self._fall_back(constraints, catalog, "LLM response did not contain a usable plan")

        logger.info(f"LLM plan generated with {len(plan.days)} days")
        return plan

    def _fall_back(self, constraints: TripConstraints, catalog: Catalog, reason: str) -> TripPlan:
        logger.warning(f"{reason}; using deterministic trip plan")
        plan = self.fallback.plan(constraints, catalog)
        notice = Diagnostic(kind=DiagnosticKind.LLM_FALLBACK, message=reason)
        return plan.model_copy(update={"diagnostics": [notice] + plan.diagnostics})

    def _format_request(self, constraints: TripConstraints, catalog: Catalog) -> str:
        trip = constraints.model_dump(mode="json")
        trip["trip_duration_days"] = constraints.trip_duration_days
        return f"""TRIP DETAILS:
{json.dumps(trip, indent=2)}

AVAILABLE OPTIONS:
{json.dumps(catalog.model_dump(mode="json"), indent=2)}

Generate the itinerary now."""

    def _parse_plan(
        self,
        data: dict,
        constraints: TripConstraints,
        catalog: Catalog
    ) -> Optional[TripPlan]:
        """
        Turn the model's JSON into a TripPlan, or None if it is unusable.
        Venues and costs are resolved against the catalog, never taken from
        the model's own figures.
        """
        raw_days = data.get("days") if isinstance(data, dict) else None
        if not isinstance(raw_days, list) or len(raw_days) != constraints.trip_duration_days:
            return None
        try:
            return self._build_plan(raw_days, constraints, catalog)
        except (ValidationError, TypeError, ValueError) as e:
            logger.warning(f"Discarding malformed LLM plan: {e}")
            return None

    def _build_plan(self, raw_days: list, constraints: TripConstraints, catalog: Catalog) -> Optional[TripPlan]:
        known = {
            ActivityCategory.GOLF: {c.id: c for c in catalog.golf_courses},
            ActivityCategory.HOTEL: {h.id: h for h in catalog.hotels},
            ActivityCategory.RESTAURANT: {r.id: r for r in catalog.restaurants},
            ActivityCategory.EXPERIENCE: {e.id: e for e in catalog.experiences},
        }
        referenced = {category: [] for category in known}

        days = []
        for i, day_data in enumerate(raw_days):
            if not isinstance(day_data, dict):
                return None
            activities = []
            for act_data in day_data.get("activities") or []:
                if not isinstance(act_data, dict):
                    continue
                time = act_data.get("time")
                description = act_data.get("description")
                if not time or not description:
                    continue
                try:
                    category = ActivityCategory(str(act_data.get("type", "other")).lower())
                except ValueError:
                    category = ActivityCategory.OTHER

                item = None
                item_id = act_data.get("item_id")
                if item_id is not None and category in known:
                    item = known[category].get(str(item_id))
                if item is not None and item.id not in referenced[category]:
                    referenced[category].append(item.id)

                notes = act_data.get("notes")
                activities.append(Activity(
                    time=_normalize_time(str(time)),
                    description=str(description),
                    category=category,
                    item_id=item.id if item else None,
                    item_name=item.name if item else None,
                    notes=str(notes) if notes not in (None, "") else None
                ))
            days.append(DayPlan(
                day_number=i + 1,
                date=constraints.start_date + timedelta(days=i),
                activities=activities
            ))

        def pick(category, items):
            return [item for item in items if item.id in referenced[category]]

        hotels = pick(ActivityCategory.HOTEL, catalog.hotels)
        selections = Selections(
            golf_courses=pick(ActivityCategory.GOLF, catalog.golf_courses),
            hotel=hotels[0] if hotels else None,
            restaurants=pick(ActivityCategory.RESTAURANT, catalog.restaurants),
            experiences=pick(ActivityCategory.EXPERIENCE, catalog.experiences),
        )

        days, time_issues = _order_days(days)
        costs = calculate_costs(constraints, selections, self.config)
        transportation = build_transportation(constraints, self.config)
        return assemble(days, selections, transportation, costs, time_issues, source="llm")


# Global planner instance
planner: Optional[TripPlanner] = None


def get_planner() -> TripPlanner:
    """Get or create the global planner for the configured LLM provider."""
    global planner
    if planner is None:
        if default_settings.llm_provider == "mock":
            planner = DeterministicTripPlanner()
        else:
            planner = LLMTripPlanner()
    return planner

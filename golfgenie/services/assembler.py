"""
Plan Assembler - Combines scheduled days, selections and costs into a
TripPlan, and renders plans as readable text.
"""
from decimal import Decimal
from typing import Optional

from ..models.itinerary import CostBreakdown, DayPlan, Diagnostic, Transportation, TripPlan
from .scheduler import Selections


def assemble(
    days: list[DayPlan],
    selections: Selections,
    transportation: Optional[Transportation],
    costs: CostBreakdown,
    diagnostics: Optional[list[Diagnostic]] = None,
    source: str = "deterministic"
) -> TripPlan:
    """Build the final plan. Pure: no I/O, no clock."""
    return TripPlan(
        days=days,
        golf_courses=selections.golf_courses,
        hotels=[selections.hotel] if selections.hotel is not None else [],
        restaurants=selections.restaurants,
        experiences=selections.experiences,
        transportation=transportation,
        cost_breakdown=costs,
        total_cost=costs.total,
        diagnostics=diagnostics or [],
        source=source
    )


def format_currency(amount: Decimal) -> str:
    """'$3,786' for whole amounts, '$1,234.50' otherwise."""
    if amount == amount.to_integral_value():
        return f"${amount:,.0f}"
    return f"${amount:,.2f}"


def render_summary(plan: TripPlan, destination: str) -> str:
    """Render a plan as a markdown day-by-day summary with a cost total."""
    hotel_name = plan.hotels[0].name if plan.hotels else "a selected hotel"
    lines = [
        "# Your Personalized Golf Trip Plan",
        "",
        f"A {len(plan.days)}-day itinerary for your golf trip to {destination}, "
        f"with {len(plan.golf_courses)} golf courses and accommodations at {hotel_name}.",
        "",
        "## Daily Itinerary",
        "",
    ]

    for day in plan.days:
        lines.append(f"### Day {day.day_number} - {day.date.isoformat()}")
        lines.append("")
        for activity in day.activities:
            line = f"**{activity.time}**: {activity.description}"
            if activity.notes:
                line += f" - {activity.notes}"
            lines.append(line)
        lines.append("")

    lines.append(f"## Total Estimated Cost: {format_currency(plan.total_cost)}")
    return "\n".join(lines)

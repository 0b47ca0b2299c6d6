"""
Activity time ordering.
Only the time of day matters; every time is normalized to minutes after
midnight before comparison.
"""
import re
from typing import Optional

from ..errors import TimeParseError
from ..models.itinerary import Activity, Diagnostic, DiagnosticKind


_TWELVE_HOUR = re.compile(r"^(\d{1,2}):(\d{2})\s*([AaPp])\.?\s*[Mm]\.?$")
_TWENTY_FOUR_HOUR = re.compile(r"^(\d{1,2}):(\d{2})$")


def parse_clock_time(value: str) -> int:
    """
    Parse '8:30 AM', '1:30pm' or '13:30' into minutes after midnight.

    Raises:
        TimeParseError: if the value is not a valid clock time
    """
    if not isinstance(value, str):
        raise TimeParseError(value)
    text = value.strip()

    match = _TWELVE_HOUR.match(text)
    if match:
        hour, minute, meridiem = int(match.group(1)), int(match.group(2)), match.group(3).upper()
        if not 1 <= hour <= 12 or minute > 59:
            raise TimeParseError(value)
        hour %= 12
        if meridiem == "P":
            hour += 12
        return hour * 60 + minute

    match = _TWENTY_FOUR_HOUR.match(text)
    if match:
        hour, minute = int(match.group(1)), int(match.group(2))
        if hour > 23 or minute > 59:
            raise TimeParseError(value)
        return hour * 60 + minute

    raise TimeParseError(value)


def format_clock_time(minutes: int) -> str:
    """Format minutes after midnight as 'h:mm AM/PM'."""
    hour, minute = divmod(minutes % (24 * 60), 60)
    meridiem = "AM" if hour < 12 else "PM"
    return f"{hour % 12 or 12}:{minute:02d} {meridiem}"


def sort_activities(
    activities: list[Activity],
    day_number: Optional[int] = None
) -> tuple[list[Activity], list[Diagnostic]]:
    """
    Order activities by time of day.

    The sort is stable, so activities sharing a time keep their insertion
    order. Activities whose time cannot be parsed are placed after all valid
    ones (still in insertion order) and reported as diagnostics.

    Returns:
        Tuple of (sorted activities, diagnostics)
    """
    diagnostics = []
    keyed = []
    for activity in activities:
        try:
            keyed.append(((0, parse_clock_time(activity.time)), activity))
        except TimeParseError as e:
            keyed.append(((1, 0), activity))
            diagnostics.append(Diagnostic(
                kind=DiagnosticKind.TIME_PARSE,
                message=f"{e}; '{activity.description}' placed at the end of the day",
                day_number=day_number
            ))

    keyed.sort(key=lambda pair: pair[0])
    return [activity for _, activity in keyed], diagnostics

"""
Error types raised by the trip planner.
"""


class PlanningError(Exception):
    """Base class for trip planning errors."""


class InputError(PlanningError):
    """Trip constraints that cannot be planned (fatal, no partial plan)."""

    def __init__(self, problems: list[str]):
        self.problems = list(problems)
        super().__init__("; ".join(self.problems) or "Invalid trip constraints")


class TimeParseError(PlanningError):
    """An activity time string that is not a recognizable clock time."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Unrecognized activity time: {value!r}")


class CatalogError(PlanningError):
    """Unknown catalog category or item."""

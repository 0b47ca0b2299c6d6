"""GolfGenie golf trip planner."""

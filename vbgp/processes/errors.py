"""Errors raised while prioritizing goals.

Both indicate a mismatch between the goals an agent pursues and the
configuration the process was built with; they are not retried.
"""


class GoalPrioritizingError(Exception):
    """Base class for run-time goal prioritizing failures."""

    pass


class UnknownGoalError(GoalPrioritizingError):
    """Raised when a goal has no gain/loss-to-value mapping configured."""

    def __init__(self, goal_name: str):
        super().__init__(f"No gain/loss to value mapping configured for the goal '{goal_name}'")
        self.goal_name = goal_name


class UnsupportedGoalTypeError(GoalPrioritizingError):
    """Raised for a goal type the adjustment formulas do not cover."""

    def __init__(self, goal_type: object):
        super().__init__(
            "Cannot calculate relative difference between goal value and focal "
            f"goal value for goal type {goal_type}"
        )
        self.goal_type = goal_type

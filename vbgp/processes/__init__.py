"""Goal prioritizing processes."""

from .errors import GoalPrioritizingError, UnknownGoalError, UnsupportedGoalTypeError
from .nearest import MAX_ARGUMENT_DELTA, find_nearest_value, find_nearest_value_index
from .prioritizing import ADJUSTMENT_FORMULAS, ValueBasedGoalPrioritizing

__all__ = [
    "GoalPrioritizingError",
    "UnknownGoalError",
    "UnsupportedGoalTypeError",
    "MAX_ARGUMENT_DELTA",
    "find_nearest_value",
    "find_nearest_value_index",
    "ADJUSTMENT_FORMULAS",
    "ValueBasedGoalPrioritizing",
]

"""Input: CSV configuration reader and goal-state snapshot schemas."""

from .reader import read_configuration, read_elements
from .schemas import GoalStateRecord, GoalStateSnapshot, parse_snapshot

__all__ = [
    "read_configuration",
    "read_elements",
    "GoalStateRecord",
    "GoalStateSnapshot",
    "parse_snapshot",
]

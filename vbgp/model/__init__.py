"""Goal model: goal types, goal states and agent capability."""

from .goals import (
    AgentArchetype,
    Goal,
    GoalState,
    GoalType,
    ImportanceAdjustingAgent,
)

__all__ = [
    "AgentArchetype",
    "Goal",
    "GoalState",
    "GoalType",
    "ImportanceAdjustingAgent",
]

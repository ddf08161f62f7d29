"""Value-based goal prioritizing: gain/loss-to-value re-weighting of agent goals."""

from .configuration import (
    GoalGainOrLossToValueMapping,
    MappingCurve,
    MappingPoint,
    VBGPConfiguration,
    VBGPConfigurationError,
    build_registry,
)
from .model import AgentArchetype, Goal, GoalState, GoalType
from .processes import (
    GoalPrioritizingError,
    ValueBasedGoalPrioritizing,
    find_nearest_value,
)

__all__ = [
    "GoalGainOrLossToValueMapping",
    "MappingCurve",
    "MappingPoint",
    "VBGPConfiguration",
    "VBGPConfigurationError",
    "build_registry",
    "AgentArchetype",
    "Goal",
    "GoalState",
    "GoalType",
    "GoalPrioritizingError",
    "ValueBasedGoalPrioritizing",
    "find_nearest_value",
]

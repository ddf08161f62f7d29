"""Goal and goal-state entities consumed by value-based prioritizing.

Only the handful of fields the prioritizing process reads or writes are
modelled here. Agents are represented by whatever object exposes the
``uses_importance_adjusting`` capability flag.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, runtime_checkable


class GoalType(str, Enum):
    """How deviation from a goal's reference value is evaluated."""
    MAXIMIZE = "maximize"
    MINIMIZE = "minimize"
    MAINTAIN_AT_VALUE = "maintain_at_value"
    EQUAL_TO_OR_ABOVE_FOCAL_VALUE = "equal_to_or_above_focal_value"


@dataclass(frozen=True)
class Goal:
    """A named objective an agent pursues.

    Goals are hashable so they can key the per-agent goal-state mapping.
    The name selects the gain/loss mapping in the configuration.
    """

    name: str
    type: GoalType


@dataclass
class GoalState:
    """Per-agent, per-goal measurements for the current decision cycle.

    Attributes:
        value: Current measured value
        focal_value: Goal-specific target (maintain / at-or-above goals)
        prior_value: Value measured at the previous decision cycle
        importance: Base weight supplied by the caller
        confidence: Whether the agent currently trusts its importance weight
        adjusted_importance: Output written by the prioritizing process
    """

    value: float = 0.0
    focal_value: float = 0.0
    prior_value: float = 0.0
    importance: float = 0.0
    confidence: bool = True
    adjusted_importance: float = 0.0


@runtime_checkable
class ImportanceAdjustingAgent(Protocol):
    """Anything that can tell whether importance adjusting is enabled."""

    uses_importance_adjusting: bool


@dataclass(frozen=True)
class AgentArchetype:
    """Minimal agent capability record."""

    name: str = "default"
    uses_importance_adjusting: bool = True

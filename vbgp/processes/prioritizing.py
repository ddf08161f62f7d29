"""
Value-Based Goal Prioritizing: prospect-theory re-weighting of agent goals.

Each decision cycle, goals the agent is not confident about have their
importance scaled by an adjustment factor read off the goal's loss or gain
curve, then all importances are renormalized to sum to 1.0.

The adjustment factor depends on the goal type:

    MAXIMIZE                        1 - loss(min(0, value / prior - 1))
    EQUAL_TO_OR_ABOVE_FOCAL_VALUE   1 - loss(min(0, value / focal - 1))
    MINIMIZE                        1 - loss(max(0, value / prior - 1))
    MAINTAIN_AT_VALUE               1 + gain(k - 1) if k >= 1 else 1 - loss(k - 1),
                                    where k = value / focal

A zero reference (prior or focal) leaves the factor at 1.0.

Usage:
    from vbgp.configuration import build_registry
    from vbgp.processes import ValueBasedGoalPrioritizing

    process = ValueBasedGoalPrioritizing(build_registry(tables))
    adjusted = process.prioritize(agent, goal_states)

Side effect:
    ``prioritize`` writes ``GoalState.adjusted_importance`` in place for every
    goal it is given. Nothing else is mutated; the same result is returned
    as a new dict.
"""

import logging
from typing import Callable, Mapping

from vbgp.configuration.mapping import GoalGainOrLossToValueMapping
from vbgp.configuration.registry import VBGPConfiguration
from vbgp.model.goals import Goal, GoalState, GoalType, ImportanceAdjustingAgent
from vbgp.processes.errors import UnknownGoalError, UnsupportedGoalTypeError
from vbgp.processes.nearest import find_nearest_value

logger = logging.getLogger(__name__)

# Factor applied when the reference value is zero
NEUTRAL_ADJUSTMENT = 1.0


def _maximize(mapping: GoalGainOrLossToValueMapping, state: GoalState) -> float:
    if state.prior_value == 0.0:
        return NEUTRAL_ADJUSTMENT
    loss = min(0.0, state.value / state.prior_value - 1.0)
    return 1.0 - find_nearest_value(mapping.loss_to_value, loss)


def _equal_to_or_above_focal_value(mapping: GoalGainOrLossToValueMapping, state: GoalState) -> float:
    if state.focal_value == 0.0:
        return NEUTRAL_ADJUSTMENT
    loss = min(0.0, state.value / state.focal_value - 1.0)
    return 1.0 - find_nearest_value(mapping.loss_to_value, loss)


def _minimize(mapping: GoalGainOrLossToValueMapping, state: GoalState) -> float:
    if state.prior_value == 0.0:
        return NEUTRAL_ADJUSTMENT
    # Growth is the loss for a minimized quantity; it is still read off the loss curve
    loss = max(0.0, state.value / state.prior_value - 1.0)
    return 1.0 - find_nearest_value(mapping.loss_to_value, loss)


def _maintain_at_value(mapping: GoalGainOrLossToValueMapping, state: GoalState) -> float:
    if state.focal_value == 0.0:
        return NEUTRAL_ADJUSTMENT
    k = state.value / state.focal_value
    if k >= 1.0:
        return 1.0 + find_nearest_value(mapping.gain_to_value, k - 1.0)
    return 1.0 - find_nearest_value(mapping.loss_to_value, k - 1.0)


AdjustmentFormula = Callable[[GoalGainOrLossToValueMapping, GoalState], float]

# One formula per GoalType member; tests assert the table stays complete
ADJUSTMENT_FORMULAS: dict[GoalType, AdjustmentFormula] = {
    GoalType.MAXIMIZE: _maximize,
    GoalType.EQUAL_TO_OR_ABOVE_FOCAL_VALUE: _equal_to_or_above_focal_value,
    GoalType.MINIMIZE: _minimize,
    GoalType.MAINTAIN_AT_VALUE: _maintain_at_value,
}


class ValueBasedGoalPrioritizing:
    """
    Value-based goal prioritizing process.

    Holds a shared, read-only VBGPConfiguration. One instance can serve any
    number of agents; each call only touches the goal states it is given.
    """

    def __init__(self, config: VBGPConfiguration):
        """
        Initialize the process.

        Args:
            config: Gain/loss-to-value mappings for every goal to be prioritized
        """
        if config is None:
            raise ValueError("ValueBasedGoalPrioritizing requires a configuration")
        self._config = config

    @property
    def config(self) -> VBGPConfiguration:
        return self._config

    def prioritize(
        self,
        agent: ImportanceAdjustingAgent,
        goals: Mapping[Goal, GoalState],
    ) -> dict[Goal, float]:
        """
        Prioritize an agent's goals for the current decision cycle.

        Args:
            agent: Agent exposing ``uses_importance_adjusting``
            goals: Goal states of this agent, keyed by goal

        Returns:
            Final adjusted importance per goal (also written to each GoalState)

        Raises:
            UnknownGoalError: A low-confidence goal has no configured mapping
            UnsupportedGoalTypeError: A low-confidence goal has an unknown type
        """
        if not goals:
            return {}

        for state in goals.values():
            state.adjusted_importance = state.importance

        if not agent.uses_importance_adjusting:
            return self._snapshot(goals)

        no_confidence_goals = [
            (goal, state)
            for goal, state in goals.items()
            if state.importance > 0 and not state.confidence
        ]
        if not no_confidence_goals:
            return self._snapshot(goals)

        for goal, state in no_confidence_goals:
            adjustment = self.calculate_adjustment(goal, state)
            state.adjusted_importance = state.importance * adjustment
            logger.debug(
                f"Goal '{goal.name}' ({goal.type.value}): adjustment={adjustment:.4f}, "
                f"adjusted_importance={state.adjusted_importance:.4f}"
            )

        total_adjusted_importance = sum(state.adjusted_importance for state in goals.values())
        if total_adjusted_importance == 0.0:
            logger.warning(
                f"Total adjusted importance is zero for {len(goals)} goals; "
                "skipping renormalization"
            )
            return self._snapshot(goals)

        for state in goals.values():
            state.adjusted_importance /= total_adjusted_importance

        return self._snapshot(goals)

    def calculate_adjustment(self, goal: Goal, goal_state: GoalState) -> float:
        """
        Calculate the relative importance adjustment factor for one goal.

        Args:
            goal: The goal (its name selects the mapping, its type the formula)
            goal_state: Current measurements for the goal

        Returns:
            Multiplier applied to the goal's importance
        """
        mapping = self._config.get(goal.name)
        if mapping is None:
            raise UnknownGoalError(goal.name)

        # Plain strings compare equal to str-Enum members, so require the enum itself
        formula = ADJUSTMENT_FORMULAS.get(goal.type) if isinstance(goal.type, GoalType) else None
        if formula is None:
            raise UnsupportedGoalTypeError(goal.type)

        return formula(mapping, goal_state)

    @staticmethod
    def _snapshot(goals: Mapping[Goal, GoalState]) -> dict[Goal, float]:
        return {goal: state.adjusted_importance for goal, state in goals.items()}

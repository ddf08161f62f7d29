"""Configuration for the value-based goal prioritizing process.

Holds one gain/loss-to-value mapping per goal, keyed by goal name. Built
once at load time and shared read-only afterwards.
"""

import logging
from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Sequence

from vbgp.configuration.errors import MissingConfigurationError, NoGoalsError
from vbgp.configuration.mapping import GoalGainOrLossToValueMapping

logger = logging.getLogger(__name__)


class VBGPConfiguration:
    """Gain/loss-to-value mappings for every goal.

    Attributes:
        gain_and_loss_to_value: Read-only mapping from goal name to its mapping
    """

    __slots__ = ("_mappings",)

    def __init__(
        self,
        gain_or_loss_to_value: Optional[Mapping[str, Optional[Sequence[Sequence[float]]]]],
    ):
        """
        Build the per-goal mappings.

        Args:
            gain_or_loss_to_value: Raw ``(argument, value)`` elements per goal name

        Raises:
            MissingConfigurationError: the input mapping is None
            NoGoalsError: the input mapping is empty
            VBGPConfigurationError: any goal's mapping is malformed
        """
        if gain_or_loss_to_value is None:
            raise MissingConfigurationError()

        if len(gain_or_loss_to_value) == 0:
            raise NoGoalsError()

        mappings: dict[str, GoalGainOrLossToValueMapping] = {}
        for goal_name, elements in gain_or_loss_to_value.items():
            mappings[goal_name] = GoalGainOrLossToValueMapping(goal_name, elements)

        self._mappings = MappingProxyType(mappings)
        logger.info(f"Built gain/loss-to-value configuration for {len(mappings)} goals")

    @property
    def gain_and_loss_to_value(self) -> Mapping[str, GoalGainOrLossToValueMapping]:
        return self._mappings

    @property
    def goal_count(self) -> int:
        """Number of goals."""
        return len(self._mappings)

    @property
    def goal_names(self) -> list[str]:
        return list(self._mappings)

    def get(self, goal_name: str) -> Optional[GoalGainOrLossToValueMapping]:
        """Get a goal's mapping, or None if the goal is not configured."""
        return self._mappings.get(goal_name)

    def __getitem__(self, goal_name: str) -> GoalGainOrLossToValueMapping:
        return self._mappings[goal_name]

    def __contains__(self, goal_name: object) -> bool:
        return goal_name in self._mappings

    def __iter__(self) -> Iterator[str]:
        return iter(self._mappings)

    def __len__(self) -> int:
        return len(self._mappings)

    def __repr__(self) -> str:
        return f"VBGPConfiguration(goals={self.goal_names!r})"


def build_registry(
    gain_or_loss_to_value: Optional[Mapping[str, Optional[Sequence[Sequence[float]]]]],
) -> VBGPConfiguration:
    """Build a validated configuration from raw per-goal elements.

    Args:
        gain_or_loss_to_value: ``{goal_name: [(argument, value), ...]}`` in percent units

    Returns:
        Immutable VBGPConfiguration
    """
    return VBGPConfiguration(gain_or_loss_to_value)

"""Gain/loss-to-value mapping for a single goal.

A calibration table arrives as an unordered list of ``(argument, value)``
pairs in percent units: the argument is the relative change of the goal
value (-100..100), the value is the adjustment magnitude. The table is
split into a loss curve (negative arguments) and a gain curve (arguments
>= 0), both sorted ascending and scaled into the [-1.0, 1.0] range.

Loss-side values are magnitudes subtracted from 1.0 by the prioritizing
process; gain-side values are added to it.
"""

import logging
from typing import Iterable, Iterator, NamedTuple, Optional, Sequence

import numpy as np

from vbgp.configuration.errors import (
    ArgumentOutOfRangeError,
    DuplicateArgumentError,
    EmptyMappingError,
    MissingGainSideError,
    MissingGoalNameError,
    MissingLossSideError,
    MissingMappingError,
)

logger = logging.getLogger(__name__)

# Raw arguments are percentages of relative change
MIN_RAW_ARGUMENT = -100.0
MAX_RAW_ARGUMENT = 100.0

# Divisor mapping percent units onto [-1.0, 1.0]
PERCENT_SCALE = 100.0


class MappingPoint(NamedTuple):
    """One break point of a gain or loss curve."""
    argument: float
    value: float


class MappingCurve:
    """Immutable, argument-sorted sequence of mapping points.

    Backed by two read-only float64 arrays so lookups index plain numbers.
    """

    __slots__ = ("_arguments", "_values")

    def __init__(self, arguments: Sequence[float], values: Sequence[float]):
        arguments = np.array(arguments, dtype=np.float64)
        values = np.array(values, dtype=np.float64)
        if arguments.shape != values.shape or arguments.ndim != 1:
            raise ValueError(
                f"Curve arguments and values must be 1-D and equal length, "
                f"got {arguments.shape} and {values.shape}"
            )
        arguments.setflags(write=False)
        values.setflags(write=False)
        self._arguments = arguments
        self._values = values

    @classmethod
    def from_points(cls, points: Iterable[Sequence[float]]) -> "MappingCurve":
        """Build a curve from already-sorted ``(argument, value)`` pairs."""
        points = list(points)
        return cls([p[0] for p in points], [p[1] for p in points])

    @property
    def arguments(self) -> np.ndarray:
        """Read-only array of break-point arguments, ascending."""
        return self._arguments

    @property
    def values(self) -> np.ndarray:
        """Read-only array of mapped values, aligned with ``arguments``."""
        return self._values

    def scaled(self, divisor: float) -> "MappingCurve":
        """Return a new curve with arguments and values divided by ``divisor``."""
        return MappingCurve(self._arguments / divisor, self._values / divisor)

    def __len__(self) -> int:
        return len(self._arguments)

    def __getitem__(self, index: int) -> MappingPoint:
        return MappingPoint(float(self._arguments[index]), float(self._values[index]))

    def __iter__(self) -> Iterator[MappingPoint]:
        for argument, value in zip(self._arguments, self._values):
            yield MappingPoint(float(argument), float(value))

    def __eq__(self, other) -> bool:
        if not isinstance(other, MappingCurve):
            return NotImplemented
        return (
            np.array_equal(self._arguments, other._arguments)
            and np.array_equal(self._values, other._values)
        )

    def __repr__(self) -> str:
        return f"MappingCurve({[tuple(p) for p in self]!r})"


class GoalGainOrLossToValueMapping:
    """Gain and loss to value mapping for a single goal.

    Construction validates the raw table and is the only place the curves
    are computed; the instance is read-only afterwards.

    Attributes:
        goal_name: Goal this mapping applies to
        loss_to_value: Curve for negative relative changes, arguments in [-1, 0)
        gain_to_value: Curve for non-negative relative changes, arguments in [0, 1]
    """

    __slots__ = ("_goal_name", "_loss_to_value", "_gain_to_value")

    def __init__(self, goal_name: Optional[str], elements: Optional[Sequence[Sequence[float]]]):
        """Validate and normalize a raw calibration table.

        Args:
            goal_name: Name of the goal to which this mapping applies
            elements: Unordered ``(argument, value)`` pairs in percent units

        Raises:
            MissingGoalNameError: goal_name is None or empty
            MissingMappingError: elements is None
            EmptyMappingError: elements is empty
            ArgumentOutOfRangeError: an argument lies outside [-100, 100]
            DuplicateArgumentError: two elements share the same argument
            MissingLossSideError: no negative arguments
            MissingGainSideError: no non-negative arguments
        """
        if not goal_name:
            raise MissingGoalNameError()

        if elements is None:
            raise MissingMappingError(goal_name)

        points = [MappingPoint(float(e[0]), float(e[1])) for e in elements]
        if not points:
            raise EmptyMappingError(goal_name)

        first_seen: dict[float, int] = {}
        for index, point in enumerate(points):
            # Written as a negated range test so NaN is rejected too
            if not (MIN_RAW_ARGUMENT <= point.argument <= MAX_RAW_ARGUMENT):
                raise ArgumentOutOfRangeError(goal_name, index, point.argument)
            if point.argument in first_seen:
                raise DuplicateArgumentError(
                    goal_name, index, first_seen[point.argument], point.argument
                )
            first_seen[point.argument] = index

        sorted_points = sorted(points, key=lambda p: p.argument)
        first_gain_index = next(
            (i for i, p in enumerate(sorted_points) if p.argument >= 0.0),
            len(sorted_points),
        )

        if first_gain_index == 0:
            raise MissingLossSideError(goal_name)
        if first_gain_index == len(sorted_points):
            raise MissingGainSideError(goal_name)

        self._goal_name = goal_name
        self._loss_to_value = MappingCurve.from_points(
            sorted_points[:first_gain_index]
        ).scaled(PERCENT_SCALE)
        self._gain_to_value = MappingCurve.from_points(
            sorted_points[first_gain_index:]
        ).scaled(PERCENT_SCALE)

        logger.debug(
            f"Mapping for goal '{goal_name}': {len(self._loss_to_value)} loss points, "
            f"{len(self._gain_to_value)} gain points"
        )

    @property
    def goal_name(self) -> str:
        return self._goal_name

    @property
    def loss_to_value(self) -> MappingCurve:
        return self._loss_to_value

    @property
    def gain_to_value(self) -> MappingCurve:
        return self._gain_to_value

    def __repr__(self) -> str:
        return (
            f"GoalGainOrLossToValueMapping(goal_name={self._goal_name!r}, "
            f"losses={len(self._loss_to_value)}, gains={len(self._gain_to_value)})"
        )

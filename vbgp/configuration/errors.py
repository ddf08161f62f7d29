"""Errors raised while building the gain/loss-to-value configuration.

All of them are fatal at load time: the calibration table is malformed and
must be fixed by whoever supplied it.
"""

from typing import Optional


class VBGPConfigurationError(ValueError):
    """Base class for malformed gain/loss-to-value configuration.

    Attributes:
        goal_name: Goal whose mapping is malformed, when known
    """

    def __init__(self, message: str, goal_name: Optional[str] = None):
        super().__init__(message)
        self.goal_name = goal_name


class MissingGoalNameError(VBGPConfigurationError):
    """Raised when a mapping is built without a goal name."""

    def __init__(self):
        super().__init__("Missing goal name")


class MissingMappingError(VBGPConfigurationError):
    """Raised when a goal has no mapping elements at all (None)."""

    def __init__(self, goal_name: str):
        super().__init__(f"Missing mapping for the goal '{goal_name}'", goal_name)


class EmptyMappingError(VBGPConfigurationError):
    """Raised when a goal's mapping element list is empty."""

    def __init__(self, goal_name: str):
        super().__init__(f"Empty mapping for the goal '{goal_name}'", goal_name)


class ArgumentOutOfRangeError(VBGPConfigurationError):
    """Raised when a raw argument lies outside [-100, 100]."""

    def __init__(self, goal_name: str, index: int, argument: float):
        super().__init__(
            f"Invalid mapping argument #{index} '{argument}' for the goal '{goal_name}'",
            goal_name,
        )
        self.index = index
        self.argument = argument


class DuplicateArgumentError(VBGPConfigurationError):
    """Raised when two elements share the same raw argument.

    Attributes:
        index: Position of the duplicate element
        first_index: Position where the argument first appeared
        argument: The repeated raw argument
    """

    def __init__(self, goal_name: str, index: int, first_index: int, argument: float):
        super().__init__(
            f"Duplicate mapping argument #{index} '{argument}', introduced earlier "
            f"at position #{first_index} for the goal '{goal_name}'",
            goal_name,
        )
        self.index = index
        self.first_index = first_index
        self.argument = argument


class MissingLossSideError(VBGPConfigurationError):
    """Raised when no element has a negative argument."""

    def __init__(self, goal_name: str):
        super().__init__(f"Missing losses in the mapping for the goal '{goal_name}'", goal_name)


class MissingGainSideError(VBGPConfigurationError):
    """Raised when no element has a non-negative argument."""

    def __init__(self, goal_name: str):
        super().__init__(f"Missing gains in the mapping for the goal '{goal_name}'", goal_name)


class MissingConfigurationError(VBGPConfigurationError):
    """Raised when the per-goal mapping dictionary itself is None."""

    def __init__(self):
        super().__init__("Missing gain and loss to value configuration")


class NoGoalsError(VBGPConfigurationError):
    """Raised when the configuration contains no goals."""

    def __init__(self):
        super().__init__("Missing gain and loss to value mapping: no goals configured")


class ConfigurationFileError(VBGPConfigurationError):
    """Raised when a configuration file cannot be parsed.

    Attributes:
        path: File being read
        row: 1-based row number of the offending line, if known
    """

    def __init__(self, path, message: str, row: Optional[int] = None,
                 goal_name: Optional[str] = None):
        location = f"{path}:{row}" if row is not None else f"{path}"
        super().__init__(f"{location}: {message}", goal_name)
        self.path = path
        self.row = row

"""Gain/loss-to-value configuration: per-goal mappings and their registry."""

from .errors import (
    ArgumentOutOfRangeError,
    ConfigurationFileError,
    DuplicateArgumentError,
    EmptyMappingError,
    MissingConfigurationError,
    MissingGainSideError,
    MissingGoalNameError,
    MissingLossSideError,
    MissingMappingError,
    NoGoalsError,
    VBGPConfigurationError,
)
from .mapping import (
    GoalGainOrLossToValueMapping,
    MappingCurve,
    MappingPoint,
    PERCENT_SCALE,
)
from .registry import VBGPConfiguration, build_registry

__all__ = [
    # Errors
    "VBGPConfigurationError",
    "MissingGoalNameError",
    "MissingMappingError",
    "EmptyMappingError",
    "ArgumentOutOfRangeError",
    "DuplicateArgumentError",
    "MissingLossSideError",
    "MissingGainSideError",
    "MissingConfigurationError",
    "NoGoalsError",
    "ConfigurationFileError",
    # Mappings
    "MappingPoint",
    "MappingCurve",
    "GoalGainOrLossToValueMapping",
    "PERCENT_SCALE",
    # Registry
    "VBGPConfiguration",
    "build_registry",
]

"""Pytest configuration and fixtures."""

import pytest

from vbgp.configuration.registry import VBGPConfiguration
from vbgp.model.goals import AgentArchetype, Goal, GoalType


# Percent-unit calibration table shared by most tests
PROFIT_ELEMENTS = [
    (-100.0, 90.0),
    (-50.0, 60.0),
    (-20.0, 30.0),
    (-10.0, 10.0),
    (0.0, 0.0),
    (10.0, 5.0),
    (50.0, 20.0),
    (100.0, 40.0),
]


@pytest.fixture
def profit_elements():
    return list(PROFIT_ELEMENTS)


@pytest.fixture
def config():
    """Configuration with one goal per goal type, all sharing the same table."""
    return VBGPConfiguration({
        "Profit": PROFIT_ELEMENTS,
        "Cost": PROFIT_ELEMENTS,
        "Biomass": PROFIT_ELEMENTS,
        "Income": PROFIT_ELEMENTS,
    })


@pytest.fixture
def adjusting_agent():
    return AgentArchetype(name="adjusting", uses_importance_adjusting=True)


@pytest.fixture
def fixed_agent():
    return AgentArchetype(name="fixed", uses_importance_adjusting=False)


@pytest.fixture
def goals():
    return {
        "Profit": Goal("Profit", GoalType.MAXIMIZE),
        "Cost": Goal("Cost", GoalType.MINIMIZE),
        "Biomass": Goal("Biomass", GoalType.MAINTAIN_AT_VALUE),
        "Income": Goal("Income", GoalType.EQUAL_TO_OR_ABOVE_FOCAL_VALUE),
    }

"""Shared fixtures for the attribute assignment test suite."""

import pytest

from src.attribute_assignment.assignment_engine import AssignmentEngine

SCENARIO_VALUES = [15, 14, 13, 12, 10, 9, 8]


@pytest.fixture
def engine():
    """Engine that has not been initialized yet."""
    return AssignmentEngine()


@pytest.fixture
def seeded_engine():
    """Engine initialized with the standard scenario values."""
    eng = AssignmentEngine()
    eng.initialize(SCENARIO_VALUES)
    return eng


@pytest.fixture
def scenario_values():
    """Fresh copy of the standard scenario values."""
    return list(SCENARIO_VALUES)

"""
Pytest configuration and shared fixtures for the toy robot tests.

Provides markers, a fresh robot state and interpreter per test, and a helper
that runs a list of command lines and collects the report output.
"""

import os
import sys
from typing import Callable, List

import pytest

# Add the parent directory to Python path so we can import the package
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from toyrobot.simulator.interpreter import Interpreter
from toyrobot.simulator.runner import run_lines
from toyrobot.simulator.state import RobotState


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests that test individual components in isolation"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests that run the CLI in a subprocess"
    )


@pytest.fixture
def robot_state() -> RobotState:
    """Fresh, unplaced robot state."""
    return RobotState()


@pytest.fixture
def interpreter(robot_state: RobotState) -> Interpreter:
    """Interpreter bound to the ``robot_state`` fixture."""
    return Interpreter(robot_state)


@pytest.fixture
def run_commands(interpreter: Interpreter) -> Callable[[List[str]], List[str]]:
    """Run lines through the shared interpreter and return the reports."""

    def _run(lines: List[str]) -> List[str]:
        return list(run_lines(lines, interpreter))

    return _run

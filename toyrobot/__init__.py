"""
Toy Robot Python Package

Simulates a single robot on a fixed 5x5 table driven by a small text command
language (PLACE X,Y,F / MOVE / LEFT / RIGHT / REPORT).

Key components:
- RobotState: position, facing and placement status with boundary enforcement
- Interpreter: parses one line and applies it, returning an Outcome
- run_lines: lazily yields the report output for a sequence of lines
- Facing: the four cardinal directions, with pure rotation helpers
"""

from ._version import __version__
from .protocol.types import Facing, Outcome, OutcomeKind
from .simulator.interpreter import Interpreter
from .simulator.runner import Simulation, run_lines
from .simulator.state import RobotState

__all__ = [
    "__version__",
    "Facing",
    "Outcome",
    "OutcomeKind",
    "Interpreter",
    "RobotState",
    "Simulation",
    "run_lines",
]

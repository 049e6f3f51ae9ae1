"""
Line interpreter for the toy robot command language.

Turns one raw text line into an Outcome, applying the matched command to the
robot state it owns. Malformed input never raises; it is rejected silently and
the reason is only visible in the logs.
"""

from __future__ import annotations

import logging

from toyrobot.config import TRACE
from toyrobot.protocol.types import Outcome
from toyrobot.simulator import command_registry
from toyrobot.simulator.state import RobotState

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Parses and applies commands, one line at a time, in arrival order.

    The interpreter exclusively owns its RobotState; pass one in to inspect
    it from outside (tests do), otherwise a fresh unplaced state is created.
    """

    def __init__(self, state: RobotState | None = None):
        self.state = state if state is not None else RobotState()

    def reset(self) -> None:
        self.state.reset()

    def interpret(self, raw_line: str) -> Outcome:
        line = raw_line.strip()
        if not line:
            return Outcome.no_output("blank line")

        parts = line.split()
        command, error = command_registry.create_command_from_parts(parts)
        if command is None:
            reason = error or f"unknown command '{parts[0]}'"
            logger.debug("Rejected %r: %s", line, reason)
            return Outcome.rejected(reason)

        status = command.execute(self.state)
        if not status.ok:
            # Bounds failures and commands before PLACE are silent no-ops
            logger.debug("No effect %r: %s", line, status.message)
            return Outcome.no_output(status.message)

        report = (status.details or {}).get("report")
        if report is not None:
            logger.log(TRACE, "Report %s", report)
            return Outcome.report(report)
        return Outcome.no_output()

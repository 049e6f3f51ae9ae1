"""
Query command: REPORT

Read-only; never mutates the robot state.
"""

from toyrobot.commands.base import ExecutionStatus, NoArgCommand
from toyrobot.simulator.command_registry import register_command
from toyrobot.simulator.state import RobotState


@register_command("REPORT")
class ReportCommand(NoArgCommand):
    """Announce position and facing as ``X,Y,FACING``."""

    def execute_step(self, state: RobotState) -> ExecutionStatus:
        text = state.report()
        if text is None:
            return ExecutionStatus.failed("not placed")
        return ExecutionStatus.completed("reported", details={"report": text})

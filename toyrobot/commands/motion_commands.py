"""
Motion commands: MOVE, LEFT, RIGHT
"""

from toyrobot.commands.base import ExecutionStatus, NoArgCommand
from toyrobot.simulator.command_registry import register_command
from toyrobot.simulator.state import RobotState


@register_command("MOVE")
class MoveCommand(NoArgCommand):
    """Step one cell forward; refused at the table edge."""

    def execute_step(self, state: RobotState) -> ExecutionStatus:
        if not state.move():
            if not state.placed:
                return ExecutionStatus.failed("not placed")
            return ExecutionStatus.failed("blocked by edge", details={"x": state.x, "y": state.y, "facing": state.facing.name})
        return ExecutionStatus.completed(f"moved to {state.x},{state.y}")


@register_command("LEFT")
class LeftCommand(NoArgCommand):
    """Rotate 90 degrees counter-clockwise in place."""

    def execute_step(self, state: RobotState) -> ExecutionStatus:
        if not state.turn_left():
            return ExecutionStatus.failed("not placed")
        return ExecutionStatus.completed(f"facing {state.facing.name}")


@register_command("RIGHT")
class RightCommand(NoArgCommand):
    """Rotate 90 degrees clockwise in place."""

    def execute_step(self, state: RobotState) -> ExecutionStatus:
        if not state.turn_right():
            return ExecutionStatus.failed("not placed")
        return ExecutionStatus.completed(f"facing {state.facing.name}")

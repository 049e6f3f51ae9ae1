"""
Placement command: PLACE X,Y,DIRECTION
"""

from typing import List, Optional, Tuple

from toyrobot.commands.base import CommandBase, ExecutionStatus, expect_len, parse_unsigned_int
from toyrobot.protocol.types import Facing, fold_token, parse_facing
from toyrobot.simulator.command_registry import register_command
from toyrobot.simulator.state import RobotState


@register_command("PLACE")
class PlaceCommand(CommandBase):
    """
    Put the robot on the table at (x, y) facing a direction.

    Parameters arrive as a single token ``X,Y,DIRECTION`` with no spaces.
    Coordinates are unsigned decimal literals; bounds are checked by the state.
    """

    __slots__ = ("x", "y", "facing")

    def __init__(self, x: Optional[int] = None, y: Optional[int] = None, facing: Optional[Facing] = None):
        super().__init__()
        self.x = x
        self.y = y
        self.facing = facing

    def do_match(self, parts: List[str]) -> Tuple[bool, Optional[str]]:
        if not parts or fold_token(parts[0]) != "PLACE":
            return False, None
        expect_len(parts, 2, "PLACE")

        fields = parts[1].split(",")
        if len(fields) != 3 or any(ch.isspace() for ch in parts[1]):
            raise ValueError(f"PLACE expects X,Y,DIRECTION, got {parts[1]!r}")

        self.x = parse_unsigned_int(fields[0])
        self.y = parse_unsigned_int(fields[1])
        self.facing = parse_facing(fields[2])
        return True, None

    def execute_step(self, state: RobotState) -> ExecutionStatus:
        if self.x is None or self.y is None or self.facing is None:
            return ExecutionStatus.failed("PLACE is missing parameters")
        if not state.place(self.x, self.y, self.facing):
            return ExecutionStatus.failed(
                "out of bounds", details={"x": self.x, "y": self.y, "facing": self.facing.name}
            )
        return ExecutionStatus.completed(f"placed at {self.x},{self.y},{self.facing.name}")

from __future__ import annotations

from dataclasses import dataclass, field
import logging

import numpy as np

from toyrobot.config import GRID_SIZE, TRACE
from toyrobot.protocol.types import Facing, delta, turn_left, turn_right

logger = logging.getLogger(__name__)


def within_grid(position: np.ndarray) -> bool:
    """True when every coordinate of ``position`` lies in [0, GRID_SIZE)."""
    pos = np.asarray(position)
    return bool(np.all((pos >= 0) & (pos < GRID_SIZE)))


@dataclass
class RobotState:
    """
    The robot's mutable state on the table.

    ``position`` is an (x, y) int32 buffer. It and ``facing`` are only
    meaningful while ``placed`` is True. Every operation either applies fully
    or leaves all fields untouched, and returns whether it applied.
    """
    position: np.ndarray = field(default_factory=lambda: np.zeros((2,), dtype=np.int32))
    facing: Facing = Facing.NORTH
    placed: bool = False

    @property
    def x(self) -> int:
        return int(self.position[0])

    @property
    def y(self) -> int:
        return int(self.position[1])

    def reset(self) -> None:
        """Return to the initial unplaced state."""
        self.position.fill(0)
        self.facing = Facing.NORTH
        self.placed = False

    def place(self, x: int, y: int, facing: Facing) -> bool:
        if not isinstance(facing, Facing):
            logger.debug("place rejected: invalid facing %r", facing)
            return False
        # Bounds check runs on the raw ints, before the int32 write
        if not within_grid((x, y)):
            logger.debug("place rejected: (%s,%s) is off the table", x, y)
            return False
        self.position[:] = (x, y)
        self.facing = facing
        self.placed = True
        logger.log(TRACE, "placed at %d,%d,%s", self.x, self.y, self.facing)
        return True

    def move(self) -> bool:
        if not self.placed:
            return False
        target = self.position + delta(self.facing)
        if not within_grid(target):
            logger.debug("move blocked at %d,%d facing %s", self.x, self.y, self.facing)
            return False
        np.copyto(self.position, target, casting="unsafe")
        logger.log(TRACE, "moved to %d,%d", self.x, self.y)
        return True

    def turn_left(self) -> bool:
        if not self.placed:
            return False
        self.facing = turn_left(self.facing)
        return True

    def turn_right(self) -> bool:
        if not self.placed:
            return False
        self.facing = turn_right(self.facing)
        return True

    def report(self) -> str | None:
        """Return ``"x,y,FACING"`` when placed, otherwise None."""
        if not self.placed:
            return None
        return f"{self.x},{self.y},{self.facing.name}"

"""
Type definitions for the toy robot command protocol.

Defines the facing enum and its pure displacement/rotation helpers, plus the
outcome types the interpreter returns for each command line.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import numpy as np


class Facing(Enum):
    """Cardinal direction the robot points. Values follow clockwise order."""
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    def __str__(self) -> str:
        return self.name


# Unit displacement per facing (dx, dy); north is +y
_DELTAS: dict[Facing, np.ndarray] = {
    Facing.NORTH: np.array([0, 1], dtype=np.int32),
    Facing.EAST: np.array([1, 0], dtype=np.int32),
    Facing.SOUTH: np.array([0, -1], dtype=np.int32),
    Facing.WEST: np.array([-1, 0], dtype=np.int32),
}

_FACING_COUNT = len(Facing)


def delta(facing: Facing) -> np.ndarray:
    """Return a copy of the (dx, dy) unit step for ``facing``."""
    return _DELTAS[facing].copy()


def turn_left(facing: Facing) -> Facing:
    """Rotate 90 degrees counter-clockwise (NORTH -> WEST)."""
    return Facing((facing.value - 1) % _FACING_COUNT)


def turn_right(facing: Facing) -> Facing:
    """Rotate 90 degrees clockwise (NORTH -> EAST)."""
    return Facing((facing.value + 1) % _FACING_COUNT)


def fold_token(token: str) -> str | None:
    """Upper-case an ASCII token. Non-ASCII tokens fold to None and match nothing."""
    t = str(token)
    return t.upper() if t.isascii() else None


def parse_facing(token: str) -> Facing:
    """
    Parse a facing name case-insensitively (ASCII letters only).

    Raises:
        ValueError: if ``token`` is not one of NORTH, EAST, SOUTH, WEST
    """
    name = fold_token(str(token or "").strip())
    try:
        return Facing[name]
    except KeyError:
        raise ValueError(f"Invalid direction: {token}") from None


class OutcomeKind(Enum):
    """Result of interpreting a single command line."""
    NO_OUTPUT = "NO_OUTPUT"
    REPORT = "REPORT"
    REJECTED = "REJECTED"


@dataclass(frozen=True)
class Outcome:
    """
    Interpreter result for one line.

    ``text`` is set only for REPORT. ``reason`` is a diagnostic string for logs
    and tests; it is never shown to the user.
    """
    kind: OutcomeKind
    text: str | None = None
    reason: str = ""

    @classmethod
    def no_output(cls, reason: str = "") -> Outcome:
        return cls(OutcomeKind.NO_OUTPUT, None, reason)

    @classmethod
    def report(cls, text: str) -> Outcome:
        return cls(OutcomeKind.REPORT, text, "")

    @classmethod
    def rejected(cls, reason: str) -> Outcome:
        return cls(OutcomeKind.REJECTED, None, reason)

    @property
    def is_rejected(self) -> bool:
        return self.kind is OutcomeKind.REJECTED

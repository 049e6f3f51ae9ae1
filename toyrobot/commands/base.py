"""
Base abstractions and helpers for command implementations.
"""
from dataclasses import dataclass
from typing import Tuple, Optional, Dict, Any, List, ClassVar
from abc import ABC, abstractmethod
from enum import Enum
import logging
import re

from toyrobot.config import TRACE
from toyrobot.protocol.types import fold_token
from toyrobot.simulator.state import RobotState


logger = logging.getLogger(__name__)


class ExecutionStatusCode(Enum):
    """Enumeration for command execution status codes."""
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"


@dataclass
class ExecutionStatus:
    """
    Status returned from executing a command against the robot state.
    """
    code: ExecutionStatusCode
    message: str
    details: Optional[Dict[str, Any]] = None

    @classmethod
    def completed(cls, message: str = "Completed", details: Optional[Dict[str, Any]] = None) -> "ExecutionStatus":
        return cls(ExecutionStatusCode.COMPLETED, message, details=details)

    @classmethod
    def failed(cls, message: str, details: Optional[Dict[str, Any]] = None) -> "ExecutionStatus":
        return cls(ExecutionStatusCode.FAILED, message, details=details)

    @property
    def ok(self) -> bool:
        return self.code is ExecutionStatusCode.COMPLETED


# Parsing utilities (lightweight, shared)
_UNSIGNED_INT = re.compile(r"[0-9]+")


def parse_unsigned_int(token: Any) -> int:
    """Parse a non-negative base-10 literal; signs, spaces and other digits are rejected."""
    t = str(token)
    if not _UNSIGNED_INT.fullmatch(t):
        raise ValueError(f"Invalid coordinate: {token!r}")
    return int(t)


def expect_len(parts: List[str], n: int, cmd: str) -> None:
    """Ensure parts list has exactly n elements."""
    if len(parts) != n:
        raise ValueError(f"{cmd} requires {n-1} parameters, got {len(parts)-1}")


class CommandBase(ABC):
    """
    Reusable base for commands with shared lifecycle and logging helpers.
    """
    # Set by @register_command decorator
    _registered_name: ClassVar[str] = ""

    __slots__ = ("is_valid", "is_finished", "error_message")

    def __init__(self) -> None:
        self.is_valid: bool = True
        self.is_finished: bool = False
        self.error_message: str = ""

    @property
    def name(self) -> str:
        return self._registered_name or type(self).__name__

    # Logging helpers (uniform, include command identity)
    def log_trace(self, msg: str, *args: Any) -> None:
        logger.log(TRACE, "[%s] " + msg, self.name, *args)

    def log_debug(self, msg: str, *args: Any) -> None:
        logger.debug("[%s] " + msg, self.name, *args)

    @abstractmethod
    def do_match(self, parts: List[str]) -> Tuple[bool, Optional[str]]:
        """
        Check if this command can handle the given message parts.

        Args:
            parts: Whitespace-split line (e.g., ['PLACE', '1,2,NORTH'])

        Returns:
            Tuple of (can_handle, error_message)
        """
        raise NotImplementedError

    def match(self, parts: List[str]) -> Tuple[bool, Optional[str]]:
        """
        Wrapper that guards subclass do_match() to avoid propagating exceptions.
        Centralizes try/except so subclasses don't repeat it.
        """
        try:
            return self.do_match(parts)
        except ValueError as e:
            return False, str(e)

    @abstractmethod
    def execute_step(self, state: RobotState) -> ExecutionStatus:
        """Apply the command to ``state`` and report whether it took effect."""
        raise NotImplementedError

    def execute(self, state: RobotState) -> ExecutionStatus:
        """
        Template-method wrapper around execute_step() that enforces the one-shot lifecycle.
        """
        if self.is_finished or not self.is_valid:
            return ExecutionStatus.failed("Already finished") if self.is_finished else ExecutionStatus.failed("Invalid command")
        status = self.execute_step(state)
        self.finish()
        if status.ok:
            self.log_trace("completed: %s", status.message)
        else:
            self.log_debug("no effect: %s", status.message)
        return status

    # ----- lifecycle helpers -----

    def finish(self) -> None:
        """Mark command as finished."""
        self.is_finished = True

    def fail(self, message: str) -> None:
        """Mark command as invalid/failed with an error message."""
        self.is_valid = False
        self.error_message = message
        self.is_finished = True


class NoArgCommand(CommandBase):
    """
    Base class for bare-keyword commands (MOVE, LEFT, RIGHT, REPORT).

    Anything after the keyword makes the line invalid.
    """

    def do_match(self, parts: List[str]) -> Tuple[bool, Optional[str]]:
        if not parts or fold_token(parts[0]) != self.name:
            return False, None
        expect_len(parts, 1, self.name)
        return True, None

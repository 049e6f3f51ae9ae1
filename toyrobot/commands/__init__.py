"""
Commands package for the toy robot simulator.

Modules here are imported by the command registry's discovery step; each
command class registers itself with @register_command.
"""

from toyrobot.commands.base import CommandBase, ExecutionStatus, ExecutionStatusCode

__all__ = [
    "CommandBase",
    "ExecutionStatus",
    "ExecutionStatusCode",
]

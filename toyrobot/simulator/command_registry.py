"""
Command registration system with decorator support.

Command classes register themselves with @register_command; the registry
auto-discovers every module in toyrobot.commands on first lookup so the
interpreter never needs a hand-maintained dispatch table.
"""

from __future__ import annotations

import logging
import pkgutil
from collections.abc import Callable
from importlib import import_module

from toyrobot.commands.base import CommandBase
from toyrobot.config import TRACE
from toyrobot.protocol.types import fold_token

logger = logging.getLogger(__name__)


class CommandRegistry:
    """
    Singleton registry for command classes.

    Names are stored upper-case; lookups are ASCII case-insensitive.
    """

    _instance: CommandRegistry | None = None
    _commands: dict[str, type[CommandBase]] = {}
    _class_to_name: dict[type[CommandBase], str] = {}
    _discovered: bool = False

    def __new__(cls) -> CommandRegistry:
        """Ensure singleton pattern."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """Initialize the registry (only runs once due to singleton)."""
        if not hasattr(self, "_initialized"):
            self._commands = {}
            self._class_to_name = {}
            self._discovered = False
            self._initialized = True

    def register(self, name: str, command_class: type[CommandBase]) -> None:
        """
        Register a command class with the given name.

        Raises:
            ValueError: If a different class is already registered under the name
        """
        name = name.upper()
        if name in self._commands:
            existing = self._commands[name]
            if existing != command_class:
                raise ValueError(
                    f"Command '{name}' is already registered with class {existing.__name__}. "
                    f"Cannot register with {command_class.__name__}"
                )
        else:
            self._commands[name] = command_class
            self._class_to_name[command_class] = name
            logger.debug("Registered command '%s' -> %s", name, command_class.__name__)

    def get_command_class(self, name: str) -> type[CommandBase] | None:
        """Retrieve a command class by name, or None if unknown."""
        if not self._discovered:
            self.discover_commands()

        key = fold_token(name)
        return self._commands.get(key) if key is not None else None

    def get_name_for_class(self, cls: type[CommandBase]) -> str | None:
        """
        Retrieve the registered command name for a given command class.
        Returns None if the class is not registered.
        """
        if not self._discovered:
            self.discover_commands()
        return self._class_to_name.get(cls) or getattr(cls, "_registered_name", None) or None

    def list_registered_commands(self) -> list[str]:
        """Return all registered command names, sorted."""
        if not self._discovered:
            self.discover_commands()

        return sorted(self._commands.keys())

    def discover_commands(self) -> None:
        """
        Auto-discover and register all decorated commands.

        Imports every module in the toyrobot.commands package to trigger
        the @register_command decorators.
        """
        if self._discovered:
            return

        logger.debug("Discovering commands...")

        commands_package = import_module("toyrobot.commands")

        for _importer, modname, ispkg in pkgutil.iter_modules(commands_package.__path__):
            if ispkg or modname == "base":
                continue

            full_module_name = f"toyrobot.commands.{modname}"
            module = import_module(full_module_name)
            # Re-register classes from modules imported before a clear()
            for obj in vars(module).values():
                registered = getattr(obj, "_registered_name", "")
                if isinstance(obj, type) and issubclass(obj, CommandBase) and registered:
                    if obj.__module__ == full_module_name:
                        self.register(registered, obj)
            logger.log(TRACE, "Imported command module: %s", full_module_name)

        self._discovered = True
        logger.debug(
            "Command discovery complete. %d commands registered.", len(self._commands)
        )

    def create_command_from_parts(
        self, parts: list[str]
    ) -> tuple[CommandBase | None, str | None]:
        """
        Create a command instance from pre-split line parts.

        Returns:
            A tuple of (command, error_message):
            - (command, None) if successful
            - (None, None) if command name not registered
            - (None, error_message) if command is recognized but has invalid parameters
        """
        if not self._discovered:
            self.discover_commands()

        if not parts:
            logger.log(TRACE, "Empty line parts")
            return None, None

        command_name = fold_token(parts[0])
        if command_name is None:
            logger.log(TRACE, "match_unknown non-ascii name=%r", parts[0])
            return None, None
        logger.log(TRACE, "match_start name=%s parts=%d", command_name, len(parts))

        command_class = self._commands.get(command_name)

        if command_class is None:
            logger.log(TRACE, "match_unknown name=%s", command_name)
            return None, None

        command = command_class()
        can_handle, error = command.match(parts)

        if can_handle:
            logger.log(TRACE, "match_ok name=%s", command_name)
            return command, None

        command.fail(error or "Command validation failed")
        logger.log(TRACE, "match_error name=%s err=%s", command_name, command.error_message)
        return None, command.error_message

    def clear(self) -> None:
        """
        Clear all registered commands.

        Mainly useful for testing; the next lookup re-runs discovery.
        """
        self._commands.clear()
        self._class_to_name.clear()
        self._discovered = False
        logger.debug("Command registry cleared")


# Global registry instance
_registry = CommandRegistry()


def register_command(name: str) -> Callable[[type[CommandBase]], type[CommandBase]]:
    """
    Decorator to register a command class.

    Usage:
        @register_command("MOVE")
        class MoveCommand(NoArgCommand):
            ...
    """

    def decorator(cls: type[CommandBase]) -> type[CommandBase]:
        if not issubclass(cls, CommandBase):
            raise TypeError(f"Class {cls.__name__} must inherit from CommandBase")

        _registry.register(name, cls)
        cls._registered_name = name.upper()

        return cls

    return decorator


# Module-level convenience functions that delegate to the registry singleton
get_command_class = _registry.get_command_class
list_registered_commands = _registry.list_registered_commands
discover_commands = _registry.discover_commands
clear_registry = _registry.clear
create_command_from_parts = _registry.create_command_from_parts
get_name_for_class = _registry.get_name_for_class

"""A root command together with its named sub-commands."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from .command import Command
from .flag import Flag
from .option import Option


class DuplicateCommandError(ValueError):
    """Raised when a command with the same name is already registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Cannot add the command {name}. Because it was added.")
        self.name = name


class CommandGroup:
    """Holds the root command and sub-commands keyed by name."""

    def __init__(self) -> None:
        self.root_command = Command()
        self._commands: dict[str, Command] = {}

    @property
    def commands(self) -> Mapping[str, Command]:
        """Registered sub-commands keyed by their name."""
        return MappingProxyType(self._commands)

    @staticmethod
    def _build(name: str, flags: Iterable[Flag], options: Iterable[Option]) -> Command:
        command = Command(name)
        for flag in flags:
            command.add_flag(flag)
        for option in options:
            command.add_option(option)
        return command

    def add_root_command(self, command: Command) -> None:
        """Set the command used when no sub-command is given."""
        self.root_command = command

    def add_root_command_definition(
        self, name: str, flags: Iterable[Flag], options: Iterable[Option]
    ) -> Command:
        """Build and set the root command from its parts."""
        self.root_command = self._build(name, flags, options)
        return self.root_command

    def add_command(self, command: Command) -> None:
        """Register a sub-command; its name must not be taken."""
        if command.name in self._commands:
            raise DuplicateCommandError(command.name)
        self._commands[command.name] = command

    def add_command_definition(
        self, name: str, flags: Iterable[Flag], options: Iterable[Option]
    ) -> Command:
        """Build and register a sub-command from its parts."""
        command = self._build(name, flags, options)
        self.add_command(command)
        return command
"""Parse command-line arguments against a command group."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Union

from .command import Command
from .command_group import CommandGroup
from .option import Option, PositionalArg

ParseValue = Union[list[str], bool]


class ParseError(ValueError):
    """Raised when the arguments do not fit the command definitions."""


def _is_switch(arg: str) -> bool:
    return arg.startswith("-")


class Parser:
    """Parses an argument list into flags and option values.

    The first argument may name a sub-command of the group; otherwise the
    group's root command is used.
    """

    def __init__(self, command_group: CommandGroup) -> None:
        self._group = command_group
        self._current_command: Command = command_group.root_command
        self._args: list[str] = []
        self._result: dict[str, ParseValue] = {}

    @property
    def args(self) -> list[str]:
        """Arguments consumed while parsing, in order, without the command name."""
        return list(self._args)

    @property
    def result(self) -> Mapping[str, ParseValue]:
        """Flag names mapped to ``True`` and option names mapped to their values."""
        return dict(self._result)

    @property
    def current_command(self) -> Command:
        """The command selected by the parsed arguments."""
        return self._current_command

    @property
    def current_command_value(self) -> str:
        """The name of the selected command."""
        return self._current_command.name

    def parse(self, argv: Sequence[str]) -> Mapping[str, ParseValue]:
        """Parse ``argv`` (the arguments after the program name) and return the result."""
        if not argv:
            return self.result

        start = 0
        first = argv[0]
        if not _is_switch(first):
            command = self._group.commands.get(first)
            if command is None:
                raise ParseError(f"Command {first} isn't a valid command.")
            self._current_command = command
            start = 1

        options = self._current_command.options
        flags = self._current_command.flags
        last_index = len(argv) - 1

        option = Option()
        current_name = ""
        values: list[str] = []

        for index, arg in enumerate(argv[start:], start=start):
            if _is_switch(arg):
                if arg in options:
                    if len(values) > 1 and current_name not in self._result:
                        self._result[current_name] = values
                    option = options[arg]
                    current_name = option.name
                    values = []
                    self._args.append(arg)
                    continue

                if arg in flags:
                    flag_name = flags[arg].name
                    if flag_name in self._result:
                        raise ParseError(f"The flag {arg} is repeated.")
                    self._result[flag_name] = True
                    self._args.append(arg)
                    continue

                raise ParseError(f"The flag or option {arg} isn't valid.")

            if (
                option.positional_type is PositionalArg.ONLY_ONE and not values
            ) or index == last_index:
                values.append(arg)
                if current_name not in self._result:
                    self._result[current_name] = values
                values = []
                current_name = ""
            elif option.positional_type is PositionalArg.MANY:
                values.append(arg)
            else:
                raise ParseError(f"The number values of {current_name} is exceeded.")

            self._args.append(arg)

        return self.result
"""Options: named arguments that take one or more positional values."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class PositionalArg(enum.Enum):
    """How many positional values an option accepts."""

    ONLY_ONE = enum.auto()
    MANY = enum.auto()


@dataclass
class Option:
    """A command-line option such as ``--operands`` / ``-opds``."""

    name: str = ""
    short_name: str = ""
    positional_type: PositionalArg = PositionalArg.ONLY_ONE
    description: str = ""

    @property
    def long_form(self) -> str:
        """The option as written with the long prefix, e.g. ``--name``."""
        return "--" + self.name

    @property
    def short_form(self) -> str:
        """The option as written with the short prefix, e.g. ``-n``."""
        return "-" + self.short_name
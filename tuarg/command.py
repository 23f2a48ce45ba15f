"""Commands: a name with its own flags and options."""

from __future__ import annotations

import copy
import sys
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import TypeVar

from .flag import Flag
from .option import Option, PositionalArg

_T = TypeVar("_T")


def _unique(items: Iterable[_T]) -> list[_T]:
    seen: set[int] = set()
    result = []
    for item in items:
        if id(item) not in seen:
            seen.add(id(item))
            result.append(item)
    return result


class Command:
    """A command that owns flags and options, looked up by their written form."""

    def __init__(self, name: str = "", description: str = "") -> None:
        self.name = name
        self.description = description
        self._options: dict[str, Option] = {}
        self._flags: dict[str, Flag] = {}
        self._longest_name = 0
        self._longest_short_name = 0

    def __repr__(self) -> str:
        return f"Command(name={self.name!r}, description={self.description!r})"

    @property
    def options(self) -> Mapping[str, Option]:
        """Options keyed by both ``--name`` and ``-short``."""
        return MappingProxyType(self._options)

    @property
    def flags(self) -> Mapping[str, Flag]:
        """Flags keyed by both ``--name`` and ``-short``."""
        return MappingProxyType(self._flags)

    def _track_widths(self, long_form: str, short_form: str) -> None:
        self._longest_name = max(self._longest_name, len(long_form))
        self._longest_short_name = max(self._longest_short_name, len(short_form))

    def add_option_definition(
        self,
        name: str,
        short_name: str,
        positional_type: PositionalArg = PositionalArg.ONLY_ONE,
        description: str = "",
    ) -> Option:
        """Create an option from its parts and register it."""
        return self.add_option(Option(name, short_name, positional_type, description))

    def add_option(self, option: Option) -> Option:
        """Register a copy of ``option`` and return the stored copy."""
        stored = copy.copy(option)
        self._track_widths(stored.long_form, stored.short_form)
        self._options[stored.long_form] = stored
        self._options[stored.short_form] = stored
        return stored

    def add_flag_definition(self, name: str, short_name: str, description: str = "") -> Flag:
        """Create a flag from its parts and register it."""
        return self.add_flag(Flag(name, short_name, description))

    def add_flag(self, flag: Flag) -> Flag:
        """Register a copy of ``flag`` and return the stored copy."""
        stored = copy.copy(flag)
        self._track_widths(stored.long_form, stored.short_form)
        self._flags[stored.long_form] = stored
        self._flags[stored.short_form] = stored
        return stored

    def _format_entry(self, short_name: str, name: str, description: str) -> str:
        return (
            "  "
            + (short_name + ", ").ljust(self._longest_short_name + 2)
            + (name + ":").ljust(self._longest_name + 1)
            + "   "
            + description
            + "\n"
        )

    def format_manual(self) -> str:
        """Return the description and a listing of flags and options."""
        parts = ["Description:\n", f"  {self.description}\n\n", "Flags:\n"]
        if self._flags:
            parts.extend(
                self._format_entry(f.short_name, f.name, f.description)
                for f in _unique(self._flags.values())
            )
            parts.append("\n")
        else:
            parts.append("  N\\A\n\n")

        parts.append("Options:\n")
        if self._options:
            parts.extend(
                self._format_entry(o.short_name, o.name, o.description)
                for o in _unique(self._options.values())
            )
            parts.append("\n")
        else:
            parts.append("  N\\A\n")
        return "".join(parts)

    def print_manual(self) -> None:
        """Write the manual to standard output."""
        sys.stdout.write(self.format_manual())
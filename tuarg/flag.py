"""Flags: named switches that take no values."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Flag:
    """A command-line flag such as ``--help`` / ``-h``."""

    name: str = ""
    short_name: str = ""
    description: str = ""

    @property
    def long_form(self) -> str:
        """The flag as written with the long prefix, e.g. ``--help``."""
        return "--" + self.name

    @property
    def short_form(self) -> str:
        """The flag as written with the short prefix, e.g. ``-h``."""
        return "-" + self.short_name
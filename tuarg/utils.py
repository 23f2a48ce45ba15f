"""Helpers for presenting parse results."""

from __future__ import annotations

import sys
from collections.abc import Mapping, Sequence
from typing import Union


def _format_value(value: Union[Sequence[str], bool]) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return "[ " + "".join(f"{item} " for item in value) + "]"


def format_parse_result(result: Mapping[str, Union[Sequence[str], bool]]) -> str:
    """Return one ``key: value`` line per entry of a parse result."""
    return "".join(f"{key}: {_format_value(value)}\n" for key, value in result.items())


def print_parse_result(result: Mapping[str, Union[Sequence[str], bool]]) -> None:
    """Write a parse result to standard output."""
    sys.stdout.write(format_parse_result(result))
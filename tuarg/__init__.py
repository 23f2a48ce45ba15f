"""Command-line argument parsing with commands, flags and options."""

__version__ = "0.1.0"
__all__ = ["command", "command_group", "flag", "option", "parser", "utils"]
# tuarg

A small library for describing a command-line interface and parsing an
argument list against it. The interface is a root command plus named
sub-commands. Each command has its own flags and options.

## Installing

```
pip install .
```

## Concepts

- **Flag** (`tuarg.flag.Flag`): a dataclass with `name`, `short_name` and
  `description`. It stands for a switch such as `-h` / `--help`. The
  `long_form` property gives `--name` and the `short_form` property gives
  `-short_name`.
- **Option** (`tuarg.option.Option`): a dataclass with `name`, `short_name`,
  `positional_type` and `description`. An option takes values, e.g.
  `--operands 1 2 3`. Its `positional_type` is a `PositionalArg`: either
  `PositionalArg.ONLY_ONE` (the default) or `PositionalArg.MANY`. It also has
  `long_form` and `short_form`.
- **Command** (`tuarg.command.Command`): a name and a description, with flags
  and options.
  - `add_flag(flag)` and `add_option(option)` store a copy of the object and
    return that copy.
  - `add_flag_definition(name, short_name, description="")` and
    `add_option_definition(name, short_name, positional_type=PositionalArg.ONLY_ONE, description="")`
    build the object from its parts and store it.
  - `flags` and `options` are read-only mappings. Each entry is keyed by its
    long form and by its short form.
  - `format_manual()` returns a help text listing the description, the flags
    and the options. `print_manual()` writes that text to standard output.
- **CommandGroup** (`tuarg.command_group.CommandGroup`): holds one root command
  (`root_command`) and a read-only mapping of sub-commands (`commands`).
  - `add_root_command(command)` sets the root command.
  - `add_root_command_definition(name, flags, options)` builds the root
    command from its parts, sets it and returns it.
  - `add_command(command)` adds a sub-command.
  - `add_command_definition(name, flags, options)` builds a sub-command, adds
    it and returns it.
  - Adding a sub-command whose name is already taken raises
    `DuplicateCommandError`, a subclass of `ValueError`.
- **Parser** (`tuarg.parser.Parser`): parses an argument list against a
  command group.
  - `parse(argv)` returns the result mapping.
  - After parsing, the `result`, `args`, `current_command` and
    `current_command_value` properties are available.
  - An unknown sub-command, an unknown flag or option, or a repeated flag
    raises `ParseError`, a subclass of `ValueError`.
- **Output helpers** (`tuarg.utils`): `format_parse_result(result)` returns
  one `key: value` line per entry. `print_parse_result(result)` writes those
  lines to standard output.

## Parsing rules

`parse` takes the arguments *after* the program name, e.g. `sys.argv[1:]`.

1. If the first argument does not start with `-`, it must name a registered
   sub-command, and parsing continues against that sub-command. Otherwise the
   root command is used.
2. A flag stores `True` under the flag's name.
3. An option collects the values that follow it:
   - an `ONLY_ONE` option takes a single value;
   - a `MANY` option collects values until the next switch or the end of the
     list.
   - The values are stored as a list under the option's name.

## Example

```python
import sys

from tuarg.command import Command
from tuarg.command_group import CommandGroup
from tuarg.flag import Flag
from tuarg.option import Option, PositionalArg
from tuarg.parser import Parser
from tuarg.utils import print_parse_result

root = Command("tuarg", "An example command-line tool.")
root.add_flag(Flag("help", "h", "Show usage and the description of every flag and option."))
root.add_option(Option("random", "r", PositionalArg.MANY, "Pick a random number in [a, b]."))

add = Command("add")
add.add_flag(Flag("help", "h"))
add.add_option(Option("operands", "opds", PositionalArg.MANY))

group = CommandGroup()
group.add_root_command(root)
group.add_command(add)

parser = Parser(group)
parser.parse(["add", "--operands", "1", "2", "3"])   # or parser.parse(sys.argv[1:])

print(parser.current_command_value)   # add
print_parse_result(parser.result)     # operands: [ 1 2 3 ]
parser.current_command.print_manual()
```

## What it does not do

This package is a library only. It installs no command-line program of its
own. It does not print help automatically when `--help` is given, and it does
not convert values to other types. Every value is returned as a string.
Handling the parsed result is left to your code.

## Running the tests

```
pip install ".[test]"
pytest
```
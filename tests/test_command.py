import pytest

from tuarg.command import Command
from tuarg.flag import Flag
from tuarg.option import Option, PositionalArg


def test_name_and_description():
    command = Command("tuarg", "A CLI builder")
    assert command.name == "tuarg"
    assert command.description == "A CLI builder"


def test_option_registered_under_both_forms():
    command = Command("add")
    command.add_option(Option("operands", "opds", PositionalArg.MANY))
    assert set(command.options) == {"--operands", "-opds"}
    assert command.options["--operands"] is command.options["-opds"]
    assert command.options["-opds"].positional_type is PositionalArg.MANY


def test_flag_registered_under_both_forms():
    command = Command("add")
    command.add_flag(Flag("help", "h"))
    assert set(command.flags) == {"--help", "-h"}
    assert command.flags["--help"] is command.flags["-h"]


def test_definitions_match_objects():
    command = Command()
    command.add_option_definition("random", "r", PositionalArg.MANY, "range")
    command.add_flag_definition("test", "t", "a test")
    assert command.options["--random"] == Option("random", "r", PositionalArg.MANY, "range")
    assert command.flags["-t"] == Flag("test", "t", "a test")


def test_option_definition_defaults_to_only_one():
    command = Command()
    command.add_option_definition("testoption", "topt")
    assert command.options["-topt"].positional_type is PositionalArg.ONLY_ONE


def test_added_objects_are_copied():
    command = Command()
    flag = Flag("help", "h", "before")
    command.add_flag(flag)
    flag.description = "after"
    assert command.flags["--help"].description == "before"


def test_mappings_are_read_only():
    command = Command()
    with pytest.raises(TypeError):
        command.flags["--x"] = Flag("x", "x")  # type: ignore[index]


def test_manual_for_empty_command():
    command = Command("empty", "nothing here")
    manual = command.format_manual()
    assert manual.startswith("Description:\n  nothing here\n\n")
    assert "Flags:\n  N\\A\n\n" in manual
    assert manual.endswith("Options:\n  N\\A\n")


def test_manual_layout_pinned():
    command = Command("add")
    command.add_flag(Flag("help", "h"))
    command.add_option(Option("operands", "opds", PositionalArg.MANY))
    expected = (
        "Description:\n  \n\n"
        "Flags:\n  h,     help:         \n\n"
        "Options:\n  opds,  operands:     \n\n"
    )
    assert command.format_manual() == expected


def test_manual_lists_each_entry_once():
    command = Command("tuarg", "desc")
    command.add_flag(Flag("help", "h", "Show help"))
    command.add_flag(Flag("test", "t", "Test flag"))
    command.add_option(Option("random", "r", PositionalArg.MANY, "Random number"))
    manual = command.format_manual()
    assert manual.count("Show help") == 1
    assert manual.count("Test flag") == 1
    assert manual.count("Random number") == 1
    assert manual.index("Show help") < manual.index("Test flag") < manual.index("Random number")


def test_manual_columns_align():
    command = Command()
    command.add_flag(Flag("help", "h", "one"))
    command.add_flag(Flag("verbose", "vv", "two"))
    lines = [line for line in command.format_manual().splitlines() if line.endswith(("one", "two"))]
    assert len(lines) == 2
    assert lines[0].index("one") == lines[1].index("two")


def test_print_manual_writes_format(capsys):
    command = Command("x", "y")
    command.add_flag(Flag("help", "h"))
    command.print_manual()
    assert capsys.readouterr().out == command.format_manual()


def test_print_manual_for_empty_command(capsys):
    command = Command("x", "y")
    command.print_manual()
    out = capsys.readouterr().out
    assert out == command.format_manual()
    assert out.endswith("Options:\n  N\\A\n")
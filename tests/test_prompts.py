"""Test the configuration prompts."""
from io import StringIO

import pytest

from one_minute_math.cli.prompts import collect_config, int_between, parse_operations
from one_minute_math.common.console import Console, QuitRequested
from one_minute_math.common.settings import QuizSettings


def make_console(*lines: str) -> Console:
    """Console scripted with the given input lines."""
    return Console(input=StringIO("".join(f"{line}\n" for line in lines)), output=StringIO(), errors=StringIO())


@pytest.mark.parametrize("text,expected", [("-99", -99), ("0", 0), ("98", 98)])
def test_int_between_accepts_open_interval(text, expected) -> None:
    """Values strictly inside the bounds are accepted."""
    assert int_between(-100, 99)(text) == expected


@pytest.mark.parametrize("text,message", [
    ("-100", "-100 is outside the bounds"),
    ("99", "99 is outside the bounds"),
    ("ten", "ten is not a number"),
    ("", " is not a number"),
    ("1_0", "1_0 is not a number"),
])
def test_int_between_rejects(text, message) -> None:
    """Out-of-range and non-numeric input raise ValueError with the bounds restated."""
    with pytest.raises(ValueError) as excinfo:
        int_between(-100, 99)(text)
    first, second = str(excinfo.value).splitlines()
    assert first == message
    assert second == "Please enter a number between -100 and 99 (Exclusive)."


def test_int_between_inclusive_low() -> None:
    """The question count accepts its lower bound and quotes the shown bound."""
    parse = int_between(1, 250, low_inclusive=True, shown_low=0)
    assert parse("1") == 1
    assert parse("249") == 249
    with pytest.raises(ValueError, match="between 0 and 250"):
        parse("0")
    with pytest.raises(ValueError, match="250 is outside the bounds"):
        parse("250")


@pytest.mark.parametrize("text,expected", [
    ("a", ["a"]),
    ("asmd", ["a", "s", "m", "d"]),
    ("ddaa", ["d", "a"]),
])
def test_parse_operations(text, expected) -> None:
    """Duplicates are collapsed silently."""
    assert parse_operations(text) == expected


@pytest.mark.parametrize("text,message", [
    ("x", "^x is not a valid operation$"),
    ("axby", "^x,b,y are not valid operations$"),
    ("a s", "^  is not a valid operation$"),
    ("", "At least one operation must be provided"),
])
def test_parse_operations_rejects(text, message) -> None:
    """Unknown letters are listed and an empty entry is refused."""
    with pytest.raises(ValueError, match=message):
        parse_operations(text)


def test_collect_config_happy_path() -> None:
    """Four valid answers produce a configuration."""
    console = make_console("-5", "12", "20", "ASma")
    config = collect_config(console, QuizSettings())

    assert (config.min_value, config.max_value, config.count) == (-5, 12, 20)
    assert config.operations == ["a", "s", "m"]
    assert console.errors.getvalue() == ""


def test_collect_config_reprompts_until_valid() -> None:
    """Every prompt repeats after a rejection and states the constraint again."""
    console = make_console(
        "abc", "-100", "3",      # minimum
        "3", "100", "7",         # maximum must exceed the minimum
        "0", "250", "10",        # count
        "xyz", "", "dd",         # operations
    )
    config = collect_config(console, QuizSettings())

    assert (config.min_value, config.max_value, config.count, config.operations) == (3, 7, 10, ["d"])
    errors = console.errors.getvalue()
    assert "abc is not a number" in errors
    assert "-100 is outside the bounds" in errors
    assert "Please enter a number between 3 and 100 (Exclusive)." in errors
    assert "Please enter a number between 0 and 250 (Exclusive)." in errors
    assert "x,y,z are not valid operations" in errors
    assert "At least one operation must be provided" in errors

    output = console.output.getvalue()
    assert "Given number must be between 3 and 100 (Exclusive):" in output
    assert "Given number must be less than 250:" in output


def test_collect_config_leaves_room_for_maximum() -> None:
    """The largest minimum still leaves one valid maximum."""
    console = make_console("99", "98", "98", "99", "1", "a")
    config = collect_config(console, QuizSettings())
    assert (config.min_value, config.max_value) == (98, 99)
    assert "99 is outside the bounds" in console.errors.getvalue()


def test_collect_config_quit() -> None:
    """q at any configuration prompt exits with status 0."""
    console = make_console("1", "5", "Q")
    with pytest.raises(QuitRequested) as excinfo:
        collect_config(console, QuizSettings())
    assert excinfo.value.code == 0
    assert "Operation(s):" not in console.output.getvalue()

"""Line-oriented console shared by every prompt of the quiz."""
import io
import re
import sys
from typing import Any, Callable, Iterable, Union

from pydantic import BaseModel, ConfigDict, Field

from one_minute_math.common.logger import logger
from one_minute_math.common.settings import QUIT_TOKEN


class QuitRequested(SystemExit):
    """Raised when the user types the quit token; exits with status 0."""

    def __init__(self) -> None:
        super().__init__(0)


class Quit(BaseModel):
    """The input was the quit token."""


class Value(BaseModel):
    """The input parsed into a usable value."""

    value: Any


class Invalid(BaseModel):
    """The input was rejected; ``reason`` is shown before re-prompting."""

    reason: str


Classified = Union[Quit, Value, Invalid]

# Optional sign and ASCII digits only, no underscores or spaces
INTEGER = re.compile(r"[+-]?[0-9]+")


def normalize(raw: str) -> str:
    """Trim surrounding whitespace and lower-case a raw input line."""
    return raw.strip().lower()


def parse_integer(text: str) -> int:
    """
    Parse a plain decimal integer.

    Stricter than int(): digit-group underscores and non-ASCII digits are refused.

    :param str text: Normalized input

    :return: Parsed integer
    :rtype: int
    :raises ValueError: If the text is not an optionally signed run of digits
    """
    if not INTEGER.fullmatch(text):
        raise ValueError(f"{text!r} is not an integer")
    return int(text)


def accept_any(text: str) -> str:
    """Parser accepting every line unchanged."""
    return text


def classify(raw: str, parser: Callable[[str], Any] = accept_any) -> Classified:
    """
    Classify one raw input line.

    The quit token wins over everything else. Otherwise the normalized text is
    handed to ``parser``; a ``ValueError`` from the parser marks the input as
    invalid and its message becomes the reason.

    :param str raw: Line as read from the input stream
    :param parser: Callable turning normalized text into a value

    :return: Quit, Value or Invalid
    """
    text = normalize(raw)
    if text == QUIT_TOKEN:
        return Quit()
    try:
        return Value(value=parser(text))
    except ValueError as exc:
        return Invalid(reason=str(exc))


class Console(BaseModel):
    """
    Wraps the input, output and error streams of an interactive session.

    Prompts and problems go to ``output``; validation messages go to ``errors``.
    """

    # Allow arbitrary types like io.TextIOBase
    model_config = ConfigDict(arbitrary_types_allowed=True)

    input: io.TextIOBase = Field(default_factory=lambda: sys.stdin, description="Stream answers are read from")
    output: io.TextIOBase = Field(default_factory=lambda: sys.stdout, description="Stream prompts are written to")
    errors: io.TextIOBase = Field(default_factory=lambda: sys.stderr, description="Stream rejections are written to")

    def say(self, *lines: str) -> None:
        """Write lines to the output stream."""
        for line in lines:
            self.output.write(f"{line}\n")
        self.output.flush()

    def warn(self, message: str) -> None:
        """Write a rejection message to the error stream."""
        self.errors.write(f"{message}\n")
        self.errors.flush()

    def read_line(self) -> str:
        """
        Block until one line is available and return it without the newline.

        :return: Raw line
        :rtype: str
        :raises QuitRequested: If the input stream is exhausted
        """
        line = self.input.readline()
        if not line:
            logger.info("Input stream closed, leaving")
            raise QuitRequested()
        return line.rstrip("\r\n")

    def prompt(self, lines: Iterable[str], parser: Callable[[str], Any] = accept_any) -> Any:
        """
        Show a prompt and read until the parser accepts the answer.

        :param lines: Prompt lines, repeated on each attempt
        :param parser: Callable turning normalized text into a value

        :return: Parsed value
        :raises QuitRequested: If the user types the quit token
        """
        lines = list(lines)
        while True:
            self.say(*lines)
            result = classify(self.read_line(), parser)
            if isinstance(result, Quit):
                raise QuitRequested()
            if isinstance(result, Invalid):
                self.warn(result.reason)
                continue
            return result.value

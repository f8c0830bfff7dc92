"""Interactive prompts collecting the generation parameters."""
from typing import Callable, List, Optional

from one_minute_math.common.console import Console, parse_integer
from one_minute_math.common.models import GenerationConfig
from one_minute_math.common.settings import OPERATION_CODES, QuizSettings


OPERATIONS_PROMPT: List[str] = [
    "What operations do you want to be included?",
    "    Enter any combination of",
    "    - 'a' for addition",
    "    - 's' for subtraction",
    "    - 'm' for multiplication",
    "    - 'd' for division",
    "    (Ex. 'as' for addition and subtraction, or 'asmd' for all)",
    "    Any duplicates will be ignored and input must be any combination of the above 4 letters.",
    "Operation(s):",
]


def int_between(low: int, high: int, low_inclusive: bool = False, shown_low: Optional[int] = None) -> Callable[[str], int]:
    """
    Build a parser accepting integers strictly between ``low`` and ``high``.

    :param int low: Lower bound
    :param int high: Upper bound (always exclusive)
    :param bool low_inclusive: Whether ``low`` itself is accepted
    :param int shown_low: Lower bound quoted in the error message, defaults to ``low``

    :return: Parser raising ValueError with a two-line message on rejection
    """
    shown = low if shown_low is None else shown_low
    hint = f"Please enter a number between {shown} and {high} (Exclusive)."

    def parse(text: str) -> int:
        try:
            value = parse_integer(text)
        except ValueError:
            raise ValueError(f"{text} is not a number\n{hint}") from None

        lowest = low if low_inclusive else low + 1
        if not lowest <= value < high:
            raise ValueError(f"{value} is outside the bounds\n{hint}")
        return value

    return parse


def parse_operations(text: str) -> List[str]:
    """
    Parse operation letters, collapsing duplicates in first-seen order.

    :param str text: Normalized input, e.g. "asmd"

    :return: Unique operation codes
    :rtype: List[str]
    :raises ValueError: If the input is empty or holds unknown letters
    """
    codes: List[str] = list(dict.fromkeys(text))
    if not codes:
        raise ValueError("At least one operation must be provided")

    invalid = [code for code in codes if code not in OPERATION_CODES]
    if invalid:
        verb = "is not a valid operation" if len(invalid) == 1 else "are not valid operations"
        raise ValueError(f"{','.join(invalid)} {verb}")
    return codes


def collect_config(console: Console, settings: QuizSettings) -> GenerationConfig:
    """
    Ask for minimum, maximum, question count and operations, in that order.

    Every prompt repeats until its answer is valid.

    :param Console console: Console to prompt on
    :param QuizSettings settings: Bounds applied to the answers

    :return: Validated configuration
    :rtype: GenerationConfig
    :raises QuitRequested: If the user types the quit token
    """
    min_value: int = console.prompt(
        [
            "Enter the smallest number that can be used in each problem (Doesn't apply to divisors): ",
            f"Given number must be between {settings.min_operand} and {settings.max_operand - 1} (Exclusive):",
        ],
        # Leave room above the minimum for the maximum prompt
        int_between(settings.min_operand, settings.max_operand - 1),
    )

    max_value: int = console.prompt(
        [
            "Enter the largest number that can be used in each problem (Doesn't apply to divisors): ",
            f"Given number must be between {min_value} and {settings.max_operand} (Exclusive):",
        ],
        int_between(min_value, settings.max_operand),
    )

    count: int = console.prompt(
        [
            "Enter the number of problems you want to try and answer",
            f"Given number must be less than {settings.max_questions}:",
        ],
        int_between(1, settings.max_questions, low_inclusive=True, shown_low=0),
    )

    operations: List[str] = console.prompt(OPERATIONS_PROMPT, parse_operations)

    return GenerationConfig(min_value=min_value, max_value=max_value, count=count, operations=operations)

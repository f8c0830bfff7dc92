"""Timed question-and-answer loop."""
import math
import time
from typing import Callable, List, Sequence

from pydantic import BaseModel, ConfigDict, Field

from one_minute_math.common.console import Console
from one_minute_math.common.logger import logger
from one_minute_math.common.models import Problem
from one_minute_math.common.settings import START_TOKEN, TIME_LIMIT_SECONDS


def remaining_seconds(start: float, now: float, limit: int) -> int:
    """
    Whole seconds left in a window of ``limit`` seconds opened at ``start``.

    :param float start: Clock reading when the window opened
    :param float now: Current clock reading
    :param int limit: Window length in seconds

    :return: Remaining seconds, zero or negative once the window is closed
    :rtype: int
    """
    return limit - math.floor(now - start)


def parse_start(text: str) -> str:
    """Accept only the ready token."""
    if text != START_TOKEN:
        raise ValueError(f"{text} is not a valid input")
    return text


class SessionRunner(BaseModel):
    """
    Present problems one at a time under a single global deadline.

    Lifecycle:
        - Waits for the user to type "start"
        - Opens one window of ``time_limit`` seconds for the whole sequence
        - Samples the clock before and after every answer; an answer typed
          after the deadline is discarded
        - Returns raw answers aligned by index with the problems
    """

    # Allow arbitrary types like Console streams and clock callables
    model_config = ConfigDict(arbitrary_types_allowed=True)

    console: Console = Field(default_factory=Console, description="Console used for prompts and answers")
    time_limit: int = Field(default=TIME_LIMIT_SECONDS, ge=0, description="Session length in seconds")
    clock: Callable[[], float] = Field(default=time.monotonic, description="Monotonic clock in seconds")

    def wait_for_start(self) -> None:
        """Block until the user types the ready token."""
        self.console.prompt(["Type 'start' when you're ready to start"], parse_start)

    def run(self, problems: Sequence[Problem]) -> List[str]:
        """
        Run the timed session.

        :param Sequence[Problem] problems: Problems in presentation order

        :return: Trimmed, lower-cased answers; empty strings for unanswered
            or unreached problems
        :rtype: List[str]
        :raises QuitRequested: If the user types the quit token
        """
        # Pre-allocate so answers stay aligned with problems whatever happens
        answers: List[str] = [""] * len(problems)

        self.wait_for_start()
        start: float = self.clock()
        logger.info(f"⏱️ Session started with {self.time_limit}s for {len(problems)} problems")

        for index, problem in enumerate(problems):
            time_left = remaining_seconds(start, self.clock(), self.time_limit)
            if time_left <= 0:
                self._times_up(index)
                break

            self.console.say(f"{time_left} seconds remaining")
            answer: str = self.console.prompt([f"{problem.expression}="])

            # The window may have closed while the user was typing
            if remaining_seconds(start, self.clock(), self.time_limit) <= 0:
                self._times_up(index)
                break

            answers[index] = answer

        time_left = remaining_seconds(start, self.clock(), self.time_limit)
        if answers and answers[-1] and time_left > 0:
            self.console.say(f"You finished with {time_left} seconds to spare!")

        return answers

    def _times_up(self, index: int) -> None:
        """Announce the end of the window."""
        logger.info(f"⌛ Time expired at problem {index + 1}")
        self.console.say("Times up!")

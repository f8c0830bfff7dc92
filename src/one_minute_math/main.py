"""
Command-line entrypoint of the One Minute Math challenge.

This script:
- Prints the welcome block
- Collects the generation parameters interactively
- Generates the problems and runs the timed session
- Grades the answers and prints the report

Typing 'q' at any prompt exits immediately with status 0.
"""

import argparse
import random
import sys
from typing import List, Optional

from pydantic import BaseModel, Field, ValidationError

from one_minute_math.cli.prompts import collect_config
from one_minute_math.common.console import Console
from one_minute_math.common.logger import configure_logging, logger
from one_minute_math.common.settings import QuizSettings, TIME_LIMIT_SECONDS
from one_minute_math.generator.generator import ProblemGenerator
from one_minute_math.session.grader import grade, render_report
from one_minute_math.session.runner import SessionRunner


LOG_LEVELS: List[str] = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    time_limit : int
        Length of the timed window in seconds.
    seed : int, optional
        Seed for the problem generator, to replay the same quiz.
    log_level : str
        Level of the stderr log handler.
    """

    time_limit: int = Field(default=TIME_LIMIT_SECONDS, ge=1)
    seed: Optional[int] = None
    log_level: str = "WARNING"


def parse_args(argv: Optional[List[str]] = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :param argv: Arguments without the program name, defaults to sys.argv[1:]

    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = argparse.ArgumentParser(
        description="Solve as many arithmetic problems as you can before the time runs out"
    )
    parser.add_argument(
        "-t", "--time-limit",
        type=int,
        default=TIME_LIMIT_SECONDS,
        help=f"Length of the session in seconds (default: {TIME_LIMIT_SECONDS})",
    )
    parser.add_argument(
        "-s", "--seed",
        type=int,
        default=None,
        help="Seed for the problem generator",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Diagnostic log level written to stderr (default: WARNING)",
    )

    args = parser.parse_args(argv)

    try:
        return CliArgs(time_limit=args.time_limit, seed=args.seed, log_level=args.log_level)
    except ValidationError as exc:
        parser.error(str(exc))


def welcome(console: Console, settings: QuizSettings) -> None:
    """Print the instructions block."""
    console.say(
        "",
        "Welcome to the One Minute Math Challenge!",
        "",
        f"You will have {settings.time_limit} seconds to solve as many problems as possible.",
        "To quit at any time, press 'q'.",
        "To answer a question, enter your answer and then press 'Enter' or 'Return'.",
        "NOTE: A blank or empty answer will count as a unanswered question.",
        "",
    )


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None) -> None:
    """
    Run one quiz from configuration to report.

    :param argv: Command-line arguments, defaults to sys.argv[1:]
    :param console: Console to talk through, defaults to the standard streams
    """
    cli_args = parse_args(argv)
    configure_logging(cli_args.log_level)

    console = console or Console()
    settings = QuizSettings(time_limit=cli_args.time_limit)
    generator = ProblemGenerator(rng=random.Random(cli_args.seed))

    welcome(console, settings)
    config = collect_config(console, settings)

    problems = generator.generate(config.min_value, config.max_value, config.count, config.operations)
    if not problems:
        # Nothing to ask: stop rather than run an empty session
        logger.error("🛑 No problems generated, aborting")
        sys.exit(1)

    runner = SessionRunner(console=console, time_limit=settings.time_limit)
    answers = runner.run(problems)

    console.say(render_report(grade(problems, answers)))


if __name__ == "__main__":
    main()

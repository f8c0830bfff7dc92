"""Random arithmetic problem generator."""
import math
import random
from typing import Iterable, List, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from one_minute_math.common.logger import logger
from one_minute_math.common.models import GenerationConfig, InvalidConfiguration, Operation, Problem


def find_divisors(n: int) -> List[int]:
    """
    Return the positive divisors of ``|n|`` in ascending order.

    Trial divisors run from 1 to isqrt(|n|); each hit contributes both factors.
    Zero yields an empty list since the scan range is empty.

    :param int n: Number to factor

    :return: Sorted list of divisors
    :rtype: List[int]
    """
    magnitude = abs(n)
    divisors: set[int] = set()
    for i in range(1, math.isqrt(magnitude) + 1):
        if magnitude % i == 0:
            divisors.add(i)
            divisors.add(magnitude // i)
    return sorted(divisors)


def pick_divisor(numerator: int, rng: random.Random) -> Tuple[int, int]:
    """
    Choose a denominator that divides the numerator exactly.

    When the numerator has no divisor (only 0) it is bumped by one and the
    search starts over, so the returned numerator may differ from the input.
    Denominators are always positive.

    :param int numerator: Sampled numerator
    :param random.Random rng: Source of randomness

    :return: Tuple of (numerator, denominator)
    :rtype: Tuple[int, int]
    """
    while True:
        divisors = find_divisors(numerator)
        if divisors:
            return numerator, rng.choice(divisors)
        logger.debug("No divisor for %d, trying %d", numerator, numerator + 1)
        numerator += 1


class ProblemGenerator(BaseModel):
    """
    Generate sequences of arithmetic problems with integer answers.

    Supported operation codes:
        - "a": addition
        - "s": subtraction
        - "m": multiplication
        - "d": division, always exact

    Examples:
        >>> generator = ProblemGenerator(rng=random.Random(7))
        >>> problems = generator.generate(1, 10, 3, "asmd")
        >>> len(problems)
        3
    """

    # Allow arbitrary types like random.Random
    model_config = ConfigDict(arbitrary_types_allowed=True)

    rng: random.Random = Field(default_factory=random.Random, description="Random source, seed it to replay a quiz")

    def generate(
        self,
        min_value: int,
        max_value: int,
        count: int,
        operations: Iterable[Union[str, Operation]],
    ) -> List[Problem]:
        """
        Validate the parameters and generate ``count`` problems.

        Configuration errors are logged and produce an empty list; callers
        must treat an empty list as a hard stop.

        :param int min_value: Smallest operand (inclusive)
        :param int max_value: Largest operand (inclusive)
        :param int count: Number of problems
        :param operations: Operation codes ("a", "s", "m", "d")

        :return: Problems in presentation order, or an empty list
        :rtype: List[Problem]
        """
        try:
            config = GenerationConfig(
                min_value=min_value,
                max_value=max_value,
                count=count,
                operations=list(operations),
            )
        except (InvalidConfiguration, ValidationError, TypeError) as exc:
            logger.error(f"❌ Invalid configuration: {exc}")
            return []

        return self.generate_from(config)

    def generate_from(self, config: GenerationConfig) -> List[Problem]:
        """
        Generate problems from an already validated configuration.

        :param GenerationConfig config: Validated parameters

        :return: Problems in presentation order
        :rtype: List[Problem]
        """
        choices: List[Operation] = config.operation_set
        problems: List[Problem] = [
            self._make_problem(self.rng.choice(choices), config.min_value, config.max_value)
            for _ in range(config.count)
        ]
        logger.info(
            f"🧮 Generated {len(problems)} problems in [{config.min_value}, {config.max_value}] "
            f"using {''.join(config.operations)}"
        )
        return problems

    def _make_problem(self, op: Operation, min_value: int, max_value: int) -> Problem:
        """Build one problem for the chosen operation."""
        if op is Operation.DIVIDE:
            numerator, denominator = pick_divisor(self.rng.randint(min_value, max_value), self.rng)
            return Problem.build(numerator, op, denominator)

        left: int = self.rng.randint(min_value, max_value)
        right: int = self.rng.randint(min_value, max_value)
        return Problem.build(left, op, right)

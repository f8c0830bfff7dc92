"""Pydantic models shared by the generator, the session runner and the grader."""
from enum import Enum
import operator
from typing import Callable, List

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class InvalidConfiguration(Exception):
    """
    Raised when generation parameters break a generator invariant.

    Deliberately not a ValueError: pydantic lets it escape validators unwrapped,
    so callers receive the plain message.
    """


class Operation(str, Enum):
    """Operation codes as typed at the prompt."""

    ADD = "a"
    SUBTRACT = "s"
    MULTIPLY = "m"
    DIVIDE = "d"

    @property
    def symbol(self) -> str:
        """Symbol used when rendering an expression."""
        return _SYMBOLS[self]

    def apply(self, left: int, right: int) -> int:
        """
        Apply the operation to two integers.

        Division is only exact when ``right`` divides ``left``; the generator
        guarantees it.

        :param int left: Left operand
        :param int right: Right operand

        :return: Integer result
        :rtype: int
        """
        return _FUNCTIONS[self](left, right)


_SYMBOLS: dict[Operation, str] = {
    Operation.ADD: "+",
    Operation.SUBTRACT: "-",
    Operation.MULTIPLY: "*",
    Operation.DIVIDE: "/",
}

_FUNCTIONS: dict[Operation, Callable[[int, int], int]] = {
    Operation.ADD: operator.add,
    Operation.SUBTRACT: operator.sub,
    Operation.MULTIPLY: operator.mul,
    Operation.DIVIDE: operator.floordiv,
}


class Problem(BaseModel):
    """A single generated problem, immutable for the lifetime of a session."""

    model_config = ConfigDict(frozen=True)

    expression: str = Field(..., description="Operands and operator without spaces, e.g. '12/3'")
    answer: int = Field(..., description="Exact integer result of the expression")

    @classmethod
    def build(cls, left: int, op: Operation, right: int) -> "Problem":
        """Render and solve ``left op right``."""
        return cls(expression=f"{left}{op.symbol}{right}", answer=op.apply(left, right))


class GenerationConfig(BaseModel):
    """
    Validated parameters for one generation run.

    Operations are normalized (trimmed, lower-cased, deduplicated in
    first-seen order) before the invariants are checked.
    """

    model_config = ConfigDict(frozen=True)

    min_value: int = Field(..., description="Smallest operand (inclusive)")
    max_value: int = Field(..., description="Largest operand (inclusive)")
    count: int = Field(..., description="Number of problems to generate")
    operations: List[str] = Field(..., description="Enabled operation codes")

    @field_validator("operations", mode="before")
    def normalize_operations(cls, v):
        """Lower-case, trim and deduplicate the operation codes."""
        if isinstance(v, str):
            v = list(v)
        seen: List[str] = []
        for code in v:
            code = code.value if isinstance(code, Operation) else str(code).strip().lower()
            if code and code not in seen:
                seen.append(code)
        return seen

    @model_validator(mode="after")
    def check_invariants(self) -> "GenerationConfig":
        """Reject configurations the generator cannot honour."""
        if self.min_value > self.max_value:
            raise InvalidConfiguration(
                f"Min number ({self.min_value}) must be <= max number ({self.max_value})"
            )

        if self.count <= 0:
            raise InvalidConfiguration("There should be at least one question")

        if not self.operations:
            raise InvalidConfiguration("At least one operation must be provided")

        known = {op.value for op in Operation}
        unknown = [code for code in self.operations if code not in known]
        if unknown:
            verb = "is not a valid operation" if len(unknown) == 1 else "are not valid operations"
            raise InvalidConfiguration(f"{', '.join(unknown)} {verb}")

        return self

    @property
    def operation_set(self) -> List[Operation]:
        """Enabled operations, in first-seen order."""
        return [Operation(code) for code in self.operations]


class AnsweredProblem(BaseModel):
    """A problem paired with the raw text the user typed for it."""

    model_config = ConfigDict(frozen=True)

    problem: Problem
    user_answer: str = Field(default="", description="Raw answer, empty when unanswered")


class GradeReport(BaseModel):
    """Summary counts of a graded session."""

    total: int = Field(..., ge=0)
    correct: int = Field(default=0, ge=0)
    unanswered: int = Field(default=0, ge=0)
    incorrect: List[AnsweredProblem] = Field(default_factory=list)

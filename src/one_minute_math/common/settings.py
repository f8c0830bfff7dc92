"""Named constants and validated settings for a quiz session."""
from pydantic import BaseModel, ConfigDict, Field, model_validator


# Operand bounds accepted at the prompts (both exclusive)
MIN_OPERAND: int = -100
MAX_OPERAND: int = 100

# Upper bound on the number of questions (exclusive)
MAX_QUESTIONS: int = 250

# Length of the single timed window shared by every problem
TIME_LIMIT_SECONDS: int = 60

# Reserved tokens, compared after trimming and lower-casing
QUIT_TOKEN: str = "q"
START_TOKEN: str = "start"

# Operation codes offered at the prompt
OPERATION_CODES: tuple[str, ...] = ("a", "s", "m", "d")


class QuizSettings(BaseModel):
    """
    Tunable limits of a quiz session.

    The defaults are the module constants; the CLI may override the time limit.
    """

    model_config = ConfigDict(frozen=True)

    min_operand: int = Field(default=MIN_OPERAND, description="Exclusive lower bound for operands")
    max_operand: int = Field(default=MAX_OPERAND, description="Exclusive upper bound for operands")
    max_questions: int = Field(default=MAX_QUESTIONS, ge=2, description="Exclusive upper bound for the question count")
    time_limit: int = Field(default=TIME_LIMIT_SECONDS, ge=0, description="Session length in seconds")

    @model_validator(mode="after")
    def bounds_must_leave_room(self) -> "QuizSettings":
        """Ensure at least two operands fit strictly between the bounds."""
        if self.max_operand - self.min_operand < 3:
            raise ValueError(
                f"Operand bounds ({self.min_operand}, {self.max_operand}) leave no room for a range"
            )
        return self

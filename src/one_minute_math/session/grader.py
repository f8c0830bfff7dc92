"""Grade a finished session and render the report."""
from typing import List, Sequence

from one_minute_math.common.console import parse_integer
from one_minute_math.common.logger import logger
from one_minute_math.common.models import AnsweredProblem, GradeReport, Problem


SEPARATOR: str = "=" * 20


def grade(problems: Sequence[Problem], answers: Sequence[str]) -> GradeReport:
    """
    Compare raw answers against the problems they were given for.

    Rules:
        - Empty answer counts as unanswered
        - Answer that is not an integer counts as incorrect
        - Integer answer is compared to the problem's answer

    :param Sequence[Problem] problems: Problems that were asked
    :param Sequence[str] answers: Raw answers aligned by index with problems

    :return: Summary counts and the incorrect items
    :rtype: GradeReport
    :raises ValueError: If the two sequences differ in length
    """
    if len(problems) != len(answers):
        raise ValueError(f"Got {len(answers)} answers for {len(problems)} problems")

    report = GradeReport(total=len(problems))
    for problem, answer in zip(problems, answers):
        if not answer:
            report.unanswered += 1
            continue
        try:
            is_correct = parse_integer(answer) == problem.answer
        except ValueError:
            is_correct = False

        if is_correct:
            report.correct += 1
        else:
            report.incorrect.append(AnsweredProblem(problem=problem, user_answer=answer))

    logger.info(
        f"📝 Graded {report.total} problems: {report.correct} correct, "
        f"{len(report.incorrect)} incorrect, {report.unanswered} unanswered"
    )
    return report


def render_report(report: GradeReport) -> str:
    """
    Render the end-of-session report.

    :param GradeReport report: Graded session

    :return: Multi-line report text
    :rtype: str
    """
    lines: List[str] = ["", SEPARATOR, ""]

    if report.correct == report.total:
        lines.append("You got every problem right!")
    elif report.correct == 0 and report.unanswered == 0:
        lines.append("You didn't get any problems right... awkward")
    else:
        lines.append(f"You got {report.correct}/{report.total} problems correct.")

    if report.unanswered > 0:
        lines.append(f"You failed to answer {report.unanswered} problem(s)")

    if report.incorrect:
        lines.append("")
        lines.append(f"You got {len(report.incorrect)} problems wrong")
        for item in report.incorrect:
            lines.append(f"{item.problem.expression} = {item.problem.answer}, you answered {item.user_answer}")

    return "\n".join(lines)

"""Test grade and render_report."""
import pytest

from one_minute_math.common.models import GradeReport, Problem
from one_minute_math.session.grader import SEPARATOR, grade, render_report


def test_grade_correct_answer() -> None:
    """A numeric answer equal to the problem's answer is correct."""
    report = grade([Problem(expression="9+7", answer="16")], ["16"])
    assert report.correct == 1
    assert report.incorrect == []
    assert report.unanswered == 0


def test_grade_empty_answer_is_unanswered() -> None:
    """An empty answer counts as unanswered, not incorrect."""
    report = grade([Problem(expression="8-10", answer="-2")], [""])
    assert report.unanswered == 1
    assert report.correct == 0
    assert report.incorrect == []


def test_grade_non_numeric_answer_is_incorrect() -> None:
    """Text that is not an integer is incorrect and kept for the report."""
    report = grade([Problem(expression="8-10", answer="-2")], ["abc"])
    assert len(report.incorrect) == 1
    assert report.incorrect[0].user_answer == "abc"
    assert report.incorrect[0].problem.expression == "8-10"


@pytest.mark.parametrize("answer,is_correct", [
    ("-2", True),
    ("2", False),
    ("-2.0", False),
    ("--2", False),
])
def test_grade_numeric_comparison(answer, is_correct) -> None:
    """Only an exact integer match is correct."""
    report = grade([Problem(expression="8-10", answer=-2)], [answer])
    assert report.correct == int(is_correct)
    assert len(report.incorrect) == int(not is_correct)


@pytest.mark.parametrize("answer,is_correct", [
    ("16", True),
    ("+16", True),
    ("016", True),
    ("1_6", False),
    ("١٦", False),
    ("16 ", False),
])
def test_grade_only_plain_digits_count(answer, is_correct) -> None:
    """Underscored, non-ASCII or padded digits are graded as incorrect, not converted."""
    report = grade([Problem(expression="9+7", answer=16)], [answer])
    assert report.correct == int(is_correct)
    assert len(report.incorrect) == int(not is_correct)


def test_grade_is_idempotent() -> None:
    """Grading the same pair twice gives the same report."""
    problems = [
        Problem(expression="9+7", answer=16),
        Problem(expression="8-10", answer=-2),
        Problem(expression="12/3", answer=4),
    ]
    answers = ["16", "", "5"]
    assert grade(problems, answers) == grade(problems, answers)


def test_grade_length_mismatch() -> None:
    """Misaligned sequences are rejected."""
    with pytest.raises(ValueError):
        grade([Problem(expression="1+1", answer=2)], [])


def test_render_all_correct() -> None:
    """A perfect session gets the congratulation line."""
    text = render_report(grade([Problem(expression="1+1", answer=2)], ["2"]))
    assert text.splitlines()[:4] == ["", SEPARATOR, "", "You got every problem right!"]


def test_render_none_correct_none_unanswered() -> None:
    """All wrong with nothing skipped gets the commiseration line and the item list."""
    problems = [Problem(expression="2*3", answer=6), Problem(expression="6/2", answer=3)]
    text = render_report(grade(problems, ["5", "x"]))

    lines = text.splitlines()
    assert "You didn't get any problems right... awkward" in lines
    assert "You got 2 problems wrong" in lines
    assert "2*3 = 6, you answered 5" in lines
    assert "6/2 = 3, you answered x" in lines
    assert not any("failed to answer" in line for line in lines)


def test_render_partial() -> None:
    """Mixed results show the ratio, the unanswered count and the mistakes."""
    problems = [
        Problem(expression="9+7", answer=16),
        Problem(expression="8-10", answer=-2),
        Problem(expression="12/3", answer=4),
    ]
    text = render_report(grade(problems, ["16", "", "5"]))

    assert text == "\n".join([
        "",
        SEPARATOR,
        "",
        "You got 1/3 problems correct.",
        "You failed to answer 1 problem(s)",
        "",
        "You got 1 problems wrong",
        "12/3 = 4, you answered 5",
    ])


def test_render_all_unanswered() -> None:
    """Nothing answered shows the ratio and the unanswered count only."""
    text = render_report(GradeReport(total=3, unanswered=3))
    assert "You got 0/3 problems correct." in text
    assert "You failed to answer 3 problem(s)" in text
    assert "wrong" not in text


def test_separator_is_twenty_equals() -> None:
    """The report separator is a line of twenty '=' characters."""
    assert SEPARATOR == "=" * 20

import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import question_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from question_toolkit.core.models import Question, QuestionType  # noqa: E402


# Common test fixtures
@pytest.fixture
def addition() -> Question:
    """Published short answer question with content."""
    return Question(
        id=1,
        name="Addition",
        type=QuestionType.SHORT_ANSWER,
        body="What is 2+2?",
        expected="4",
        options=(),
        points=1,
        published=True,
    )


@pytest.fixture
def letters() -> Question:
    """Unpublished short answer question."""
    return Question(
        id=2,
        name="Letters",
        type=QuestionType.SHORT_ANSWER,
        body="What is the last letter of the English alphabet?",
        expected="Z",
        options=(),
        points=1,
        published=False,
    )


@pytest.fixture
def colors() -> Question:
    """Published multiple choice question with three options."""
    return Question(
        id=5,
        name="Colors",
        type=QuestionType.MULTIPLE_CHOICE,
        body="Which of these is a color?",
        expected="red",
        options=("red", "apple", "firetruck"),
        points=1,
        published=True,
    )


@pytest.fixture
def shapes() -> Question:
    """Unpublished multiple choice question worth two points."""
    return Question(
        id=9,
        name="Shapes",
        type=QuestionType.MULTIPLE_CHOICE,
        body="What shape can you make with one line?",
        expected="circle",
        options=("square", "triangle", "circle"),
        points=2,
        published=False,
    )


@pytest.fixture
def blank_question() -> Question:
    """Question with no body, expected answer or options."""
    return Question(id=3, name="Blank", type=QuestionType.SHORT_ANSWER)


@pytest.fixture
def questions(addition, letters, colors, shapes) -> list[Question]:
    """Mixed collection of published and unpublished questions."""
    return [addition, letters, colors, shapes]

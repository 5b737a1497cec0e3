"""
Module: questions

Purpose:
    Provides the Question dataclass - the record every transformation in
    the builder package consumes and produces. Immutable, with options
    held in a tuple so copies never share a mutable container.

Key Functions:
    - Question.with_changes(**changes): Fresh copy with fields replaced
    - Question.to_dict() / Question.from_dict(): Serialization
    - make_blank_question(id, name, type): Empty question factory
    - duplicate_question(new_id, question): "Copy of ..." factory

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - core.utils.serialization
    - builder.collection, builder.editing, builder.scoring, builder.export
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Iterable

COPY_NAME_PREFIX = "Copy of "


class QuestionType(str, Enum):
    """Variant tag of a question."""
    MULTIPLE_CHOICE = "multiple_choice_question"
    SHORT_ANSWER = "short_answer_question"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Question:
    """
    Single quiz question (immutable).

    Attributes:
        id: Integer identifier (uniqueness assumed, not enforced)
        name: Display name
        type: QuestionType variant; plain strings are coerced
        body: Question prompt
        expected: Expected answer text
        options: Choices, stored as a tuple
        points: Non-negative score value
        published: Visibility flag

    Invariants:
        - points >= 0
        - options is always a tuple owned by this instance

    Example:
        >>> q = Question(1, "Addition", QuestionType.SHORT_ANSWER, "1+1?", "2", (), 1, True)
        >>> q.with_changes(name="Sum").name
        'Sum'
    """

    id: int
    name: str
    type: QuestionType
    body: str = ""
    expected: str = ""
    options: tuple[str, ...] = ()
    points: int = 0
    published: bool = False

    def __post_init__(self) -> None:
        """Coerce type/options and validate points."""
        try:
            object.__setattr__(self, "type", QuestionType(self.type))
        except ValueError:
            raise ValueError(f"Unknown question type: {self.type!r}") from None
        if isinstance(self.options, str):
            raise ValueError(f"options must be a sequence of strings, not {self.options!r}")
        object.__setattr__(self, "options", tuple(self.options))

        if self.points < 0:
            raise ValueError(f"points cannot be negative: {self.points}")

    @property
    def is_multiple_choice(self) -> bool:
        return self.type is QuestionType.MULTIPLE_CHOICE

    def with_changes(self, **changes: Any) -> Question:
        """
        Return a new Question with the given fields replaced.

        Args:
            **changes: Field values to override

        Returns:
            Fresh Question instance (self is unchanged)
        """
        return replace(self, **changes)

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> dict:
        """
        Serialize to dictionary for JSON storage.

        Returns:
            Dict representation, options as a new list
        """
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type.value,
            "body": self.body,
            "expected": self.expected,
            "options": list(self.options),
            "points": self.points,
            "published": self.published,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Question:
        """
        Deserialize from dictionary.

        Args:
            data: Dict representation

        Returns:
            Question instance
        """
        return cls(
            id=data["id"],
            name=data["name"],
            type=QuestionType(data["type"]),
            body=data.get("body", ""),
            expected=data.get("expected", ""),
            options=tuple(data.get("options", [])),
            points=data.get("points", 0),
            published=data.get("published", False),
        )

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        return (
            f"Question({self.id!r}, {self.name!r}, type={self.type.value}, "
            f"points={self.points}, published={self.published})"
        )


def make_blank_question(id: int, name: str, type: QuestionType | str) -> Question:
    """
    Create a question with no content.

    Body and expected are empty, there are no options, points are zero
    and the question is unpublished.
    """
    return Question(id=id, name=name, type=QuestionType(type))


def duplicate_question(
    new_id: int,
    question: Question,
    *,
    name_prefix: str = COPY_NAME_PREFIX,
) -> Question:
    """
    Copy a question under a new id.

    The copy is named ``"Copy of <name>"`` and is always unpublished.

    Args:
        new_id: Id for the copy
        question: Question to copy
        name_prefix: Prefix prepended to the original name

    Returns:
        New unpublished Question
    """
    return question.with_changes(
        id=new_id,
        name=f"{name_prefix}{question.name}",
        published=False,
    )


def copy_questions(questions: Iterable[Question]) -> list[Question]:
    """Fresh copies of every question, in order."""
    return [q.with_changes() for q in questions]

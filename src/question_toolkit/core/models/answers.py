"""
Module: answers

Purpose:
    Provides the Answer dataclass - a response to one Question, linked
    by question id (non-owning reference).

Used By:
    - builder.collection.make_answers
    - core.utils.serialization
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Answer:
    """
    Response to a single question (immutable).

    Attributes:
        question_id: Id of the Question this answers
        text: Response text
        submitted: Whether the answer has been submitted
        correct: Whether the answer was marked correct
    """

    question_id: int
    text: str = ""
    submitted: bool = False
    correct: bool = False

    @classmethod
    def blank(cls, question_id: int) -> Answer:
        """Unsubmitted, empty answer for a question."""
        return cls(question_id=question_id)

    def to_dict(self) -> dict:
        return {
            "question_id": self.question_id,
            "text": self.text,
            "submitted": self.submitted,
            "correct": self.correct,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Answer:
        return cls(
            question_id=data["question_id"],
            text=data.get("text", ""),
            submitted=data.get("submitted", False),
            correct=data.get("correct", False),
        )

"""
Core Models Package

Immutable data models shared by every module in the toolkit.

All models are frozen dataclasses. Any "change" produces a new instance,
so a transformed collection never shares state with its input.
"""

from .answers import Answer
from .questions import (
    COPY_NAME_PREFIX,
    Question,
    QuestionType,
    copy_questions,
    duplicate_question,
    make_blank_question,
)

__all__ = [
    "Answer",
    "COPY_NAME_PREFIX",
    "Question",
    "QuestionType",
    "copy_questions",
    "duplicate_question",
    "make_blank_question",
]

"""
Module: builder.collection

Purpose:
    Query functions over a question collection: filtering, lookup,
    removal and projection. Every function returns new objects and
    leaves its input untouched.

Key Functions:
    - get_published_questions(): Published subset
    - get_non_empty_questions(): Questions with any content
    - find_question(): First question with an id, or None
    - remove_question(): Collection without an id
    - get_names(): Question names
    - make_answers(): One blank Answer per question
    - same_type(): Whether all questions share a type

Dependencies:
    - question_toolkit.core.models: Question, Answer, QuestionType

Used By:
    - builder (public API)
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from question_toolkit.core.models import Answer, Question, QuestionType, copy_questions

logger = logging.getLogger(__name__)


def get_published_questions(questions: Sequence[Question]) -> List[Question]:
    """
    Keep only published questions.

    Args:
        questions: Collection to filter

    Returns:
        Copies of the published questions, in input order
    """
    return copy_questions(q for q in questions if q.published)


def _is_non_empty(question: Question) -> bool:
    return (
        question.body.strip() != ""
        or len(question.options) > 0
        or question.expected.strip() != ""
    )


def get_non_empty_questions(questions: Sequence[Question]) -> List[Question]:
    """
    Keep only questions that have some content.

    A question is empty when its body and expected answer are blank
    (whitespace only) and it has no options.
    """
    return copy_questions(q for q in questions if _is_non_empty(q))


def find_question(questions: Sequence[Question], id: int) -> Optional[Question]:
    """
    Find the first question with the given id.

    Args:
        questions: Collection to search
        id: Question id to look for

    Returns:
        Copy of the first match, or None if no question has that id
    """
    for q in questions:
        if q.id == id:
            return q.with_changes()
    logger.debug(f"Question {id} not found among {len(questions)} questions")
    return None


def remove_question(questions: Sequence[Question], id: int) -> List[Question]:
    """
    Drop every question with the given id.

    Returns:
        Copies of the remaining questions, in input order
    """
    return copy_questions(q for q in questions if q.id != id)


def get_names(questions: Sequence[Question]) -> List[str]:
    """Names of the questions, in order."""
    return [q.name for q in questions]


def make_answers(questions: Sequence[Question]) -> List[Answer]:
    """
    Create one blank Answer per question.

    Each answer references its question by id, has empty text and is
    neither submitted nor correct.
    """
    return [Answer.blank(q.id) for q in questions]


def same_type(questions: Sequence[Question]) -> bool:
    """
    Check whether every question has the same type.

    An empty collection counts as the same type (vacuously true).
    """
    return (
        all(q.is_multiple_choice for q in questions)
        or all(q.type is QuestionType.SHORT_ANSWER for q in questions)
    )

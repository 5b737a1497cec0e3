"""
Module: builder.editing

Purpose:
    Edit operations over a question collection. Each returns a new list
    of new Question objects; the input collection and its questions are
    never modified.

Key Functions:
    - publish_all(): Publish every question
    - add_new_question(): Append a blank question
    - rename_question_by_id(): Change one question's name
    - change_question_type_by_id(): Change one question's type
    - edit_option(): Append or replace one option of a question
    - duplicate_question_in_array(): Insert a copy after a question

Targeting:
    Functions taking a target id apply the change to every question with
    that id. When nothing matches, the result is a plain copy of the input.

Dependencies:
    - question_toolkit.core.models: Question, QuestionType, make_blank_question
    - question_toolkit.builder.config: BuilderConfig

Used By:
    - builder (public API)
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence

from question_toolkit.builder.config import DEFAULT_CONFIG, BuilderConfig
from question_toolkit.core.models import (
    Question,
    QuestionType,
    copy_questions,
    make_blank_question,
)

logger = logging.getLogger(__name__)

APPEND_OPTION = -1


def _update_by_id(
    questions: Sequence[Question],
    target_id: int,
    update: Callable[[Question], Question],
) -> List[Question]:
    """Apply update to questions with target_id, copy the rest."""
    result = []
    matched = False
    for q in questions:
        if q.id == target_id:
            result.append(update(q))
            matched = True
        else:
            result.append(q.with_changes())

    if not matched:
        logger.debug(f"No question with id {target_id}; returning unchanged copy")
    return result


def publish_all(questions: Sequence[Question]) -> List[Question]:
    """Copies of all questions, each marked as published."""
    return [q.with_changes(published=True) for q in questions]


def add_new_question(
    questions: Sequence[Question],
    id: int,
    name: str,
    type: QuestionType | str,
) -> List[Question]:
    """
    Append a blank question to the collection.

    Args:
        questions: Existing questions (copied)
        id: Id for the new question
        name: Name for the new question
        type: Type for the new question

    Returns:
        Copies of the existing questions followed by the blank question
    """
    return copy_questions(questions) + [make_blank_question(id, name, type)]


def rename_question_by_id(
    questions: Sequence[Question],
    target_id: int,
    new_name: str,
) -> List[Question]:
    """Rename the question with target_id; all others are copied as-is."""
    return _update_by_id(
        questions, target_id, lambda q: q.with_changes(name=new_name)
    )


def change_question_type_by_id(
    questions: Sequence[Question],
    target_id: int,
    new_type: QuestionType | str,
) -> List[Question]:
    """
    Change the type of the question with target_id.

    Options only make sense for multiple choice questions, so any other
    new type also clears the options.
    """
    new_type = QuestionType(new_type)

    def change(q: Question) -> Question:
        changed = q.with_changes(type=new_type)
        if changed.is_multiple_choice:
            return changed
        return changed.with_changes(options=())

    return _update_by_id(questions, target_id, change)


def _replace_option(question: Question, index: int, new_option: str) -> Question:
    if not question.is_multiple_choice:
        logger.warning(
            f"Ignored option edit on question {question.id}: "
            f"{question.type} questions have no options"
        )
        return question.with_changes()

    options = list(question.options)

    if index == APPEND_OPTION:
        options.append(new_option)
    elif 0 <= index < len(options):
        options[index] = new_option
    else:
        logger.warning(
            f"Rejected option edit on question {question.id}: index {index} "
            f"outside 0..{len(options) - 1}"
        )
        raise IndexError(
            f"Option index {index} out of range for question {question.id} "
            f"with {len(options)} options"
        )

    return question.with_changes(options=tuple(options))


def edit_option(
    questions: Sequence[Question],
    target_id: int,
    target_option_index: int,
    new_option: str,
) -> List[Question]:
    """
    Append or replace an option on the question with target_id.

    Args:
        questions: Collection to edit
        target_id: Id of the question to edit
        target_option_index: -1 to append, otherwise the index to replace
        new_option: Option text

    Returns:
        New collection with the edited question. Short answer targets
        never gain options; they are copied unchanged.

    Raises:
        IndexError: If target_option_index is neither -1 nor a valid index
            into the target question's options
    """
    return _update_by_id(
        questions,
        target_id,
        lambda q: _replace_option(q, target_option_index, new_option),
    )


def duplicate_question_in_array(
    questions: Sequence[Question],
    target_id: int,
    new_id: int,
    *,
    config: Optional[BuilderConfig] = None,
) -> List[Question]:
    """
    Insert a duplicate directly after the question with target_id.

    The duplicate gets new_id and the name "Copy of <name>"; every other
    field, including published, is kept from the original.

    Example:
        >>> qs = [make_blank_question(1, "Q", QuestionType.SHORT_ANSWER)]
        >>> [(q.id, q.name) for q in duplicate_question_in_array(qs, 1, 99)]
        [(1, 'Q'), (99, 'Copy of Q')]
    """
    config = config or DEFAULT_CONFIG

    result = []
    for q in questions:
        result.append(q.with_changes())
        if q.id == target_id:
            result.append(
                q.with_changes(id=new_id, name=f"{config.copy_name_prefix}{q.name}")
            )
    return result

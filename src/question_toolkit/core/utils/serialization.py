"""
Serialization Utilities

Provides to/from JSON utilities for the core models.

- `serialize_*` and `deserialize_*` functions wrap the model
  `to_dict()` / `from_dict()` methods
- Validation via the schema validator before deserialization
- JSONL helpers for storing a question collection one record per line
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable

from ..models.answers import Answer
from ..models.questions import Question
from ..schemas.validator import ValidationError, validate_answer, validate_question

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Question Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_question(question: Question) -> dict[str, Any]:
    """
    Serialize a Question to a dictionary.

    The output can be written to JSON and will pass strict validation
    as long as the question respects the short-answer options rule.
    """
    return question.to_dict()


def deserialize_question(
    data: dict[str, Any],
    *,
    validate: bool = True,
) -> Question:
    """
    Deserialize a Question from a dictionary.

    Args:
        data: Dictionary from JSON
        validate: Whether to run basic validation first

    Returns:
        Question instance

    Raises:
        ValidationError: If validate=True and data is invalid
        ValueError: If data cannot be parsed
    """
    if validate:
        validate_question(data, strict=False)

    return Question.from_dict(data)


# ─────────────────────────────────────────────────────────────────────────────
# Answer Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_answer(answer: Answer) -> dict[str, Any]:
    """Serialize an Answer to a dictionary."""
    return answer.to_dict()


def deserialize_answer(
    data: dict[str, Any],
    *,
    validate: bool = True,
) -> Answer:
    """
    Deserialize an Answer from a dictionary.

    Raises:
        ValidationError: If validate=True and data is invalid
    """
    if validate:
        validate_answer(data, strict=False)

    return Answer.from_dict(data)


# ─────────────────────────────────────────────────────────────────────────────
# JSONL Utilities
# ─────────────────────────────────────────────────────────────────────────────

def load_questions_jsonl(
    path: Path,
    *,
    validate: bool = True,
) -> list[Question]:
    """
    Load questions from a JSONL file.

    Args:
        path: Path to questions.jsonl file
        validate: Whether to validate each question

    Returns:
        List of Question instances, in file order

    Raises:
        FileNotFoundError: If file doesn't exist
        ValidationError: If any question is invalid
    """
    if not path.exists():
        raise FileNotFoundError(f"Questions file not found: {path}")

    questions = []
    with open(path, "r", encoding="utf-8") as f:
        for line_no, line in enumerate(f, 1):
            line = line.strip()
            if not line:
                continue

            try:
                data = json.loads(line)
                question = deserialize_question(data, validate=validate)
                questions.append(question)
            except (json.JSONDecodeError, ValidationError, ValueError, KeyError) as e:
                raise ValidationError(
                    f"Error parsing line {line_no}: {e}",
                    path=str(path),
                    errors=[str(e)]
                ) from e

    logger.debug(f"Loaded {len(questions)} questions from {path}")
    return questions


def save_questions_jsonl(questions: Iterable[Question], path: Path) -> None:
    """
    Save questions to a JSONL file.

    Args:
        questions: Questions to save
        path: Output path for questions.jsonl
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        for question in questions:
            data = serialize_question(question)
            f.write(json.dumps(data, ensure_ascii=False))
            f.write("\n")

"""
Schema Validation Utilities

Validates serialized question and answer dicts before they are turned
into models.

Two levels:
- Basic checks (always): required fields, types of the fields the
  builder relies on, known question type, short-answer questions carry
  no options
- Strict checks (``strict=True``): full JSON Schema validation with
  jsonschema against the bundled ``*.schema.json`` files
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema

QUESTION_TYPES = ("multiple_choice_question", "short_answer_question")

# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def _is_int(value: Any) -> bool:
    # bool is an int subclass
    return isinstance(value, int) and not isinstance(value, bool)


def _require(data: dict[str, Any], required: list[str]) -> None:
    missing = [f for f in required if f not in data]
    if missing:
        raise ValidationError(
            f"Missing required fields: {missing}",
            path="",
            errors=[f"Missing field: {f}" for f in missing]
        )


def _check_strict(data: dict[str, Any], schema_name: str) -> None:
    schema = _load_schema(schema_name)
    try:
        jsonschema.validate(data, schema)
    except jsonschema.ValidationError as e:
        raise ValidationError(
            f"Schema validation failed: {e.message}",
            path=".".join(str(p) for p in e.absolute_path),
            errors=[e.message]
        ) from e


def validate_question(data: dict[str, Any], *, strict: bool = False) -> None:
    """
    Validate question data.

    Args:
        data: Question dictionary to validate
        strict: If True, also validate against question.schema.json

    Raises:
        ValidationError: If data is invalid
    """
    _require(data, ["id", "name", "type"])

    if not _is_int(data["id"]):
        raise ValidationError(
            f"Invalid id: {data['id']!r} (must be an integer)",
            path="id"
        )

    qtype = data["type"]
    if qtype not in QUESTION_TYPES:
        raise ValidationError(
            f"Invalid question type: {qtype!r}",
            path="type"
        )

    for text_field in ("name", "body", "expected"):
        if text_field in data and not isinstance(data[text_field], str):
            raise ValidationError(
                f"{text_field} must be a string",
                path=text_field
            )

    if "published" in data and not isinstance(data["published"], bool):
        raise ValidationError(
            "published must be a boolean",
            path="published"
        )

    points = data.get("points", 0)
    if not _is_int(points) or points < 0:
        raise ValidationError(
            f"Invalid points: {points!r} (must be non-negative integer)",
            path="points"
        )

    options = data.get("options", [])
    if not isinstance(options, list):
        raise ValidationError(
            "options must be a list",
            path="options"
        )
    for i, option in enumerate(options):
        if not isinstance(option, str):
            raise ValidationError(
                f"Invalid option: {option!r} (must be a string)",
                path=f"options[{i}]"
            )

    if qtype == "short_answer_question" and options:
        raise ValidationError(
            "short_answer_question must not have options",
            path="options"
        )

    if strict:
        _check_strict(data, "question")


def validate_answer(data: dict[str, Any], *, strict: bool = False) -> None:
    """
    Validate answer data.

    Args:
        data: Answer dictionary to validate
        strict: If True, also validate against answer.schema.json

    Raises:
        ValidationError: If data is invalid
    """
    _require(data, ["question_id"])

    if not _is_int(data["question_id"]):
        raise ValidationError(
            f"Invalid question_id: {data['question_id']!r} (must be an integer)",
            path="question_id"
        )

    for flag in ("submitted", "correct"):
        if flag in data and not isinstance(data[flag], bool):
            raise ValidationError(
                f"{flag} must be a boolean",
                path=flag
            )

    if strict:
        _check_strict(data, "answer")

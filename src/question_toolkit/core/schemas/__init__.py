"""
Schemas Package

JSON schema definitions and validation utilities.
"""

from .validator import (
    validate_question,
    validate_answer,
    ValidationError,
    QUESTION_TYPES,
)

__all__ = [
    "validate_question",
    "validate_answer",
    "ValidationError",
    "QUESTION_TYPES",
]

"""
Utils Package

Serialization and utility functions.
"""

from .serialization import (
    serialize_question,
    deserialize_question,
    serialize_answer,
    deserialize_answer,
    load_questions_jsonl,
    save_questions_jsonl,
)

__all__ = [
    "serialize_question",
    "deserialize_question",
    "serialize_answer",
    "deserialize_answer",
    "load_questions_jsonl",
    "save_questions_jsonl",
]

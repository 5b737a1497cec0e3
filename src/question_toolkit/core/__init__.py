"""
Question Toolkit Core Package

Shared data models, validation and serialization. Everything in the
builder package operates on the models defined here.

**Immutable Data Models**
   Frozen dataclasses; every change creates a new instance. Options are
   stored as tuples so no two questions ever share a mutable container.
"""

from .models import Answer, Question, QuestionType, make_blank_question

__all__ = [
    "Answer",
    "Question",
    "QuestionType",
    "make_blank_question",
]

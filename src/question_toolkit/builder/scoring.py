"""
Module: builder.scoring

Purpose:
    Point totals over a question collection. Totals are always computed
    from the questions themselves, never stored.
"""

from __future__ import annotations

from typing import Sequence

from question_toolkit.core.models import Question


def sum_points(questions: Sequence[Question]) -> int:
    """Total points of all questions (0 for an empty collection)."""
    return sum(q.points for q in questions)


def sum_published_points(questions: Sequence[Question]) -> int:
    """Total points of the published questions only."""
    return sum(q.points for q in questions if q.published)

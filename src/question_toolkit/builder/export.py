"""
Module: builder.export

Purpose:
    Render a question collection as CSV text.

Format:
    id,name,options,points,published
    1,Addition,0,1,true
    5,Colors,3,1,false

    - options is the NUMBER of options
    - booleans are the literal tokens true / false
    - no quoting or escaping; values are assumed delimiter-free
    - rows joined by the line terminator, none after the last row
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from question_toolkit.builder.config import DEFAULT_CONFIG, BuilderConfig
from question_toolkit.core.models import Question

CSV_COLUMNS = ("id", "name", "options", "points", "published")


def _format_bool(value: bool) -> str:
    return "true" if value else "false"


def _csv_fields(question: Question) -> List[str]:
    return [
        str(question.id),
        question.name,
        str(len(question.options)),
        str(question.points),
        _format_bool(question.published),
    ]


def to_csv(
    questions: Sequence[Question],
    *,
    config: Optional[BuilderConfig] = None,
) -> str:
    """
    Produce CSV text for a question collection.

    The header line is always followed by the line terminator, so an
    empty collection yields just the header and one terminator.

    Args:
        questions: Questions to export, one row each
        config: Formatting settings (defaults to DEFAULT_CONFIG)

    Returns:
        CSV text

    Example:
        >>> to_csv([Question(1, "Addition", "short_answer_question", points=1, published=True)])
        'id,name,options,points,published\\n1,Addition,0,1,true'
    """
    config = config or DEFAULT_CONFIG
    sep = config.csv_delimiter
    eol = config.csv_line_terminator

    header = sep.join(CSV_COLUMNS) + eol
    rows = eol.join(sep.join(_csv_fields(q)) for q in questions)
    return header + rows

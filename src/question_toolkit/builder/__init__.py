"""
Question Builder Package

Pure transformation functions over a collection of questions. Inputs
are never modified; every result is made of new Question objects.
"""

from .collection import (
    find_question,
    get_names,
    get_non_empty_questions,
    get_published_questions,
    make_answers,
    remove_question,
    same_type,
)
from .config import DEFAULT_CONFIG, BuilderConfig
from .editing import (
    add_new_question,
    change_question_type_by_id,
    duplicate_question_in_array,
    edit_option,
    publish_all,
    rename_question_by_id,
)
from .export import CSV_COLUMNS, to_csv
from .scoring import sum_points, sum_published_points

__all__ = [
    # Config
    "BuilderConfig",
    "DEFAULT_CONFIG",
    # Collection queries
    "get_published_questions",
    "get_non_empty_questions",
    "find_question",
    "remove_question",
    "get_names",
    "make_answers",
    "same_type",
    # Scoring
    "sum_points",
    "sum_published_points",
    # Export
    "CSV_COLUMNS",
    "to_csv",
    # Editing
    "publish_all",
    "add_new_question",
    "rename_question_by_id",
    "change_question_type_by_id",
    "edit_option",
    "duplicate_question_in_array",
]

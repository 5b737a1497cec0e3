"""
Unit Tests for Collection Queries

Tests for filtering, lookup, removal and projection functions.
"""

import pytest

from question_toolkit.builder import (
    find_question,
    get_names,
    get_non_empty_questions,
    get_published_questions,
    make_answers,
    remove_question,
    same_type,
)
from question_toolkit.core.models import Answer, Question, QuestionType


class TestGetPublishedQuestions:
    """Tests for get_published_questions."""

    def test_filter_when_mixed_then_keeps_published_in_order(
        self, questions, addition, colors
    ):
        assert get_published_questions(questions) == [addition, colors]

    def test_filter_when_none_published_then_empty(self, letters, shapes):
        assert get_published_questions([letters, shapes]) == []

    def test_filter_when_empty_then_empty(self):
        assert get_published_questions([]) == []

    def test_filter_when_called_then_returns_new_objects(self, questions):
        result = get_published_questions(questions)
        assert all(r is not q for r in result for q in questions)

    def test_filter_when_called_then_input_unchanged(self, questions):
        before = list(questions)
        get_published_questions(questions)
        assert questions == before


class TestGetNonEmptyQuestions:
    """Tests for get_non_empty_questions."""

    def test_filter_when_blank_present_then_removed(self, questions, blank_question):
        result = get_non_empty_questions([blank_question] + questions)
        assert result == questions

    def test_filter_when_only_whitespace_then_removed(self):
        q = Question(
            id=1, name="Spaces", type=QuestionType.SHORT_ANSWER,
            body="   ", expected="\t\n",
        )
        assert get_non_empty_questions([q]) == []

    @pytest.mark.parametrize(
        "changes",
        [
            {"body": "Prompt"},
            {"expected": "Answer"},
            {"options": ("a",), "type": QuestionType.MULTIPLE_CHOICE},
        ],
    )
    def test_filter_when_any_field_set_then_kept(self, blank_question, changes):
        q = blank_question.with_changes(**changes)
        assert get_non_empty_questions([q]) == [q]


class TestFindQuestion:
    """Tests for find_question."""

    def test_find_when_present_then_returns_copy(self, questions, colors):
        result = find_question(questions, 5)
        assert result == colors
        assert result is not colors

    def test_find_when_absent_then_returns_none(self, questions):
        assert find_question(questions, 42) is None

    def test_find_when_empty_then_returns_none(self):
        assert find_question([], 1) is None

    def test_find_when_duplicate_ids_then_returns_first(self, addition):
        second = addition.with_changes(name="Second")
        assert find_question([addition, second], 1).name == "Addition"


class TestRemoveQuestion:
    """Tests for remove_question."""

    def test_remove_when_present_then_excluded(self, questions, addition, colors, shapes):
        assert remove_question(questions, 2) == [addition, colors, shapes]

    def test_remove_when_absent_then_copy_of_input(self, questions):
        result = remove_question(questions, 42)
        assert result == questions
        assert result is not questions

    def test_remove_when_duplicate_ids_then_all_removed(self, addition, letters):
        twin = addition.with_changes(name="Twin")
        assert remove_question([addition, letters, twin], 1) == [letters]


class TestGetNames:
    """Tests for get_names."""

    def test_names_when_called_then_in_order(self, questions):
        assert get_names(questions) == ["Addition", "Letters", "Colors", "Shapes"]

    def test_names_when_empty_then_empty(self):
        assert get_names([]) == []


class TestMakeAnswers:
    """Tests for make_answers."""

    def test_answers_when_called_then_one_blank_answer_per_question(self, questions):
        assert make_answers(questions) == [
            Answer(question_id=1, text="", submitted=False, correct=False),
            Answer(question_id=2, text="", submitted=False, correct=False),
            Answer(question_id=5, text="", submitted=False, correct=False),
            Answer(question_id=9, text="", submitted=False, correct=False),
        ]

    def test_answers_when_empty_then_empty(self):
        assert make_answers([]) == []


class TestSameType:
    """Tests for same_type."""

    def test_same_type_when_all_short_answer_then_true(self, addition, letters):
        assert same_type([addition, letters])

    def test_same_type_when_all_multiple_choice_then_true(self, colors, shapes):
        assert same_type([colors, shapes])

    def test_same_type_when_mixed_then_false(self, questions):
        assert not same_type(questions)

    def test_same_type_when_single_then_true(self, colors):
        assert same_type([colors])

    def test_same_type_when_empty_then_vacuously_true(self):
        assert same_type([])

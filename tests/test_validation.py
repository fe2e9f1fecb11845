from __future__ import annotations

import pytest

from casebook.quiz import QuizValidationError, parse_document
from casebook.quiz.validation import (
    EMPTY_DOCUMENT, EMPTY_QUESTION, MULTIPLE_CORRECT_OPTIONS, NO_CORRECT_OPTION, TOO_FEW_OPTIONS,
    ensure_valid, validate_document,
)


def _codes(text: str, **kwargs) -> list[str]:
    return [issue.code for issue in validate_document(parse_document(text), **kwargs)]


def test_valid_document_has_no_issues(sample_text: str) -> None:
    assert validate_document(parse_document(sample_text)) == []


def test_empty_document() -> None:
    assert _codes("") == [EMPTY_DOCUMENT]


def test_too_few_options_and_no_correct() -> None:
    assert _codes("//// Q\n/// A") == [TOO_FEW_OPTIONS, NO_CORRECT_OPTION]


def test_multiple_correct_is_configurable() -> None:
    text = "//// Q\n// A\n// B"
    assert _codes(text) == [MULTIPLE_CORRECT_OPTIONS]
    assert _codes(text, require_single_correct=False) == []


def test_min_options_is_configurable() -> None:
    assert _codes("//// Q\n// A", min_options=1) == []


def test_empty_question() -> None:
    assert _codes("//// | \n// A\n/// B") == [EMPTY_QUESTION]


def test_issue_points_at_step() -> None:
    issues = validate_document(parse_document("//// Q1\n// A\n/// B\n//// Q2\n/// C\n/// D"))
    assert len(issues) == 1
    assert issues[0].step_index == 1
    assert issues[0].to_dict()["code"] == NO_CORRECT_OPTION


def test_ensure_valid_raises_with_issues() -> None:
    with pytest.raises(QuizValidationError) as exc:
        ensure_valid(parse_document("//// Q\n/// A"))
    payload = exc.value.to_dict()
    assert payload["error"] == "validation"
    assert {i["code"] for i in payload["issues"]} == {TOO_FEW_OPTIONS, NO_CORRECT_OPTION}


def test_ensure_valid_returns_steps(sample_text: str) -> None:
    steps = parse_document(sample_text)
    assert ensure_valid(steps) is steps

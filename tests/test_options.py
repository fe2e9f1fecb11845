from __future__ import annotations

import pytest

from casebook.quiz import QuizSyntaxError, RandomIds, encode_options, parse_options
from casebook.quiz.localized import CORRECT_FEEDBACK, INCORRECT_FEEDBACK, LocalizedText
from casebook.quiz.validation import TOO_FEW_OPTIONS, validate_options

LAB_TEXT = """\
// Hyperkalemia ## Peaked T waves | მაღალი T კბილები
/// Hyponatremia | ჰიპონატრიემია
/// Hypocalcemia
"""


def test_option_lines_follow_step_grammar() -> None:
    options = parse_options(LAB_TEXT)
    assert [o.correct for o in options] == [True, False, False]
    assert options[0].feedback == LocalizedText("Peaked T waves", "მაღალი T კბილები")
    assert options[1].text == LocalizedText("Hyponatremia", "ჰიპონატრიემია")
    assert options[1].feedback == INCORRECT_FEEDBACK
    assert [o.id for o in options] == ["s0_opt0", "s0_opt1", "s0_opt2"]


def test_random_ids() -> None:
    ids = [o.id for o in parse_options(LAB_TEXT, ids=RandomIds())]
    assert len(set(ids)) == 3


def test_step_and_hint_lines_are_not_options() -> None:
    options = parse_options("//// Q\n???? H\n// A\nplain\n/// B")
    assert [o.text.primary for o in options] == ["A", "B"]


def test_strict_rejects_unmarked_line() -> None:
    with pytest.raises(QuizSyntaxError) as exc:
        parse_options("// A\nplain", strict=True)
    assert exc.value.line_number == 2
    assert exc.value.text == "plain"


def test_empty_text() -> None:
    assert parse_options("") == []
    assert parse_options(None) == []
    assert encode_options([]) == ""


def test_encode_options_canonical_and_stable() -> None:
    options = parse_options(LAB_TEXT)
    encoded = encode_options(options)
    assert encoded == (
        "// Hyperkalemia | Hyperkalemia ## Peaked T waves | მაღალი T კბილები\n"
        "/// Hyponatremia | ჰიპონატრიემია\n"
        "/// Hypocalcemia | Hypocalcemia"
    )
    assert parse_options(encoded) == options
    assert encode_options(parse_options(encoded)) == encoded


def test_default_feedback_written_out_is_suppressed() -> None:
    options = parse_options("// A ## Correct! | სწორია!\n/// B")
    assert options[0].feedback == CORRECT_FEEDBACK
    assert "##" not in encode_options(options)


def test_validate_options_counts_options() -> None:
    assert validate_options(parse_options(LAB_TEXT)) == []
    issues = validate_options(parse_options("// A"))
    assert [i.code for i in issues] == [TOO_FEW_OPTIONS]
    assert validate_options(parse_options("// A"), min_options=1) == []

from __future__ import annotations

from casebook.quiz import encode_document, encode_step, never_suppress, parse_document
from casebook.quiz.localized import LocalizedText
from casebook.quiz.models import QuizOption, QuizStep


def test_canonical_step_layout() -> None:
    step = parse_document(
        "//// Q | K\n???? H\n// A ## Well done | Kargi\n/// B"
    )[0]
    assert encode_step(step) == (
        "//// Q | K\n"
        "???? H | H\n"
        "// A | A ## Well done | Kargi\n"
        "/// B | B"
    )


def test_default_feedback_is_suppressed() -> None:
    text = encode_document(parse_document("//// Q\n// A ## Correct! | სწორია!\n/// B"))
    assert "##" not in text


def test_never_suppress_keeps_every_feedback() -> None:
    text = encode_document(parse_document("//// Q\n// A\n/// B"), suppress=never_suppress)
    assert "// A | A ## Correct! | სწორია!" in text
    assert "/// B | B ## Incorrect choice. | არასწორია." in text


def test_steps_are_separated_by_blank_line() -> None:
    text = encode_document(parse_document("//// Q1\n// A\n//// Q2\n// B"))
    assert text == "//// Q1 | Q1\n// A | A\n\n//// Q2 | Q2\n// B | B"


def test_empty_document_encodes_to_empty_string() -> None:
    assert encode_document([]) == ""


def test_round_trip(sample_text: str) -> None:
    doc = parse_document(sample_text)
    assert parse_document(encode_document(doc)) == doc


def test_round_trip_of_messy_text() -> None:
    messy = (
        "scratch before the first step\n"
        "////   Q1 |K1  \n"
        "  ???? h  \n"
        "junk line\n"
        "///wrong|arasworia##fb\n"
        "//right\n"
        "////\n"
        "//// Q2\n"
        "/// only wrong ## |ka only\n"
    )
    doc = parse_document(messy)
    assert len(doc) == 2
    assert parse_document(encode_document(doc)) == doc


def test_re_encoding_is_idempotent(sample_text: str) -> None:
    encoded = encode_document(parse_document(sample_text))
    assert encode_document(parse_document(encoded)) == encoded


def test_encode_built_document_round_trips() -> None:
    doc = [QuizStep(
        question=LocalizedText("Q", "K"),
        options=(
            QuizOption.build(LocalizedText("A", "A2"), True),
            QuizOption.build(LocalizedText("B", "B2"), False, LocalizedText("No", "Ara")),
        ),
    )]
    encoded = encode_document(doc)
    assert parse_document(encoded) == doc
    assert encode_document(parse_document(encoded)) == encoded


def test_single_locale_output() -> None:
    doc = parse_document("//// Q | K\n???? H | HK\n// A | AK ## F | FK\n/// B | BK")
    assert encode_document(doc, locale="primary") == "//// Q\n???? H\n// A ## F\n/// B"
    assert encode_document(doc, locale="secondary") == "//// K\n???? HK\n// AK ## FK\n/// BK"


def test_empty_secondary_encodes_like_its_fallback() -> None:
    doc = [QuizStep(
        question=LocalizedText("Q", ""),
        hint=LocalizedText("H", ""),
        options=(
            QuizOption.build(LocalizedText("A", ""), True, LocalizedText("Yes", "")),
            QuizOption.build(LocalizedText("B", "B2"), False),
        ),
    )]
    encoded = encode_document(doc)
    assert encoded == "//// Q | Q\n???? H | H\n// A | A ## Yes | Yes\n/// B | B2"
    assert encode_document(parse_document(encoded)) == encoded

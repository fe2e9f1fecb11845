from __future__ import annotations

import pytest

from casebook.quiz.syntax import LineKind, block_lines, classify_line, split_blocks, strip_marker


def test_split_discards_leading_scratch_and_empty_blocks() -> None:
    text = "notes for myself\n//// Q1\n// A\n////   \n\n//// Q2\n/// B"
    assert split_blocks(text) == [" Q1\n// A\n", " Q2\n/// B"]


@pytest.mark.parametrize("text", ["", "no delimiter here", "// A\n/// B"])
def test_split_without_delimiter_is_empty(text: str) -> None:
    assert split_blocks(text) == []


def test_block_lines_are_trimmed_and_non_empty() -> None:
    assert block_lines(" Q \r\n\r\n  // A  \n\t\n") == ["Q", "// A"]


def test_wrong_option_is_never_classified_as_correct() -> None:
    assert classify_line("/// Wrong | Arasworia") is LineKind.WRONG_OPTION
    assert classify_line("///Wrong") is LineKind.WRONG_OPTION


@pytest.mark.parametrize(
    ("line", "kind"),
    [
        ("???? hint", LineKind.HINT),
        ("// right", LineKind.CORRECT_OPTION),
        ("//right", LineKind.CORRECT_OPTION),
        ("/ single slash", LineKind.UNRECOGNIZED),
        ("??? three marks", LineKind.UNRECOGNIZED),
        ("# comment", LineKind.UNRECOGNIZED),
    ],
)
def test_classify(line: str, kind: LineKind) -> None:
    assert classify_line(line) is kind


def test_strip_marker_removes_marker_and_following_space() -> None:
    assert strip_marker("///   Wrong", LineKind.WRONG_OPTION) == "Wrong"
    assert strip_marker("// Right", LineKind.CORRECT_OPTION) == "Right"
    assert strip_marker("?????extra", LineKind.HINT) == "?extra"
    assert strip_marker("plain", LineKind.UNRECOGNIZED) == "plain"


def test_only_newline_ends_a_line() -> None:
    assert block_lines(" Q\n// Aspirin\u2028300 mg\n/// B\x0bC\r\n") == [
        "Q", "// Aspirin\u2028300 mg", "/// B\x0bC",
    ]

"""
Bare option lists (lab cases): the option lines of a step without the step.

    // Hyperkalemia ## Peaked T waves | სწორია
    /// Hyponatremia | ჰიპონატრიემია

Option lines follow the step grammar exactly (markers, '##' feedback,
"A | B" locales, default feedback). Step and hint lines have no meaning here
and are treated like any other unrecognized line.
"""
import logging

from casebook.quiz.errors import QuizSyntaxError
from casebook.quiz.ids import POSITIONAL
from casebook.quiz.parser import parse_option
from casebook.quiz.syntax import BLOCK_DELIMITER, LineKind, classify_line, strip_marker, text_lines

logger = logging.getLogger(__name__)

_OPTION_KINDS = (LineKind.CORRECT_OPTION, LineKind.WRONG_OPTION)


def _option_kind(line):
    if line.startswith(BLOCK_DELIMITER):
        return LineKind.UNRECOGNIZED
    kind = classify_line(line)
    return kind if kind in _OPTION_KINDS else LineKind.UNRECOGNIZED


def parse_options(text, ids=POSITIONAL, strict=False):
    """Textarea -> list of QuizOption in line order."""
    options = []
    for line_number, line in enumerate(text_lines(text), start=1):
        kind = _option_kind(line)
        if kind is LineKind.UNRECOGNIZED:
            if strict:
                raise QuizSyntaxError(0, line_number, line)
            logger.debug("Option list: unrecognized line %d dropped: %r", line_number, line)
            continue
        options.append(parse_option(
            strip_marker(line, kind),
            kind is LineKind.CORRECT_OPTION,
            ids.option_id(0, len(options)),
        ))
    return options

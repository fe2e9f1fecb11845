"""
Quiz DSL -> QuizStep list.

    //// What is the diagnosis? | რა არის დიაგნოზი?
    ???? Look at the ST segment | შეხედეთ ST სეგმენტს
    // STEMI ## Correct, ST elevation | სწორია
    /// Pericarditis

Malformed input never raises: empty blocks are skipped and lines without a
marker are dropped. With strict=True a dropped line raises QuizSyntaxError.
"""
import logging

from casebook.quiz.errors import QuizSyntaxError
from casebook.quiz.ids import POSITIONAL
from casebook.quiz.localized import parse_localized
from casebook.quiz.models import QuizOption, QuizStep
from casebook.quiz.syntax import (
    FEEDBACK_SEPARATOR, LineKind, block_lines, classify_line, split_blocks, strip_marker,
)

logger = logging.getLogger(__name__)


def parse_option(remainder, correct, option_id=''):
    """Option line without its marker: "text ## feedback"."""
    text, _, feedback = remainder.partition(FEEDBACK_SEPARATOR)
    return QuizOption.build(
        parse_localized(text),
        correct,
        parse_localized(feedback) if feedback.strip() else None,
        id=option_id,
    )


def parse_step(block, step_index=0, ids=POSITIONAL, strict=False):
    """One block -> QuizStep, or None when the block has no lines."""
    lines = block_lines(block)
    if not lines:
        return None

    question = parse_localized(lines[0])
    hint = None
    options = []
    for line_number, line in enumerate(lines[1:], start=2):
        kind = classify_line(line)
        remainder = strip_marker(line, kind)
        if kind is LineKind.HINT:
            # last hint wins; a bare marker clears it
            hint = parse_localized(remainder)
            if hint.is_empty():
                hint = None
        elif kind in (LineKind.CORRECT_OPTION, LineKind.WRONG_OPTION):
            options.append(parse_option(
                remainder,
                kind is LineKind.CORRECT_OPTION,
                ids.option_id(step_index, len(options)),
            ))
        else:
            if strict:
                raise QuizSyntaxError(step_index, line_number, line)
            logger.debug("Step %d: unrecognized line %d dropped: %r", step_index, line_number, line)

    return QuizStep(
        question=question,
        hint=hint,
        options=tuple(options),
        id=ids.step_id(step_index),
    )


def parse_document(text, ids=POSITIONAL, strict=False):
    """Whole textarea -> list of QuizStep in block order."""
    steps = []
    for block in split_blocks(text):
        step = parse_step(block, len(steps), ids=ids, strict=strict)
        if step is not None:
            steps.append(step)
    return steps

"""
Split editing: one Quiz DSL text per language, merged by position.

Each text is written in a single language (no "|" needed). Steps and options
are paired by index; an option marked correct in either text is correct.
"""
import logging

from casebook.quiz.encoder import encode_document
from casebook.quiz.ids import POSITIONAL
from casebook.quiz.localized import LocalizedText, default_feedback
from casebook.quiz.models import QuizOption, QuizStep
from casebook.quiz.parser import parse_document

logger = logging.getLogger(__name__)

_MISSING_STEP = QuizStep(question=LocalizedText())


def _pick(values, index, fallback):
    return values[index] if index < len(values) else fallback


def _side_feedback(option, locale):
    # Each language falls back to its own default, chosen by that side's flag.
    if option is None:
        return default_feedback(False).get(locale)
    if option.has_default_feedback:
        return default_feedback(option.correct).get(locale)
    return option.feedback.primary


def merge_steps(primary_steps, secondary_steps, ids=POSITIONAL):
    """Pair two single-language documents into one bilingual document."""
    if len(primary_steps) != len(secondary_steps):
        logger.info("Step count differs between languages: %d vs %d",
                    len(primary_steps), len(secondary_steps))
    merged = []
    for i in range(max(len(primary_steps), len(secondary_steps))):
        en = _pick(primary_steps, i, _MISSING_STEP)
        ka = _pick(secondary_steps, i, _MISSING_STEP)

        options = []
        for j in range(max(len(en.options), len(ka.options))):
            en_opt = _pick(en.options, j, None)
            ka_opt = _pick(ka.options, j, None)
            options.append(QuizOption(
                text=LocalizedText.of(
                    en_opt.text.primary if en_opt else '',
                    ka_opt.text.primary if ka_opt else '',
                ),
                correct=bool((en_opt and en_opt.correct) or (ka_opt and ka_opt.correct)),
                feedback=LocalizedText(
                    _side_feedback(en_opt, 'primary'),
                    _side_feedback(ka_opt, 'secondary'),
                ),
                id=ids.option_id(i, j),
            ))

        hint = None
        if en.hint is not None or ka.hint is not None:
            hint = LocalizedText.of(
                en.hint.primary if en.hint else '',
                ka.hint.primary if ka.hint else '',
            )
        merged.append(QuizStep(
            question=LocalizedText.of(en.question.primary, ka.question.primary),
            hint=hint,
            options=tuple(options),
            id=ids.step_id(i),
        ))
    return merged


def merge_texts(primary_text, secondary_text, ids=POSITIONAL, strict=False):
    return merge_steps(
        parse_document(primary_text, strict=strict),
        parse_document(secondary_text, strict=strict),
        ids=ids,
    )


def split_texts(steps):
    """(primary_text, secondary_text) for a bilingual document."""
    return (
        encode_document(steps, locale='primary'),
        encode_document(steps, locale='secondary'),
    )

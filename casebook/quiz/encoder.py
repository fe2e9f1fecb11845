"""
QuizStep list -> canonical Quiz DSL text (the inverse of parser.parse_document).

Feedback equal to the synthesized default is left out, so the encoded text of
a freshly parsed document re-parses to the same document.

Fields are written as-is, with no escaping. A primary value containing '|', or
an option text containing '##', '\\n' or a leading marker, re-parses
differently; such values cannot be produced by the parser and only come from
hand-edited records. An empty secondary value is written as the primary one,
the same fallback the parser applies.
"""
from casebook.quiz.localized import LocalizedText, default_feedback
from casebook.quiz.syntax import (
    BLOCK_DELIMITER, CORRECT_MARKER, FEEDBACK_SEPARATOR, HINT_MARKER, WRONG_MARKER,
)

STEP_SEPARATOR = '\n\n'


def suppress_default(option, locale=None):
    """True when the option's feedback is the default one for its correctness."""
    default = default_feedback(option.correct)
    feedback = LocalizedText.coerce(option.feedback)
    if locale is None:
        return feedback == default
    return feedback.get(locale) == default.get(locale)


def never_suppress(option, locale=None):
    return False


def _field(value, locale):
    value = LocalizedText.coerce(value)
    if locale is None:
        return value.to_text()
    return value.get(locale)


def encode_option(option, suppress=suppress_default, locale=None):
    marker = CORRECT_MARKER if option.correct else WRONG_MARKER
    line = f"{marker} {_field(option.text, locale)}"
    if not suppress(option, locale):
        line += f" {FEEDBACK_SEPARATOR} {_field(option.feedback, locale)}"
    return line


def encode_options(options, suppress=suppress_default, locale=None):
    """Bare option list, one line per option (lab cases)."""
    return '\n'.join(encode_option(option, suppress=suppress, locale=locale) for option in options)


def encode_step(step, suppress=suppress_default, locale=None):
    """One step block.

    locale=None writes "primary | secondary" for every field; 'primary' or
    'secondary' writes that locale alone (one textarea per language).
    """
    lines = [f"{BLOCK_DELIMITER} {_field(step.question, locale)}"]
    if step.hint is not None:
        lines.append(f"{HINT_MARKER} {_field(step.hint, locale)}")
    for option in step.options:
        lines.append(encode_option(option, suppress=suppress, locale=locale))
    return '\n'.join(lines)


def encode_document(steps, suppress=suppress_default, locale=None):
    return STEP_SEPARATOR.join(
        encode_step(step, suppress=suppress, locale=locale) for step in steps
    )

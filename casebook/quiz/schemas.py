"""
Storage shapes for parsed quizzes.

Flag records (clinical case steps, lab case options) keep a boolean `correct`
and the feedback on every option:

    {"id": "step_0", "question": {"en": ..., "ka": ...}, "hint": {...} | None,
     "options": [{"id": "s0_opt0", "text": {...}, "correct": true, "feedback": {...}}]}

Pointer records (inscription tests) keep one `correctId` per step and no
feedback:

    {"id": ..., "question": {...}, "options": [{"id": ..., "text": {...}}], "correctId": ...}

Loading never fails on a malformed row: entries that are not objects are
skipped and fields of an unknown shape load as empty text.
"""
import logging

from casebook.quiz.localized import LocalizedText
from casebook.quiz.models import QuizOption, QuizStep

logger = logging.getLogger(__name__)


def _objects(raw):
    """Dict entries of a stored list; anything else is dropped."""
    if not isinstance(raw, (list, tuple)):
        if raw:
            logger.warning("Expected a list of records, got %s", type(raw).__name__)
        return []
    items = [item for item in raw if isinstance(item, dict)]
    if len(items) != len(raw):
        logger.warning("Skipped %d malformed records", len(raw) - len(items))
    return items


def _text_from(raw):
    return LocalizedText.coerce(raw) or LocalizedText()


def _hint_from(raw):
    hint = LocalizedText.coerce(raw) if raw else None
    if hint is not None and hint.is_empty():
        return None
    return hint


def _id_from(raw):
    return '' if raw is None or isinstance(raw, (dict, list)) else str(raw)


# ---------------------------- flag records ----------------------------

def option_to_flag_record(option):
    return {
        'id': option.id,
        'text': option.text.to_dict(),
        'correct': option.correct,
        'feedback': option.feedback.to_dict(),
    }


def options_to_flag_records(options):
    return [option_to_flag_record(opt) for opt in options]


def option_from_flag_record(record):
    return QuizOption.build(
        _text_from(record.get('text')),
        bool(record.get('correct')),
        LocalizedText.coerce(record.get('feedback') or None),
        id=_id_from(record.get('id')),
    )


def options_from_flag_records(records):
    return [option_from_flag_record(record) for record in _objects(records)]


def step_to_flag_record(step):
    return {
        'id': step.id,
        'question': step.question.to_dict(),
        'hint': step.hint.to_dict() if step.hint is not None else None,
        'options': options_to_flag_records(step.options),
    }


def steps_to_flag_records(steps):
    return [step_to_flag_record(step) for step in steps]


def steps_from_flag_records(records):
    """Stored steps -> QuizStep list. Tolerates plain-string fields from old rows."""
    steps = []
    for record in _objects(records):
        steps.append(QuizStep(
            question=_text_from(record.get('question')),
            hint=_hint_from(record.get('hint')),
            options=tuple(options_from_flag_records(record.get('options'))),
            id=_id_from(record.get('id')),
        ))
    return steps


# --------------------------- pointer records --------------------------

def step_to_pointer_record(step):
    correct = step.correct_options()
    record = {
        'id': step.id,
        'question': step.question.to_dict(),
        'options': [{'id': opt.id, 'text': opt.text.to_dict()} for opt in step.options],
        # a single pointer keeps only the last correct option
        'correctId': correct[-1].id if correct else None,
    }
    if step.hint is not None:
        record['hint'] = step.hint.to_dict()
    return record


def steps_to_pointer_records(steps):
    return [step_to_pointer_record(step) for step in steps]


def steps_from_pointer_records(records):
    steps = []
    for record in _objects(records):
        correct_id = _id_from(record.get('correctId'))
        options = tuple(
            QuizOption.build(
                _text_from(opt.get('text')),
                bool(correct_id) and _id_from(opt.get('id')) == correct_id,
                id=_id_from(opt.get('id')),
            )
            for opt in _objects(record.get('options'))
        )
        steps.append(QuizStep(
            question=_text_from(record.get('question')),
            hint=_hint_from(record.get('hint')),
            options=options,
            id=_id_from(record.get('id')),
        ))
    return steps

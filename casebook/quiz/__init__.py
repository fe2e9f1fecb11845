"""
Quiz DSL: plain-text quiz steps <-> structured steps.
"""
from casebook.quiz.encoder import (
    encode_document, encode_options, encode_step, never_suppress, suppress_default,
)
from casebook.quiz.errors import QuizError, QuizSyntaxError, QuizValidationError
from casebook.quiz.ids import PositionalIds, RandomIds
from casebook.quiz.localized import LocalizedText, default_feedback, parse_localized
from casebook.quiz.models import QuizOption, QuizStep
from casebook.quiz.options import parse_options
from casebook.quiz.parser import parse_document, parse_step

__all__ = [
    'LocalizedText', 'QuizOption', 'QuizStep',
    'PositionalIds', 'RandomIds',
    'QuizError', 'QuizSyntaxError', 'QuizValidationError',
    'default_feedback', 'parse_localized', 'parse_step', 'parse_document', 'parse_options',
    'encode_step', 'encode_document', 'encode_options', 'suppress_default', 'never_suppress',
]

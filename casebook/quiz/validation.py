"""
Business rules checked after parsing, before a quiz is saved.
"""
from dataclasses import asdict, dataclass
from typing import Optional

from casebook.quiz.errors import QuizValidationError

EMPTY_DOCUMENT = 'empty_document'
EMPTY_QUESTION = 'empty_question'
TOO_FEW_OPTIONS = 'too_few_options'
NO_CORRECT_OPTION = 'no_correct_option'
MULTIPLE_CORRECT_OPTIONS = 'multiple_correct_options'


@dataclass(frozen=True)
class QuizIssue:
    step_index: Optional[int]
    code: str
    message: str

    def to_dict(self):
        return asdict(self)


def validate_document(steps, min_options=2, require_single_correct=True):
    """Return the list of rule violations (empty list = valid)."""
    if not steps:
        return [QuizIssue(None, EMPTY_DOCUMENT, 'Quiz has no steps')]

    issues = []
    for i, step in enumerate(steps):
        label = f"Step {i + 1}"
        if not step.question.primary:
            issues.append(QuizIssue(i, EMPTY_QUESTION, f"{label}: question is empty"))
        if len(step.options) < min_options:
            issues.append(QuizIssue(
                i, TOO_FEW_OPTIONS,
                f"{label}: needs at least {min_options} options, got {len(step.options)}",
            ))
        correct = len(step.correct_options())
        if correct == 0:
            issues.append(QuizIssue(i, NO_CORRECT_OPTION, f"{label}: no correct option"))
        elif correct > 1 and require_single_correct:
            issues.append(QuizIssue(
                i, MULTIPLE_CORRECT_OPTIONS, f"{label}: {correct} options marked correct",
            ))
    return issues


def ensure_valid(steps, min_options=2, require_single_correct=True):
    issues = validate_document(steps, min_options, require_single_correct)
    if issues:
        raise QuizValidationError(issues)
    return steps


def validate_options(options, min_options=2):
    """Rules for a bare option list (lab cases): only the option count."""
    if len(options) < min_options:
        return [QuizIssue(
            None, TOO_FEW_OPTIONS,
            f"Needs at least {min_options} options, got {len(options)}",
        )]
    return []


def ensure_valid_options(options, min_options=2):
    issues = validate_options(options, min_options)
    if issues:
        raise QuizValidationError(issues)
    return options

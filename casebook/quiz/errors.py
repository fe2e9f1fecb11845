"""
Quiz DSL exceptions.
"""


class QuizError(Exception):
    """Base class for quiz parsing/validation errors."""


class QuizSyntaxError(QuizError):
    """Raised in strict mode for a line that carries no known marker."""

    def __init__(self, step_index, line_number, text):
        self.step_index = step_index
        self.line_number = line_number
        self.text = text
        super().__init__(
            f"Unrecognized line {line_number} in step {step_index + 1}: {text!r}"
        )

    def to_dict(self):
        return {
            'error': 'syntax',
            'step': self.step_index,
            'line': self.line_number,
            'text': self.text,
        }


class QuizValidationError(QuizError):
    """Parsed document breaks a business rule (option count, correct answers)."""

    def __init__(self, issues):
        self.issues = list(issues)
        super().__init__('; '.join(issue.message for issue in self.issues) or 'invalid quiz')

    def to_dict(self):
        return {'error': 'validation', 'issues': [issue.to_dict() for issue in self.issues]}

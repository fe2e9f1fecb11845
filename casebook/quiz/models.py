"""
Parsed quiz structures. Identifiers do not take part in equality, so two
parses of the same text compare equal whatever id policy produced them.
"""
from dataclasses import dataclass, field
from typing import Optional, Tuple

from casebook.quiz.localized import LocalizedText, default_feedback


@dataclass(frozen=True)
class QuizOption:
    text: LocalizedText
    correct: bool
    feedback: LocalizedText
    id: str = field(default='', compare=False)

    @classmethod
    def build(cls, text, correct, feedback=None, id=''):
        """Option with the default feedback filled in when none is given."""
        if feedback is None or feedback.is_empty():
            feedback = default_feedback(correct)
        return cls(text=text, correct=bool(correct), feedback=feedback, id=id)

    @property
    def has_default_feedback(self):
        return self.feedback == default_feedback(self.correct)


@dataclass(frozen=True)
class QuizStep:
    question: LocalizedText
    hint: Optional[LocalizedText] = None
    options: Tuple[QuizOption, ...] = ()
    id: str = field(default='', compare=False)

    def correct_options(self):
        return [opt for opt in self.options if opt.correct]

"""
Two-locale text fields: "English | Georgian" parsing and default feedback.
"""
from dataclasses import dataclass

LOCALE_SEPARATOR = '|'

# Storage keys for the two locale slots
PRIMARY_LOCALE = 'en'
SECONDARY_LOCALE = 'ka'


@dataclass(frozen=True)
class LocalizedText:
    """Text in the primary (authoritative) and secondary locale."""
    primary: str = ''
    secondary: str = ''

    @classmethod
    def of(cls, primary, secondary=None):
        """Build with the secondary slot falling back to the primary one."""
        primary = (primary or '').strip()
        secondary = (secondary or '').strip()
        return cls(primary, secondary or primary)

    @classmethod
    def coerce(cls, raw):
        """Normalize a stored value: plain string, {en, ka} or {primary, secondary}.

        Anything else (numbers, lists, nested objects) loads as empty text.
        """
        if raw is None:
            return None
        if isinstance(raw, LocalizedText):
            return cls.of(raw.primary, raw.secondary)
        if isinstance(raw, str):
            return cls.of(raw)
        if isinstance(raw, dict):
            primary = raw.get(PRIMARY_LOCALE, raw.get('primary'))
            secondary = raw.get(SECONDARY_LOCALE, raw.get('secondary'))
            return cls.of(_as_str(primary), _as_str(secondary))
        return cls()

    def get(self, locale):
        """Value for 'primary'/'secondary' or the storage key ('en'/'ka')."""
        if locale in ('primary', PRIMARY_LOCALE):
            return self.primary
        if locale in ('secondary', SECONDARY_LOCALE):
            return self.secondary
        raise ValueError(f"Unknown locale: {locale}")

    def is_empty(self):
        return not self.primary and not self.secondary

    def to_dict(self):
        return {PRIMARY_LOCALE: self.primary, SECONDARY_LOCALE: self.secondary}

    def to_text(self):
        return f"{self.primary} {LOCALE_SEPARATOR} {self.secondary}"


def _as_str(value):
    return value if isinstance(value, str) else ''


def parse_localized(raw):
    """Parse "A" or "A | B" into LocalizedText, splitting on the first pipe only.

    >>> parse_localized('Hello | Gamarjoba')
    LocalizedText(primary='Hello', secondary='Gamarjoba')
    >>> parse_localized('Hello')
    LocalizedText(primary='Hello', secondary='Hello')
    """
    primary, _, secondary = (raw or '').partition(LOCALE_SEPARATOR)
    return LocalizedText.of(primary, secondary)


CORRECT_FEEDBACK = LocalizedText('Correct!', 'სწორია!')
INCORRECT_FEEDBACK = LocalizedText('Incorrect choice.', 'არასწორია.')


def default_feedback(correct):
    """Feedback synthesized for an option the author left without one."""
    return CORRECT_FEEDBACK if correct else INCORRECT_FEEDBACK

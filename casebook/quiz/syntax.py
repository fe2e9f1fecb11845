"""
Quiz DSL tokens: block splitting and line classification.

Markers (fixed, no escaping):
    ////  new step (question follows on the same line)
    ????  hint
    ///   wrong option
    //    correct option
    ##    feedback separator inside an option line
"""
import enum

BLOCK_DELIMITER = '////'
HINT_MARKER = '????'
WRONG_MARKER = '///'
CORRECT_MARKER = '//'
FEEDBACK_SEPARATOR = '##'


class LineKind(enum.Enum):
    HINT = 'hint'
    CORRECT_OPTION = 'correct'
    WRONG_OPTION = 'wrong'
    UNRECOGNIZED = 'unrecognized'


# Longest prefix first: '///' starts with '//', so the wrong-option marker
# has to be tested before the correct-option one.
_PRECEDENCE = (
    (HINT_MARKER, LineKind.HINT),
    (WRONG_MARKER, LineKind.WRONG_OPTION),
    (CORRECT_MARKER, LineKind.CORRECT_OPTION),
)

MARKERS = {kind: marker for marker, kind in _PRECEDENCE}


def split_blocks(text):
    """Raw step blocks, in order. Text before the first delimiter is scratch."""
    if not text:
        return []
    fragments = text.split(BLOCK_DELIMITER)
    return [block for block in fragments[1:] if block.strip()]


def block_lines(block):
    """Trimmed, non-empty lines of a block.

    Only '\\n' ends a line ('\\r\\n' loses its '\\r' to the trim); other Unicode
    line boundaries such as U+2028 stay inside the line.
    """
    lines = (line.strip() for line in block.split('\n'))
    return [line for line in lines if line]


def text_lines(text):
    """Trimmed, non-empty lines of a whole text (no block splitting)."""
    return block_lines(text or '')


def classify_line(line):
    for marker, kind in _PRECEDENCE:
        if line.startswith(marker):
            return kind
    return LineKind.UNRECOGNIZED


def strip_marker(line, kind):
    """Remove the marker of `kind` and the whitespace right after it."""
    marker = MARKERS.get(kind)
    if marker is None or not line.startswith(marker):
        return line
    return line[len(marker):].lstrip()

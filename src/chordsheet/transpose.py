"""
Transposition engine

Shifts every [chord] annotation in a chord sheet by a number of semitones.
Text outside the brackets (lyrics, whitespace, newlines) is never touched.
"""

import re
from typing import List

from .chord import parse_token


# '[' up to the next ']'; empty brackets are left alone
CHORD_TOKEN_PATTERN = re.compile(r'\[([^\]]+)\]')

# Range the song view and CLI accept; an octave either way is the identity
MIN_TRANSPOSE = -11
MAX_TRANSPOSE = 11


def transpose_chord_token(token: str, steps: int) -> str:
    """Transpose a single chord annotation (without brackets).

    Examples:
        transpose_chord_token('F#m7', 3)  -> 'Am7'
        transpose_chord_token('G/D', 2)   -> 'A/E'
        transpose_chord_token('Db', 1)    -> 'D'
        transpose_chord_token('N.C.', 5)  -> 'N.C.'
    """
    return str(parse_token(token).transpose(steps))


def transpose_chordpro(text: str, steps: int) -> str:
    """Transpose every bracketed chord in a document.

    Runs the full scan even for steps == 0, so flat spellings come back
    sharp ('[Db]' -> '[C#]') at any shift.
    """
    return CHORD_TOKEN_PATTERN.sub(
        lambda match: '[' + transpose_chord_token(match.group(1), steps) + ']',
        text,
    )


def extract_chords(text: str) -> List[str]:
    """All bracket annotations in document order, as written."""
    return CHORD_TOKEN_PATTERN.findall(text)


def clamp_transpose(steps: int, lower: int = MIN_TRANSPOSE, upper: int = MAX_TRANSPOSE) -> int:
    if steps < lower:
        return lower
    if steps > upper:
        return upper
    return steps


def format_signed(steps: int) -> str:
    """'+2', '+0', '-3' for a transpose control label."""
    if steps >= 0:
        return f"+{steps}"
    return str(steps)

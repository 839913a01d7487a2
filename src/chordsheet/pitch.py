"""
Pitch-class model for chord transposition

Notes are folded into one of twelve pitch classes (0 = C ... 11 = B).
Sharp spellings are canonical; flat spellings are accepted on input and
always come back out as their sharp equivalent.
"""

from typing import Optional


SHARPS = ('C', 'C#', 'D', 'D#', 'E', 'F', 'F#', 'G', 'G#', 'A', 'A#', 'B')
FLATS = ('C', 'Db', 'D', 'Eb', 'E', 'F', 'Gb', 'G', 'Ab', 'A', 'Bb', 'B')

PITCH_CLASS_COUNT = len(SHARPS)


def normalize(note: str) -> Optional[int]:
    """Return the pitch class for a note name, or None if it isn't one.

    Only single accidentals from the two tables are recognized, so
    'C##', 'Cb', 'E#' and lowercase names all come back as None.
    """
    if note in FLATS:
        return FLATS.index(note)
    if note in SHARPS:
        return SHARPS.index(note)
    return None


def shift(pitch_class: int, steps: int) -> int:
    """Move a pitch class by a signed number of semitones."""
    return ((pitch_class + steps) % PITCH_CLASS_COUNT + PITCH_CLASS_COUNT) % PITCH_CLASS_COUNT


def note_name(pitch_class: int) -> str:
    """Canonical (sharp) spelling of a pitch class."""
    return SHARPS[shift(pitch_class, 0)]

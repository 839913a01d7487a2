"""
Chord token grammar

A chord annotation is the text between '[' and ']' in a chord sheet:

    root   := [A-G][#b]?
    token  := root suffix ('/' bass)?

The suffix (m7, sus4, add9, ...) is opaque and kept byte-for-byte. The bass
is expected to be a bare note name. Anything that does not start with a
recognized root (N.C., x2, Chorus, ...) is kept as a literal.
"""

import re
from dataclasses import dataclass
from typing import Optional

from .pitch import normalize, note_name, shift


# Greedy on the accidental: 'Bb5' is B-flat + '5', never B + 'b5'
CHORD_ROOT_PATTERN = re.compile(r'^([A-G][#b]?)(.*)$', re.DOTALL)


@dataclass(frozen=True)
class ChordToken:
    """One parsed chord annotation.

    root is None when the token could not be parsed; str() then gives
    back raw unchanged. bass_raw is None when there is no '/' part.
    """
    raw: str
    root: Optional[int] = None
    suffix: str = ''
    bass: Optional[int] = None
    bass_raw: Optional[str] = None

    @property
    def is_chord(self) -> bool:
        return self.root is not None

    @property
    def has_bass(self) -> bool:
        return self.bass_raw is not None

    def transpose(self, steps: int) -> 'ChordToken':
        """Shift root and bass independently by the same number of semitones."""
        if not self.is_chord:
            return self

        root = shift(self.root, steps)
        bass = self.bass
        bass_raw = self.bass_raw
        if bass is not None:
            bass = shift(bass, steps)
            bass_raw = note_name(bass)

        return ChordToken(
            raw=_serialize(root, self.suffix, bass, bass_raw),
            root=root,
            suffix=self.suffix,
            bass=bass,
            bass_raw=bass_raw,
        )

    def __str__(self) -> str:
        if not self.is_chord:
            return self.raw
        return _serialize(self.root, self.suffix, self.bass, self.bass_raw)


def _serialize(root: int, suffix: str, bass: Optional[int], bass_raw: Optional[str]) -> str:
    text = note_name(root) + suffix
    if bass is not None:
        text += '/' + note_name(bass)
    elif bass_raw is not None:
        # Bass that isn't a note name is echoed as written
        text += '/' + bass_raw
    return text


def parse_token(raw: str) -> ChordToken:
    """Parse a chord annotation; never raises.

    Returns an unparsed token (root None) when the text does not start with
    a root in [A-G][#b]? or when that root is not a known spelling (Cb, E#).
    """
    primary, slash, bass_raw = raw.partition('/')

    match = CHORD_ROOT_PATTERN.match(primary)
    if not match:
        return ChordToken(raw=raw)

    root = normalize(match.group(1))
    if root is None:
        return ChordToken(raw=raw)

    return ChordToken(
        raw=raw,
        root=root,
        suffix=match.group(2),
        bass=normalize(bass_raw) if slash else None,
        bass_raw=bass_raw if slash else None,
    )

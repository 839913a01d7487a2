"""
Inline chord layout

Turns lines with inline [chord] markers into the shapes a reader needs:
a chord-free lyric with chord offsets, a chords-over-lyrics pair of lines,
or a list of alternating text/chord segments.
"""

from dataclasses import dataclass
from typing import List, NamedTuple, Tuple

from .lines import LineKind, iter_document_lines
from .transpose import CHORD_TOKEN_PATTERN


@dataclass
class ChordPosition:
    """A chord and the lyric offset it sounds on"""
    chord: str
    position: int


class InlineSegment(NamedTuple):
    text: str
    is_chord: bool = False


def parse_inline(line: str) -> Tuple[str, List[ChordPosition]]:
    """Split a line into its lyric and the chords placed within it.

    '[G]Hello [C]world' -> ('Hello world', [G@0, C@6])
    """
    lyric_parts = []
    positions = []
    lyric_length = 0
    last = 0

    for match in CHORD_TOKEN_PATTERN.finditer(line):
        before = line[last:match.start()]
        lyric_parts.append(before)
        lyric_length += len(before)
        positions.append(ChordPosition(match.group(1), lyric_length))
        last = match.end()

    lyric_parts.append(line[last:])
    return ''.join(lyric_parts), positions


def build_chord_line(lyric: str, chords: List[ChordPosition]) -> str:
    """Line of chords aligned over the lyric returned by parse_inline().

    A chord that would run into the previous one is pushed right, one
    space after it.
    """
    if not chords:
        return ''

    chord_line = ''
    for chord in chords:
        if chord.position < 0:
            continue
        if len(chord_line) < chord.position:
            chord_line += ' ' * (chord.position - len(chord_line))
        elif chord_line:
            chord_line += ' '
        chord_line += chord.chord

    return chord_line


def build_inline_segments(line: str) -> List[InlineSegment]:
    segments = []
    last = 0

    for match in CHORD_TOKEN_PATTERN.finditer(line):
        if match.start() > last:
            segments.append(InlineSegment(line[last:match.start()]))
        segments.append(InlineSegment(match.group(1), is_chord=True))
        last = match.end()

    if last < len(line):
        segments.append(InlineSegment(line[last:]))
    if not segments:
        segments.append(InlineSegment(line))

    return segments


def to_overlay(text: str) -> List[str]:
    """Display lines with chords drawn on their own line above the lyric."""
    output = []
    for line in iter_document_lines(text):
        if not line.is_displayed:
            continue
        if line.kind == LineKind.BLANK:
            output.append('')
            continue

        lyric, chords = parse_inline(line.text)
        if chords:
            output.append(build_chord_line(lyric, chords))
        output.append(lyric)

    return output


def to_lyrics(text: str) -> List[str]:
    """Display lines with every chord marker removed."""
    output = []
    for line in iter_document_lines(text):
        if not line.is_displayed:
            continue
        if line.kind == LineKind.BLANK:
            output.append('')
        else:
            output.append(parse_inline(line.text)[0])
    return output

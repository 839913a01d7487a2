"""
Chordsheet - Transposition and cleanup for ChordPro-style chord sheets

Modules:
- pitch: Twelve-tone pitch classes and note spelling
- chord: Chord annotation grammar ([F#m7/C#])
- transpose: Transposing single chords and whole documents
- directives: {key: value} metadata extraction
- lines: Line classification and directive stripping for display
- layout: Chords-over-lyrics and inline segment layouts
- song: One-call song view (transposed body, keys, display lines)
"""

from .pitch import FLATS, SHARPS, normalize
from .chord import ChordToken, parse_token
from .transpose import (
    MAX_TRANSPOSE,
    MIN_TRANSPOSE,
    clamp_transpose,
    extract_chords,
    format_signed,
    transpose_chord_token,
    transpose_chordpro,
)
from .directives import Directive, extract_key, extract_meta, iter_directives
from .lines import (
    DocumentLine,
    LineKind,
    classify_line,
    split_lines,
    strip_chordpro_directives,
    to_display_lines,
)
from .layout import (
    ChordPosition,
    InlineSegment,
    build_chord_line,
    build_inline_segments,
    parse_inline,
    to_lyrics,
    to_overlay,
)
from .song import SongView, build_song_view

__version__ = "0.1.0"

__all__ = [
    # Pitch classes
    'SHARPS',
    'FLATS',
    'normalize',
    # Chord tokens
    'ChordToken',
    'parse_token',
    # Transposition
    'transpose_chord_token',
    'transpose_chordpro',
    'extract_chords',
    'clamp_transpose',
    'format_signed',
    'MIN_TRANSPOSE',
    'MAX_TRANSPOSE',
    # Directives
    'Directive',
    'iter_directives',
    'extract_meta',
    'extract_key',
    # Lines
    'DocumentLine',
    'LineKind',
    'classify_line',
    'split_lines',
    'to_display_lines',
    'strip_chordpro_directives',
    # Layout
    'ChordPosition',
    'InlineSegment',
    'parse_inline',
    'build_chord_line',
    'build_inline_segments',
    'to_overlay',
    'to_lyrics',
    # Song view
    'SongView',
    'build_song_view',
]

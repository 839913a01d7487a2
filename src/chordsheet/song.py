"""
Song view - everything a song page needs from one chord sheet

Composes the engine pieces: clamps the requested shift, transposes the
body, works out the original and the sounding key, and splits the result
into display lines.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .directives import extract_key, extract_meta, normalize_key_value
from .lines import to_display_lines
from .transpose import (
    MAX_TRANSPOSE,
    MIN_TRANSPOSE,
    clamp_transpose,
    format_signed,
    transpose_chord_token,
    transpose_chordpro,
)


NO_KEY_DISPLAY = 'Key: —'


@dataclass
class SongView:
    """Transposed song plus the values shown around it"""
    steps: int
    body: str
    base_key: str = ''
    effective_key: str = ''
    metadata: Dict[str, str] = field(default_factory=dict)
    lines: List[str] = field(default_factory=list)

    @property
    def has_key(self) -> bool:
        return bool(self.base_key)

    @property
    def steps_display(self) -> str:
        return format_signed(self.steps)

    @property
    def key_display(self) -> str:
        if not self.has_key:
            return NO_KEY_DISPLAY
        if self.steps != 0 and self.effective_key and self.effective_key != self.base_key:
            return f"Key: {self.base_key} → {self.effective_key}"
        return f"Key: {self.base_key}"


def build_song_view(
    text: str,
    steps: int = 0,
    key: Optional[str] = None,
    min_steps: int = MIN_TRANSPOSE,
    max_steps: int = MAX_TRANSPOSE,
) -> SongView:
    """Build the view for one song.

    Args:
        text: ChordPro-style song body
        steps: Requested shift in semitones; clamped to [min_steps, max_steps]
        key: Key stored alongside the song, if any; overrides a {key:} directive
    """
    steps = clamp_transpose(steps, min_steps, max_steps)
    body = transpose_chordpro(text, steps)

    base_key = normalize_key_value(key or '') or extract_key(text)
    effective_key = transpose_chord_token(base_key, steps) if base_key else ''

    return SongView(
        steps=steps,
        body=body,
        base_key=base_key,
        effective_key=effective_key,
        metadata=extract_meta(text),
        lines=to_display_lines(body),
    )

"""
Document line model

Splits a chord sheet into lines and decides which ones are shown to the
reader. Each line is classified on its own; there are no multi-line
constructs to track.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List


LINE_BREAK_PATTERN = re.compile(r'\r?\n')

DIRECTIVE_PREFIX = '{'
COMMENT_PREFIXES = ('#', '%')


class LineKind(Enum):
    DIRECTIVE = 'directive'
    COMMENT = 'comment'
    CONTENT = 'content'
    BLANK = 'blank'


@dataclass(frozen=True)
class DocumentLine:
    """One line of the source text, as written, with its classification"""
    text: str
    kind: LineKind

    @property
    def is_displayed(self) -> bool:
        return self.kind in (LineKind.CONTENT, LineKind.BLANK)


def split_lines(text: str) -> List[str]:
    """Split on '\\n' or '\\r\\n'. An empty document is one empty line."""
    return LINE_BREAK_PATTERN.split(text)


def classify_line(line: str) -> LineKind:
    stripped = line.strip()
    if not stripped:
        return LineKind.BLANK
    if stripped.startswith(DIRECTIVE_PREFIX):
        return LineKind.DIRECTIVE
    if stripped.startswith(COMMENT_PREFIXES):
        return LineKind.COMMENT
    return LineKind.CONTENT


def iter_document_lines(text: str) -> Iterator[DocumentLine]:
    for line in split_lines(text):
        yield DocumentLine(line, classify_line(line))


def strip_chordpro_directives(text: str) -> str:
    """Remove directive and comment lines, keeping everything else."""
    return '\n'.join(line.text for line in iter_document_lines(text) if line.is_displayed)


def to_display_lines(text: str) -> List[str]:
    """Lines to show: content lines untrimmed, blank lines kept as stanza breaks.

    Directive ({...}) and comment (# or %) lines are dropped. Chord
    brackets inside content lines are left in place. The kept lines are
    joined and split again, so feeding the result back in gives the same
    lines (a text of only directives gives ['']).
    """
    return split_lines(strip_chordpro_directives(text))

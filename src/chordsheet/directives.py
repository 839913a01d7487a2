"""
Directive and metadata extraction

Directives look like {key: value} and may sit on their own line or in the
middle of one. Anything without a ':' or a closing '}' is not a directive
and is left for the display layer to show as text.
"""

import re
from typing import Dict, Iterator, NamedTuple


# No nested braces in key or value, so each attempt stops at the next
# brace and a scan stays linear on brace-heavy text
DIRECTIVE_PATTERN = re.compile(r'\{([^{}:]*):([^{}]*)\}')


class Directive(NamedTuple):
    """A single {key: value} occurrence"""
    key: str
    value: str


def iter_directives(text: str) -> Iterator[Directive]:
    """Yield directives in document order, keys lowercased, values trimmed.

    A directive whose key or value is blank ({: x}, {title: }) is skipped.
    """
    for match in DIRECTIVE_PATTERN.finditer(text):
        key = match.group(1).strip().lower()
        value = match.group(2).strip()
        if key and value:
            yield Directive(key, value)


def extract_meta(text: str) -> Dict[str, str]:
    """Build the metadata mapping for a document.

    When a key repeats, the last value wins; the key stays where it was
    first seen.
    """
    meta = {}
    for directive in iter_directives(text):
        meta[directive.key] = directive.value
    return meta


def normalize_key_value(value: str) -> str:
    """Reduce a key directive value to the bare key name.

    '[G]' -> 'G', 'Am minor' -> 'Am', '' -> ''
    """
    cleaned = value.replace('[', '').replace(']', '').strip()
    fields = cleaned.split()
    if not fields:
        return ''
    return fields[0]


def extract_key(text: str) -> str:
    """Key from the first {key: ...} directive, or '' if the song has none."""
    for directive in iter_directives(text):
        if directive.key == 'key':
            return normalize_key_value(directive.value)
    return ''

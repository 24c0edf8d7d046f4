"""
Position-preserving reconstruction.

The text before each literal is blanked out so the literal lands on the same
line (and, when it starts mid-line, the same column) as in the source. The
whitespace rules match what template linters expect: no trailing whitespace
on blank lines, and no trailing spaces on the literal's closing line.
"""

from __future__ import annotations

import re

# Whitespace as JavaScript defines it: BOM included, \x1c-\x1f and \x85 excluded.
_WHITESPACE = "\t\n\x0b\x0c\r \xa0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
_NON_WHITESPACE_RE = re.compile(f"[^{_WHITESPACE}]")
_SPACES_BEFORE_NEWLINES_RE = re.compile(r"[ ]*(?=\n+)")
_INDENTED_CLOSING_LINE_RE = re.compile(r"\n[ ]+\Z")
_TRAILING_SPACES_RE = re.compile(r"[ ]+$", re.MULTILINE)


def blank_prefix(prefix: str, literal: str) -> str:
    """
    Blank `prefix` while keeping its line structure.

    Every non-whitespace character becomes a space. Then:
    - if `literal` starts on the next line, all spaces go (blank lines only);
    - otherwise only spaces before a newline go, so the last line keeps the
      padding that puts the literal at its original column.
    """
    blanked = _NON_WHITESPACE_RE.sub(" ", prefix)
    if literal.startswith("\n"):
        return blanked.replace(" ", "")
    return _SPACES_BEFORE_NEWLINES_RE.sub("", blanked)


def trim_literal(literal: str) -> str:
    """
    Right-trim every line of a literal whose closing line is only indentation.

    Other literals are returned as written.
    """
    if _INDENTED_CLOSING_LINE_RE.search(literal):
        return _TRAILING_SPACES_RE.sub("", literal)
    return literal

"""
Shared types for tag validation, scanning and reconstruction.
"""

from __future__ import annotations

import re
from dataclasses import dataclass


class InvalidTagSpecification(ValueError):
    """Raised when a tag specification does not match `name(|name)*`."""

    def __init__(self, tag_spec: str) -> None:
        self.tag_spec = tag_spec
        super().__init__(
            f"Invalid tag specification {tag_spec!r}: expected names such as "
            "`hbs`, `hbs|handlebars` or `hbs|handlebars|dotted.string`"
        )


@dataclass(frozen=True, slots=True)
class TagSpecification:
    """
    A validated set of tag names.

    `source` is the string the caller passed in; `names` keeps its order,
    duplicates included.
    """

    source: str
    names: tuple[str, ...]

    @property
    def pattern(self) -> str:
        """Regex alternation matching any of the names literally."""
        return "|".join(re.escape(name) for name in self.names)


@dataclass(frozen=True, slots=True)
class LiteralMatch:
    """
    One tagged template literal located in a document.

    Notes:
    - `prefix` runs from the end of the previous match (or the document start)
      through the opening backtick.
    - `literal` is the raw content between the backticks, escaped backticks
      included verbatim.
    - `start`/`end` are document offsets of the first literal character and of
      the closing backtick.
    - `line` is 1-based, `column` is 0-based, both for `start`.
    """

    tag: str
    prefix: str
    literal: str
    start: int
    end: int
    line: int
    column: int

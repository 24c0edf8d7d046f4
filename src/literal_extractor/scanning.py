"""
Tagged template literal scanning.

The scan is textual: it looks for a tag name followed by a backtick and takes
everything up to the next backtick that is not preceded by a backslash. Host
language syntax (comments, strings, nesting) is not understood.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator
from functools import lru_cache

from .tags import parse_tag_specification
from .types import LiteralMatch
from .types import TagSpecification

logger = logging.getLogger(__name__)


@lru_cache(maxsize=64)
def _compile(alternation: str) -> re.Pattern[str]:
    # The prefix is sliced from the document: `search` stops at the nearest tag.
    return re.compile(
        rf"(?P<tag>{alternation})`(?P<literal>.*?)(?<!\\)`",
        re.DOTALL,
    )


def compile_literal_pattern(tags: str | TagSpecification) -> re.Pattern[str]:
    """
    Build the matcher for `tags`.

    Groups:
    - `tag`: the tag name that matched (the opening backtick follows it)
    - `literal`: lazy run of any text before the closing backtick

    The prefix of a match is the document text from the search position up
    to `match.start("literal")`.
    """
    return _compile(parse_tag_specification(tags).pattern)


def iter_literal_matches(
    document: str,
    tags: str | TagSpecification,
) -> Iterator[LiteralMatch]:
    """
    Yield every tagged literal in `document`, left to right.

    Each search resumes where the previous match ended, so prefixes tile the
    document up to the last closing backtick. Scanning stops at the first
    search that finds nothing (e.g. an unterminated literal).
    """
    spec = parse_tag_specification(tags)
    pattern = _compile(spec.pattern)
    return _scan(document, pattern, spec.source)


def _scan(
    document: str, pattern: re.Pattern[str], source: str
) -> Iterator[LiteralMatch]:
    pos = 0
    # Line bookkeeping carried across matches.
    counted = 0
    line = 1
    line_start = 0
    found = 0

    while pos <= len(document):
        match = pattern.search(document, pos)
        if match is None:
            break

        start = match.start("literal")
        line += document.count("\n", counted, start)
        newline = document.rfind("\n", counted, start)
        if newline != -1:
            line_start = newline + 1
        counted = start

        found += 1
        yield LiteralMatch(
            tag=match.group("tag"),
            prefix=document[pos:start],
            literal=match.group("literal"),
            start=start,
            end=match.end() - 1,
            line=line,
            column=start - line_start,
        )

        if match.end() == match.start():
            pos = match.end() + 1
        else:
            pos = match.end()

    logger.debug("Found %d tagged literal(s) for tags %r", found, source)

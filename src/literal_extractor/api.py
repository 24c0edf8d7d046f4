"""Extraction entry points."""

from __future__ import annotations

from collections.abc import Iterator

from .padding import blank_prefix
from .padding import trim_literal
from .scanning import iter_literal_matches
from .tags import DEFAULT_TAG_SPECIFICATION
from .types import LiteralMatch
from .types import TagSpecification


def iter_literals(
    document: str, tag_spec: str | TagSpecification
) -> Iterator[LiteralMatch]:
    """Validate `tag_spec`, then iterate the tagged literals in `document`."""
    return iter_literal_matches(document, tag_spec)


def extract(document: str, tag_spec: str | TagSpecification) -> str:
    """
    Extract the tagged template literals of `document`.

    Every literal is preceded by the blanked-out text that came before it, so
    line numbers in the result match the source. Text after the last literal
    is dropped, and a document with no literal yields "".

    Example, with `tag_spec="hbs"`:

        const t = hbs`<div>{{x}}</div>`;

    becomes `<div>{{x}}</div>` padded with spaces to its original column.

    Raises:
        InvalidTagSpecification: `tag_spec` is not of the form `name(|name)*`.
    """
    parts: list[str] = []
    for match in iter_literal_matches(document, tag_spec):
        parts.append(blank_prefix(match.prefix, match.literal))
        parts.append(trim_literal(match.literal))
    return "".join(parts)


def extract_default(document: str) -> str:
    """`extract()` with the `hbs|handlebars` tags."""
    return extract(document, DEFAULT_TAG_SPECIFICATION)

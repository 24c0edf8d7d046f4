"""
Tag specification parsing.

A specification is a `|`-separated list of tag names. Each name is an
identifier made of `[a-zA-Z0-9_]`, optionally dot-qualified:

- `hbs`
- `hbs|handlebars`
- `hbs|handlebars|dotted.string`
"""

from __future__ import annotations

import re

from .types import InvalidTagSpecification
from .types import TagSpecification

DEFAULT_TAG_SPECIFICATION = "hbs|handlebars"

_NAME = r"[a-zA-Z0-9_]+(?:\.[a-zA-Z0-9_]+)*"
TAG_SPECIFICATION_RE = re.compile(rf"{_NAME}(?:\|{_NAME})*")


def parse_tag_specification(tag_spec: str | TagSpecification) -> TagSpecification:
    if isinstance(tag_spec, TagSpecification):
        return tag_spec
    if not isinstance(tag_spec, str) or not TAG_SPECIFICATION_RE.fullmatch(tag_spec):
        raise InvalidTagSpecification(tag_spec)
    return TagSpecification(source=tag_spec, names=tuple(tag_spec.split("|")))


def join_tag_names(names: list[str] | tuple[str, ...]) -> str:
    """
    Build a specification string from separate names.

    The result is not validated here; pass it to `parse_tag_specification`.
    """
    return "|".join(names)

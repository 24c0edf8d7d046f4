"""
Template Literal Extractor - Position-preserving extraction of tagged templates.

This library pulls tagged template literals (e.g. hbs`...`) out of
JavaScript/TypeScript source so template linters and formatters can run on
them and still report line/column positions of the original file.
"""

from __future__ import annotations

from .api import extract
from .api import extract_default
from .api import iter_literals
from .tags import DEFAULT_TAG_SPECIFICATION
from .tags import parse_tag_specification
from .types import InvalidTagSpecification
from .types import LiteralMatch
from .types import TagSpecification

__all__ = [
    "DEFAULT_TAG_SPECIFICATION",
    "InvalidTagSpecification",
    "LiteralMatch",
    "TagSpecification",
    "extract",
    "extract_default",
    "iter_literals",
    "parse_tag_specification",
]

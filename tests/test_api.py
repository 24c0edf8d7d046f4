from __future__ import annotations

from pathlib import Path

import pytest

import literal_extractor
from literal_extractor.api import extract
from literal_extractor.api import extract_default
from literal_extractor.api import iter_literals
from literal_extractor.padding import blank_prefix
from literal_extractor.padding import trim_literal
from literal_extractor.tags import parse_tag_specification
from literal_extractor.types import InvalidTagSpecification

FIXTURES = Path(__file__).resolve().parent / "fixtures" / "extraction"

DOCUMENTS = [
    "const t = hbs`<div>{{x}}</div>`;",
    "a;\n\n  b = hbs`\n    <p>{{b}}</p>\n  `;\n\nc = handlebars`{{c}}`;\n",
    "x = hbs`one`;y = hbs`two`\n\n\tz = hbs`\tthree\n  `",
    "\n\n\n",
    "",
    (FIXTURES / "multiple_tags.ts").read_text(encoding="utf-8"),
    (FIXTURES / "single_literal.ts").read_text(encoding="utf-8"),
]


def test_example_from_docs() -> None:
    assert extract("const t = hbs`<div>{{x}}</div>`;", "hbs") == (
        " " * 14 + "<div>{{x}}</div>"
    )


@pytest.mark.parametrize("tags", ["hbs", "hbs|handlebars", "dotted.string", "x_1.y"])
def test_no_tag_occurrence_yields_empty_string(tags: str) -> None:
    document = "const a = `plain ${b}`;\nconst c = html`<p></p>`;\n"
    assert extract(document, tags) == ""


@pytest.mark.parametrize("document", DOCUMENTS)
def test_line_numbers_are_preserved(document: str) -> None:
    tags = "hbs|handlebars|dotted.string"
    output = ""
    for match in iter_literals(document, tags):
        output += blank_prefix(match.prefix, match.literal)
        output += trim_literal(match.literal)
        # Line reached after the Nth literal is the line of its closing backtick.
        assert output.count("\n") == document.count("\n", 0, match.end)
    assert output == extract(document, tags)


@pytest.mark.parametrize("document", DOCUMENTS)
def test_inline_literals_keep_their_column(document: str) -> None:
    tags = "hbs|handlebars|dotted.string"
    output = extract(document, tags)
    output_lines = output.split("\n")
    for index, match in enumerate(iter_literals(document, tags)):
        if match.literal.startswith("\n"):
            continue
        # Closing backticks are not emitted, so only the first literal of a
        # line keeps its column.
        if index and "\n" not in match.prefix:
            continue
        first_line = match.literal.split("\n", 1)[0].rstrip(" ")
        line = output_lines[match.line - 1]
        assert line[match.column :].startswith(first_line)


def test_later_literals_on_a_line_shift_by_the_dropped_backtick() -> None:
    document = "x = hbs`one`;y = hbs`two`"
    assert extract(document, "hbs") == " " * 8 + "one" + " " * 9 + "two"


def test_escaped_backticks_are_kept_verbatim() -> None:
    document = r"t = hbs`{{! a \` inside }}`; rest"
    assert extract(document, "hbs") == " " * 8 + r"{{! a \` inside }}"


def test_matches_are_concatenated_in_document_order() -> None:
    document = "a = dotted.string`1`\nb = hbs`2`\nc = handlebars`3`"
    output = extract(document, "hbs|handlebars|dotted.string")
    assert output == (
        " " * 18 + "1" + "\n" + " " * 8 + "2" + "\n" + " " * 15 + "3"
    )


def test_tag_order_does_not_change_output() -> None:
    document = (FIXTURES / "multiple_tags.ts").read_text(encoding="utf-8")
    assert extract(document, "hbs|handlebars|dotted.string") == extract(
        document, "dotted.string|handlebars|hbs"
    )


@pytest.mark.parametrize("tags", ["hbs handlebars", "|hbs", "hbs||x", "", "a.|b"])
def test_invalid_tags_raise(tags: str) -> None:
    with pytest.raises(InvalidTagSpecification) as exc_info:
        extract("hbs`x`", tags)
    assert exc_info.value.tag_spec == tags


def test_extract_is_deterministic() -> None:
    document = (FIXTURES / "multiple_tags.ts").read_text(encoding="utf-8")
    first = extract(document, "hbs|handlebars|dotted.string")
    for _ in range(3):
        assert extract(document, "hbs|handlebars|dotted.string") == first


def test_extract_accepts_parsed_specification() -> None:
    spec = parse_tag_specification("hbs")
    assert extract("x = hbs`y`", spec) == extract("x = hbs`y`", "hbs")


def test_text_after_last_literal_is_dropped() -> None:
    assert extract("hbs`a` trailing\ntext\n", "hbs") == "    a"


def test_extract_default_uses_hbs_and_handlebars() -> None:
    document = "a = hbs`1`;\nb = handlebars`2`;\nc = dotted.string`3`;"
    assert extract_default(document) == extract(document, "hbs|handlebars")
    assert extract_default(document) == " " * 8 + "1" + "\n" + " " * 15 + "2"


def test_package_exports() -> None:
    assert literal_extractor.extract is extract
    assert literal_extractor.extract_default is extract_default
    assert literal_extractor.DEFAULT_TAG_SPECIFICATION == "hbs|handlebars"

"""
Project configuration from `[tool.literal-extractor]` in `pyproject.toml`.

Example:

    [tool.literal-extractor]
    tags = ["hbs", "handlebars", "dotted.string"]
    suffixes = [".ts", ".gts"]
    output-suffix = ".hbs"
    log-level = "INFO"
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass
from dataclasses import field
from pathlib import Path
from typing import Any

from .tags import DEFAULT_TAG_SPECIFICATION
from .tags import join_tag_names
from .tags import parse_tag_specification
from .types import InvalidTagSpecification

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "pyproject.toml"
TOOL_NAME = "literal-extractor"

DEFAULT_SUFFIXES: tuple[str, ...] = (".js", ".mjs", ".cjs", ".ts", ".gjs", ".gts")
DEFAULT_OUTPUT_SUFFIX = ".hbs"
DEFAULT_LOG_LEVEL = "WARNING"

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class ConfigError(ValueError):
    """Raised for a malformed `[tool.literal-extractor]` table."""


@dataclass(frozen=True)
class ExtractorConfig:
    tags: str = DEFAULT_TAG_SPECIFICATION
    suffixes: tuple[str, ...] = DEFAULT_SUFFIXES
    output_suffix: str = DEFAULT_OUTPUT_SUFFIX
    log_level: str = DEFAULT_LOG_LEVEL
    source: Path | None = field(default=None, compare=False)


def find_config(start: Path) -> Path | None:
    """
    Return the nearest `pyproject.toml` at or above `start` that has a
    `[tool.literal-extractor]` table.
    """
    start = start.resolve()
    directory = start if start.is_dir() else start.parent
    for candidate_dir in (directory, *directory.parents):
        candidate = candidate_dir / CONFIG_FILENAME
        if not candidate.is_file():
            continue
        if _tool_table(_read_toml(candidate), candidate) is not None:
            return candidate
    return None


def load_config(path: Path | None) -> ExtractorConfig:
    if path is None:
        return ExtractorConfig()

    table = _tool_table(_read_toml(path), path)
    if table is None:
        logger.debug("No [tool.%s] table in %s, using defaults", TOOL_NAME, path)
        return ExtractorConfig(source=path)

    return config_from_table(table, source=path)


def config_from_table(
    table: dict[str, Any], *, source: Path | None = None
) -> ExtractorConfig:
    where = str(source) if source is not None else f"[tool.{TOOL_NAME}]"

    unknown = set(table) - {"tags", "suffixes", "output-suffix", "log-level"}
    if unknown:
        raise ConfigError(f"{where}: unknown key(s) {', '.join(sorted(unknown))}")

    values: dict[str, Any] = {}

    if "tags" in table:
        values["tags"] = _tags_value(table["tags"], where)

    if "suffixes" in table:
        suffixes = table["suffixes"]
        if not isinstance(suffixes, list) or not all(
            isinstance(s, str) and s.startswith(".") for s in suffixes
        ):
            raise ConfigError(
                f"{where}: `suffixes` must be a list of strings starting with '.'"
            )
        values["suffixes"] = tuple(suffixes)

    if "output-suffix" in table:
        output_suffix = table["output-suffix"]
        if not isinstance(output_suffix, str):
            raise ConfigError(f"{where}: `output-suffix` must be a string")
        values["output_suffix"] = output_suffix

    if "log-level" in table:
        level = table["log-level"]
        if not isinstance(level, str) or level.upper() not in _LOG_LEVELS:
            raise ConfigError(
                f"{where}: `log-level` must be one of {', '.join(sorted(_LOG_LEVELS))}"
            )
        values["log_level"] = level.upper()

    return ExtractorConfig(source=source, **values)


def _tags_value(raw: Any, where: str) -> str:
    if isinstance(raw, str):
        spec = raw
    elif isinstance(raw, list) and all(isinstance(name, str) for name in raw):
        spec = join_tag_names(raw)
    else:
        raise ConfigError(f"{where}: `tags` must be a string or a list of strings")

    try:
        parse_tag_specification(spec)
    except InvalidTagSpecification as exc:
        raise ConfigError(f"{where}: {exc}") from exc
    return spec


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"{path}: {exc}") from exc


def _tool_table(data: dict[str, Any], path: Path) -> dict[str, Any] | None:
    tool = data.get("tool", {})
    if not isinstance(tool, dict):
        raise ConfigError(f"{path}: [tool] must be a table")
    table = tool.get(TOOL_NAME)
    if table is None:
        return None
    if not isinstance(table, dict):
        raise ConfigError(f"{path}: [tool.{TOOL_NAME}] must be a table")
    return table

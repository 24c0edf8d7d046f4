from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .api import extract
from .config import ConfigError
from .config import ExtractorConfig
from .config import find_config
from .config import load_config
from .files import iter_source_files
from .files import output_path_for
from .logging import LogConfig
from .logging import configure_logging
from .tags import parse_tag_specification
from .types import InvalidTagSpecification
from .types import TagSpecification

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="literal-extractor",
        description=(
            "Extract tagged template literals (e.g. hbs`...`) from JavaScript/"
            "TypeScript sources, keeping their original line and column."
        ),
    )
    parser.add_argument(
        "paths",
        nargs="*",
        help="Source files or directories. Use '-' (or nothing) to read stdin.",
    )
    parser.add_argument(
        "--tags",
        default=None,
        help="Tag names separated by '|', e.g. 'hbs|handlebars' (default from config).",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Write one file per source here instead of printing to stdout.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a pyproject.toml (default: nearest one with [tool.literal-extractor]).",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true")
    verbosity.add_argument("-q", "--quiet", action="store_true")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config_path = args.config if args.config else find_config(Path.cwd())
        config = load_config(config_path)
    except (ConfigError, OSError, UnicodeDecodeError) as exc:
        parser.error(str(exc))

    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    else:
        level = getattr(logging, config.log_level)
    configure_logging(LogConfig(log_level=level))

    if config.source is not None:
        logger.debug("Using configuration from %s", config.source)

    try:
        tags = parse_tag_specification(
            args.tags if args.tags is not None else config.tags
        )
    except InvalidTagSpecification as exc:
        parser.error(str(exc))

    paths: list[str] = args.paths or ["-"]
    if "-" in paths:
        if len(paths) > 1:
            parser.error("'-' cannot be combined with other paths")
        if args.output_dir is not None:
            parser.error("--output-dir needs file or directory paths, not stdin")
        try:
            document = sys.stdin.read()
        except UnicodeDecodeError as exc:
            logger.error("Cannot read stdin: %s", exc)
            return 1
        sys.stdout.write(extract(document, tags))
        return 0

    roots = [Path(p) for p in paths]
    if args.output_dir is None:
        if len(roots) > 1 or roots[0].is_dir():
            parser.error("several inputs (or a directory) need --output-dir")
        return _extract_to_stdout(roots[0], tags)

    return _extract_to_dir(roots, args.output_dir, tags, config)


def _extract_to_stdout(path: Path, tags: TagSpecification) -> int:
    try:
        document = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Cannot read %s: %s", path, exc)
        return 1
    sys.stdout.write(extract(document, tags))
    return 0


def _extract_to_dir(
    roots: list[Path],
    output_dir: Path,
    tags: TagSpecification,
    config: ExtractorConfig,
) -> int:
    status = 0
    for root in roots:
        if not root.exists():
            logger.error("No such file or directory: %s", root)
            status = 1
            continue

        for source in iter_source_files(root, config.suffixes):
            target = output_path_for(source, root, output_dir, config.output_suffix)
            try:
                document = source.read_text(encoding="utf-8")
                target.parent.mkdir(parents=True, exist_ok=True)
                target.write_text(extract(document, tags), encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                logger.error("Cannot extract %s: %s", source, exc)
                status = 1
                continue
            logger.info("Wrote %s", target)

    return status

"""
Source file discovery for the command line.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

_SKIPPED_DIRS = {"node_modules", ".git", "dist"}


def iter_source_files(root: Path, suffixes: Iterable[str]) -> list[Path]:
    """
    List files under `root` whose suffix is in `suffixes`, sorted.

    `root` itself is returned when it is a file, whatever its suffix.
    """
    if root.is_file():
        return [root]

    wanted = {s.lower() for s in suffixes}
    paths: list[Path] = []
    for p in root.rglob("*"):
        if not p.is_file() or p.suffix.lower() not in wanted:
            continue
        if any(part in _SKIPPED_DIRS for part in p.relative_to(root).parts):
            continue
        paths.append(p)
    return sorted(paths)


def output_path_for(source: Path, root: Path, output_dir: Path, suffix: str) -> Path:
    """
    Mirror `source` (found under `root`) into `output_dir` with `suffix` appended.

    Example:
    - src/components/button.ts under src/ -> out/components/button.ts.hbs
    """
    if root.is_file():
        relative = Path(source.name)
    else:
        relative = source.relative_to(root)
    return output_dir / relative.with_name(relative.name + suffix)

from __future__ import annotations

import logging
from collections.abc import Callable
from collections.abc import Iterator
from pathlib import Path

import pytest


@pytest.fixture
def write_pyproject(tmp_path: Path) -> Callable[[str], Path]:
    def _write(text: str) -> Path:
        path = tmp_path / "pyproject.toml"
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A working directory with a small JS/TS source tree."""
    src = tmp_path / "app"
    (src / "components").mkdir(parents=True)
    (src / "node_modules" / "dep").mkdir(parents=True)

    (src / "components" / "button.ts").write_text(
        "const t = hbs`<button>{{yield}}</button>`;\n", encoding="utf-8"
    )
    (src / "components" / "card.gjs").write_text(
        "export default handlebars`\n  <div>{{@title}}</div>\n`;\n",
        encoding="utf-8",
    )
    (src / "notes.md").write_text("hbs`ignored`", encoding="utf-8")
    (src / "node_modules" / "dep" / "index.js").write_text(
        "hbs`vendored`", encoding="utf-8"
    )

    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    yield
    logger = logging.getLogger("literal_extractor")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)

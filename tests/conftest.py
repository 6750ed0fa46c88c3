from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path

_AMBIENT_VARS = ("GITHUB_TOKEN", "CATEGORIZATION_MODEL")


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _AMBIENT_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def readme_path(tmp_path: Path) -> Path:
    path = tmp_path / "README.md"
    path.write_text(
        "# Awesome Starlight\n\n"
        "<!-- AUTOMATED_CONTENT_START -->\nstale\n<!-- AUTOMATED_CONTENT_END -->\n\n"
        "## Contributing\n",
        encoding="utf-8",
    )
    return path

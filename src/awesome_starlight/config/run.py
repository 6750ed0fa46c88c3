"""Per-run settings supplied by the entry point."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_README_PATH = Path("README.md")


@dataclass(frozen=True, slots=True)
class RunConfig:
    readme_path: Path = DEFAULT_README_PATH
    dry_run: bool = False

from __future__ import annotations

from awesome_starlight.ui.cli import run

run()

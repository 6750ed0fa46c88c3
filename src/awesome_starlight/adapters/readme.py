"""Render the catalog as Markdown and splice it into the README."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from awesome_starlight.domain.model import Category

if TYPE_CHECKING:
    from pathlib import Path

    from awesome_starlight.domain.model import CanonicalEntry, Catalog

log = getLogger(__name__)

START_MARKER = "<!-- AUTOMATED_CONTENT_START -->"
END_MARKER = "<!-- AUTOMATED_CONTENT_END -->"
PREVIEW_LENGTH = 500

SECTION_TITLES: dict[Category, str] = {
    Category.PLUGIN: "Plugins & Integrations",
    Category.THEME: "Themes",
    Category.TOOL: "Tools",
    Category.SHOWCASE: "Showcases",
    Category.VIDEO: "Videos",
    Category.ARTICLE: "Articles & Case Studies",
}

SECTION_INTROS: dict[Category, str] = {
    Category.THEME: "Discover beautiful themes for your Starlight documentation:",
    Category.TOOL: "Development tools and utilities for Starlight:",
    Category.SHOWCASE: "Real-world documentation sites built with Starlight:",
    Category.VIDEO: "Video tutorials and screencasts:",
}


class MarkerNotFoundError(ValueError):
    """Raised when the README lacks one of the generated-content markers."""


def format_entry(entry: CanonicalEntry) -> str | None:
    if not entry.title or not entry.url:
        return None
    line = f"- [{entry.title}]({entry.url})"
    if entry.description:
        line += f" - {entry.description}"
    return line


def render_catalog(catalog: Catalog) -> str:
    """Render non-empty categories in display order, one section each."""

    sections: list[str] = []
    for category in catalog:
        entries = catalog.entries(category)
        if not entries:
            continue
        lines = [line for line in map(format_entry, entries) if line is not None]
        header = f"## {SECTION_TITLES[category]}\n\n"
        intro = SECTION_INTROS.get(category)
        if intro:
            header += f"{intro}\n\n"
        sections.append(header + "\n".join(lines))
    return "\n\n".join(sections)


def inject_between_markers(document: str, content: str) -> str:
    """Replace everything between the two markers, keeping the markers."""

    start = document.find(START_MARKER)
    end = document.find(END_MARKER)
    if start == -1 or end == -1:
        raise MarkerNotFoundError("Markers not found in README")
    before = document[: start + len(START_MARKER)]
    after = document[end:]
    return f"{before}\n\n{content}\n\n{after}"


def update_readme(path: Path, catalog: Catalog, *, dry_run: bool = False) -> str:
    """Write the rendered catalog into ``path`` and return the new document.

    The markers are located before anything is written, so a README without
    them is left untouched. In dry-run mode only a preview is logged.
    """

    document = path.read_text(encoding="utf-8")
    content = render_catalog(catalog)
    updated = inject_between_markers(document, content)

    if dry_run:
        log.info("Dry run, README not written. Preview:\n%s...", content[:PREVIEW_LENGTH])
        return updated

    path.write_text(updated, encoding="utf-8")
    log.info("Updated %s", path)
    return updated

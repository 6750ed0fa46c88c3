"""Merge accepted candidates into the catalog and order it for display."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from awesome_starlight.domain.model import CanonicalEntry, Catalog, Category

from .match import is_duplicate, is_known, is_likely_same_theme, is_same_title
from .normalize import sort_key

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from awesome_starlight.domain.model import CandidateItem

log = getLogger(__name__)


def merge(catalog: Catalog, new_items: Iterable[CandidateItem], category: Category) -> Catalog:
    """Append every item not already represented in ``category``.

    Items are checked against entries appended earlier in the same call, so the
    category never holds two entries the matcher considers duplicates.
    """

    added = 0
    skipped = 0
    for item in new_items:
        existing = _find_match(catalog.entries(category), item, category)
        if existing is not None:
            log.debug("Skipping %s (%s): matches %s", item.title, category, existing.title)
            skipped += 1
            continue
        catalog.add(CanonicalEntry.admit(item, category))
        added += 1

    if added or skipped:
        log.info("Merged %s: added=%s, skipped=%s", category, added, skipped)
    return catalog


def seed_catalog(official: Mapping[Category, Iterable[CandidateItem]]) -> Catalog:
    """Build the starting catalog from curated entries.

    Curated themes are only deduplicated strictly; the fuzzy theme tier is for
    incoming registry packages and would fold distinct curated themes such as
    "Nova" and "Nova Dark" into one.
    """

    catalog = Catalog()
    for category, items in official.items():
        for item in items:
            if is_known(item, catalog.entries(category)):
                log.debug("Dropping repeated curated entry %s (%s)", item.title, category)
                continue
            catalog.add(CanonicalEntry.admit(item, category))
    return catalog


def sort_catalog(catalog: Catalog) -> Catalog:
    for category in catalog:
        catalog.reorder(category, key=lambda entry: sort_key(entry.title))
    return catalog


def _find_match(
    entries: Iterable[CanonicalEntry],
    item: CandidateItem,
    category: Category,
) -> CanonicalEntry | None:
    for entry in entries:
        if is_duplicate(item, entry):
            return entry
        if category is Category.THEME and (
            is_same_title(item, entry) or is_likely_same_theme(item, entry)
        ):
            return entry
    return None

"""Append-only catalog of admitted entries grouped by category."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from .enums import Category

if TYPE_CHECKING:
    from collections.abc import Callable

    from .items import CanonicalEntry


# Rendering order of catalog sections.
DISPLAY_ORDER: tuple[Category, ...] = (
    Category.PLUGIN,
    Category.THEME,
    Category.TOOL,
    Category.SHOWCASE,
    Category.VIDEO,
    Category.ARTICLE,
)


class Catalog:
    """Mapping from category to its admitted entries.

    Entries are only ever appended during a run; reordering for display happens
    through :meth:`reorder`, which keeps the same set of entries.
    """

    def __init__(self) -> None:
        self._entries: dict[Category, list[CanonicalEntry]] = {
            category: [] for category in DISPLAY_ORDER
        }

    def __iter__(self) -> Iterator[Category]:
        return iter(DISPLAY_ORDER)

    def __len__(self) -> int:
        return sum(len(entries) for entries in self._entries.values())

    def entries(self, category: Category) -> tuple[CanonicalEntry, ...]:
        return tuple(self._entries[category])

    def all_entries(self) -> tuple[CanonicalEntry, ...]:
        return tuple(entry for category in DISPLAY_ORDER for entry in self._entries[category])

    def add(self, entry: CanonicalEntry) -> None:
        self._entries[entry.category].append(entry)

    def reorder(self, category: Category, key: Callable[[CanonicalEntry], str]) -> None:
        self._entries[category].sort(key=key)

    def counts(self) -> dict[Category, int]:
        return {category: len(self._entries[category]) for category in DISPLAY_ORDER}

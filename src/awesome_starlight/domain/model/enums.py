"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class Category(StrEnum):
    """Closed set of catalog sections."""

    PLUGIN = "plugin"
    THEME = "theme"
    TOOL = "tool"
    VIDEO = "video"
    ARTICLE = "article"
    SHOWCASE = "showcase"


# Categories the classifier may assign to an uncategorized registry package.
CLASSIFIABLE_CATEGORIES: tuple[Category, ...] = (Category.THEME, Category.PLUGIN, Category.TOOL)

"""Domain model for the add-on catalog."""

from __future__ import annotations

from .catalog import DISPLAY_ORDER, Catalog
from .enums import CLASSIFIABLE_CATEGORIES, Category
from .items import CandidateItem, CanonicalEntry, ValidationVerdict

__all__ = [
    "CLASSIFIABLE_CATEGORIES",
    "DISPLAY_ORDER",
    "CandidateItem",
    "CanonicalEntry",
    "Catalog",
    "Category",
    "ValidationVerdict",
]

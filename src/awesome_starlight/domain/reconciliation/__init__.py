"""Reconciliation core: comparison keys, identity matching and catalog merging."""

from __future__ import annotations

from .aggregate import merge, seed_catalog, sort_catalog
from .match import is_duplicate, is_known, is_likely_same_theme, is_same_title
from .normalize import (
    extract_repo_slug,
    extract_repository,
    normalize_url,
    sort_key,
    theme_key,
)

__all__ = [
    "extract_repo_slug",
    "extract_repository",
    "is_duplicate",
    "is_known",
    "is_likely_same_theme",
    "is_same_title",
    "merge",
    "normalize_url",
    "seed_catalog",
    "sort_catalog",
    "sort_key",
    "theme_key",
]

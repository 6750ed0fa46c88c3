"""Identity decisions between two candidate records.

Three tiers trade recall for precision:
- ``is_duplicate``: exact normalized URL or repository slug (all categories)
- ``is_same_title``: exact case-folded title
- ``is_likely_same_theme``: fuzzy key containment, themes only
"""

from __future__ import annotations

from itertools import product
from typing import TYPE_CHECKING

from .normalize import extract_repo_slug, normalize_url, theme_key

if TYPE_CHECKING:
    from collections.abc import Iterable

    from awesome_starlight.domain.model import CandidateItem


def is_duplicate(a: CandidateItem, b: CandidateItem) -> bool:
    url_a = normalize_url(a.url)
    if url_a and url_a == normalize_url(b.url):
        return True
    slug_a = extract_repo_slug(a.url)
    return bool(slug_a) and slug_a == extract_repo_slug(b.url)


def is_same_title(a: CandidateItem, b: CandidateItem) -> bool:
    title_a = _normalize_title(a.title)
    return bool(title_a) and title_a == _normalize_title(b.title)


def is_likely_same_theme(a: CandidateItem, b: CandidateItem) -> bool:
    """Match a theme's demo site, repository and package name against each other."""

    keys_a = (theme_key(a.title), theme_key(extract_repo_slug(a.url)))
    keys_b = (theme_key(b.title), theme_key(extract_repo_slug(b.url)))
    return any(_keys_overlap(x, y) for x, y in product(keys_a, keys_b))


def is_known(item: CandidateItem, entries: Iterable[CandidateItem]) -> bool:
    return any(is_duplicate(item, entry) for entry in entries)


def _normalize_title(title: str | None) -> str:
    return (title or "").strip().casefold()


def _keys_overlap(x: str, y: str) -> bool:
    return bool(x) and bool(y) and (x in y or y in x)

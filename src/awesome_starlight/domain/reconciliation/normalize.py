"""Comparison keys derived from free-form titles and URLs.

Every function here is total and deterministic: ``None`` or malformed input
yields an empty key rather than an exception, and inputs are never mutated.
"""

from __future__ import annotations

import re

_REPOSITORY_PATTERN = re.compile(r"github\.com/([^/]+)/([^/#?]+)", re.IGNORECASE)
_PROTOCOL_PATTERN = re.compile(r"https?://(www\.)?")
# Substrings that carry no identity for a visual theme.
_THEME_NOISE_PATTERNS = (
    re.compile("starlight"),
    re.compile("theme"),
    re.compile("astro"),
    re.compile("docs?"),
)
_SEPARATOR_PATTERN = re.compile(r"[\s._-]+")
_NON_ALPHANUMERIC_PATTERN = re.compile(r"[^a-z0-9]")


def normalize_url(url: str | None) -> str:
    """Lower-case, trim and drop trailing slashes."""

    return (url or "").strip().lower().rstrip("/")


def extract_repository(url: str | None) -> tuple[str, str] | None:
    """Return ``(owner, repo)`` for a GitHub repository URL."""

    match = _REPOSITORY_PATTERN.search(url or "")
    if match is None:
        return None
    return match.group(1), match.group(2)


def extract_repo_slug(url: str | None) -> str:
    """Lower-cased repository name of a GitHub URL, or an empty string."""

    repository = extract_repository(url)
    if repository is None:
        return ""
    return repository[1].lower()


def theme_key(text: str | None) -> str:
    """Reduce a theme title, slug or URL to its distinguishing core.

    ``"Starlight Theme Galaxy"`` and ``"starlight-galaxy-theme"`` both become
    ``"galaxy"``.
    """

    key = _PROTOCOL_PATTERN.sub("", (text or "").lower())
    for pattern in _THEME_NOISE_PATTERNS:
        key = pattern.sub("", key)
    key = _SEPARATOR_PATTERN.sub("", key)
    return _NON_ALPHANUMERIC_PATTERN.sub("", key)


def sort_key(title: str | None) -> str:
    """Case-folded ordering key; scoped package names sort by their bare name."""

    key = (title or "").strip().casefold()
    if key.startswith("@") and "/" in key:
        return key.split("/")[1]
    return key

"""Extract candidate records from Starlight's MDX and Astro sources.

The documents are not parsed as markup; each parser pattern-matches the few
component shapes the docs use and silently drops fragments that lack a title
or link.
"""

from __future__ import annotations

import re

from awesome_starlight.domain.model import CandidateItem

_LINK_CARD_PATTERN = re.compile(r"<LinkCard\s+([^>]+)/>")
_CARD_PATTERN = re.compile(r"<Card\s+([^>]+)/>")
_THEMES_BLOCK_PATTERN = re.compile(r"themes=\{?\[(\s*\{[\s\S]*?\}\s*,?\s*)+\]\}?")
_THEME_ENTRY_PATTERN = re.compile(
    r"""\{\s*title:\s*['"]([^'"]+)['"],\s*"""
    r"""description:\s*['"]([^'"]*?)['"],\s*"""
    r"""href:\s*['"]([^'"]+)['"]"""
)
_VIDEOS_BLOCK_PATTERN = re.compile(r"videos=\{?\[(\s*\{[\s\S]*?\}\s*,?\s*)+\]\}?")
_VIDEO_ENTRY_PATTERN = re.compile(
    r"""\{\s*href:\s*['"]([^'"]+)['"],\s*"""
    r"""title:\s*['"]([^'"]+)['"],\s*"""
    r"""description:\s*['"]([^'"]*?)['"]"""
)


def _attribute(attributes: str, name: str) -> str | None:
    match = re.search(rf"""{name}=["']([^"']+)["']""", attributes)
    return match.group(1).strip() if match else None


class LinkCardParser:
    """``<LinkCard href=... title=... description=... />`` with absolute links."""

    def parse(self, document: str) -> list[CandidateItem]:
        items: list[CandidateItem] = []
        for match in _LINK_CARD_PATTERN.finditer(document):
            attributes = match.group(1)
            href = _attribute(attributes, "href")
            title = _attribute(attributes, "title")
            if not href or not title or not href.startswith("http"):
                continue
            items.append(
                CandidateItem.create(
                    title=title,
                    url=href,
                    description=_attribute(attributes, "description"),
                )
            )
        return items


class CardParser:
    """``<Card title=... href=... />`` entries of the showcase component."""

    def parse(self, document: str) -> list[CandidateItem]:
        items: list[CandidateItem] = []
        for match in _CARD_PATTERN.finditer(document):
            attributes = match.group(1)
            title = _attribute(attributes, "title")
            href = _attribute(attributes, "href")
            if title and href:
                items.append(CandidateItem.create(title=title, url=href))
        return items


class ThemeGridParser:
    """The ``themes={[...]}`` array passed to the theme grid component."""

    def parse(self, document: str) -> list[CandidateItem]:
        block = _THEMES_BLOCK_PATTERN.search(document)
        if block is None:
            return []
        return [
            CandidateItem.create(title=title, url=href, description=description)
            for title, description, href in _THEME_ENTRY_PATTERN.findall(block.group(0))
        ]


class VideoGridParser:
    """Every ``videos={[...]}`` array in the community content page."""

    def parse(self, document: str) -> list[CandidateItem]:
        items: list[CandidateItem] = []
        for block in _VIDEOS_BLOCK_PATTERN.finditer(document):
            items.extend(
                CandidateItem.create(title=title, url=href, description=description)
                for href, title, description in _VIDEO_ENTRY_PATTERN.findall(block.group(0))
            )
        return items

"""Parsers and fetchers for the curated documentation sources."""

from __future__ import annotations

from .official import fetch_official_sources
from .parsers import CardParser, LinkCardParser, ThemeGridParser, VideoGridParser

__all__ = [
    "CardParser",
    "LinkCardParser",
    "ThemeGridParser",
    "VideoGridParser",
    "fetch_official_sources",
]

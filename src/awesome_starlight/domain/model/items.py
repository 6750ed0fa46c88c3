"""Candidate records and admitted catalog entries."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .enums import Category


@dataclass(frozen=True, slots=True, eq=False)
class CandidateItem:
    """Unvalidated record handed over by a source collaborator.

    Equality is identity: two structurally equal candidates coming from different
    origins are distinct objects until the matcher says otherwise.
    """

    title: str
    url: str
    description: str = ""
    keywords: frozenset[str] = field(default_factory=frozenset[str])

    @classmethod
    def create(
        cls,
        *,
        title: str | None,
        url: str | None,
        description: str | None = None,
        keywords: Iterable[str] | None = None,
    ) -> CandidateItem:
        return cls(
            title=(title or "").strip(),
            url=(url or "").strip(),
            description=(description or "").strip(),
            keywords=frozenset(keywords or ()),
        )


@dataclass(frozen=True, slots=True, eq=False)
class CanonicalEntry(CandidateItem):
    """Candidate admitted into the catalog under a category."""

    category: Category = field(kw_only=True)

    @classmethod
    def admit(cls, item: CandidateItem, category: Category) -> CanonicalEntry:
        return cls(
            title=item.title,
            url=item.url,
            description=item.description,
            keywords=item.keywords,
            category=category,
        )


@dataclass(frozen=True, slots=True)
class ValidationVerdict:
    url: str
    live: bool

"""Ports for obtaining candidate records from their origins."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from awesome_starlight.domain.model import CandidateItem, Category


class SourceFetchError(RuntimeError):
    """Raised when a curated origin cannot be fetched."""


@runtime_checkable
class SourceParser(Protocol):
    """Extract candidate records from one document, dropping malformed fragments."""

    def parse(self, document: str) -> list[CandidateItem]: ...


@dataclass(slots=True)
class SourceSnapshot:
    """Everything the origins handed over for one run."""

    official: dict[Category, list[CandidateItem]] = field(
        default_factory=dict["Category", list["CandidateItem"]]
    )
    showcases: list[CandidateItem] = field(default_factory=list["CandidateItem"])
    packages: list[CandidateItem] = field(default_factory=list["CandidateItem"])


__all__ = ["SourceFetchError", "SourceParser", "SourceSnapshot"]

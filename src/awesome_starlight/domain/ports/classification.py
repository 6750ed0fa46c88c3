"""Port for the external categorization service."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


class CategorizationServiceError(RuntimeError):
    """Raised when the categorization service answers with an error."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class MissingCredentialError(CategorizationServiceError):
    """Raised when the service cannot be called because no credential is configured."""


@runtime_checkable
class CategorizationService(Protocol):
    """Single request/response exchange returning free text."""

    async def complete(self, *, system: str, prompt: str) -> str: ...


__all__ = ["CategorizationService", "CategorizationServiceError", "MissingCredentialError"]

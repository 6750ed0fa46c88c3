"""Public interface for the categorization service adapter."""

from __future__ import annotations

from .client import GitHubModelsClient
from .schema import ChatCompletionRequest, ChatCompletionResponse, ChatMessage

__all__ = [
    "ChatCompletionRequest",
    "ChatCompletionResponse",
    "ChatMessage",
    "GitHubModelsClient",
]

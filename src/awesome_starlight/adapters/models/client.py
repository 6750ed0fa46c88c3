"""Categorization service backed by the GitHub Models chat-completions API."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError

from awesome_starlight.adapters.http_resilience import ResilientClient
from awesome_starlight.domain.ports.classification import (
    CategorizationServiceError,
    MissingCredentialError,
)

from .schema import ChatCompletionRequest, ChatCompletionResponse, ChatMessage

if TYPE_CHECKING:
    from collections.abc import Callable

    from awesome_starlight.config.categorization import CategorizationConfig
    from awesome_starlight.config.http_resilience import ResilienceConfig

log = getLogger(__name__)


class GitHubModelsClient:
    """Send one system+user exchange and return the assistant's text."""

    def __init__(
        self,
        *,
        config: CategorizationConfig,
        client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
    ) -> None:
        self._config = config
        self._client_factory = client_factory or ResilientClient

    async def complete(self, *, system: str, prompt: str) -> str:
        if not self._config.token:
            raise MissingCredentialError("GITHUB_TOKEN is required for AI categorization")

        request = ChatCompletionRequest(
            model=self._config.model,
            temperature=self._config.temperature,
            max_tokens=self._config.max_tokens,
            messages=[
                ChatMessage(role="system", content=system),
                ChatMessage(role="user", content=prompt),
            ],
        )
        headers = {"Authorization": f"Bearer {self._config.token}"}

        try:
            async with self._client_factory(self._config.resilience) as client:
                response = await client.post(
                    self._config.endpoint,
                    json=request.model_dump(),
                    headers=headers,
                )
        except httpx.HTTPError as exc:
            raise CategorizationServiceError(f"GitHub Models request failed: {exc}") from exc

        if not response.is_success:
            raise CategorizationServiceError(
                f"GitHub Models API error ({response.status_code}): {response.text}",
                status_code=response.status_code,
            )

        try:
            completion = ChatCompletionResponse.model_validate_json(response.content)
        except ValidationError as exc:
            raise CategorizationServiceError("Malformed GitHub Models response") from exc

        content = completion.content
        if content is None:
            raise CategorizationServiceError("GitHub Models response has no message content")
        log.debug("GitHub Models replied with %s characters", len(content))
        return content

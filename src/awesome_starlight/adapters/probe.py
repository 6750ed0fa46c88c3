"""Plain HTTP probe used for liveness checks of arbitrary links."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

from awesome_starlight.adapters.http_resilience import ResilientClient
from awesome_starlight.domain.ports.validation import ProbeError

if TYPE_CHECKING:
    from collections.abc import Callable

    from awesome_starlight.config.http_resilience import ResilienceConfig
    from awesome_starlight.domain.ports.validation import ProbeMethod


class HttpLinkProbe:
    """Report the final status of one request, following redirects."""

    def __init__(
        self,
        *,
        resilience: ResilienceConfig,
        client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
    ) -> None:
        self._resilience = resilience
        self._client_factory = client_factory or ResilientClient

    async def probe(self, url: str, *, method: ProbeMethod) -> int:
        try:
            async with self._client_factory(self._resilience) as client:
                response = await client.request(method, url)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise ProbeError(f"{method} {url} failed: {exc}") from exc
        return response.status_code

"""Categorization service (GitHub Models) configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import optional_env_var, require_env_vars
from .http_resilience import ResilienceConfig, RetryPolicy

GITHUB_MODELS_ENDPOINT = "https://models.inference.ai.azure.com/chat/completions"
DEFAULT_MODEL = "gpt-4o"
DEFAULT_TEMPERATURE = 0.1
DEFAULT_MAX_TOKENS = 4000
_TIMEOUT_SECONDS = 120.0


@dataclass(frozen=True, slots=True)
class CategorizationConfig:
    token: str | None
    resilience: ResilienceConfig
    endpoint: str = GITHUB_MODELS_ENDPOINT
    model: str = DEFAULT_MODEL
    temperature: float = DEFAULT_TEMPERATURE
    max_tokens: int = DEFAULT_MAX_TOKENS


def get_categorization_config(
    *,
    required: bool = False,
    token: str | None = None,
) -> CategorizationConfig:
    """Build the categorization config from ``GITHUB_TOKEN``.

    Without a token the classifier falls back to its keyword heuristic, unless
    ``required`` is set, in which case the run cannot proceed.
    """

    if required and token is None:
        token = require_env_vars(("GITHUB_TOKEN",))["GITHUB_TOKEN"]
    effective_token = token or optional_env_var("GITHUB_TOKEN")
    return CategorizationConfig(
        token=effective_token,
        model=optional_env_var("CATEGORIZATION_MODEL") or DEFAULT_MODEL,
        resilience=ResilienceConfig(
            name="github-models",
            timeout_seconds=_TIMEOUT_SECONDS,
            retry=RetryPolicy(total=2),
            cache=None,
        ),
    )

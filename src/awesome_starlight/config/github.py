"""GitHub API configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import optional_env_var
from .http_resilience import CacheConfig, ResilienceConfig

GITHUB_API_BASE_URL = "https://api.github.com"
GITHUB_USER_AGENT = "Awesome-Starlight-Updater"
ASTRO_SHOWCASE_PATH = "repos/withastro/astro.build/contents/src/content/showcase"
SHOWCASE_FILE_SUFFIX = ".yml"
SHOWCASE_CATEGORY = "starlight"


@dataclass(frozen=True, slots=True)
class GitHubConfig:
    """Holds GitHub API configuration values.

    ``resilience`` is used for listing and downloading source files;
    ``validation_resilience`` for repository lookups, which must surface the
    real status code (no retries, no cache).
    """

    token: str | None
    resilience: ResilienceConfig
    validation_resilience: ResilienceConfig
    showcase_path: str = ASTRO_SHOWCASE_PATH


def _is_cacheable_payload(payload: object) -> bool:
    # Error bodies (rate limits, missing paths) come back as JSON objects with a message.
    return not (isinstance(payload, dict) and "message" in payload)


def github_headers(token: str | None) -> dict[str, str]:
    headers = {
        "User-Agent": GITHUB_USER_AGENT,
        "Accept": "application/vnd.github.v3+json",
    }
    if token:
        headers["Authorization"] = f"token {token}"
    return headers


def get_github_config(*, token: str | None = None) -> GitHubConfig:
    effective_token = token or optional_env_var("GITHUB_TOKEN")
    headers = github_headers(effective_token)
    return GitHubConfig(
        token=effective_token,
        resilience=ResilienceConfig(
            name="github",
            base_url=GITHUB_API_BASE_URL,
            cache=CacheConfig(should_cache=_is_cacheable_payload),
            default_headers=headers,
            follow_redirects=True,
        ),
        validation_resilience=ResilienceConfig(
            name="github-validation",
            base_url=GITHUB_API_BASE_URL,
            retry=None,
            cache=None,
            default_headers=headers,
        ),
    )

"""Origins consulted on every run."""

from __future__ import annotations

from dataclasses import dataclass, field

from .http_resilience import CacheConfig, RateLimit, ResilienceConfig

_STARLIGHT_RAW_BASE = "https://raw.githubusercontent.com/withastro/starlight/refs/heads/main"

OFFICIAL_PLUGINS_URL = f"{_STARLIGHT_RAW_BASE}/docs/src/content/docs/resources/plugins.mdx"
OFFICIAL_THEMES_URL = f"{_STARLIGHT_RAW_BASE}/docs/src/content/docs/resources/themes.mdx"
OFFICIAL_COMMUNITY_URL = (
    f"{_STARLIGHT_RAW_BASE}/docs/src/content/docs/resources/community-content.mdx"
)
OFFICIAL_SHOWCASES_URL = f"{_STARLIGHT_RAW_BASE}/docs/src/components/showcase-sites.astro"

NPM_REGISTRY_BASE_URL = "https://registry.npmjs.org"
DEFAULT_REGISTRY_QUERIES = ("starlight-", "@astrojs/starlight")
DEFAULT_REGISTRY_PAGE_SIZE = 250

PROBE_USER_AGENT = "Mozilla/5.0 (compatible; AwesomeStarlightBot/1.0)"
DEFAULT_PROBE_TIMEOUT_SECONDS = 6.0


@dataclass(frozen=True, slots=True)
class SourcesConfig:
    plugins_url: str = OFFICIAL_PLUGINS_URL
    themes_url: str = OFFICIAL_THEMES_URL
    community_url: str = OFFICIAL_COMMUNITY_URL
    showcases_url: str = OFFICIAL_SHOWCASES_URL
    registry_queries: tuple[str, ...] = DEFAULT_REGISTRY_QUERIES
    registry_page_size: int = DEFAULT_REGISTRY_PAGE_SIZE
    probe_timeout_seconds: float = DEFAULT_PROBE_TIMEOUT_SECONDS
    documents: ResilienceConfig = field(
        default_factory=lambda: ResilienceConfig(
            name="starlight-docs",
            cache=CacheConfig(),
        )
    )
    registry: ResilienceConfig = field(
        default_factory=lambda: ResilienceConfig(
            name="npm",
            base_url=NPM_REGISTRY_BASE_URL,
            ratelimit=RateLimit(max_calls=5, per_seconds=1.0),
            cache=CacheConfig(),
        )
    )
    probe: ResilienceConfig = field(
        default_factory=lambda: ResilienceConfig(
            name="link-probe",
            timeout_seconds=DEFAULT_PROBE_TIMEOUT_SECONDS,
            retry=None,
            cache=None,
            default_headers={"User-Agent": PROBE_USER_AGENT},
            follow_redirects=True,
        )
    )


def get_sources_config() -> SourcesConfig:
    return SourcesConfig()

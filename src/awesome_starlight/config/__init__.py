"""Application configuration helpers."""

from __future__ import annotations

from .categorization import CategorizationConfig, get_categorization_config
from .env import optional_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .github import GitHubConfig, get_github_config, github_headers
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig, RetryPolicy
from .logging import configure_logging
from .run import RunConfig
from .sources import SourcesConfig, get_sources_config

__all__ = [
    "CacheConfig",
    "CategorizationConfig",
    "ConfigurationError",
    "GitHubConfig",
    "MissingConfigurationError",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "RunConfig",
    "SourcesConfig",
    "configure_logging",
    "get_categorization_config",
    "get_github_config",
    "get_sources_config",
    "github_headers",
    "optional_env_var",
    "require_env_vars",
]

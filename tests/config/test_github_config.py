from __future__ import annotations

import pytest

from awesome_starlight.config import get_github_config, github_headers


def test_github_headers_include_token_when_present() -> None:
    assert github_headers("abc")["Authorization"] == "token abc"
    assert "Authorization" not in github_headers(None)


def test_validation_lookups_bypass_retries_and_cache(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GITHUB_TOKEN", "from-env")

    config = get_github_config()

    assert config.token == "from-env"
    assert config.validation_resilience.retry is None
    assert config.validation_resilience.cache is None
    assert config.resilience.cache is not None
    assert config.resilience.cache.should_cache is not None
    assert config.resilience.cache.should_cache({"message": "API rate limit exceeded"}) is False
    assert config.resilience.cache.should_cache([{"name": "site.yml"}]) is True

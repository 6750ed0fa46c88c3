from __future__ import annotations

import pytest

from awesome_starlight.config import MissingConfigurationError, get_categorization_config


def test_token_is_optional_by_default() -> None:
    config = get_categorization_config()

    assert config.token is None
    assert config.model == "gpt-4o"
    assert config.resilience.cache is None


def test_required_categorization_without_token_fails() -> None:
    with pytest.raises(MissingConfigurationError, match="GITHUB_TOKEN"):
        get_categorization_config(required=True)


def test_token_and_model_come_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GITHUB_TOKEN", "ghp_example")
    monkeypatch.setenv("CATEGORIZATION_MODEL", "gpt-4o-mini")

    config = get_categorization_config(required=True)

    assert config.token == "ghp_example"
    assert config.model == "gpt-4o-mini"

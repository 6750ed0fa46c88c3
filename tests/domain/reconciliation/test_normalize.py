from __future__ import annotations

import pytest

from awesome_starlight.domain.reconciliation import (
    extract_repo_slug,
    extract_repository,
    normalize_url,
    sort_key,
    theme_key,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("  HTTPS://Example.com/Docs/ ", "https://example.com/docs"),
        ("https://example.com//", "https://example.com"),
        ("https://example.com", "https://example.com"),
        (None, ""),
        ("   ", ""),
    ],
)
def test_normalize_url(raw: str | None, expected: str) -> None:
    assert normalize_url(raw) == expected


def test_normalize_url_is_idempotent() -> None:
    for raw in ("https://Example.com/a/", "https://example.com//", " x/ ", ""):
        once = normalize_url(raw)
        assert normalize_url(once) == once


def test_extract_repository_reads_owner_and_repo() -> None:
    assert extract_repository("https://github.com/HiDeoo/starlight-blog#readme") == (
        "HiDeoo",
        "starlight-blog",
    )
    assert extract_repository("https://github.com/withastro/starlight/tree/main") == (
        "withastro",
        "starlight",
    )


def test_extract_repository_ignores_other_hosts() -> None:
    assert extract_repository("https://gitlab.com/user/project") is None
    assert extract_repository("https://github.com/only-owner") is None
    assert extract_repository(None) is None
    assert extract_repo_slug("https://starlight.astro.build") == ""


def test_theme_key_reduces_title_and_slug_to_the_same_core() -> None:
    assert theme_key("Starlight Theme Galaxy") == "galaxy"
    assert theme_key(extract_repo_slug("https://github.com/someone/starlight-galaxy-theme")) == (
        "galaxy"
    )


def test_theme_key_strips_protocol_and_punctuation() -> None:
    assert theme_key("https://www.Rapide.example") == "rapideexample"
    assert theme_key(None) == ""


def test_sort_key_uses_bare_name_of_scoped_packages() -> None:
    assert sort_key("@astrojs/starlight-tailwind") == "starlight-tailwind"
    assert sort_key("Starlight Blog") == "starlight blog"
    assert sort_key("@scope-only") == "@scope-only"
    assert sort_key("@scope/name/extra") == "name"


def test_extract_repository_accepts_mixed_case_host() -> None:
    assert extract_repository("https://GitHub.COM/HiDeoo/Starlight-Blog") == (
        "HiDeoo",
        "Starlight-Blog",
    )
    assert extract_repo_slug("https://GitHub.COM/HiDeoo/Starlight-Blog") == "starlight-blog"

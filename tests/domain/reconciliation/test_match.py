from __future__ import annotations

from awesome_starlight.domain.reconciliation import (
    is_duplicate,
    is_known,
    is_likely_same_theme,
    is_same_title,
)
from tests.helpers.fakes import make_item


def test_is_duplicate_compares_normalized_urls() -> None:
    a = make_item("Blog", "https://Starlight-Blog.example/")
    b = make_item("Other title", "https://starlight-blog.example")

    assert is_duplicate(a, b)
    assert is_duplicate(b, a)


def test_is_duplicate_is_reflexive() -> None:
    item = make_item("Blog", "https://starlight-blog.example")

    assert is_duplicate(item, item)


def test_is_duplicate_matches_repository_slug_across_owners() -> None:
    original = make_item("starlight-links", "https://github.com/alice/starlight-links")
    mirror = make_item("Links", "https://github.com/bob/starlight-links")

    assert is_duplicate(original, mirror)


def test_is_duplicate_ignores_empty_urls() -> None:
    assert not is_duplicate(make_item("A", ""), make_item("B", ""))


def test_is_same_title_is_case_insensitive() -> None:
    assert is_same_title(make_item(" Nova ", "https://a.example"), make_item("nova", "https://b"))
    assert not is_same_title(make_item("", "https://a.example"), make_item("", "https://b"))


def test_is_likely_same_theme_matches_title_against_repository() -> None:
    titled = make_item("Starlight Theme Galaxy", "https://galaxy.example")
    packaged = make_item("galaxy", "https://github.com/someone/starlight-galaxy-theme")

    assert is_likely_same_theme(titled, packaged)


def test_is_likely_same_theme_uses_containment() -> None:
    official = make_item("Nova", "https://nova.dev")
    package = make_item("starlight-theme-nova", "https://github.com/x/starlight-theme-nova")

    assert is_likely_same_theme(official, package)
    assert not is_likely_same_theme(official, make_item("Rapide", "https://rapide.example"))


def test_is_likely_same_theme_ignores_titles_that_are_only_noise() -> None:
    noise = make_item("Starlight Theme", "https://example.com")

    assert not is_likely_same_theme(noise, make_item("Galaxy", "https://galaxy.example"))


def test_is_known_checks_every_entry() -> None:
    entries = [make_item("A", "https://a.example"), make_item("B", "https://b.example")]

    assert is_known(make_item("B again", "https://b.example/"), entries)
    assert not is_known(make_item("C", "https://c.example"), entries)


def test_is_duplicate_repository_slug_ignores_case() -> None:
    upper = make_item("Links", "https://GitHub.com/Alice/Starlight-Links")
    lower = make_item("starlight-links", "https://github.com/bob/starlight-links")

    assert is_duplicate(upper, lower)

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
import pytest

from awesome_starlight.adapters.readme import MarkerNotFoundError
from awesome_starlight.app import update_catalog
from awesome_starlight.config import (
    MissingConfigurationError,
    RunConfig,
    get_categorization_config,
    get_github_config,
    get_sources_config,
)
from awesome_starlight.config.github import ASTRO_SHOWCASE_PATH
from tests.helpers.transport import make_client_factory

if TYPE_CHECKING:
    from pathlib import Path

    from awesome_starlight.domain.catalog_update import CatalogUpdateResult

DOCUMENTS = {
    "plugins.mdx": '<LinkCard href="https://blog.example" title="starlight-blog" />',
    "themes.mdx": "themes={[{ title: 'Nova', description: 'Minimal', href: 'https://nova.dev' }]}",
    "community-content.mdx": '<LinkCard href="https://article.example" title="Case study" />',
    "showcase-sites.astro": '<Card title="Docs Z" href="https://z.example" />',
}

SHOWCASE_YAML = "title: Athena OS\nurl: https://athenaos.org\ncategories: [starlight]\n"

REGISTRY_RESULTS = {
    "objects": [
        {
            "package": {
                "name": "starlight-links",
                "description": "Astro Starlight links plugin",
                "links": {"homepage": "https://links.example"},
            }
        },
        {
            "package": {
                "name": "starlight-theme-nova",
                "description": "Nova theme for Astro Starlight",
                "links": {"repository": "https://github.com/x/starlight-theme-nova"},
            }
        },
    ]
}


def _handler(request: httpx.Request) -> httpx.Response:
    url = request.url
    if url.host == "raw.githubusercontent.com":
        return httpx.Response(200, text=DOCUMENTS[url.path.rsplit("/", 1)[-1]])
    if url.host == "api.github.com" and url.path == f"/{ASTRO_SHOWCASE_PATH}":
        return httpx.Response(
            200, json=[{"name": "athena.yml", "download_url": "https://raw.example/athena.yml"}]
        )
    if url.host == "raw.example":
        return httpx.Response(200, text=SHOWCASE_YAML)
    if url.host == "api.github.com" and url.path == "/repos/x/starlight-theme-nova":
        return httpx.Response(200, json={"fork": False})
    if url.host == "registry.npmjs.org":
        return httpx.Response(200, json=REGISTRY_RESULTS)
    if url.host in {"links.example", "athenaos.org"}:
        return httpx.Response(200)
    return httpx.Response(404)


def _update(run_config: RunConfig) -> CatalogUpdateResult:
    return update_catalog(
        run_config,
        sources_config=get_sources_config(),
        github_config=get_github_config(),
        categorization_config=get_categorization_config(),
        client_factory=make_client_factory(_handler),
    )


def test_update_catalog_writes_reconciled_catalog(readme_path: Path) -> None:
    result = _update(RunConfig(readme_path=readme_path))

    written = readme_path.read_text(encoding="utf-8")
    assert "- [starlight-blog](https://blog.example)" in written
    assert "- [starlight-links](https://links.example) - Astro Starlight links plugin" in written
    assert "- [Athena OS](https://athenaos.org)" in written
    assert "starlight-theme-nova" not in written
    assert written.index("Athena OS") < written.index("Docs Z")
    assert result.packages_fetched == 2
    assert result.packages_accepted == 1
    assert result.showcases_accepted == 1


def test_update_catalog_dry_run_keeps_readme(readme_path: Path) -> None:
    original = readme_path.read_text(encoding="utf-8")

    result = _update(RunConfig(readme_path=readme_path, dry_run=True))

    assert readme_path.read_text(encoding="utf-8") == original
    assert len(result.catalog) == 6


def test_update_catalog_requires_markers(tmp_path: Path) -> None:
    path = tmp_path / "README.md"
    path.write_text("# Awesome Starlight\n", encoding="utf-8")

    with pytest.raises(MarkerNotFoundError):
        _update(RunConfig(readme_path=path))

    assert path.read_text(encoding="utf-8") == "# Awesome Starlight\n"


def test_update_catalog_requires_token_when_categorization_is_mandatory(
    readme_path: Path,
) -> None:
    with pytest.raises(MissingConfigurationError):
        update_catalog(RunConfig(readme_path=readme_path), require_categorization=True)

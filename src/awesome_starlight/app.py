"""Application orchestration entry points."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

from awesome_starlight.adapters.github import GitHubClient, fetch_showcase_candidates
from awesome_starlight.adapters.models import GitHubModelsClient
from awesome_starlight.adapters.npm import NpmRegistryClient, fetch_registry_candidates
from awesome_starlight.adapters.probe import HttpLinkProbe
from awesome_starlight.adapters.readme import update_readme
from awesome_starlight.adapters.sources import fetch_official_sources
from awesome_starlight.config import (
    RunConfig,
    get_categorization_config,
    get_github_config,
    get_sources_config,
)
from awesome_starlight.domain.catalog_update import CatalogUpdateResult, reconcile_catalog
from awesome_starlight.domain.classification import Classifier
from awesome_starlight.domain.ports.fetching import SourceSnapshot
from awesome_starlight.domain.validation import LinkValidator, ValidationCache

if TYPE_CHECKING:
    from collections.abc import Callable

    from awesome_starlight.adapters.http_resilience import ResilientClient
    from awesome_starlight.config import CategorizationConfig, GitHubConfig, SourcesConfig
    from awesome_starlight.config.http_resilience import ResilienceConfig

    ClientFactory = Callable[[ResilienceConfig], ResilientClient]

log = getLogger(__name__)


def update_catalog(
    run_config: RunConfig | None = None,
    *,
    require_categorization: bool = False,
    sources_config: SourcesConfig | None = None,
    github_config: GitHubConfig | None = None,
    categorization_config: CategorizationConfig | None = None,
    client_factory: ClientFactory | None = None,
) -> CatalogUpdateResult:
    """Rebuild the catalog from all origins and write it into the README."""

    effective_run = run_config or RunConfig()
    # Configuration errors surface before any request is made.
    effective_categorization = categorization_config or get_categorization_config(
        required=require_categorization
    )
    log.info(
        "Starting catalog update: readme=%s, dry_run=%s, categorization=%s",
        effective_run.readme_path,
        effective_run.dry_run,
        "service" if effective_categorization.token else "fallback",
    )

    result = asyncio.run(
        _update_catalog_async(
            effective_run,
            sources_config=sources_config or get_sources_config(),
            github_config=github_config or get_github_config(),
            categorization_config=effective_categorization,
            client_factory=client_factory,
        )
    )

    log.info(
        "Finished catalog update: entries=%s, official=%s, showcases=%s, "
        "packages=%s/%s, rejected=%s",
        len(result.catalog),
        result.official,
        result.showcases_accepted,
        result.packages_accepted,
        result.packages_fetched,
        len(result.rejected_urls),
    )
    return result


async def _update_catalog_async(
    run_config: RunConfig,
    *,
    sources_config: SourcesConfig,
    github_config: GitHubConfig,
    categorization_config: CategorizationConfig,
    client_factory: ClientFactory | None,
) -> CatalogUpdateResult:
    github = GitHubClient(config=github_config, client_factory=client_factory)
    registry = NpmRegistryClient(
        resilience=sources_config.registry,
        client_factory=client_factory,
    )

    official, showcases, packages = await asyncio.gather(
        fetch_official_sources(sources_config, client_factory=client_factory),
        fetch_showcase_candidates(github, path=github_config.showcase_path),
        fetch_registry_candidates(
            registry,
            queries=sources_config.registry_queries,
            size=sources_config.registry_page_size,
        ),
    )
    snapshot = SourceSnapshot(official=official, showcases=showcases, packages=packages)

    validator = LinkValidator(
        repositories=github,
        probe=HttpLinkProbe(resilience=sources_config.probe, client_factory=client_factory),
        cache=ValidationCache(),
        probe_timeout_seconds=sources_config.probe_timeout_seconds,
    )
    service = (
        GitHubModelsClient(config=categorization_config, client_factory=client_factory)
        if categorization_config.token
        else None
    )

    result = await reconcile_catalog(
        snapshot,
        validator=validator,
        classifier=Classifier(service=service),
    )
    update_readme(run_config.readme_path, result.catalog, dry_run=run_config.dry_run)
    return result

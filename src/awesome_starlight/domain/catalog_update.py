"""Reconcile one run's source snapshot into a sorted catalog."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from awesome_starlight.domain.model import CLASSIFIABLE_CATEGORIES, Category
from awesome_starlight.domain.reconciliation import is_known, merge, seed_catalog, sort_catalog

if TYPE_CHECKING:
    from collections.abc import Sequence

    from awesome_starlight.domain.classification import Classifier
    from awesome_starlight.domain.model import CandidateItem, Catalog
    from awesome_starlight.domain.ports.fetching import SourceSnapshot
    from awesome_starlight.domain.validation import LinkValidator

log = getLogger(__name__)

OFFICIAL_SCOPE = "@astrojs/"


@dataclass(slots=True)
class CatalogUpdateResult:
    """Outcome of one reconciliation run."""

    catalog: Catalog
    official: int = 0
    showcases_accepted: int = 0
    packages_fetched: int = 0
    packages_accepted: int = 0
    rejected_urls: list[str] = field(default_factory=list[str])


def is_relevant(item: CandidateItem) -> bool:
    """Keep registry packages that are about Starlight on Astro.

    Outside the ``@astrojs`` scope a package must mention Astro, and every
    package must mention Starlight in its text or name.
    """

    text = " ".join((item.title, item.description, *sorted(item.keywords))).lower()
    if not item.title.startswith(OFFICIAL_SCOPE) and "astro" not in text:
        return False
    return "starlight" in text or "starlight" in item.title


async def reconcile_catalog(
    sources: SourceSnapshot,
    *,
    validator: LinkValidator,
    classifier: Classifier,
) -> CatalogUpdateResult:
    """Validate, classify and merge a snapshot into a sorted catalog."""

    catalog = seed_catalog(sources.official)
    result = CatalogUpdateResult(catalog=catalog, official=len(catalog))
    log.info("Seeded catalog with %s curated entries", result.official)

    showcases = await _accept_live(sources.showcases, validator=validator, result=result)
    before = len(catalog.entries(Category.SHOWCASE))
    merge(catalog, showcases, Category.SHOWCASE)
    result.showcases_accepted = len(catalog.entries(Category.SHOWCASE)) - before
    log.info("Found %s valid showcase sites", len(showcases))

    result.packages_fetched = len(sources.packages)
    official_entries = catalog.all_entries()
    pending = [
        item
        for item in sources.packages
        if not is_known(item, official_entries) and is_relevant(item)
    ]
    packages = await _accept_live(pending, validator=validator, result=result)
    log.info("Kept %s of %s packages after filtering", len(packages), result.packages_fetched)

    categories = await classifier.classify(packages)
    before = len(catalog)
    for category in CLASSIFIABLE_CATEGORIES:
        merge(
            catalog,
            (item for item in packages if categories.get(item) is category),
            category,
        )
    result.packages_accepted = len(catalog) - before

    sort_catalog(catalog)
    return result


async def _accept_live(
    items: Sequence[CandidateItem],
    *,
    validator: LinkValidator,
    result: CatalogUpdateResult,
) -> list[CandidateItem]:
    verdicts = await validator.validate_all(item.url for item in items)
    accepted: list[CandidateItem] = []
    for item, live in zip(items, verdicts, strict=True):
        if live:
            accepted.append(item)
            continue
        log.debug("Skipping invalid, fork or dead link: %s", item.url)
        result.rejected_urls.append(item.url)
    return accepted

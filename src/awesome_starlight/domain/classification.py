"""Categorization of registry packages that arrive without a category.

One batched request goes to the external categorization service. Any failure on
that path (no service, missing credential, error status, unparsable reply)
falls back to a keyword heuristic that classifies every item, so the pipeline
never stalls here.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, cast

from awesome_starlight.domain.model import CLASSIFIABLE_CATEGORIES, Category
from awesome_starlight.domain.ports.classification import CategorizationServiceError

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from awesome_starlight.domain.model import CandidateItem
    from awesome_starlight.domain.ports.classification import CategorizationService

log = getLogger(__name__)

SYSTEM_INSTRUCTION = "You are a helpful assistant that categorizes documentation resources."

_PROMPT_TEMPLATE = """Categorize these Starlight-related NPM packages into ONE category each.

CATEGORIES:

**themes** - Visual themes/styling presets
- Pattern: "starlight-theme-*"
- Examples: "starlight-theme-rapide", "starlight-theme-galaxy"
- Must be for visual appearance only

**plugins** - Starlight plugins (injected via plugins array)
- For END USERS of Starlight
- Extends Starlight functionality
- Examples: "starlight-blog", "starlight-openapi", "starlight-image-zoom"

**tools** - Development tools (NOT injected as plugins)
- For DEVELOPERS/AUTHORS, not end users
- VS Code extensions, CLI tools, generators
- CRITICAL EXAMPLES:
  * "starlight-i18n" = tool (VS Code extension)
  * "@hideoo/starlight-plugin" = tool (generator)
  * "generator-starlight-plugin" = tool
  * "starlight-to-pdf" = tool (CLI)

RULES:
- If it's a VS Code extension → tool
- If it's for plugin authors → tool
- If it's a CLI utility → tool
- If name has "theme" → theme
- Otherwise → plugin

Packages (format: ID | name | url | description):
{items}

Respond with ONLY a JSON object:
{{
  "0": "plugin",
  "1": "theme",
  "2": "tool",
  ...
}}"""

# First brace-delimited object in the reply, shortest match.
_JSON_OBJECT_PATTERN = re.compile(r"\{[\s\S]*?\}")
_TOOL_MARKERS = ("vscode", "vs code", "cli", "generator")


class UnparsableCategorizationError(ValueError):
    """Raised when the service reply holds no usable JSON object."""


def build_prompt(items: Sequence[CandidateItem]) -> str:
    lines = "\n".join(
        f"{index}. {item.title} | {item.url} | {item.description}"
        for index, item in enumerate(items)
    )
    return _PROMPT_TEMPLATE.format(items=lines)


def parse_categorization(
    response_text: str,
    items: Sequence[CandidateItem],
) -> dict[CandidateItem, Category]:
    """Read per-item labels from the first JSON object in ``response_text``."""

    match = _JSON_OBJECT_PATTERN.search(response_text)
    if match is None:
        raise UnparsableCategorizationError("No JSON object in categorization response")
    try:
        payload = json.loads(match.group(0))
    except json.JSONDecodeError as exc:
        raise UnparsableCategorizationError(f"Invalid categorization JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise UnparsableCategorizationError("Categorization response is not a JSON object")

    labels = cast("Mapping[object, object]", payload)
    categories: dict[CandidateItem, Category] = {}
    for index, item in enumerate(items):
        label = labels.get(index) or labels.get(str(index)) or Category.PLUGIN.value
        categories[item] = category_from_label(str(label))
    return categories


def category_from_label(label: str) -> Category:
    if "theme" in label:
        return Category.THEME
    if "tool" in label:
        return Category.TOOL
    return Category.PLUGIN


def fallback_categories(items: Sequence[CandidateItem]) -> dict[CandidateItem, Category]:
    """Keyword heuristic used whenever the service path fails."""

    categories: dict[CandidateItem, Category] = {}
    for item in items:
        text = f"{item.title} {item.description}".lower()
        if "theme" in text or "theme" in item.title:
            categories[item] = Category.THEME
        elif any(marker in text for marker in _TOOL_MARKERS):
            categories[item] = Category.TOOL
        else:
            categories[item] = Category.PLUGIN
    return categories


@dataclass(slots=True)
class Classifier:
    service: CategorizationService | None = None

    async def classify(self, items: Sequence[CandidateItem]) -> dict[CandidateItem, Category]:
        if not items:
            return {}
        if self.service is None:
            log.info("No categorization service configured, using keyword fallback")
            return fallback_categories(items)

        try:
            response_text = await self.service.complete(
                system=SYSTEM_INSTRUCTION,
                prompt=build_prompt(items),
            )
            categories = parse_categorization(response_text, items)
        except (CategorizationServiceError, UnparsableCategorizationError) as exc:
            log.warning("Categorization service failed, using fallback: %s", exc)
            return fallback_categories(items)
        except Exception:  # noqa: BLE001
            log.exception("Unexpected categorization failure, using fallback")
            return fallback_categories(items)

        _log_summary(categories)
        return categories


def _log_summary(categories: Mapping[CandidateItem, Category]) -> None:
    counts = dict.fromkeys(CLASSIFIABLE_CATEGORIES, 0)
    for category in categories.values():
        counts[category] += 1
    log.info(
        "Categorized: %s plugins, %s themes, %s tools",
        counts[Category.PLUGIN],
        counts[Category.THEME],
        counts[Category.TOOL],
    )

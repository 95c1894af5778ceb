"""Navigation catalog and its filter."""

from __future__ import annotations

import enum
import typing
from collections.abc import Sequence
from dataclasses import dataclass

from ore_geology.analysis.controller import View

if typing.TYPE_CHECKING:
    from ore_geology.locales import LocaleProvider


class CatalogGroup(str, enum.Enum):
    DATA_INPUT = "data_input"
    MODULE = "module"
    TOOL = "tool"


@dataclass(frozen=True)
class CatalogItem:
    """One navigable entry."""

    group: CatalogGroup
    label: str
    description: str = ""
    view: View | None = None


@dataclass(frozen=True)
class SearchResult:
    """Catalog items that matched, split by group."""

    data_input: list[CatalogItem]
    modules: list[CatalogItem]
    tools: list[CatalogItem]

    @property
    def has_matches(self) -> bool:
        return bool(self.data_input or self.modules or self.tools)


def build_catalog(locale: LocaleProvider) -> list[CatalogItem]:
    """Fixed catalog: data entry, six modules, two tools."""
    items = [
        CatalogItem(CatalogGroup.DATA_INPUT, locale.ui("data_input"), view=View.INPUTS)
    ]
    items.extend(
        CatalogItem(CatalogGroup.MODULE, m.label, m.description)
        for m in locale.modules
    )
    items.append(
        CatalogItem(CatalogGroup.TOOL, locale.ui("heatmap"), locale.ui("heatmap_desc"), View.HEATMAP)
    )
    items.append(CatalogItem(CatalogGroup.TOOL, locale.ui("results"), view=View.RESULTS))
    return items


def filter_catalog(query: str, items: Sequence[CatalogItem]) -> list[CatalogItem]:
    """Case-insensitive substring match on labels, original order kept."""
    if not query:
        return list(items)
    needle = query.lower()
    return [item for item in items if needle in item.label.lower()]


def search(query: str, locale: LocaleProvider) -> SearchResult:
    """Filter the catalog once and group the matches."""
    matches = filter_catalog(query, build_catalog(locale))
    return SearchResult(
        data_input=[i for i in matches if i.group is CatalogGroup.DATA_INPUT],
        modules=[i for i in matches if i.group is CatalogGroup.MODULE],
        tools=[i for i in matches if i.group is CatalogGroup.TOOL],
    )


def find_module(locale: LocaleProvider, key: str) -> CatalogItem | None:
    """Resolve a module by number ("3") or by label substring."""
    modules = [i for i in build_catalog(locale) if i.group is CatalogGroup.MODULE]
    key = key.strip()
    if key.isdigit():
        index = int(key) - 1
        return modules[index] if 0 <= index < len(modules) else None
    found = filter_catalog(key, modules)
    return found[0] if found else None

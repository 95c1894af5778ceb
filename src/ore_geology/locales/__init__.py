"""Label and instruction tables for the supported locales.

Each locale is a YAML table shipped next to this module. The core only
talks to :class:`LocaleProvider`; it never reads the raw tables.
"""

from __future__ import annotations

import functools
from importlib import resources

import pydantic
import yaml

from ore_geology.categories import CATEGORY_ORDER
from ore_geology.categories import Category

SUPPORTED_LOCALES = ("en", "ur")


class ModuleEntry(pydantic.BaseModel):
    """An analysis module as listed in the navigation."""

    label: str
    description: str


class HeatmapStep(pydantic.BaseModel):
    """One step of the heat-map logic flow."""

    title: str
    detail: str


class LocaleTable(pydantic.BaseModel):
    """Raw contents of one locale YAML file."""

    code: str
    name: str
    labels: dict[Category, str]
    placeholders: dict[Category, str]
    ui: dict[str, str]
    modules: list[ModuleEntry] = pydantic.Field(min_length=6, max_length=6)
    system_instruction: str
    heatmap_steps: list[HeatmapStep]
    help: str

    @pydantic.field_validator("labels", "placeholders")
    @classmethod
    def _covers_all_categories(cls, value: dict[Category, str]):
        missing = [c.value for c in CATEGORY_ORDER if c not in value]
        if missing:
            raise ValueError(f"missing categories: {missing}")
        return value


@functools.cache
def load_table(code: str) -> LocaleTable:
    """Load and validate the table for a locale code."""
    if code not in SUPPORTED_LOCALES:
        raise ValueError(f"Unsupported locale: {code!r}")
    source = resources.files(__package__).joinpath(f"{code}.yaml")
    data = yaml.safe_load(source.read_text(encoding="utf-8"))
    return LocaleTable.model_validate(data)


class LocaleProvider:
    """Label/instruction provider keyed by locale and Category."""

    def __init__(self, code: str = "en"):
        self.table = load_table(code)

    @property
    def code(self) -> str:
        return self.table.code

    @property
    def name(self) -> str:
        return self.table.name

    @property
    def system_instruction(self) -> str:
        return self.table.system_instruction

    @property
    def generic_error(self) -> str:
        return self.ui("generic_error")

    @property
    def modules(self) -> list[ModuleEntry]:
        return list(self.table.modules)

    @property
    def heatmap_steps(self) -> list[HeatmapStep]:
        return list(self.table.heatmap_steps)

    @property
    def help(self) -> str:
        return self.table.help

    def label(self, category: Category) -> str:
        return self.table.labels[category]

    def placeholder(self, category: Category) -> str:
        return self.table.placeholders[category]

    def ui(self, key: str) -> str:
        """UI string by key; unknown keys fall back to English."""
        if key in self.table.ui:
            return self.table.ui[key]
        return load_table("en").ui[key]

    def message(self, key: str, /, **values: object) -> str:
        """UI string with its ``{placeholders}`` filled in."""
        return self.ui(key).format(**values)


__all__ = [
    "SUPPORTED_LOCALES",
    "LocaleProvider",
    "HeatmapStep",
    "LocaleTable",
    "ModuleEntry",
    "load_table",
]

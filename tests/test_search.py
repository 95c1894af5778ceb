"""Tests for the navigation catalog."""

import pytest

from ore_geology.analysis.controller import View
from ore_geology.analysis.search import CatalogGroup
from ore_geology.analysis.search import build_catalog
from ore_geology.analysis.search import filter_catalog
from ore_geology.analysis.search import find_module
from ore_geology.analysis.search import search
from ore_geology.locales import LocaleProvider


@pytest.fixture
def locale():
    return LocaleProvider("en")


@pytest.fixture
def catalog(locale):
    return build_catalog(locale)


class TestCatalog:
    def test_layout(self, catalog):
        groups = [item.group for item in catalog]
        assert len(catalog) == 9
        assert groups.count(CatalogGroup.MODULE) == 6
        assert groups[0] is CatalogGroup.DATA_INPUT
        assert [i.view for i in catalog if i.group is CatalogGroup.TOOL] == [
            View.HEATMAP,
            View.RESULTS,
        ]


class TestFilter:
    """Case-insensitive substring filter."""

    def test_empty_query_returns_everything(self, catalog):
        assert filter_catalog("", catalog) == catalog

    def test_case_insensitive(self, catalog):
        labels = [i.label for i in filter_catalog("OrE", catalog)]
        assert labels == ["3. Ore Petrography"]

    def test_no_matches(self, locale):
        result = search("zzz-no-such-module", locale)
        assert not result.has_matches
        assert result.modules == []

    def test_grouped_results(self, locale):
        result = search("heat", locale)
        assert [i.label for i in result.modules] == ["6. Heat-Map Fusion"]
        assert [i.label for i in result.tools] == ["Heat Map Logic"]
        assert result.data_input == []

    def test_urdu_catalog(self):
        result = search("", LocaleProvider("ur"))
        assert len(result.modules) == 6
        assert result.data_input[0].label == "ڈیٹا ان پٹ"


class TestFindModule:
    @pytest.mark.parametrize(
        "key,expected",
        [
            ("3", "3. Ore Petrography"),
            ("petro", "3. Ore Petrography"),
            ("1", "1. Geological Context"),
            ("7", None),
            ("0", None),
            ("nothing", None),
        ],
    )
    def test_lookup(self, locale, key, expected):
        item = find_module(locale, key)
        assert (item.label if item else None) == expected

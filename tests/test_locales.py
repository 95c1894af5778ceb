"""Tests for locale tables."""

import pytest

from ore_geology.categories import Category
from ore_geology.categories import resolve_category
from ore_geology.locales import SUPPORTED_LOCALES
from ore_geology.locales import LocaleProvider
from ore_geology.locales import LocaleTable
from ore_geology.locales import load_table


class TestTables:
    @pytest.mark.parametrize("code", SUPPORTED_LOCALES)
    def test_every_category_labelled(self, code):
        provider = LocaleProvider(code)
        for category in Category:
            assert provider.label(category)
            assert provider.placeholder(category)
        assert len(provider.modules) == 6
        assert provider.system_instruction.strip()

    def test_unsupported_locale(self):
        with pytest.raises(ValueError):
            load_table("fr")

    def test_missing_label_rejected(self):
        data = load_table("en").model_dump(mode="json")
        del data["labels"]["microscopy"]
        with pytest.raises(ValueError, match="microscopy"):
            LocaleTable.model_validate(data)

    def test_english_labels(self):
        provider = LocaleProvider("en")
        assert provider.label(Category.FIELD) == "Field & Outcrop"
        assert provider.generic_error == "Error generating analysis. Please check console."

    def test_ui_falls_back_to_english(self):
        provider = LocaleProvider("ur")
        provider.table = provider.table.model_copy(update={"ui": {}})
        assert provider.ui("analyze") == "Run Full Analysis"


class TestMessages:
    def test_ur_covers_every_ui_key(self):
        assert set(load_table("en").ui) <= set(load_table("ur").ui)

    @pytest.mark.parametrize("code", SUPPORTED_LOCALES)
    def test_help_and_heatmap_steps(self, code):
        provider = LocaleProvider(code)
        assert "`analyze`" in provider.help
        assert len(provider.heatmap_steps) == 4

    def test_message_fills_placeholders(self):
        provider = LocaleProvider("en")
        assert provider.message("updated", label="Geochemistry") == "Updated **Geochemistry**."
        assert provider.message("attached", count=2) == "Attached 2 file(s):"


class TestCategories:
    @pytest.mark.parametrize(
        "name,expected",
        [
            ("field", Category.FIELD),
            (" Hand ", Category.HAND_SPECIMEN),
            ("satellite", Category.REMOTE_SENSING),
            ("lava", None),
        ],
    )
    def test_resolve(self, name, expected):
        assert resolve_category(name) is expected

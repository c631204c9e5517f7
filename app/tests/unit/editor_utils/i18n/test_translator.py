"""Tests for editor_utils.i18n.translator module."""

from unittest.mock import patch

import pytest

from editor_utils.i18n import Message, Translator
from tests.factories.i18n import (
    make_translation_catalog,
    polish_plural_form,
)


@pytest.mark.unit
class TestTranslatorFallback:
    """Tests for untranslated messages."""

    def test_returns_source_text_when_catalog_empty(self, translator):
        """An empty catalog returns the message id."""
        assert translator.translate("pl", Message("Bold"), 1) == "Bold"

    def test_bare_string_message(self, translator):
        """A bare string is treated as the message id."""
        assert translator.translate("pl", "Bold") == "Bold"

    def test_mapping_message(self, translator):
        """A mapping with an id is accepted."""
        assert translator.translate("pl", {"id": "Bold"}) == "Bold"

    def test_singular_fallback_for_unregistered_language(self, translator):
        """Quantity one returns the singular source text."""
        message = Message("Thing", plural="# things")
        assert translator.translate("xx", message, 1) == "Thing"

    def test_plural_fallback_for_unregistered_language(self, translator):
        """Other quantities return the plural source text, placeholders untouched."""
        message = Message("Thing", plural="# things")
        assert translator.translate("xx", message, 3) == "# things"
        assert translator.translate("xx", message, 0) == "# things"

    def test_fallback_when_key_missing(self, translator, catalog):
        """A registered language without the key returns the source text."""
        catalog.register("pl", {"ok": "OK"})
        catalog.register("de", {"ok": "OK"})
        assert translator.translate("pl", "Heading") == "Heading"

    def test_empty_translation_counts_as_missing(self, translator, catalog):
        """An empty string translation falls back to the source text."""
        catalog.register("pl", {"heading": ""})
        assert translator.translate("pl", "Heading") == "Heading"

    def test_miss_is_logged(self, translator):
        """Misses are logged at debug level and never raise."""
        with patch("editor_utils.i18n.translator.logger") as mock_logger:
            translator.translate("pl", "Bold")
        mock_logger.debug.assert_called_once()
        assert mock_logger.debug.call_args[0][0] == "translation_not_found"


@pytest.mark.unit
class TestTranslatorLookup:
    """Tests for translated messages."""

    def test_translates_registered_message(self, translator, catalog):
        """The id is lowercased to find the translation."""
        catalog.register("pl", {"ok": "OK", "cancel": "Anuluj"})
        assert translator.translate("pl", "Cancel") == "Anuluj"

    def test_single_language_overrides_requested_language(self, translator, catalog):
        """With one registered language it is used whatever was requested."""
        catalog.register("pl", {"ok": "OK", "cancel": "Anuluj"})
        assert translator.translate("de", Message("cancel"), 1) == "Anuluj"

    def test_multiple_languages_use_requested_language(self):
        """With several languages each is resolved separately."""
        catalog = make_translation_catalog()
        translator = Translator(catalog)
        assert translator.translate("pl", "Cancel") == "Anuluj"
        assert translator.translate("de", "Cancel") == "Abbrechen"

    def test_unregistered_language_among_many_falls_back(self):
        """An unknown language among several returns the source text."""
        translator = Translator(make_translation_catalog())
        assert translator.translate("fr", "Cancel") == "Cancel"

    def test_merged_registrations_resolve(self, translator, catalog):
        """Translations registered separately for a language all resolve."""
        catalog.register("pl", {"ok": "OK"})
        catalog.register("pl", {"cancel": "Anuluj"})
        catalog.register("en_US", {"ok": "OK", "cancel": "Cancel"})
        assert translator.translate("pl", "Cancel") == "Anuluj"
        assert translator.translate("en", "Cancel") == "Cancel"

    def test_string_translation_ignores_quantity(self, translator, catalog):
        """A single-string translation is returned for any quantity."""
        catalog.register("pl", {"cancel": "Anuluj"})
        assert translator.translate("pl", Message("Cancel", plural="Cancels"), 5) == "Anuluj"

    def test_context_isolation(self, translator, catalog):
        """Messages with and without context resolve independently."""
        catalog.register(
            "pl", {"cancel": "Anuluj", "dialog|cancel": "Zamknij okno"}
        )
        assert translator.translate("pl", Message("Cancel")) == "Anuluj"
        assert translator.translate("pl", Message("Cancel", context="dialog")) == "Zamknij okno"

    def test_context_without_translation_falls_back(self, translator, catalog):
        """A context with no translation does not use the context-free entry."""
        catalog.register("pl", {"cancel": "Anuluj"})
        assert translator.translate("pl", Message("Cancel", context="toolbar")) == "Cancel"


@pytest.mark.unit
class TestTranslatorPlurals:
    """Tests for plural-form selection."""

    @pytest.fixture
    def polish_catalog(self, catalog):
        catalog.register(
            "pl",
            {
                "PLURAL_FORMS": "nplurals=3;plural=n==1?0:n<=4?1:2;",
                "table": ["tabelka", "# tabelki", "# tabelek"],
            },
        )
        return catalog

    @pytest.mark.parametrize(
        "quantity,expected", [(1, "tabelka"), (3, "# tabelki"), (7, "# tabelek")]
    )
    def test_plural_forms_header(self, translator, polish_catalog, quantity, expected):
        """The PLURAL_FORMS header selects the variant."""
        assert translator.translate("pl", Message("table"), quantity) == expected

    def test_registered_selector(self, translator, catalog):
        """A registered selector function picks the variant."""
        catalog.register(
            "pl", {"bar": ["bar_pl_0", "%0 bar_pl_1", "%0 bar_pl_2"]}, polish_plural_form
        )
        message = Message("bar", plural="%0 bars")
        assert translator.translate("pl", message, 1) == "bar_pl_0"
        assert translator.translate("pl", message, 2) == "%0 bar_pl_1"
        assert translator.translate("pl", message, 5) == "%0 bar_pl_2"

    def test_english_rule_by_default(self, translator, catalog):
        """Without a rule the English default selects the variant."""
        catalog.register("de", {"bar": ["bar_de_0", "%0 bar_de_1"]})
        assert translator.translate("de", "bar", 1) == "bar_de_0"
        assert translator.translate("de", "bar", 4) == "%0 bar_de_1"

    def test_missing_variant_uses_singular(self, translator, catalog):
        """An index beyond the variants falls back to the singular form."""
        catalog.register("pl", {"bar": ["bar_pl_0", "%0 bar_pl_1"]}, polish_plural_form)
        assert translator.translate("pl", "bar", 5) == "bar_pl_0"

    def test_negative_index_uses_singular(self, translator, catalog):
        """A negative index falls back to the singular form."""
        catalog.register("pl", {"bar": ["bar_pl_0", "%0 bar_pl_1"]}, lambda n: -1)
        assert translator.translate("pl", "bar", 5) == "bar_pl_0"

    def test_empty_variants_use_source_text(self, translator, catalog):
        """An empty variant list falls back to the source text."""
        catalog.register("pl", {"bar": []})
        assert translator.translate("pl", Message("Bar", plural="Bars"), 2) == "Bars"

    def test_failing_rule_uses_singular(self, translator, catalog):
        """A rule failing at evaluation selects the singular form."""
        catalog.register(
            "pl",
            {
                "PLURAL_FORMS": "nplurals=2; plural=1 / (n - 1);",
                "bar": ["bar_pl_0", "%0 bar_pl_1"],
            },
        )
        with patch("editor_utils.i18n.translator.logger") as mock_logger:
            assert translator.translate("pl", "bar", 1) == "bar_pl_0"
        mock_logger.warning.assert_called_once()

    def test_malformed_header_uses_english_rule(self, translator, catalog):
        """A malformed header falls back to the English rule."""
        catalog.register(
            "pl",
            {"PLURAL_FORMS": "plural=n==1?0:2", "table": ["tabelka", "tabelki", "tabelek"]},
        )
        assert translator.translate("pl", "table", 1) == "tabelka"
        assert translator.translate("pl", "table", 7) == "tabelki"


    @pytest.mark.parametrize(
        "expression",
        ["(" * 150 + "n!=1" + ")" * 150, "!" * 2000 + "n"],
    )
    def test_oversized_header_uses_english_rule(self, translator, catalog, expression):
        """Headers past the parser limits fall back to the English rule."""
        catalog.register(
            "xx",
            {"PLURAL_FORMS": f"nplurals=2; plural={expression};", "thing": ["a", "b"]},
        )
        assert translator.translate("xx", {"id": "Thing"}, 3) == "b"
        assert translator.translate("xx", {"id": "Thing"}, 1) == "a"

    def test_float_index_from_selector(self, translator, catalog):
        """A selector returning a float index is truncated to int."""
        catalog.register("pl", {"bar": ["bar_0", "bar_1"]}, lambda n: 1.0)
        assert translator.translate("pl", "bar", 5) == "bar_1"


@pytest.mark.unit
class TestTranslatorIntrospection:
    """Tests for has_translation() and get_available_languages()."""

    def test_has_translation(self):
        """has_translation() uses the effective key."""
        translator = Translator(make_translation_catalog())
        assert translator.has_translation("pl", "Cancel")
        assert not translator.has_translation("pl", "Heading")
        assert not translator.has_translation("fr", "Cancel")

    def test_get_available_languages(self):
        """get_available_languages() lists registered languages."""
        translator = Translator(make_translation_catalog())
        assert translator.get_available_languages() == ["pl", "de"]

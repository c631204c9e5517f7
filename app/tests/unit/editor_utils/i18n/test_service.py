"""Tests for editor_utils.i18n.service and editor_utils.i18n.factory modules."""

import pytest

from editor_utils.i18n import (
    Message,
    TranslationCatalog,
    TranslationService,
    Translator,
    create_catalog,
    create_translator,
    get_default_catalog,
    get_default_translator,
)
from tests.factories.i18n import make_translator


@pytest.mark.unit
class TestTranslationService:
    """Tests for TranslationService facade."""

    @pytest.fixture
    def service(self):
        return TranslationService(make_translator())

    def test_add_and_translate(self, service):
        """add() registers translations used by translate()."""
        service.add("pl", {"ok": "OK", "cancel": "Anuluj"})
        assert service.translate("pl", "Cancel") == "Anuluj"

    def test_translate_keeps_placeholders(self, service):
        """translate() does not interpolate."""
        service.add("pl", {"add space": ["Dodaj spację", "Dodaj %0 spacje"]})
        message = Message("Add space", plural="Add %0 spaces")
        assert service.translate("pl", message, 3) == "Dodaj %0 spacje"

    def test_add_with_plural_form(self, service):
        """add() forwards the plural form function."""
        service.add("pl", {"bar": ["a", "b", "c"]}, lambda n: 2)
        assert service.translate("pl", "bar", 1) == "c"

    def test_has_translation(self, service):
        """has_translation() reflects registered messages."""
        service.add("pl", {"cancel": "Anuluj"})
        assert service.has_translation("pl", "Cancel")
        assert not service.has_translation("pl", "OK")

    def test_get_available_languages(self, service):
        """get_available_languages() lists registered languages."""
        service.add("pl", {})
        service.add("de", {})
        assert service.get_available_languages() == ["pl", "de"]

    def test_clear(self, service):
        """clear() removes every translation."""
        service.add("pl", {"cancel": "Anuluj"})
        service.clear()
        assert service.catalog.count_languages() == 0
        assert service.translate("pl", "Cancel") == "Cancel"

    def test_exposes_translator_and_catalog(self):
        """translator and catalog properties expose the collaborators."""
        translator = make_translator()
        service = TranslationService(translator)
        assert service.translator is translator
        assert service.catalog is translator.catalog

    def test_defaults_to_default_translator(self):
        """Without a translator the process default is used."""
        service = TranslationService()
        assert service.translator is get_default_translator()


@pytest.mark.unit
class TestFactory:
    """Tests for i18n factory functions."""

    def test_create_catalog(self):
        """create_catalog() returns a new empty catalog."""
        catalog = create_catalog()
        assert isinstance(catalog, TranslationCatalog)
        assert catalog.count_languages() == 0
        assert catalog.plural_forms_key == "PLURAL_FORMS"
        assert create_catalog() is not catalog

    def test_create_catalog_custom_key(self):
        """create_catalog() accepts a custom reserved key."""
        assert create_catalog("Plural-Forms").plural_forms_key == "Plural-Forms"

    def test_create_translator_with_catalog(self):
        """create_translator() binds the given catalog."""
        catalog = TranslationCatalog()
        translator = create_translator(catalog)
        assert isinstance(translator, Translator)
        assert translator.catalog is catalog

    def test_create_translator_without_catalog(self):
        """create_translator() creates a fresh catalog when none is given."""
        translator = create_translator()
        assert translator.catalog is not get_default_catalog()

    def test_default_instances_are_singletons(self):
        """The default translator wraps the default catalog."""
        assert get_default_catalog() is get_default_catalog()
        assert get_default_translator() is get_default_translator()
        assert get_default_translator().catalog is get_default_catalog()

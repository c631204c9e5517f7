"""Translation service for dependency injection.

Provides a class-based interface to the i18n system for easier DI and testing.
"""

from typing import Mapping, Optional

from editor_utils.i18n.catalog import TranslationCatalog
from editor_utils.i18n.factory import get_default_translator
from editor_utils.i18n.models import PluralFormSelector, Translation
from editor_utils.i18n.translator import MessageLike, Translator


class TranslationService:
    """Class-based translation service.

    Thin facade over a Translator and its catalog, exposing registration,
    translation and reset in one place.

    Usage:
        service = TranslationService()
        service.add("pl", {"cancel": "Anuluj", "heading": "Nagłówek"})
        service.translate("pl", "Cancel")  # "Anuluj"
    """

    def __init__(self, translator: Optional[Translator] = None):
        """Initialize translation service.

        Args:
            translator: Optional pre-configured Translator instance.
                       If not provided, uses the default translator.
        """
        self._translator = translator or get_default_translator()

    def add(
        self,
        language: str,
        messages: Mapping[str, Translation],
        plural_form: Optional[PluralFormSelector] = None,
    ) -> None:
        """Add translations to existing ones or override existing translations.

        Args:
            language: Target language
            messages: Effective key -> translation
            plural_form: Optional function returning the plural form index
        """
        self.catalog.register(language, messages, plural_form)

    def translate(
        self,
        language: str,
        message: MessageLike,
        quantity: float = 1,
    ) -> str:
        """Translate a message without interpolating placeholders.

        Args:
            language: Target language
            message: Message to translate
            quantity: Number of elements for plural selection

        Returns:
            Translated string, or the source text when not translated
        """
        return self._translator.translate(language, message, quantity)

    def has_translation(self, language: str, message: MessageLike) -> bool:
        """Check if translation exists for message in language.

        Args:
            language: Language to check
            message: Message to check

        Returns:
            True if a translation is registered, False otherwise
        """
        return self._translator.has_translation(language, message)

    def get_available_languages(self) -> list[str]:
        """Get list of registered language codes."""
        return self._translator.get_available_languages()

    def clear(self) -> None:
        """Remove all translations. Intended for test isolation."""
        self.catalog.clear()

    @property
    def catalog(self) -> TranslationCatalog:
        """Access the underlying TranslationCatalog."""
        return self._translator.catalog

    @property
    def translator(self) -> Translator:
        """Access underlying Translator instance.

        Provided for advanced use cases that need direct access
        to the Translator API.

        Returns:
            The underlying Translator instance
        """
        return self._translator

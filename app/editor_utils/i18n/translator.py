"""Translation lookup and fallback policy.

Resolves a message to the string registered for a language, choosing the
right plural variant. Missing translations never raise: the source text of
the message is returned instead.
"""

from typing import Any, Mapping, Union

from editor_utils.errors import PluralFormsError
from editor_utils.i18n.catalog import TranslationCatalog
from editor_utils.i18n.models import Message
from editor_utils.logging import get_module_logger

logger = get_module_logger()

MessageLike = Union[str, Message, Mapping[str, Any]]


class Translator:
    """Service resolving messages against a TranslationCatalog.

    Placeholders (``%0``, ``%1``, ...) are left untouched; interpolation is
    done by the caller (see ``editor_utils.i18n.locale.Locale``).

    Attributes:
        catalog: Catalog translations are looked up in.
    """

    def __init__(self, catalog: TranslationCatalog):
        """Initialize Translator.

        Args:
            catalog: TranslationCatalog to resolve messages against.
        """
        self.catalog = catalog

    def translate(
        self,
        language: str,
        message: MessageLike,
        quantity: float = 1,
    ) -> str:
        """Translate a message to the given language.

        When only one language is registered, it is used whatever language
        was requested, since single-language builds do not know the code the
        editor was configured with.

        Args:
            language: Target language code.
            message: Bare message id, Message, or mapping with id/context/plural.
            quantity: Number of elements, used to pick the plural form.

        Returns:
            The translated string, or the message's source text (plural
            source text for quantities other than one) when no translation
            exists.
        """
        message = Message.from_value(message)
        number_of_languages = self.catalog.count_languages()

        if number_of_languages == 1:
            language = self.catalog.languages()[0]

        key = message.key

        if number_of_languages == 0 or not self.catalog.has_translation(language, key):
            logger.debug(
                "translation_not_found",
                language=language,
                key=key,
                quantity=quantity,
            )
            return message.fallback(quantity)

        translation = self.catalog.lookup(language, key)

        if isinstance(translation, str):
            return translation

        index = int(self._plural_form_index(language, quantity))
        if 0 <= index < len(translation):
            return translation[index]

        if translation:
            logger.debug(
                "plural_form_missing",
                language=language,
                key=key,
                index=index,
                available=len(translation),
            )
            return translation[0]

        return message.fallback(quantity)

    def has_translation(self, language: str, message: MessageLike) -> bool:
        """Check if a translation exists for message in language.

        Args:
            language: Language code (not overridden in single-language mode).
            message: Message to check.

        Returns:
            True if the catalog holds a non-empty translation.
        """
        return self.catalog.has_translation(language, Message.from_value(message).key)

    def get_available_languages(self) -> list:
        """Get list of registered language codes."""
        return self.catalog.languages()

    def _plural_form_index(self, language: str, quantity: float) -> int:
        plural_form = self.catalog.get_plural_form(language)
        try:
            return plural_form(quantity)
        except PluralFormsError as e:
            logger.warning(
                "plural_form_evaluation_failed",
                language=language,
                quantity=quantity,
                error=str(e),
            )
            return 0

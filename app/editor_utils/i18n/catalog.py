"""Translation dictionary store.

Holds every registered language's messages and plural-form selector.
A catalog is an ordinary object owned by whoever composes the i18n
components; the only shared instance lives in ``editor_utils.i18n.factory``.
"""

from typing import Dict, List, Mapping, Optional

from editor_utils.i18n.models import LanguageRecord, PluralFormSelector, Translation
from editor_utils.i18n.plural_forms import PLURAL_FORMS_KEY, resolve_plural_form
from editor_utils.logging import get_module_logger

logger = get_module_logger()


class TranslationCatalog:
    """Storage for translations of multiple languages.

    Messages are merged into a language's table on every registration and
    are never removed individually; ``clear()`` resets the whole catalog.

    Attributes:
        plural_forms_key: Reserved message key holding a PO-style
            plural-forms header.

    Example:
        catalog = TranslationCatalog()
        catalog.register("pl", {
            "PLURAL_FORMS": "nplurals=3; plural=n==1 ? 0 : n<=4 ? 1 : 2;",
            "cancel": "Anuluj",
            "add space": ["Dodaj spację", "Dodaj %0 spacje", "Dodaj %0 spacji"],
        })
        catalog.lookup("pl", "cancel")  # "Anuluj"
    """

    def __init__(self, plural_forms_key: str = PLURAL_FORMS_KEY):
        self.plural_forms_key = plural_forms_key
        self._records: Dict[str, LanguageRecord] = {}

    def register(
        self,
        language: str,
        messages: Mapping[str, Translation],
        plural_form: Optional[PluralFormSelector] = None,
    ) -> None:
        """Add translations to a language, overriding entries with the same key.

        Args:
            language: Target language code.
            messages: Effective key -> translation (a string, or the singular
                form followed by every plural form).
            plural_form: Function returning the plural form index for a
                quantity. Replaces the stored one when given.
        """
        record = self._records.get(language)
        if record is None:
            record = LanguageRecord(language=language)
            self._records[language] = record

        record.merge(messages, plural_form)
        logger.debug(
            "translations_registered",
            language=language,
            message_count=len(messages),
            custom_plural_form=plural_form is not None,
        )

    def lookup(self, language: str, key: str) -> Optional[Translation]:
        """Retrieve a stored translation verbatim.

        Args:
            language: Language code.
            key: Effective message key.

        Returns:
            The stored string or list of plural variants, or None if the
            language or key is unknown.
        """
        record = self._records.get(language)
        if record is None:
            return None
        return record.messages.get(key)

    def has_translation(self, language: str, key: str) -> bool:
        """Check whether a non-empty translation exists for key in language.

        Args:
            language: Language code.
            key: Effective message key.

        Returns:
            True if a translation exists, False otherwise. An empty string
            counts as missing.
        """
        translation = self.lookup(language, key)
        return translation is not None and translation != ""

    def get_record(self, language: str) -> Optional[LanguageRecord]:
        """Get the record of a language, or None if it is not registered."""
        return self._records.get(language)

    def get_plural_form(self, language: str) -> PluralFormSelector:
        """Get the plural-form selector of a language.

        The selector is derived on first use and cached on the language record
        until the next registration for that language.

        Args:
            language: Language code.

        Returns:
            Function mapping a quantity to a plural category index. The
            English rule for unknown languages.
        """
        record = self._records.get(language)
        if record is None:
            return resolve_plural_form(None)

        if record.resolved_plural_form is None:
            record.resolved_plural_form = resolve_plural_form(
                record, self.plural_forms_key
            )
        return record.resolved_plural_form

    def languages(self) -> List[str]:
        """Get registered language codes in registration order."""
        return list(self._records)

    def count_languages(self) -> int:
        """Get the number of registered languages."""
        return len(self._records)

    def clear(self) -> None:
        """Remove every registered language.

        Intended for test isolation.
        """
        self._records.clear()
        logger.debug("translations_cleared")

    def __contains__(self, language: object) -> bool:
        return language in self._records

    def __len__(self) -> int:
        return len(self._records)

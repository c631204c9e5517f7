"""i18n system - internationalization and localization framework.

Provides translation storage, plural-form selection, and placeholder
interpolation for the editor UI.

Main components:
- models: Message, LanguageRecord, MessagePart, TextDirection
- catalog: TranslationCatalog storing messages per language
- plural_forms: PO-style plural rule parsing and evaluation
- translator: Translator applying the lookup and fallback policy
- interpolation: %0-style placeholder substitution
- locale: Locale exposing t(), ct() and ctn()
- service: TranslationService facade
"""

from editor_utils.i18n.catalog import TranslationCatalog
from editor_utils.i18n.factory import (
    create_catalog,
    create_translator,
    get_default_catalog,
    get_default_translator,
)
from editor_utils.i18n.interpolation import interpolate, interpolate_parts
from editor_utils.i18n.locale import Locale, get_language_direction
from editor_utils.i18n.models import (
    LanguageRecord,
    Message,
    MessagePart,
    TextDirection,
)
from editor_utils.i18n.plural_forms import (
    PLURAL_FORMS_KEY,
    PluralRule,
    default_plural_form,
    parse_plural_forms,
)
from editor_utils.i18n.service import TranslationService
from editor_utils.i18n.translator import Translator

__all__ = [
    "Message",
    "LanguageRecord",
    "MessagePart",
    "TextDirection",
    "TranslationCatalog",
    "PLURAL_FORMS_KEY",
    "PluralRule",
    "default_plural_form",
    "parse_plural_forms",
    "Translator",
    "interpolate",
    "interpolate_parts",
    "Locale",
    "get_language_direction",
    "TranslationService",
    "create_catalog",
    "create_translator",
    "get_default_catalog",
    "get_default_translator",
]

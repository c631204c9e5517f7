"""Factory functions for creating i18n components.

The default catalog and translator created here are the only process-wide
i18n state. Library code receives a catalog or translator explicitly and
falls back to these defaults only at the outermost composition point.
"""

from functools import lru_cache
from typing import Optional

import structlog

from editor_utils.configuration import settings
from editor_utils.i18n.catalog import TranslationCatalog
from editor_utils.i18n.translator import Translator

logger = structlog.get_logger()


def create_catalog(plural_forms_key: Optional[str] = None) -> TranslationCatalog:
    """Create an empty TranslationCatalog.

    Args:
        plural_forms_key: Reserved key for PO-style plural headers
            (default: settings.i18n.PLURAL_FORMS_KEY).

    Returns:
        TranslationCatalog: New, empty catalog
    """
    return TranslationCatalog(
        plural_forms_key=plural_forms_key or settings.i18n.PLURAL_FORMS_KEY
    )


def create_translator(catalog: Optional[TranslationCatalog] = None) -> Translator:
    """Create and configure a Translator instance.

    Args:
        catalog: Catalog to translate from (default: a new empty catalog)

    Returns:
        Translator: Configured translator instance

    Usage:
        translator = create_translator()
        translator.catalog.register("pl", {"cancel": "Anuluj"})
        translator.translate("pl", "Cancel")  # "Anuluj"
    """
    translator = Translator(catalog=catalog if catalog is not None else create_catalog())
    logger.debug(
        "translator_created",
        language_count=translator.catalog.count_languages(),
    )
    return translator


@lru_cache
def get_default_catalog() -> TranslationCatalog:
    """Get the process-wide default catalog singleton.

    Returns:
        TranslationCatalog: Cached catalog instance.
    """
    return create_catalog()


@lru_cache
def get_default_translator() -> Translator:
    """Get the process-wide default translator, bound to the default catalog.

    Returns:
        Translator: Cached translator instance.
    """
    return create_translator(get_default_catalog())

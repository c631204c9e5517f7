"""Localization services of an editor instance.

A Locale knows the UI and content languages, their writing directions,
and exposes the ``t`` / ``ct`` / ``ctn`` helpers that translate a message and
interpolate its placeholders.
"""

from typing import Any, Optional, Sequence

from editor_utils.configuration import settings
from editor_utils.i18n.factory import get_default_translator
from editor_utils.i18n.interpolation import interpolate
from editor_utils.i18n.models import Message, TextDirection
from editor_utils.i18n.translator import MessageLike, Translator
from editor_utils.logging import get_module_logger

logger = get_module_logger()


def get_language_direction(language: str) -> TextDirection:
    """Determine whether a language is written left-to-right or right-to-left.

    Args:
        language: ISO 639-1 language code.

    Returns:
        TextDirection.RTL for configured right-to-left languages, else LTR.
    """
    if language in settings.i18n.RTL_LANGUAGE_CODES:
        return TextDirection.RTL
    return TextDirection.LTR


def _as_values(values: Any) -> list:
    if values is None:
        return []
    if isinstance(values, (list, tuple)):
        return list(values)
    return [values]


def _as_quantity(value: Any) -> float:
    if isinstance(value, (int, float)):
        return value
    try:
        quantity = float(value)
    except (TypeError, ValueError):
        logger.debug("locale_quantity_not_numeric", value=repr(value))
        return 1
    return int(quantity) if quantity.is_integer() else quantity


class Locale:
    """Represents the localization services.

    Attributes:
        ui_language: Editor UI language code (ISO 639-1).
        content_language: Editor content language code. Same as the UI
            language unless given.
        ui_language_direction: Text direction of the UI language.
        content_language_direction: Text direction of the content language.
        translator: Translator used by ``t``.

    Example:
        locale = Locale(ui_language="pl")
        locale.t('Created file "%0" in %1ms.', [file_name, time_taken])
    """

    def __init__(
        self,
        ui_language: Optional[str] = None,
        content_language: Optional[str] = None,
        translator: Optional[Translator] = None,
    ):
        self.ui_language = ui_language or settings.i18n.DEFAULT_UI_LANGUAGE
        self.content_language = content_language or self.ui_language
        self.ui_language_direction = get_language_direction(self.ui_language)
        self.content_language_direction = get_language_direction(
            self.content_language
        )
        self.translator = translator or get_default_translator()

    @property
    def language(self) -> str:
        """The UI language code.

        Deprecated: use ``ui_language`` and ``content_language`` instead.
        """
        logger.warning(
            "locale_deprecated_language_property",
            message=(
                "The Locale.language property has been deprecated and will be removed "
                "in the near future. Please use ui_language and content_language instead."
            ),
        )
        return self.ui_language

    def t(self, message: MessageLike, values: Any = None) -> str:
        """Translate a message to the UI language and interpolate it.

        Placeholders (``%<index>``) are replaced with the matching value. A
        single non-sequence value is treated as a one-item list. For messages
        with a plural form the first value is the quantity; numeric strings
        are converted and other values count as one.

        Args:
            message: Bare message id, Message, or mapping with id/context/plural.
            values: Values used to interpolate the translated string.

        Returns:
            Translated, interpolated string.
        """
        message = Message.from_value(message)
        values = _as_values(values)

        quantity = _as_quantity(values[0]) if message.plural and values else 1
        translated = self.translator.translate(self.ui_language, message, quantity)

        return interpolate(translated, values)

    def ct(self, context: str, message: str, values: Any = None) -> str:
        """Translate a message within a context.

        Args:
            context: Context disambiguating the message (e.g. "dialog").
            message: Source text of the message.
            values: Values used to interpolate the translated string.

        Returns:
            Translated, interpolated string.
        """
        return self.t(Message(id=message, context=context), values)

    def ctn(
        self,
        context: str,
        singular: str,
        plural: str,
        quantity: float,
        values: Optional[Sequence[Any]] = None,
    ) -> str:
        """Translate a message with a context and a plural form.

        Args:
            context: Context disambiguating the message.
            singular: Source text for a quantity of one.
            plural: Source text for other quantities.
            quantity: Number of elements.
            values: Interpolation values. Defaults to ``[quantity]``.

        Returns:
            Translated, interpolated string.
        """
        message = Message(id=singular, context=context, plural=plural)
        values = [quantity] if values is None else _as_values(values)
        translated = self.translator.translate(self.ui_language, message, quantity)

        return interpolate(translated, values)

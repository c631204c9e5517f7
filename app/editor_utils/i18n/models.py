"""Translation models for the i18n system.

Defines the message request, per-language record and interpolation part
structures shared by the catalog, translator and locale.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Literal, Mapping, Optional, Union

# A stored translation: a single string, or the singular form followed by
# every plural form of the language.
Translation = Union[str, list[str]]

PluralFormSelector = Callable[[float], int]

CONTEXT_SEPARATOR = "|"


class TextDirection(str, Enum):
    """Writing direction of a language."""

    LTR = "ltr"
    RTL = "rtl"


@dataclass(frozen=True)
class Message:
    """A translation request.

    Frozen to ensure immutability and hashability.

    Attributes:
        id: Source (English) text of the message. Lowercased, it becomes the
            lookup key.
        context: Optional qualifier making otherwise identical source texts
            separately translatable (e.g. "dialog" for a "Cancel" button).
        plural: Optional source text used for quantities other than one.
    """

    id: str
    context: Optional[str] = None
    plural: Optional[str] = None

    @property
    def key(self) -> str:
        """Return the effective lookup key.

        Returns:
            ``"<context>|<id lowercased>"`` when a context is set, otherwise the
            lowercased id (e.g. ``"dialog|cancel"`` or ``"cancel"``).
        """
        message_id = self.id.lower()
        if self.context:
            return f"{self.context}{CONTEXT_SEPARATOR}{message_id}"
        return message_id

    def fallback(self, quantity: float = 1) -> str:
        """Return the source text used when no translation exists.

        Args:
            quantity: Number of elements the message refers to.

        Returns:
            The plural source text for quantities other than one when the
            message has one, otherwise the id.
        """
        if quantity != 1 and self.plural:
            return self.plural
        return self.id

    @classmethod
    def from_value(
        cls, value: Union[str, "Message", Mapping[str, Any]]
    ) -> "Message":
        """Normalize a bare id, a Message or a mapping into a Message.

        Mappings use the ``id`` key, or the legacy ``string`` key, plus
        optional ``context`` and ``plural`` keys.

        Args:
            value: Message in any of the accepted shapes.

        Returns:
            Message instance.

        Raises:
            ValueError: If a mapping has neither ``id`` nor ``string``.
            TypeError: If the value has an unsupported type.
        """
        if isinstance(value, Message):
            return value
        if isinstance(value, str):
            return cls(id=value)
        if isinstance(value, Mapping):
            message_id = value.get("id", value.get("string"))
            if message_id is None:
                raise ValueError(
                    f"Message mapping must provide 'id' or 'string': {dict(value)}"
                )
            return cls(
                id=message_id,
                context=value.get("context"),
                plural=value.get("plural"),
            )
        raise TypeError(f"Unsupported message type: {type(value).__name__}")


@dataclass
class LanguageRecord:
    """Translations registered for a single language.

    Attributes:
        language: Language code (e.g. "pl", "pt-br").
        messages: Effective key -> translation. Merge-extended, never replaced.
        plural_form: Explicitly registered plural-form selector, if any.
        resolved_plural_form: Selector derived by the catalog on first use.
            Reset on every merge.
    """

    language: str
    messages: Dict[str, Translation] = field(default_factory=dict)
    plural_form: Optional[PluralFormSelector] = None
    resolved_plural_form: Optional[PluralFormSelector] = field(
        default=None, init=False, repr=False, compare=False
    )

    def merge(
        self,
        messages: Mapping[str, Translation],
        plural_form: Optional[PluralFormSelector] = None,
    ) -> None:
        """Merge messages into this record.

        Later entries override earlier ones with the same key; other entries
        are left intact.

        Args:
            messages: Effective key -> translation.
            plural_form: Replaces the stored selector when given.
        """
        self.messages.update(messages)
        if plural_form is not None:
            self.plural_form = plural_form
        self.resolved_plural_form = None


@dataclass(frozen=True)
class MessagePart:
    """A segment of an interpolated message.

    Attributes:
        kind: "literal" for template text, "value" for a substituted value.
        content: The literal text, or the value object itself.
    """

    kind: Literal["literal", "value"]
    content: Any

"""Structured errors for the editor utilities.

Errors carry a machine-readable name at the start of their message
(``"error-name: Human readable text."``) and an optional data object that
is kept as-is and also rendered into the message for quick inspection.
"""

import json
from typing import Any, Optional

_PRIMITIVES = (str, int, float, bool, type(None))


def _to_plain(value: Any, ancestors: set[int]) -> Any:
    if isinstance(value, _PRIMITIVES):
        return value

    if id(value) in ancestors:
        return f"[object {type(value).__name__}]"

    ancestors = ancestors | {id(value)}

    if isinstance(value, dict):
        return {str(key): _to_plain(item, ancestors) for key, item in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_to_plain(item, ancestors) for item in value]

    attributes = getattr(value, "__dict__", None)
    if isinstance(attributes, dict):
        return {str(key): _to_plain(item, ancestors) for key, item in attributes.items()}

    # Opaque objects (no attribute dict) render as an empty object.
    return {}


def stringify_data(data: Any) -> str:
    """Render arbitrary error data as compact JSON without raising.

    Objects render as their attribute dict, objects without one as ``{}``,
    and a reference back to an enclosing container as ``"[object <Type>]"``.

    Args:
        data: Any value attached to an error.

    Returns:
        Compact JSON string.
    """
    return json.dumps(
        _to_plain(data, set()),
        ensure_ascii=False,
        separators=(",", ":"),
        default=repr,
    )


class EditorError(Exception):
    """Base exception for caller-facing misuse of the editor utilities.

    Attributes:
        name: Always ``"EditorError"``.
        message: The message, with the stringified data appended when given.
        data: The data object passed to the constructor, unchanged.

    Example:
        >>> error = EditorError("foo", {"bar": 1})
        >>> str(error)
        'foo {"bar":1}'
        >>> error.data
        {'bar': 1}
    """

    name = "EditorError"

    def __init__(self, message: str, data: Optional[Any] = None):
        # Only None means "no data"; falsy values such as 0, "" or {} are appended.
        if data is not None:
            message = f"{message} {stringify_data(data)}"

        super().__init__(message)
        self.message = message
        self.data = data

    @property
    def error_name(self) -> str:
        """Machine-readable name, the part of the message before the first colon."""
        return self.message.split(":", 1)[0].strip()

    @staticmethod
    def is_editor_error(error: Any) -> bool:
        """Check whether ``error`` is an EditorError instance.

        Args:
            error: Object to check.

        Returns:
            True for EditorError and its subclasses.
        """
        return isinstance(error, EditorError)


class PluralFormsError(EditorError):
    """Raised when a plural-forms header or expression cannot be used.

    Example:
        >>> parse_plural_forms("plural=n!=1")
        Traceback (most recent call last):
        ...
        PluralFormsError: plural-forms-invalid-header: ...
    """

    pass

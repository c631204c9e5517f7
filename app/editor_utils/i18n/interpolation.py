"""Placeholder interpolation for translated messages.

Placeholders are ``%<index>`` tokens referencing positional values::

    interpolate('Created file "%0" in %1ms.', ["a.txt", 12])
    # 'Created file "a.txt" in 12ms.'

Tokens without a matching value are kept verbatim.
"""

import re
from typing import Any, List, Sequence, Union

from editor_utils.i18n.models import MessagePart

PLACEHOLDER_PATTERN = re.compile(r"%(\d+)")

_PRIMITIVE_TYPES = (str, int, float, bool, type(None))


def interpolate(template: str, values: Sequence[Any]) -> str:
    """Replace placeholders with the string form of the matching values.

    Args:
        template: Message with ``%0``, ``%1``, ... placeholders.
        values: Positional values.

    Returns:
        The interpolated message.
    """

    def replace(match: re.Match) -> str:
        index = int(match.group(1))
        if index < len(values):
            return str(values[index])
        return match.group(0)

    return PLACEHOLDER_PATTERN.sub(replace, template)


def split_parts(template: str, values: Sequence[Any]) -> List[MessagePart]:
    """Split a template into literal and value parts.

    Args:
        template: Message with ``%<index>`` placeholders.
        values: Positional values.

    Returns:
        Parts in template order. Empty literal segments are omitted and
        placeholders without a value become literal parts.
    """
    parts: List[MessagePart] = []
    position = 0

    for match in PLACEHOLDER_PATTERN.finditer(template):
        if match.start() > position:
            parts.append(MessagePart("literal", template[position : match.start()]))

        index = int(match.group(1))
        if index < len(values):
            parts.append(MessagePart("value", values[index]))
        else:
            parts.append(MessagePart("literal", match.group(0)))

        position = match.end()

    if position < len(template):
        parts.append(MessagePart("literal", template[position:]))

    return parts


def interpolate_parts(
    template: str, values: Sequence[Any]
) -> Union[str, List[MessagePart]]:
    """Interpolate while preserving non-primitive values.

    When every value is a primitive (str, int, float, bool or None) the
    result is the same string ``interpolate`` returns. Otherwise the list of
    parts is returned so that objects such as UI elements keep their identity.

    Args:
        template: Message with ``%<index>`` placeholders.
        values: Positional values.

    Returns:
        Interpolated string, or the list of MessagePart objects.
    """
    parts = split_parts(template, values)

    if any(not isinstance(value, _PRIMITIVE_TYPES) for value in values):
        return parts

    return "".join(str(part.content) for part in parts)

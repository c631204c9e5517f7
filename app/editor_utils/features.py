"""Feature detection for the runtime the editor utilities run on."""

import re
from functools import lru_cache

from editor_utils.logging import get_module_logger

logger = get_module_logger()


@lru_cache
def is_unicode_property_supported() -> bool:
    """Check whether the regular expression engine understands ``\\p{L}``.

    Unicode property classes such as ``\\p{L}`` (letters) or ``\\p{P}``
    (punctuation) are not supported by every engine; callers use this to
    pick between property-based and explicit character-range patterns.

    Returns:
        True if ``[\\p{L}]`` compiles and matches "ć" at position 0.
    """
    try:
        match = re.search(r"[\p{L}]", "ć")
    except re.error:
        # The stdlib engine rejects the escape as a bad escape sequence.
        match = None

    supported = match is not None and match.start() == 0

    logger.debug("unicode_property_support_detected", supported=supported)
    return supported

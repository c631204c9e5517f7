"""Structured logging infrastructure.

Public API:
    - configure_logging(): Initialize logging
    - get_logger(): Get a logger instance with a specific name
    - get_module_logger(): Get a logger for the calling module

Example:
    from editor_utils.logging import get_module_logger

    logger = get_module_logger()
    logger.info("module_initialized")
"""

from editor_utils.logging.setup import (
    configure_logging,
    get_logger,
    get_module_logger,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "get_module_logger",
]

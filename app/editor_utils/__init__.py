"""Auxiliary utilities for a rich-text editor framework.

Subpackages:
- i18n: translation catalog, plural forms, interpolation and Locale
- configuration: pydantic-settings configuration
- logging: structlog setup

Modules:
- errors: EditorError structured exception
- features: runtime feature detection
- enablement: stacked force-disabling of commands and plugins
"""

__version__ = "0.1.0"

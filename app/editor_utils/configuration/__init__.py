"""Configuration module - public API.

Centralized configuration for the editor utilities using Pydantic
BaseSettings with domain-based organization.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Translation and locale settings class
"""

from editor_utils.configuration.i18n import I18nSettings
from editor_utils.configuration.settings import Settings, settings

__all__ = ["Settings", "I18nSettings", "settings"]

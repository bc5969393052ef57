"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the site i18n
layer using Pydantic BaseSettings with domain-based organization.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Locale and translation settings class (for testing)

Example:
    ```python
    from infrastructure.configuration import settings

    default_locale = settings.i18n.default_locale
    log_level = settings.LOG_LEVEL
    ```
"""

from infrastructure.configuration.settings import Settings, settings
from infrastructure.configuration.features.i18n import I18nSettings

__all__ = ["Settings", "settings", "I18nSettings"]

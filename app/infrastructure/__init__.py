"""Infrastructure modules for the site i18n layer.

Centralized infrastructure components:
- configuration: Settings management (settings, Settings, I18nSettings)
- logging: Structured logging (configure_logging, get_module_logger)
- i18n: Locale registry, translation store and URL locale handling
"""

"""Factory functions for creating i18n components.

Provides convenience functions for initializing the i18n service with
default configurations suitable for the site.
"""

from pathlib import Path
from typing import Dict, Optional, Type

from infrastructure.configuration import settings
from infrastructure.i18n.loader import (
    FileTranslationLoader,
    JSONTranslationLoader,
    TranslationLoader,
    YAMLTranslationLoader,
)
from infrastructure.i18n.models import Locale, LocaleRegistry
from infrastructure.i18n.service import I18nService
from infrastructure.i18n.store import TranslationStore
from infrastructure.logging import get_module_logger

logger = get_module_logger()

LOADERS: Dict[str, Type[FileTranslationLoader]] = {
    "yaml": YAMLTranslationLoader,
    "json": JSONTranslationLoader,
}


def default_translations_dir() -> Path:
    """Return the bundled locales directory (app/locales)."""
    # This file is at .../app/infrastructure/i18n/factory.py
    app_root = Path(__file__).resolve().parents[2]
    return app_root / "locales"


def create_registry(default_locale: Optional[Locale | str] = None) -> LocaleRegistry:
    """Create the locale registry.

    Args:
        default_locale: Locale served without prefix (default: settings.i18n).

    Raises:
        ValueError: If the default locale is not supported.
    """
    default = Locale.from_string(default_locale or settings.i18n.default_locale)
    return LocaleRegistry(default_locale=default)


def create_loader(
    translations_dir: Optional[Path] = None,
    translations_format: Optional[str] = None,
    use_cache: bool = True,
) -> FileTranslationLoader:
    """Create the translation loader for the configured document format.

    Raises:
        ValueError: If the format is unknown or the directory does not exist.
    """
    translations_dir = (
        translations_dir or settings.i18n.translations_dir or default_translations_dir()
    )
    translations_format = translations_format or settings.i18n.translations_format

    loader_class = LOADERS.get(translations_format)
    if loader_class is None:
        raise ValueError(f"Unsupported translations format: {translations_format}")

    return loader_class(translations_dir=translations_dir, use_cache=use_cache)


def create_i18n_service(
    translations_dir: Optional[Path] = None,
    default_locale: Optional[Locale | str] = None,
    loader: Optional[TranslationLoader] = None,
) -> I18nService:
    """Create a fully loaded I18nService.

    All translation documents are loaded before the service is returned, so
    call this once at startup and share the result.

    Args:
        translations_dir: Translation documents path (default: settings, app/locales)
        default_locale: Locale served without prefix (default: settings.i18n)
        loader: Optional pre-built loader; overrides translations_dir

    Returns:
        I18nService: Ready-to-use service

    Raises:
        FileNotFoundError: If a supported locale has no translation documents
        ValueError: If the directory is missing or a document is invalid

    Usage:
        # Use defaults (settings, then app/locales)
        i18n = create_i18n_service()

        # Custom translations directory
        i18n = create_i18n_service(translations_dir=Path("/srv/site/locales"))
    """
    registry = create_registry(default_locale)
    loader = loader or create_loader(translations_dir)
    store = TranslationStore.load(loader, registry)

    logger.info(
        "i18n_service_created",
        default_locale=registry.default_locale.value,
        locale_count=len(store.locales),
    )

    return I18nService(registry=registry, store=store)

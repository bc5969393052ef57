"""Internationalization feature settings."""

from pathlib import Path
from typing import Literal, Optional

from pydantic import Field

from infrastructure.configuration.base import FeatureSettings

LocaleCode = Literal["en", "cs"]
TranslationsFormat = Literal["yaml", "json"]


class I18nSettings(FeatureSettings):
    """Locale and translation document configuration.

    Environment Variables:
        I18N_DEFAULT_LOCALE: Locale served without a URL prefix (default: en)
        I18N_TRANSLATIONS_DIR: Directory holding the translation documents
            (default: auto-discover app/locales)
        I18N_TRANSLATIONS_FORMAT: Document format, 'yaml' or 'json' (default: yaml)

    Example:
        ```python
        from infrastructure.configuration import settings

        default_locale = settings.i18n.default_locale
        translations_dir = settings.i18n.translations_dir
        ```
    """

    default_locale: LocaleCode = Field(
        default="en",
        alias="I18N_DEFAULT_LOCALE",
        description="Locale whose URLs carry no locale prefix",
    )
    translations_dir: Optional[Path] = Field(
        default=None,
        alias="I18N_TRANSLATIONS_DIR",
        description="Directory containing per-locale translation documents",
    )
    translations_format: TranslationsFormat = Field(
        default="yaml",
        alias="I18N_TRANSLATIONS_FORMAT",
        description="Structured-text format of the translation documents",
    )

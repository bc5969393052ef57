"""Locale resolution from URL paths and locale-aware path rewriting.

URLs of the default locale carry no locale segment; every other locale's
URLs start with its code, e.g. ``/about/`` and ``/cs/about/``.
"""

from typing import Any, Dict, List
from urllib.parse import urlsplit

from infrastructure.i18n.models import Locale, LocaleRegistry
from infrastructure.logging import get_module_logger

logger = get_module_logger()

PATH_SEPARATOR = "/"


def extract_path(url: Any) -> str:
    """Return the path portion of a URL, path string or URL object.

    Objects exposing a ``path`` attribute (``urllib.parse.SplitResult``,
    framework URL types) are used as is. Absolute URL strings are parsed;
    plain paths only lose their query string and fragment.
    """
    if not isinstance(url, str):
        return str(getattr(url, "path", "") or "")

    if "://" in url:
        try:
            return urlsplit(url).path
        except ValueError:
            logger.debug("unparsable_url", url=url)
    return url.split("#", 1)[0].split("?", 1)[0]


def split_segments(path: str) -> List[str]:
    """Split a path on "/" and drop empty segments."""
    return [segment for segment in path.split(PATH_SEPARATOR) if segment]


class LocaleDetector:
    """Detects the locale of a page from the first segment of its URL path."""

    def __init__(self, registry: LocaleRegistry):
        """Initialize locale detector.

        Args:
            registry: Supported locales and the default locale.
        """
        self.registry = registry

    def detect(self, url: Any) -> Locale:
        """Get locale from URL path.

        Args:
            url: Path ("/cs/about/"), full URL ("https://x/cs/about/") or
                an object with a ``path`` attribute.

        Returns:
            The locale named by the first path segment, or the default locale.
        """
        segments = split_segments(extract_path(url))
        if segments:
            locale = self.registry.get(segments[0])
            if locale is not None:
                return locale
        return self.registry.default_locale


class PathLocalizer:
    """Rewrites a path's locale prefix for another locale.

    Used by the language switcher and for alternate links.
    """

    def __init__(self, registry: LocaleRegistry):
        """Initialize path localizer.

        Args:
            registry: Supported locales and the default locale.
        """
        self.registry = registry

    def localize(self, path: Any, target_locale: Locale) -> str:
        """Get path for a different locale.

        Every leading locale segment is removed; non-default targets get
        their code as the first segment. Non-root results end with "/".
        Input is read like ``detect`` reads it, so query strings, fragments
        and scheme/host parts are dropped.

        Args:
            path: Path, optionally locale-prefixed (e.g. "/cs/about/"), full
                URL or an object with a ``path`` attribute.
            target_locale: Locale to produce the path for.

        Returns:
            Localized path, e.g. "/about/" or "/cs/about/"; root is "/" or "/cs/".
        """
        segments = split_segments(extract_path(path))

        # stacked prefixes ("/cs/en/about/") are all dropped
        while segments and self.registry.is_supported(segments[0]):
            segments.pop(0)

        if target_locale != self.registry.default_locale:
            segments.insert(0, str(target_locale))

        if not segments:
            return PATH_SEPARATOR
        return PATH_SEPARATOR + PATH_SEPARATOR.join(segments) + PATH_SEPARATOR

    def alternates(self, path: Any) -> Dict[Locale, str]:
        """Get the localized path of ``path`` for every supported locale.

        Args:
            path: Path in any locale.

        Returns:
            Dict of Locale to localized path, in registry order.
        """
        return {
            locale: self.localize(path, locale) for locale in self.registry.locales
        }

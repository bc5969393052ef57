"""I18n service facade.

Provides a class-based interface to the i18n layer for page rendering
collaborators and for easier testing.
"""

from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from infrastructure.i18n.models import Locale, LocaleRegistry, TranslationNode
from infrastructure.i18n.resolvers import LocaleDetector, PathLocalizer
from infrastructure.i18n.store import TranslationStore
from infrastructure.i18n.translator import Translator


class I18nService:
    """Class-based i18n service.

    Thin facade over the registry, translator, detector and localizer.
    Every method is safe to call concurrently once the store is loaded.

    Usage:
        from infrastructure.i18n import create_i18n_service

        i18n = create_i18n_service()

        locale = i18n.detect(request_path)
        title = i18n.resolve(locale, "nav.home")
        links = i18n.alternates(request_path)
    """

    def __init__(self, registry: LocaleRegistry, store: TranslationStore):
        """Initialize i18n service.

        Args:
            registry: Supported locales and default locale.
            store: Loaded translation trees.
        """
        self.registry = registry
        self.store = store
        self.translator = Translator(store)
        self.detector = LocaleDetector(registry)
        self.localizer = PathLocalizer(registry)

    @property
    def locales(self) -> Tuple[Locale, ...]:
        return self.registry.locales

    @property
    def default_locale(self) -> Locale:
        return self.registry.default_locale

    @property
    def display_names(self) -> Mapping[Locale, str]:
        return self.registry.display_names

    def display_name(self, locale: Locale) -> str:
        return self.registry.display_name(locale)

    def hreflang(self, locale: Locale) -> str:
        return self.registry.hreflang(locale)

    def resolve(self, locale: Any, key_path: str) -> str:
        """Translate a dot-separated key, returning the key itself on a miss."""
        return self.translator.resolve(locale, key_path)

    t = resolve

    def bind(self, locale: Any) -> Callable[[str], str]:
        """Create a translator function for a specific locale."""
        return self.translator.bind(locale)

    def get_translations(self, locale: Any) -> Optional[TranslationNode]:
        return self.translator.get_translations(locale)

    def detect(self, url: Any) -> Locale:
        """Get locale from a URL or path."""
        return self.detector.detect(url)

    def localize(self, path: str, target_locale: Locale) -> str:
        """Get path for a different locale."""
        return self.localizer.localize(path, target_locale)

    def alternates(self, path: str) -> Dict[Locale, str]:
        """Get the localized path for every supported locale."""
        return self.localizer.alternates(path)

"""Translation service for resolving dotted key paths to translated strings.

Misses never raise: the key path itself is returned, so missing
translations show up verbatim in rendered pages.
"""

from typing import Any, Callable, Optional

from infrastructure.i18n.models import TranslationLeaf, TranslationNode
from infrastructure.i18n.store import TranslationStore
from infrastructure.logging import get_module_logger

logger = get_module_logger()

KEY_SEPARATOR = "."


class Translator:
    """Resolves key paths against the translation trees of a store.

    Attributes:
        store: TranslationStore holding one tree per locale.
    """

    def __init__(self, store: TranslationStore):
        """Initialize Translator.

        Args:
            store: Loaded TranslationStore.
        """
        self.store = store

    def lookup(self, locale: Any, key_path: str) -> Optional[str]:
        """Walk the locale's tree along ``key_path``.

        Args:
            locale: Locale to look up; unsupported values find nothing.
            key_path: Dot-separated path, e.g. "nav.home.title".

        Returns:
            The string at the end of the path, or None when the locale is
            unknown, a segment is missing, the path runs into a leaf early,
            or it ends on a nested node.
        """
        node = self.store.get(locale)
        for segment in key_path.split(KEY_SEPARATOR):
            match node:
                case TranslationNode():
                    node = node.get(segment)
                case _:
                    return None

        match node:
            case TranslationLeaf(value=value):
                return value
            case _:
                return None

    def resolve(self, locale: Any, key_path: str) -> str:
        """Translate a dot-separated key.

        Args:
            locale: Locale to translate to.
            key_path: Dot-separated path, e.g. "nav.home" or "footer.license".

        Returns:
            Translated string, or the key path itself if not found.
        """
        value = self.lookup(locale, key_path)
        if value is None:
            logger.debug(
                "translation_missing",
                key=key_path,
                locale=getattr(locale, "value", locale),
            )
            return key_path
        return value

    def has_key(self, locale: Any, key_path: str) -> bool:
        return self.lookup(locale, key_path) is not None

    def bind(self, locale: Any) -> Callable[[str], str]:
        """Create a translator function for a specific locale.

        Example:
            t = translator.bind(Locale.CS)
            t("nav.home")  # "Domů"
        """

        def translate(key_path: str) -> str:
            return self.resolve(locale, key_path)

        return translate

    def get_translations(self, locale: Any) -> Optional[TranslationNode]:
        """Get the complete translation tree for a locale."""
        return self.store.get(locale)

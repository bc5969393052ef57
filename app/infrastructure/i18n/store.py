"""Read-only store of translation trees, one per supported locale."""

from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from infrastructure.i18n.loader import TranslationLoader
from infrastructure.i18n.models import (
    Locale,
    LocaleRegistry,
    TranslationNode,
    build_tree,
)
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class TranslationStore:
    """Holds the translation tree of every supported locale.

    Populated once at startup and never mutated afterwards, so it can be
    shared by concurrent callers without locking.

    Attributes:
        trees: Read-only mapping of Locale to its root TranslationNode.
    """

    def __init__(self, trees: Mapping[Locale, TranslationNode]):
        self.trees: Mapping[Locale, TranslationNode] = MappingProxyType(dict(trees))

    @classmethod
    def load(
        cls, loader: TranslationLoader, registry: LocaleRegistry
    ) -> "TranslationStore":
        """Load every locale of the registry through a loader.

        Raises:
            FileNotFoundError: If a supported locale has no translation files.
            ValueError: If a translation document is invalid.
        """
        store = cls(loader.load_all(registry.locales))
        logger.info(
            "translation_store_loaded",
            locales=[locale.value for locale in store.locales],
        )
        return store

    @classmethod
    def from_documents(
        cls, documents: Mapping[Locale, Mapping[Any, Any]]
    ) -> "TranslationStore":
        """Build a store from already deserialized documents."""
        trees: Dict[Locale, TranslationNode] = {
            locale: build_tree(document, source=locale.value)
            for locale, document in documents.items()
        }
        return cls(trees)

    def get(self, locale: Any) -> Optional[TranslationNode]:
        """Get the tree for a locale; None for unsupported or unloaded values."""
        try:
            return self.trees.get(locale)
        except TypeError:
            # unhashable lookup values
            return None

    @property
    def locales(self) -> Tuple[Locale, ...]:
        return tuple(self.trees.keys())

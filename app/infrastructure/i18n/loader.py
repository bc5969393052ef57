"""Translation loading interface and implementations.

Defines the contract for loading translation documents and provides YAML and
JSON based loaders. Loaders are the deserialization boundary: they turn
structured text into TranslationNode trees, so the resolver never depends
on the document format.
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Iterable, List, Tuple

import yaml

from infrastructure.i18n.models import (
    Locale,
    TranslationNode,
    build_tree,
    merge_documents,
)
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class TranslationLoader(ABC):
    """Abstract base for translation loaders.

    Implementations must define how to load and parse translation documents
    for the supported locales.
    """

    @abstractmethod
    def load(self, locale: Locale) -> TranslationNode:
        """Load the translation tree for a specific locale.

        Args:
            locale: Locale to load translations for.

        Returns:
            Root TranslationNode for the locale.

        Raises:
            FileNotFoundError: If translation files not found.
            ValueError: If translation format is invalid.
        """
        pass

    def load_all(self, locales: Iterable[Locale]) -> Dict[Locale, TranslationNode]:
        """Load translation trees for every given locale.

        Args:
            locales: Locales to load, usually the registry's supported set.

        Returns:
            Dict mapping Locale to its TranslationNode.

        Raises:
            FileNotFoundError: If any locale has no translation files.
        """
        return {locale: self.load(locale) for locale in locales}


class FileTranslationLoader(TranslationLoader):
    """Base loader for per-locale translation files in a directory.

    Matches ``<locale><suffix>`` and ``<domain>.<locale><suffix>`` files and
    deep-merges them in sorted filename order.

    Attributes:
        translations_dir: Path to directory containing translation files.
        use_cache: Whether to cache loaded trees in memory.
        cache: Cache of loaded trees (locale -> tree).
    """

    suffixes: Tuple[str, ...] = ()
    parse_errors: Tuple[type, ...] = ()

    def __init__(
        self,
        translations_dir: Path,
        use_cache: bool = True,
    ):
        """Initialize file translation loader.

        Args:
            translations_dir: Path to directory with translation files.
            use_cache: Whether to cache loaded trees in memory.

        Raises:
            ValueError: If the directory does not exist.
        """
        self.translations_dir = Path(translations_dir)
        self.use_cache = use_cache
        self.cache: Dict[Locale, TranslationNode] = {}

        if not self.translations_dir.is_dir():
            raise ValueError(
                f"Translations directory not found: {self.translations_dir}"
            )

        logger.info(
            "initialized_translation_loader",
            loader=type(self).__name__,
            translations_dir=str(self.translations_dir),
            use_cache=use_cache,
        )

    @abstractmethod
    def parse(self, stream) -> Any:
        """Deserialize one open document into plain Python data."""
        pass

    def find_files(self, locale: Locale) -> List[Path]:
        """Find every translation file for a locale, sorted by name."""
        files = set()
        for suffix in self.suffixes:
            exact = self.translations_dir / f"{locale.value}{suffix}"
            if exact.is_file():
                files.add(exact)
            files.update(self.translations_dir.glob(f"*.{locale.value}{suffix}"))
        return sorted(files, key=lambda path: path.name)

    def load(self, locale: Locale) -> TranslationNode:
        """Load and merge all translation files for a locale.

        Args:
            locale: Locale to load.

        Returns:
            Root TranslationNode for the locale.

        Raises:
            FileNotFoundError: If no files found for locale.
            ValueError: If parsing fails or a document is not a mapping.
        """
        if self.use_cache and locale in self.cache:
            logger.debug("loaded_from_cache", locale=locale.value)
            return self.cache[locale]

        files = self.find_files(locale)
        if not files:
            raise FileNotFoundError(
                f"No translation files found for locale {locale.value} in {self.translations_dir}"
            )

        document: Dict[str, Any] = {}
        for path in files:
            try:
                with open(path, "r", encoding="utf-8") as f:
                    data = self.parse(f)
            except self.parse_errors as e:
                logger.error("translation_parse_error", file=str(path), error=str(e))
                raise ValueError(f"Failed to parse {path}: {e}") from e

            if data is None:
                continue
            if not isinstance(data, dict):
                logger.error(
                    "invalid_translation_document", file=str(path), expected="mapping"
                )
                raise ValueError(f"Translation document {path} must be a mapping")
            merge_documents(document, data)

        tree = build_tree(document, source=locale.value)

        logger.info(
            "loaded_translations",
            locale=locale.value,
            file_count=len(files),
            namespace_count=len(tree.children),
        )

        if self.use_cache:
            self.cache[locale] = tree

        return tree

    def clear_cache(self) -> None:
        """Clear all cached translation trees."""
        self.cache.clear()
        logger.info("cleared_translation_cache")


class YAMLTranslationLoader(FileTranslationLoader):
    """Loader for YAML translation files (``en.yml``, ``nav.cs.yaml``)."""

    suffixes = (".yml", ".yaml")
    parse_errors = (yaml.YAMLError,)

    def parse(self, stream) -> Any:
        return yaml.safe_load(stream)


class JSONTranslationLoader(FileTranslationLoader):
    """Loader for JSON translation files (``en.json``, ``nav.cs.json``)."""

    suffixes = (".json",)
    parse_errors = (json.JSONDecodeError,)

    def parse(self, stream) -> Any:
        return json.load(stream)

"""i18n system - locale resolution and translation lookup for the site.

Provides translation lookup by dotted key path, locale detection from URL
paths, and locale-prefix rewriting of paths.

Main components:
- models: Locale, LocaleRegistry, TranslationLeaf, TranslationNode
- loader: TranslationLoader, YAMLTranslationLoader and JSONTranslationLoader
- store: TranslationStore holding one tree per locale
- translator: Translator resolving key paths with key-path fallback
- resolvers: LocaleDetector and PathLocalizer for URL handling
- service: I18nService facade
- factory: create_i18n_service and create_registry
"""

from infrastructure.i18n.loader import (
    JSONTranslationLoader,
    TranslationLoader,
    YAMLTranslationLoader,
)
from infrastructure.i18n.models import (
    Locale,
    LocaleRegistry,
    TranslationLeaf,
    TranslationNode,
    build_tree,
)
from infrastructure.i18n.resolvers import LocaleDetector, PathLocalizer
from infrastructure.i18n.service import I18nService
from infrastructure.i18n.store import TranslationStore
from infrastructure.i18n.translator import Translator
from infrastructure.i18n.factory import create_i18n_service, create_registry

__all__ = [
    "Locale",
    "LocaleRegistry",
    "TranslationLeaf",
    "TranslationNode",
    "build_tree",
    "TranslationLoader",
    "YAMLTranslationLoader",
    "JSONTranslationLoader",
    "TranslationStore",
    "Translator",
    "LocaleDetector",
    "PathLocalizer",
    "I18nService",
    "create_i18n_service",
    "create_registry",
]

"""Translation models for i18n system.

Defines the locale registry and the typed translation tree.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple, Union

from infrastructure.logging import get_module_logger

logger = get_module_logger()


class Locale(str, Enum):
    """Supported locale identifiers.

    Values are the two-letter codes used as URL prefix segments.
    """

    EN = "en"
    CS = "cs"

    @classmethod
    def from_string(cls, locale_str: str) -> "Locale":
        """Convert string to Locale enum.

        Args:
            locale_str: Locale string (e.g., "en", "cs").

        Returns:
            Matching Locale enum value.

        Raises:
            ValueError: If locale string is not supported.
        """
        try:
            return cls(locale_str)
        except ValueError as e:
            raise ValueError(f"Unsupported locale: {locale_str}") from e

    def __str__(self) -> str:
        return self.value


DISPLAY_NAMES: Mapping[Locale, str] = MappingProxyType(
    {
        Locale.EN: "English",
        Locale.CS: "Čeština",
    }
)

# Regional tags used for sitemap alternate links
HREFLANG_TAGS: Mapping[Locale, str] = MappingProxyType(
    {
        Locale.EN: "en-US",
        Locale.CS: "cs-CZ",
    }
)


@dataclass(frozen=True)
class LocaleRegistry:
    """Closed set of supported locales with one designated default.

    Frozen so it can be shared by every caller for the process lifetime.

    Attributes:
        locales: Supported locales, in display order.
        default_locale: Locale whose URLs carry no prefix segment.
        display_names: Human-readable name per locale.
        hreflang_tags: Regional language tag per locale.
    """

    locales: Tuple[Locale, ...] = tuple(Locale)
    default_locale: Locale = Locale.EN
    display_names: Mapping[Locale, str] = field(default_factory=lambda: DISPLAY_NAMES)
    hreflang_tags: Mapping[Locale, str] = field(default_factory=lambda: HREFLANG_TAGS)

    def __post_init__(self):
        if not self.locales:
            raise ValueError("Locale registry requires at least one locale")
        if self.default_locale not in self.locales:
            raise ValueError(
                f"Default locale {self.default_locale.value} is not a supported locale"
            )

    def get(self, value: Any) -> Optional[Locale]:
        """Return the supported Locale matching ``value`` exactly, or None."""
        for locale in self.locales:
            if locale.value == value:
                return locale
        return None

    def is_supported(self, value: Any) -> bool:
        return self.get(value) is not None

    def display_name(self, locale: Locale) -> str:
        """Get the display name for a locale, falling back to its code."""
        return self.display_names.get(locale, locale.value)

    def hreflang(self, locale: Locale) -> str:
        """Get the regional language tag for a locale (e.g. "cs-CZ")."""
        return self.hreflang_tags.get(locale, locale.value)


@dataclass(frozen=True)
class TranslationLeaf:
    """Terminal string value of a translation tree."""

    value: str


@dataclass(frozen=True)
class TranslationNode:
    """Internal node of a translation tree mapping segment names to subtrees."""

    children: Mapping[str, "TranslationTree"] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def get(self, segment: str) -> Optional["TranslationTree"]:
        return self.children.get(segment)

    def to_dict(self) -> dict:
        """Convert the subtree back into plain nested dicts."""
        result = {}
        for name, child in self.children.items():
            if isinstance(child, TranslationLeaf):
                result[name] = child.value
            else:
                result[name] = child.to_dict()
        return result


TranslationTree = Union[TranslationLeaf, TranslationNode]


def build_tree(data: Mapping[Any, Any], source: str = "<memory>") -> TranslationNode:
    """Build a read-only translation tree from a deserialized document.

    Mapping keys are coerced to strings so YAML keys such as ``404`` stay
    addressable by key path. Values that are neither strings nor mappings
    are dropped.

    Args:
        data: Nested mapping parsed from a translation document.
        source: Origin of the data, used for logging.

    Returns:
        Root TranslationNode.
    """
    children = {}
    for name, value in data.items():
        segment = str(name)
        if isinstance(value, str):
            children[segment] = TranslationLeaf(value)
        elif isinstance(value, Mapping):
            children[segment] = build_tree(value, source)
        else:
            logger.warning(
                "dropped_non_string_leaf",
                source=source,
                segment=segment,
                value_type=type(value).__name__,
            )
    return TranslationNode(MappingProxyType(children))


def merge_documents(base: dict, other: Mapping[Any, Any]) -> dict:
    """Deep-merge ``other`` into ``base``; later values override earlier ones.

    Args:
        base: Mutable document to merge into.
        other: Document whose entries take precedence.

    Returns:
        The updated ``base``.
    """
    for name, value in other.items():
        current = base.get(name)
        if isinstance(current, dict) and isinstance(value, Mapping):
            merge_documents(current, value)
        elif isinstance(value, Mapping):
            base[name] = merge_documents({}, value)
        else:
            base[name] = value
    return base

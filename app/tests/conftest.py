"""Root fixtures shared by the whole test suite."""

import pytest

from infrastructure.i18n import LocaleRegistry
from tests.factories.i18n import make_registry, make_translation_store


@pytest.fixture
def registry() -> LocaleRegistry:
    """Registry with en (default) and cs."""
    return make_registry()


@pytest.fixture
def translation_store():
    """In-memory store built from the sample documents."""
    return make_translation_store()

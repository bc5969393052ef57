"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_cs_document,
    make_en_document,
    make_i18n_service,
    make_registry,
    make_translation_store,
)

__all__ = [
    "make_cs_document",
    "make_en_document",
    "make_i18n_service",
    "make_registry",
    "make_translation_store",
]

"""Feature-level fixtures for i18n system tests.

Provides on-disk translation documents and loaders.
"""

import json

import pytest
import yaml

from infrastructure.i18n import JSONTranslationLoader, YAMLTranslationLoader
from tests.factories.i18n import make_cs_document, make_en_document


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create temporary directory with sample YAML translation files.

    Returns a directory structure like:
    - en.yml
    - cs.yml
    - docs.cs.yml  (merged into cs after cs.yml)
    """
    with open(tmp_path / "en.yml", "w", encoding="utf-8") as f:
        yaml.dump(make_en_document(), f, allow_unicode=True)

    with open(tmp_path / "cs.yml", "w", encoding="utf-8") as f:
        yaml.dump(make_cs_document(), f, allow_unicode=True)

    docs_cs = {
        "nav": {"docs": "Dokumenty"},
        "docs": {"toc": "Na této stránce"},
    }
    with open(tmp_path / "docs.cs.yml", "w", encoding="utf-8") as f:
        yaml.dump(docs_cs, f, allow_unicode=True)

    return tmp_path


@pytest.fixture
def temp_json_translations_dir(tmp_path):
    """Create temporary directory with sample JSON translation files."""
    with open(tmp_path / "en.json", "w", encoding="utf-8") as f:
        json.dump(make_en_document(), f, ensure_ascii=False)

    with open(tmp_path / "cs.json", "w", encoding="utf-8") as f:
        json.dump(make_cs_document(), f, ensure_ascii=False)

    return tmp_path


@pytest.fixture
def yaml_loader(temp_translations_dir):
    """Create YAMLTranslationLoader for temporary translations directory."""
    return YAMLTranslationLoader(temp_translations_dir, use_cache=False)


@pytest.fixture
def json_loader(temp_json_translations_dir):
    """Create JSONTranslationLoader for temporary translations directory."""
    return JSONTranslationLoader(temp_json_translations_dir, use_cache=False)

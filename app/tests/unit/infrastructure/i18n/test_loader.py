"""Tests for infrastructure.i18n.loader module."""

import pytest

from infrastructure.i18n import (
    JSONTranslationLoader,
    Locale,
    TranslationNode,
    YAMLTranslationLoader,
)


class TestYAMLTranslationLoader:
    """Tests for YAMLTranslationLoader."""

    def test_loader_initialization(self, temp_translations_dir):
        """YAMLTranslationLoader initializes with valid directory."""
        loader = YAMLTranslationLoader(temp_translations_dir)
        assert loader.translations_dir == temp_translations_dir
        assert loader.use_cache is True
        assert loader.cache == {}

    def test_loader_initialization_nonexistent_directory(self, tmp_path):
        """YAMLTranslationLoader raises ValueError for missing directory."""
        with pytest.raises(ValueError):
            YAMLTranslationLoader(tmp_path / "nonexistent")

    def test_load_single_locale(self, yaml_loader):
        """load() returns a TranslationNode for the locale."""
        tree = yaml_loader.load(Locale.EN)

        assert isinstance(tree, TranslationNode)
        assert tree.get("nav").get("home").value == "Home"
        assert tree.get("hero").get("cta").get("primary").value == "Get started"

    def test_find_files_matches_plain_and_domain_files(self, yaml_loader):
        """find_files() finds <locale>.yml and <domain>.<locale>.yml."""
        names = [path.name for path in yaml_loader.find_files(Locale.CS)]
        assert names == ["cs.yml", "docs.cs.yml"]

    def test_find_files_ignores_other_locales(self, yaml_loader):
        """find_files() does not pick up files of another locale."""
        names = [path.name for path in yaml_loader.find_files(Locale.EN)]
        assert names == ["en.yml"]

    def test_load_merges_files_in_name_order(self, yaml_loader):
        """Later files override earlier ones and add new namespaces."""
        tree = yaml_loader.load(Locale.CS)

        assert tree.get("nav").get("home").value == "Domů"
        assert tree.get("nav").get("docs").value == "Dokumenty"
        assert tree.get("docs").get("toc").value == "Na této stránce"

    def test_load_yaml_extension(self, tmp_path):
        """load() reads .yaml files too."""
        (tmp_path / "en.yaml").write_text("nav:\n  home: Home\n", encoding="utf-8")
        loader = YAMLTranslationLoader(tmp_path)
        assert loader.load(Locale.EN).get("nav").get("home").value == "Home"

    def test_load_missing_locale_raises_error(self, tmp_path):
        """load() raises FileNotFoundError when a locale has no files."""
        (tmp_path / "en.yml").write_text("nav:\n  home: Home\n", encoding="utf-8")
        loader = YAMLTranslationLoader(tmp_path)

        with pytest.raises(FileNotFoundError):
            loader.load(Locale.CS)

    def test_load_invalid_yaml_raises_error(self, tmp_path):
        """load() raises ValueError for invalid YAML."""
        (tmp_path / "en.yml").write_text("nav: [unclosed\n", encoding="utf-8")
        loader = YAMLTranslationLoader(tmp_path)

        with pytest.raises(ValueError, match="Failed to parse"):
            loader.load(Locale.EN)

    def test_load_non_mapping_document_raises_error(self, tmp_path):
        """load() raises ValueError when a document root is not a mapping."""
        (tmp_path / "en.yml").write_text("- just\n- a list\n", encoding="utf-8")
        loader = YAMLTranslationLoader(tmp_path)

        with pytest.raises(ValueError, match="must be a mapping"):
            loader.load(Locale.EN)

    def test_load_empty_document(self, tmp_path):
        """An empty document yields an empty tree."""
        (tmp_path / "en.yml").write_text("", encoding="utf-8")
        loader = YAMLTranslationLoader(tmp_path)

        assert loader.load(Locale.EN).children == {}

    def test_load_integer_keys(self, tmp_path):
        """Integer YAML keys are addressable as string segments."""
        (tmp_path / "en.yml").write_text(
            "errors:\n  404:\n    title: Page not found\n", encoding="utf-8"
        )
        loader = YAMLTranslationLoader(tmp_path)

        tree = loader.load(Locale.EN)
        assert tree.get("errors").get("404").get("title").value == "Page not found"

    def test_load_caches_results(self, temp_translations_dir):
        """load() caches trees when use_cache=True."""
        loader = YAMLTranslationLoader(temp_translations_dir, use_cache=True)
        assert loader.load(Locale.EN) is loader.load(Locale.EN)

    def test_load_no_cache_separate_instances(self, yaml_loader):
        """load() returns separate but equal trees when use_cache=False."""
        tree1 = yaml_loader.load(Locale.EN)
        tree2 = yaml_loader.load(Locale.EN)

        assert tree1 is not tree2
        assert tree1.to_dict() == tree2.to_dict()

    def test_load_all(self, yaml_loader):
        """load_all() loads every requested locale."""
        trees = yaml_loader.load_all([Locale.EN, Locale.CS])

        assert set(trees) == {Locale.EN, Locale.CS}

    def test_load_all_missing_locale(self, tmp_path):
        """load_all() propagates FileNotFoundError for a missing locale."""
        (tmp_path / "en.yml").write_text("nav:\n  home: Home\n", encoding="utf-8")
        loader = YAMLTranslationLoader(tmp_path)

        with pytest.raises(FileNotFoundError):
            loader.load_all([Locale.EN, Locale.CS])

    def test_clear_cache(self, temp_translations_dir):
        """clear_cache() removes cached trees."""
        loader = YAMLTranslationLoader(temp_translations_dir, use_cache=True)
        loader.load(Locale.EN)
        assert len(loader.cache) > 0

        loader.clear_cache()
        assert len(loader.cache) == 0


class TestJSONTranslationLoader:
    """Tests for JSONTranslationLoader."""

    def test_load_json_locale(self, json_loader):
        """load() parses JSON documents into the same tree shape."""
        tree = json_loader.load(Locale.CS)
        assert tree.get("nav").get("home").value == "Domů"

    def test_json_and_yaml_produce_equal_trees(
        self, temp_translations_dir, temp_json_translations_dir
    ):
        """The document format does not change the resulting tree."""
        yaml_tree = YAMLTranslationLoader(temp_translations_dir).load(Locale.EN)
        json_tree = JSONTranslationLoader(temp_json_translations_dir).load(Locale.EN)
        assert yaml_tree.to_dict() == json_tree.to_dict()

    def test_json_loader_ignores_yaml_files(self, tmp_path):
        """JSON loader only reads .json files."""
        (tmp_path / "en.yml").write_text("nav:\n  home: Home\n", encoding="utf-8")
        loader = JSONTranslationLoader(tmp_path)

        with pytest.raises(FileNotFoundError):
            loader.load(Locale.EN)

    def test_load_invalid_json_raises_error(self, tmp_path):
        """load() raises ValueError for invalid JSON."""
        (tmp_path / "en.json").write_text("{\"nav\": ", encoding="utf-8")
        loader = JSONTranslationLoader(tmp_path)

        with pytest.raises(ValueError, match="Failed to parse"):
            loader.load(Locale.EN)

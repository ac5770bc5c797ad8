"""Tests for the YAML translation loader."""

from pathlib import Path

import pytest

from blog.adapter.translation import YamlTranslationLoader, flatten


@pytest.fixture
def catalogue_dir(tmp_path: Path) -> Path:
    (tmp_path / "messages.en.yaml").write_text(
        "app:\n  name: Blog\npost:\n  status:\n    draft: Draft\ncount: 3\nempty:\n",
        encoding="utf-8",
    )
    (tmp_path / "messages.de.yaml").write_text("key: [unclosed\n", encoding="utf-8")
    (tmp_path / "messages.fr.yaml").write_text("- just\n- a list\n", encoding="utf-8")
    return tmp_path


class TestFlatten:
    def test_nested_keys_joined_with_dots(self):
        assert flatten({"a": {"b": {"c": "x"}}, "d": "y"}) == {"a.b.c": "x", "d": "y"}

    def test_leaves_become_strings(self):
        assert flatten({"n": 3, "flag": True, "none": None}) == {
            "n": "3",
            "flag": "True",
            "none": "",
        }


class TestYamlTranslationLoader:
    """Tests for YamlTranslationLoader."""

    def test_load_flattens_catalogue(self, catalogue_dir):
        loader = YamlTranslationLoader(catalogue_dir)

        assert loader.load("en", "messages") == {
            "app.name": "Blog",
            "post.status.draft": "Draft",
            "count": "3",
            "empty": "",
        }

    def test_missing_catalogue(self, catalogue_dir):
        loader = YamlTranslationLoader(catalogue_dir)

        assert loader.load("es", "messages") == {}
        assert loader.load("en", "validators") == {}

    def test_invalid_yaml(self, catalogue_dir):
        loader = YamlTranslationLoader(catalogue_dir)

        assert loader.load("de", "messages") == {}

    def test_non_mapping_document(self, catalogue_dir):
        loader = YamlTranslationLoader(catalogue_dir)

        assert loader.load("fr", "messages") == {}

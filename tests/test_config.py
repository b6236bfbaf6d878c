"""Unit tests for the config module."""

# pylint: disable=missing-class-docstring,missing-function-docstring

from pathlib import Path

from paramtable.config import (
    HEADER_LABELS,
    LEAF_OPTIONAL_KEYS,
    LEAF_REQUIRED_KEYS,
    OUTPUT_SUFFIX,
    ROOT,
    default_output_path,
)


class TestDefaultOutputPath:

    def test_replaces_extension(self):
        assert default_output_path("docs/info.json") == Path("docs/info.md")

    def test_adds_extension_when_missing(self):
        assert default_output_path("params") == Path("params.md")

    def test_returns_path_object(self):
        assert isinstance(default_output_path(Path("a.json")), Path)


class TestConstants:

    def test_output_suffix(self):
        assert OUTPUT_SUFFIX == ".md"

    def test_leaf_signature(self):
        assert LEAF_REQUIRED_KEYS == {"header", "description"}
        assert LEAF_OPTIONAL_KEYS == {"defaultValue", "options"}
        assert not LEAF_REQUIRED_KEYS & LEAF_OPTIONAL_KEYS

    def test_header_labels(self):
        assert HEADER_LABELS["first"] == "Parameter"
        assert HEADER_LABELS["last"] == "Description"

    def test_root_is_project_root(self):
        """ROOT should point to the project root (contains pyproject.toml)."""
        assert (ROOT / "pyproject.toml").exists()

"""Tests for exporters."""

import json

import pytest
import yaml

from importtree.model import ImportTree, ImportTreePage
from exporters.grouped_exporter import page_urls, to_grouped_text
from exporters.json_exporter import from_json, to_json
from exporters.yaml_exporter import from_yaml, to_yaml


@pytest.fixture
def tree():
    return ImportTree(pages=[
        ImportTreePage(path="/", imports=["X", "Y"]),
        ImportTreePage(path="/about", imports=["X", "Y"]),
    ])


class TestGroupedExporter:
    """Tests for grouped text output."""

    def test_exact_output(self, tree):
        """Test the full text for a two-page tree."""
        output = to_grouped_text(tree)

        assert output == (
            "## /, /index.html\n\n- X\n- Y\n\n"
            "## /about, /about/index.html\n\n- X\n- Y"
        )

    def test_empty_tree(self):
        """Test exporting an empty tree."""
        assert to_grouped_text(ImportTree()) == ""

    def test_page_without_imports(self):
        """Test that a page with no imports still gets a heading."""
        tree = ImportTree(pages=[ImportTreePage(path="/empty")])

        assert to_grouped_text(tree) == "## /empty, /empty/index.html\n\n"

    def test_follows_tree_order(self):
        """Test that pages are rendered in tree order, not sorted."""
        tree = ImportTree(pages=[
            ImportTreePage(path="/zebra", imports=["@a"]),
            ImportTreePage(path="/", imports=["@b"]),
        ])

        output = to_grouped_text(tree)

        assert output.index("## /zebra") < output.index("## /, /index.html")

    def test_page_urls(self):
        """Test URL forms for root and nested pages."""
        assert page_urls(ImportTreePage(path="/")) == ["/", "/index.html"]
        assert page_urls(ImportTreePage(path="/blog/post")) == ["/blog/post", "/blog/post/index.html"]


class TestJSONExporter:
    """Tests for JSON exporter."""

    def test_round_trip(self, tree):
        """Test that JSON output loads back to an equal tree."""
        assert from_json(to_json(tree)) == tree

    def test_field_order(self, tree):
        """Test that path comes before imports."""
        data = json.loads(to_json(tree))

        assert list(data) == ["pages"]
        assert list(data["pages"][0]) == ["path", "imports"]
        assert data["pages"][1] == {"path": "/about", "imports": ["X", "Y"]}

    def test_empty_tree(self):
        """Test exporting an empty tree."""
        assert json.loads(to_json(ImportTree())) == {"pages": []}


class TestYAMLExporter:
    """Tests for YAML exporter."""

    def test_round_trip(self, tree):
        """Test that YAML output loads back to an equal tree."""
        assert from_yaml(to_yaml(tree)) == tree

    def test_field_order(self, tree):
        """Test that path comes before imports."""
        output = to_yaml(tree)

        assert output.index("path: /") < output.index("imports:")
        assert yaml.safe_load(output)["pages"][0]["imports"] == ["X", "Y"]

    def test_marker_prefixed_imports(self):
        """Test that @-prefixed strings survive the round trip."""
        tree = ImportTree(pages=[ImportTreePage(path="/", imports=["@src/pages/index.astro"])])

        assert from_yaml(to_yaml(tree)) == tree

    def test_empty_document(self):
        """Test loading an empty document."""
        assert from_yaml("") == ImportTree()

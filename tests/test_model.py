"""Tests for import tree data model."""

import pytest

from importtree.model import ImportTree, ImportTreePage


class TestImportTree:
    """Tests for ImportTree and ImportTreePage."""

    def test_empty_tree(self):
        """Test empty tree initialization."""
        tree = ImportTree()
        assert len(tree) == 0
        assert tree.pages == []

    def test_add_page(self):
        """Test adding pages keeps insertion order."""
        tree = ImportTree()
        tree.add_page(ImportTreePage(path="/b"))
        tree.add_page(ImportTreePage(path="/a"))

        assert [page.path for page in tree] == ["/b", "/a"]

    def test_get_page(self):
        """Test looking pages up by URL path."""
        tree = ImportTree(pages=[ImportTreePage(path="/", imports=["@x"])])

        assert tree.get_page("/").imports == ["@x"]
        with pytest.raises(KeyError):
            tree.get_page("/missing")

    def test_dict_round_trip(self):
        """Test conversion to and from plain mappings."""
        tree = ImportTree(pages=[
            ImportTreePage(path="/", imports=["@a", "@b"]),
            ImportTreePage(path="/about"),
        ])

        data = tree.to_dict()

        assert data == {
            "pages": [
                {"path": "/", "imports": ["@a", "@b"]},
                {"path": "/about", "imports": []},
            ]
        }
        assert ImportTree.from_dict(data) == tree

    def test_to_dict_copies_imports(self):
        """Test that mutating the exported mapping leaves the page alone."""
        page = ImportTreePage(path="/", imports=["@a"])

        page.to_dict()["imports"].append("@b")

        assert page.imports == ["@a"]

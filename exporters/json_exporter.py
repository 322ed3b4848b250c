"""JSON exporter for import trees (machine-friendly format)."""

import json

from importtree.model import ImportTree


def to_json(tree: ImportTree, indent: int = 2) -> str:
    """
    Convert an import tree to JSON.

    Args:
        tree: The import tree to export.
        indent: JSON indentation level.

    Returns:
        JSON string with a ``pages`` list of ``{"path", "imports"}`` objects.
    """
    return json.dumps(tree.to_dict(), indent=indent, ensure_ascii=False)


def from_json(text: str) -> ImportTree:
    """Load an import tree previously written by to_json."""
    return ImportTree.from_dict(json.loads(text))

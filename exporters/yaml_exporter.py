"""YAML exporter for import trees."""

import yaml

from importtree.model import ImportTree


def to_yaml(tree: ImportTree) -> str:
    """Convert an import tree to YAML, keeping ``path`` ahead of ``imports``."""
    return yaml.safe_dump(tree.to_dict(), sort_keys=False, allow_unicode=True)


def from_yaml(text: str) -> ImportTree:
    """Load an import tree previously written by to_yaml."""
    return ImportTree.from_dict(yaml.safe_load(text) or {})

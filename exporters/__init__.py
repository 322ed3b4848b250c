"""Exporters for converting import trees to various output formats."""

from .grouped_exporter import to_grouped_text
from .json_exporter import to_json, from_json
from .yaml_exporter import to_yaml, from_yaml

__all__ = ["to_grouped_text", "to_json", "from_json", "to_yaml", "from_yaml"]

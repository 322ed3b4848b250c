"""Scanner module for page discovery, import extraction and traversal."""

from .discovery import iter_page_entries, iter_page_files, get_url_path
from .parser import extract_specifiers, find_component_tags
from .resolver import resolve_specifier
from .traversal import traverse
from .builder import build_import_tree
from .diagnostics import set_warnings_suppressed

__all__ = [
    "iter_page_entries",
    "iter_page_files",
    "get_url_path",
    "extract_specifiers",
    "find_component_tags",
    "resolve_specifier",
    "traverse",
    "build_import_tree",
    "set_warnings_suppressed",
]

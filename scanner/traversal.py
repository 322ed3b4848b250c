"""Depth-first walk over the files reachable from one page."""

import logging
from pathlib import Path
from typing import Set

from .diagnostics import warn
from .parser import TEMPLATE_KIND, extract_specifiers, find_component_tags, read_source, source_kind
from .resolver import resolve_specifier


logger = logging.getLogger(__name__)


def traverse(entry_file: Path, root: Path) -> Set[Path]:
    """
    Collect every file reachable from entry_file through imports.

    Each call starts from an empty visited set, so no state carries over
    from one page to the next.

    Args:
        entry_file: The file to start from (usually a page).
        root: Project root directory.

    Returns:
        Absolute paths of all reachable files, entry_file included.
    """
    visited: Set[Path] = set()
    _visit(entry_file, root, visited)
    return visited


def _visit(file_path: Path, root: Path, visited: Set[Path]) -> None:
    if file_path in visited:
        return

    # Mark before following imports so cycles terminate
    visited.add(file_path)

    kind = source_kind(file_path)
    if kind is None:
        return

    try:
        content = read_source(file_path)
    except (OSError, UnicodeDecodeError) as e:
        warn(logger, "Could not read file %s: %s", file_path, e)
        return

    if kind == TEMPLATE_KIND:
        components = find_component_tags(content)
        if components:
            logger.debug("%s uses components: %s", file_path, ", ".join(sorted(components)))

    from_dir = file_path.parent
    for specifier in extract_specifiers(content, kind, source=file_path):
        for resolved in resolve_specifier(specifier, from_dir, root):
            _visit(resolved, root, visited)

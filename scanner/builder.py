"""Tree builder that runs the per-page traversal and assembles the result."""

import logging
from pathlib import Path
from typing import Iterable, List, Union

from importtree.model import ImportTree, ImportTreePage
from .discovery import DEFAULT_PAGES_DIR, iter_page_entries
from .resolver import get_relative_path
from .traversal import traverse


logger = logging.getLogger(__name__)

IMPORT_MARKER = "@"


def format_import_path(file_path: Path, root: Path) -> str:
    """Render an absolute file path as ``@`` + its root-relative posix path."""
    return IMPORT_MARKER + get_relative_path(file_path, root).as_posix()


def format_imports(files: Iterable[Path], root: Path) -> List[str]:
    """Format a reachability set as a sorted, duplicate-free import list."""
    return sorted({format_import_path(f, root) for f in files})


def build_import_tree(
    root: Union[str, Path],
    pages_dir: Union[str, Path] = DEFAULT_PAGES_DIR,
) -> ImportTree:
    """
    Analyze every page of a project and build its import tree.

    Args:
        root: Project root directory.
        pages_dir: Pages directory, relative to root.

    Returns:
        ImportTree with one page per page file, in discovery order.

    Raises:
        PagesDirNotFoundError: If the pages directory does not exist.
    """
    root = Path(root).resolve()
    pages_root = root / pages_dir

    tree = ImportTree()
    for entry in iter_page_entries(pages_root):
        logger.debug("Analyzing page %s (%s)", entry.url_path, entry.file_path)
        reachable = traverse(entry.file_path, root)
        tree.add_page(ImportTreePage(path=entry.url_path, imports=format_imports(reachable, root)))

    return tree

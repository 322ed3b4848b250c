"""Page entry discovery for scanning a site's pages directory."""

from pathlib import Path
from typing import Iterator, NamedTuple

from .errors import PagesDirNotFoundError


PAGE_EXTENSION = ".astro"
DEFAULT_PAGES_DIR = "src/pages"


class PageEntry(NamedTuple):
    """A routable page: its URL path and the file that defines it."""

    url_path: str
    file_path: Path


def iter_page_files(pages_root: Path) -> Iterator[Path]:
    """
    Iterate over page files below the pages root.

    Directories are walked depth-first with entries sorted by name, so the
    order is stable between runs.

    Args:
        pages_root: Directory containing the page files.

    Yields:
        Absolute paths of files ending in PAGE_EXTENSION.

    Raises:
        PagesDirNotFoundError: If pages_root is not an existing directory.
    """
    pages_root = pages_root.resolve()
    if not pages_root.is_dir():
        raise PagesDirNotFoundError(f"Pages directory not found: {pages_root}")

    def _walk(current: Path) -> Iterator[Path]:
        try:
            entries = sorted(current.iterdir())
        except PermissionError:
            return

        for entry in entries:
            if entry.is_dir():
                yield from _walk(entry)
            elif entry.is_file() and entry.suffix == PAGE_EXTENSION:
                yield entry

    yield from _walk(pages_root)


def get_url_path(relative_path: Path) -> str:
    """
    Derive a page's URL path from its path relative to the pages root.

    ``index.astro`` maps to ``/``, ``about.astro`` to ``/about`` and
    ``blog/index.astro`` to ``/blog``.
    """
    url_path = relative_path.as_posix()
    if url_path.endswith(PAGE_EXTENSION):
        url_path = url_path[: -len(PAGE_EXTENSION)]
    url_path = "/" + url_path.replace("\\", "/")

    if url_path.endswith("/index"):
        url_path = url_path[: -len("index")].rstrip("/") or "/"

    return url_path


def iter_page_entries(pages_root: Path) -> Iterator[PageEntry]:
    """Yield a PageEntry for every page file, in discovery order."""
    pages_root = pages_root.resolve()
    for file_path in iter_page_files(pages_root):
        yield PageEntry(get_url_path(file_path.relative_to(pages_root)), file_path)

"""Data model for page import trees."""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List


@dataclass
class ImportTreePage:
    """
    One routable page and every file reachable from it.

    ``path`` is the page's URL path (``/``, ``/about``, ...). ``imports`` holds
    root-relative file references, each prefixed with ``@``, sorted and free
    of duplicates.
    """

    path: str
    imports: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Return a plain mapping with ``path`` before ``imports``."""
        return {"path": self.path, "imports": list(self.imports)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ImportTreePage":
        return cls(path=data["path"], imports=list(data.get("imports") or []))


@dataclass
class ImportTree:
    """All analyzed pages, in the order they were discovered."""

    pages: List[ImportTreePage] = field(default_factory=list)

    def add_page(self, page: ImportTreePage) -> None:
        self.pages.append(page)

    def get_page(self, path: str) -> ImportTreePage:
        """
        Look up a page by URL path.

        Raises:
            KeyError: If no page has that path.
        """
        for page in self.pages:
            if page.path == path:
                return page
        raise KeyError(path)

    def to_dict(self) -> Dict[str, Any]:
        return {"pages": [page.to_dict() for page in self.pages]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ImportTree":
        return cls(pages=[ImportTreePage.from_dict(p) for p in data.get("pages") or []])

    def __iter__(self) -> Iterator[ImportTreePage]:
        return iter(self.pages)

    def __len__(self) -> int:
        return len(self.pages)

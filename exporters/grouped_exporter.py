"""Grouped text exporter: one Markdown section of bullets per page."""

from typing import List

from importtree.model import ImportTree, ImportTreePage


def page_urls(page: ImportTreePage) -> List[str]:
    """Return the URL forms a page is served under."""
    if page.path == "/":
        return ["/", "/index.html"]
    return [page.path, page.path + "/index.html"]


def to_grouped_text(tree: ImportTree) -> str:
    """
    Render an import tree as page-grouped bullet lists.

    Each page becomes a ``## <url>, <url>/index.html`` heading, a blank line
    and one ``- <import>`` line per import. Sections are separated by a blank
    line.
    """
    sections: List[str] = []

    for page in tree.pages:
        heading = "## " + ", ".join(page_urls(page))
        bullets = "\n".join(f"- {imp}" for imp in page.imports)
        sections.append(f"{heading}\n\n{bullets}")

    return "\n\n".join(sections)

"""Resolution of import specifiers to files inside the project."""

import glob
import logging
import os
from pathlib import Path
from typing import List, Optional, Set

from .diagnostics import warn


logger = logging.getLogger(__name__)

SOURCE_DIR = "src"

# Prefixes that stand for <root>/src/
ALIAS_PREFIXES = ("@/", "~/")

# Probe order matters: the bare path first, then component templates ahead of
# plain scripts. The same list is reused for directory index files.
EXTENSIONS = ("", ".astro", ".js", ".jsx", ".ts", ".tsx", ".mjs", ".cjs")


def resolve_specifier(specifier: str, from_dir: Path, root: Path) -> List[Path]:
    """
    Resolve an import specifier to the files it refers to.

    Policy, first match wins:
    1. Specifiers containing ``*`` are globbed (relative to from_dir when
       they start with ``.``, otherwise under <root>/src/).
    2. ``./`` and ``../`` specifiers resolve against from_dir.
    3. ``@/`` and ``~/`` aliases resolve under <root>/src/.
    4. Bare and scoped package names are external and never followed.
    5. Anything else resolves under <root>/src/.

    Args:
        specifier: The import string as written in source.
        from_dir: Directory of the file containing the import.
        root: Project root directory.

    Returns:
        Matching files, possibly empty. Unresolvable specifiers are not an
        error.
    """
    if not specifier:
        return []

    if "*" in specifier:
        return _expand_glob(specifier, from_dir, root)

    if specifier.startswith("."):
        candidate = _normalize(from_dir / specifier)
    elif specifier.startswith(ALIAS_PREFIXES):
        candidate = _normalize(root / SOURCE_DIR / _strip_root(specifier[2:]))
    elif "/" not in specifier or specifier.startswith("@"):
        return []
    else:
        candidate = _normalize(root / SOURCE_DIR / _strip_root(specifier))

    resolved = probe_file(candidate)
    if resolved is None or not _is_within_repo(resolved, root):
        return []
    return [resolved]


def probe_file(candidate: Path) -> Optional[Path]:
    """
    Find the file an extensionless candidate path refers to.

    Tries the candidate with each of EXTENSIONS appended, then
    ``candidate/index`` with each of EXTENSIONS.

    Returns:
        The first existing regular file, or None.
    """
    for ext in EXTENSIONS:
        path = Path(str(candidate) + ext)
        if path.is_file():
            return path

    for ext in EXTENSIONS:
        path = candidate / ("index" + ext)
        if path.is_file():
            return path

    return None


def _expand_glob(specifier: str, from_dir: Path, root: Path) -> List[Path]:
    if specifier.startswith("."):
        pattern = os.path.join(str(from_dir), specifier)
    elif specifier.startswith(ALIAS_PREFIXES):
        pattern = os.path.join(str(root / SOURCE_DIR), _strip_root(specifier[2:]))
    else:
        pattern = os.path.join(str(root / SOURCE_DIR), _strip_root(specifier))

    matches: Set[str] = set()
    try:
        for expanded in expand_braces(pattern):
            matches.update(glob.glob(os.path.normpath(expanded), recursive=True))
    except OSError as e:
        warn(logger, "Could not expand glob %s: %s", specifier, e)
        return []

    files: List[Path] = []
    for match in sorted(matches):
        path = Path(match)
        if path.is_file() and _is_within_repo(path, root):
            files.append(path)
    return files


def expand_braces(pattern: str) -> List[str]:
    """
    Expand ``{a,b}`` groups in a glob pattern into separate patterns.

    Groups may nest; a brace pair without a top-level comma is kept as
    literal text.

    Example:
        ``posts/*.{md,mdx}`` -> ``["posts/*.md", "posts/*.mdx"]``
    """
    start = pattern.find("{")
    while start != -1:
        depth = 0
        commas: List[int] = []
        end = -1
        for i in range(start, len(pattern)):
            ch = pattern[i]
            if ch == "{":
                depth += 1
            elif ch == "}":
                depth -= 1
                if depth == 0:
                    end = i
                    break
            elif ch == "," and depth == 1:
                commas.append(i)

        if end == -1:
            break
        if commas:
            prefix, suffix = pattern[:start], pattern[end + 1:]
            bounds = [start] + commas + [end]
            expanded: List[str] = []
            for left, right in zip(bounds, bounds[1:]):
                expanded.extend(expand_braces(prefix + pattern[left + 1:right] + suffix))
            return expanded
        start = pattern.find("{", start + 1)

    return [pattern]


def _strip_root(specifier: str) -> str:
    # A leading slash still means <root>/src, not the filesystem root
    return specifier.lstrip("/")


def _normalize(path: Path) -> Path:
    # Lexical normalization: collapse ".." without following symlinks
    return Path(os.path.normpath(path))


def _is_within_repo(path: Path, root: Path) -> bool:
    """Check if a path is within the repository root."""
    try:
        _normalize(path).relative_to(_normalize(root))
        return True
    except ValueError:
        return False


def get_relative_path(file_path: Path, root: Path) -> Path:
    """
    Get the path relative to root.

    Args:
        file_path: The file path to make relative.
        root: The root directory.

    Returns:
        Relative path, or the original path if it can't be made relative.
    """
    try:
        return _normalize(file_path).relative_to(_normalize(root))
    except ValueError:
        return file_path

"""Extract import specifiers from component templates and script files."""

import logging
import re
from pathlib import Path
from typing import List, Optional, Set

import tree_sitter_typescript as tsts
from tree_sitter import Language, Node, Parser

from .diagnostics import warn
from .errors import ScriptSyntaxError


logger = logging.getLogger(__name__)

TEMPLATE_KIND = "template"
SCRIPT_KIND = "script"

TEMPLATE_EXTENSIONS = {".astro"}
SCRIPT_EXTENSIONS = {".js", ".jsx", ".ts", ".tsx"}

# Frontmatter must open the file; it ends at the next line starting with ---
FRONTMATTER_RE = re.compile(r"\A---\s*\n(.*?)\n---", re.DOTALL)
SCRIPT_TAG_RE = re.compile(r"<script[^>]*>(.*?)</script>", re.IGNORECASE | re.DOTALL)
COMPONENT_TAG_RE = re.compile(r"<([\w.]+)\s+[^>]*>")

# Receiver and member of the framework's glob-import call, e.g. Astro.glob("./*.md")
GLOB_CALL = ("Astro", "glob")

SIMPLE_ESCAPES = {
    "n": "\n", "t": "\t", "r": "\r", "b": "\b",
    "f": "\f", "v": "\v", "0": "\0",
}

_TSX_LANGUAGE = Language(tsts.language_tsx())
_parser: Optional[Parser] = None


def _get_parser() -> Parser:
    global _parser
    if _parser is None:
        _parser = Parser(_TSX_LANGUAGE)
    return _parser


def source_kind(file_path: Path) -> Optional[str]:
    """Return the source kind for a file, or None if it is not analyzed."""
    suffix = file_path.suffix
    if suffix in TEMPLATE_EXTENSIONS:
        return TEMPLATE_KIND
    if suffix in SCRIPT_EXTENSIONS:
        return SCRIPT_KIND
    return None


def read_source(file_path: Path) -> str:
    """
    Read a source file as UTF-8 text.

    Raises:
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    return file_path.read_text(encoding="utf-8")


def find_script_regions(text: str) -> List[str]:
    """
    Return the script-bearing regions of a component template.

    The frontmatter block comes first when present, followed by the body of
    every ``<script>`` element in document order.
    """
    regions: List[str] = []

    match = FRONTMATTER_RE.match(text)
    if match:
        regions.append(match.group(1))

    for match in SCRIPT_TAG_RE.finditer(text):
        regions.append(match.group(1))

    return regions


def find_component_tags(text: str) -> Set[str]:
    """
    Collect component tag names used in a template.

    Only capitalized (``<Header ...>``) or dotted (``<ui.Button ...>``) tags
    count; plain HTML elements are skipped.
    """
    components: Set[str] = set()
    for match in COMPONENT_TAG_RE.finditer(text):
        tag_name = match.group(1)
        if tag_name[0].isupper() or "." in tag_name:
            components.add(tag_name)
    return components


def parse_script(code: str) -> Node:
    """
    Parse a script region as TypeScript with JSX.

    Returns:
        The root node of the syntax tree.

    Raises:
        ScriptSyntaxError: If the tree contains error or missing nodes.
    """
    tree = _get_parser().parse(code.encode("utf-8"))
    root = tree.root_node
    if root.has_error:
        line, column = _first_error_position(root)
        raise ScriptSyntaxError(f"invalid syntax at line {line + 1}, column {column + 1}")
    return root


def _first_error_position(root: Node):
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == "ERROR" or node.is_missing:
            return node.start_point
        if node.has_error:
            stack.extend(reversed(node.children))
    return root.start_point


def collect_specifiers(root: Node) -> List[str]:
    """
    Walk a syntax tree and collect import specifiers in source order.

    Picks up the source of every import declaration, plus the first argument
    of ``import(...)`` and ``Astro.glob(...)`` calls when it is a plain string
    literal.
    """
    specifiers: List[str] = []
    stack = [root]

    while stack:
        node = stack.pop()

        if node.type == "import_statement":
            source = node.child_by_field_name("source")
            if source is not None and source.type == "string":
                specifiers.append(_string_value(source))
        elif node.type == "call_expression" and _is_import_call(node):
            literal = _first_string_argument(node)
            if literal is not None:
                specifiers.append(literal)

        stack.extend(reversed(node.children))

    return specifiers


def _is_import_call(node: Node) -> bool:
    function = node.child_by_field_name("function")
    if function is None:
        return False
    if function.type == "import":
        return True
    if function.type == "member_expression":
        obj = function.child_by_field_name("object")
        prop = function.child_by_field_name("property")
        return (
            obj is not None
            and prop is not None
            and obj.type == "identifier"
            and (_text(obj), _text(prop)) == GLOB_CALL
        )
    return False


def _first_string_argument(node: Node) -> Optional[str]:
    arguments = node.child_by_field_name("arguments")
    if arguments is None or arguments.type != "arguments":
        return None
    if not arguments.named_children:
        return None
    first = arguments.named_children[0]
    if first.type != "string":
        return None
    return _string_value(first)


def _string_value(node: Node) -> str:
    """Return the cooked value of a string literal, escapes decoded."""
    parts: List[str] = []
    for child in node.named_children:
        if child.type == "escape_sequence":
            parts.append(decode_escape(_text(child)))
        else:
            parts.append(_text(child))
    value = "".join(parts)
    # Re-join UTF-16 surrogate pairs written as two \u escapes
    return value.encode("utf-16", "surrogatepass").decode("utf-16", "surrogatepass")


def decode_escape(escape: str) -> str:
    """
    Decode one JavaScript escape sequence such as ``\\n``, ``\\x41``,
    ``\\u00e9`` or ``\\u{1F600}``.
    """
    body = escape[1:]
    if body in SIMPLE_ESCAPES:
        return SIMPLE_ESCAPES[body]
    if body.startswith("u{") and body.endswith("}"):
        return chr(int(body[2:-1], 16))
    if body[:1] in ("u", "x") and len(body) > 1:
        return chr(int(body[1:], 16))
    if body.startswith(("\r", "\n", "\u2028", "\u2029")):
        # Line continuation
        return ""
    if body and all(c in "01234567" for c in body):
        return chr(int(body, 8))
    return body


def _text(node: Node) -> str:
    return node.text.decode("utf-8")


def extract_specifiers(text: str, kind: str, source: Optional[Path] = None) -> List[str]:
    """
    Extract raw import specifiers from a source file's text.

    Args:
        text: Full file contents.
        kind: TEMPLATE_KIND or SCRIPT_KIND.
        source: Path of the file, used in diagnostics only.

    Returns:
        Specifiers in the order they appear; duplicates are kept.
    """
    regions = find_script_regions(text) if kind == TEMPLATE_KIND else [text]

    specifiers: List[str] = []
    for region in regions:
        try:
            root = parse_script(region)
        except ScriptSyntaxError as e:
            warn(logger, "Could not parse script in %s: %s", source or "<string>", e)
            continue
        specifiers.extend(collect_specifiers(root))

    return specifiers

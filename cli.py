#!/usr/bin/env python3
"""
Page Import Tree CLI

Lists, for every page of a component-based site, the source files reachable
from it through imports. Output is either grouped text for summarization or
a structural JSON/YAML document.
"""

import argparse
import logging
import sys
from pathlib import Path

from exporters import to_grouped_text, to_json, to_yaml
from scanner.builder import build_import_tree
from scanner.diagnostics import configure_logging, set_warnings_suppressed
from scanner.discovery import DEFAULT_PAGES_DIR


def parse_args(args=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="page-import-tree",
        description="Parse page URL paths and the files each page imports.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  page-import-tree llm ./my-site                         # Grouped text per page
  page-import-tree json ./my-site --pages-dir src/content
  page-import-tree yaml ./my-site -o imports.yaml        # YAML output to file
  page-import-tree llm ./my-site --quiet                 # No warnings
        """,
    )

    parser.add_argument(
        "command",
        choices=["llm", "json", "yaml"],
        help="Output format: grouped text (llm), JSON or YAML",
    )

    parser.add_argument(
        "root",
        help="Project root directory",
    )

    parser.add_argument(
        "--pages-dir",
        type=str,
        default=DEFAULT_PAGES_DIR,
        help=f"Pages directory relative to the project root (default: {DEFAULT_PAGES_DIR})",
    )

    parser.add_argument(
        "-o", "--output",
        type=str,
        default=None,
        help="Output file (default: stdout)",
    )

    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Suppress warning messages",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log every analyzed page and the components it uses",
    )

    return parser.parse_args(args)


def main(args=None):
    """Main entry point."""
    parsed = parse_args(args)

    configure_logging(level=logging.DEBUG if parsed.verbose else logging.WARNING)
    if parsed.quiet:
        set_warnings_suppressed(True)

    root = Path(parsed.root).resolve()
    if not root.is_dir():
        print(f"Error: '{parsed.root}' is not a directory", file=sys.stderr)
        return 1

    if not parsed.quiet:
        print(f"Analyzing project at: {root}", file=sys.stderr)

    try:
        tree = build_import_tree(root, parsed.pages_dir)
    except Exception as e:
        print(f"Error analyzing project: {e}", file=sys.stderr)
        return 1

    if parsed.command == "json":
        output = to_json(tree)
    elif parsed.command == "yaml":
        output = to_yaml(tree)
    else:  # llm
        output = to_grouped_text(tree)

    if parsed.output:
        try:
            output_path = Path(parsed.output)
            output_path.write_text(output, encoding="utf-8")
            print(f"Output written to: {output_path}", file=sys.stderr)
        except OSError as e:
            print(f"Error writing output: {e}", file=sys.stderr)
            return 1
    else:
        print(output)

    return 0


if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3
"""
list-deps CLI

A tool for listing the external dependencies a JavaScript project imports,
starting from a root file and following its relative imports.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List

from rich.console import Console

from scanner.builder import list_deps
from scanner.resolver import DEFAULT_EXTENSIONS
from exporters import to_text, print_text, to_json, to_yaml

__version__ = "0.1.2"


def parse_args(args=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="list-deps",
        description="List imported JavaScript dependencies.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  list-deps src/index.js                  # Follow .js files from src/index.js
  list-deps src/main.ts -e ts tsx js      # Resolve .ts, then .tsx, then .js
  list-deps src/index.js -f json -o deps.json
  list-deps src/index.js -v               # Log every resolved module
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    # Positional arguments
    parser.add_argument(
        "root_file_path",
        help="Root file from which to search for dependencies",
    )

    # Resolution options
    parser.add_argument(
        "-e", "--extensions",
        nargs="+",
        action="extend",
        default=None,
        help="File extensions to look for when resolving modules (default: js)",
    )

    # Output options
    parser.add_argument(
        "-f", "--format",
        choices=["text", "json", "yaml"],
        default="text",
        help="Output format (default: text)",
    )

    parser.add_argument(
        "-o", "--output",
        type=str,
        default=None,
        help="Output file (default: stdout)",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log module resolution details to stderr",
    )

    return parser.parse_args(args)


def _normalize_extensions(extensions) -> List[str]:
    if not extensions:
        return list(DEFAULT_EXTENSIONS)
    return [ext[1:] if ext.startswith(".") else ext for ext in extensions]


def main(args=None):
    """Main entry point."""
    parsed = parse_args(args)

    logging.basicConfig(
        level=logging.DEBUG if parsed.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    extensions = _normalize_extensions(parsed.extensions)
    result = list_deps(parsed.root_file_path, extensions)

    # Generate output
    if parsed.format == "json":
        output = to_json(result)
    elif parsed.format == "yaml":
        output = to_yaml(result)
    elif parsed.output:
        output = to_text(result)
    else:  # text (default) on the console
        print_text(result, Console(), Console(stderr=True))
        return 0

    # Write output
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

"""Lexical extraction of module specifiers from JavaScript-family sources."""

import re
from itertools import chain
from typing import Callable, Iterator

# Line and block comments. Not syntax aware: "//" or "/*" inside a string
# or template literal is treated as the start of a comment.
COMMENT_PATTERN = re.compile(r"//[^\n]*|/\*.*?\*/", re.DOTALL)

# Quoted specifier; group 1 is the delimiter, group 2 the specifier.
_QUOTED = r"""(['"`])([^'"`\n]+)\1"""

# import x from "./x"; import "./x"; import {\n a,\n b\n} from "./x"
# import(...) and import.meta are left out.
STATIC_IMPORT_PATTERN = re.compile(
    r"""^\s*import\b(?!\s*[(.])[^'"`;]*?""" + _QUOTED,
    re.MULTILINE,
)

# export * from "./x"; export { a } from "./x"
RE_EXPORT_PATTERN = re.compile(
    r"""^\s*export\b[^'"`;]*?\bfrom\s*""" + _QUOTED,
    re.MULTILINE,
)

# import("./x")
DYNAMIC_IMPORT_PATTERN = re.compile(r"\bimport\s*\(\s*" + _QUOTED + r"\s*\)")

# require("./x")
REQUIRE_PATTERN = re.compile(r"\brequire\s*\(\s*" + _QUOTED + r"\s*\)")

# Order matters: relative specifiers are followed in this order.
SPECIFIER_PATTERNS = (
    STATIC_IMPORT_PATTERN,
    RE_EXPORT_PATTERN,
    DYNAMIC_IMPORT_PATTERN,
    REQUIRE_PATTERN,
)


def strip_comments(text: str) -> str:
    """
    Remove // line comments and /* */ block comments from source text.

    Args:
        text: Raw file contents.

    Returns:
        The text with every comment replaced by the empty string.
    """
    return COMMENT_PATTERN.sub("", text)


def is_relative(specifier: str) -> bool:
    """Check if a specifier refers to a file relative to the importing module."""
    return specifier.startswith(".")


def package_name(specifier: str) -> str:
    """
    Reduce a bare specifier to the package it belongs to.

    Scoped packages keep their scope and name ("@scope/pkg/sub" -> "@scope/pkg"),
    anything else keeps its first segment ("lodash/fp" -> "lodash").

    Args:
        specifier: A bare (non-relative) specifier.

    Returns:
        The package name to record as a dependency.
    """
    parts = specifier.split("/")
    if parts[0].startswith("@") and len(parts) > 1:
        return f"{parts[0]}/{parts[1]}"
    return parts[0]


def _iter_matches(pattern: re.Pattern, text: str) -> Iterator[str]:
    for match in pattern.finditer(text):
        yield match.group(2)


def extract_specifiers(
    text: str,
    add_dependency: Callable[[str], None],
) -> Iterator[str]:
    """
    Lazily extract relative specifiers from comment-free source text.

    Static imports, re-exports, dynamic imports and require calls are
    matched independently over the whole text and chained in that order.
    Bare specifiers are not yielded: their package name is passed to
    ``add_dependency`` as they are encountered.

    Args:
        text: Source text, already passed through strip_comments.
        add_dependency: Callback receiving external package names.

    Yields:
        Relative specifiers, in extraction order.
    """
    for specifier in chain.from_iterable(
        _iter_matches(pattern, text) for pattern in SPECIFIER_PATTERNS
    ):
        if is_relative(specifier):
            yield specifier
        else:
            add_dependency(package_name(specifier))

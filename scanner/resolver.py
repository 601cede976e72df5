"""Path resolution utilities for mapping module identifiers to files on disk."""

import logging
import os
from pathlib import Path
from typing import Iterator, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS = ("js",)
INDEX_BASENAME = "index"


def get_extension(module_path: str) -> str:
    """Return the extension of a path without its leading dot ("" if none)."""
    return os.path.splitext(module_path)[1][1:]


def path_variants(
    module_path: str,
    extensions: Sequence[str],
    include_literal: bool = False,
) -> Iterator[str]:
    """
    Generate candidate file paths for a module identifier, in probing order.

    1. The path itself, only if it already carries a configured extension
       or ``include_literal`` is set.
    2. The path with each configured extension appended.
    3. The path as a directory holding an index file, for each extension.

    Args:
        module_path: Module identifier (specifier joined onto its directory).
        extensions: Configured extensions, without leading dots.
        include_literal: Probe the path as written whatever its extension.

    Yields:
        Candidate paths.
    """
    if include_literal or get_extension(module_path) in extensions:
        yield module_path

    for extension in extensions:
        yield f"{module_path}.{extension}"

    for extension in extensions:
        yield os.path.join(module_path, f"{INDEX_BASENAME}.{extension}")


def load_module(
    module_path: str,
    extensions: Sequence[str],
    include_literal: bool = False,
) -> Optional[Tuple[str, str]]:
    """
    Read the first candidate of a module identifier that can be read.

    Args:
        module_path: Module identifier to resolve.
        extensions: Configured extensions, without leading dots.
        include_literal: Probe the path as written whatever its extension.

    Returns:
        (file_path, text) of the resolved file, or None if no candidate
        could be read.
    """
    for candidate in path_variants(module_path, extensions, include_literal):
        try:
            text = Path(candidate).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Cannot read %s: %s", candidate, e)
            continue
        return candidate, text

    return None


def should_report_skipped(module_path: str, extensions: Sequence[str]) -> bool:
    """
    Check if an unresolvable module should be reported as skipped.

    Paths without an extension, or with a configured one, were meant to
    resolve to a source file. Anything else (images, stylesheets...) is
    dropped silently.
    """
    extension = get_extension(module_path)
    return not extension or extension in extensions

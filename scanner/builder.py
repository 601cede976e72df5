"""Dependency traversal that walks the module graph from a root file."""

import logging
import os
from typing import Iterable, List

from graph.model import DependencyResult, TraversalContext
from .parser import strip_comments, extract_specifiers
from .resolver import DEFAULT_EXTENSIONS, load_module, should_report_skipped

logger = logging.getLogger(__name__)


def list_deps(
    root_file_path: str,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
) -> DependencyResult:
    """
    List the external dependencies reachable from a root file.

    Relative imports are followed through the files they resolve to; bare
    imports are recorded as package names. Modules that cannot be found
    are reported as skipped instead of failing the traversal.

    Args:
        root_file_path: File to start searching from.
        extensions: File extensions used to resolve modules, without dots.

    Returns:
        DependencyResult with sorted skipped module paths (relative to the
        root file's directory) and sorted dependency names.
    """
    context = TraversalContext(root_file_path, extensions)
    follow_dependencies(context, os.path.normpath(root_file_path))
    return context.to_result()


def follow_dependencies(context: TraversalContext, module_path: str) -> None:
    """
    Walk every module reachable from ``module_path`` depth-first.

    Each module identifier is expanded at most once. The walk uses an
    explicit stack; children are pushed in reverse so they are visited in
    the order their specifiers were extracted, as a recursive walk would.
    The starting module is always read as written, whatever its extension.

    Args:
        context: Traversal state, updated in place.
        module_path: Module identifier to start from.
    """
    stack: List[str] = [module_path]

    while stack:
        current = stack.pop()
        if not context.mark_visited(current):
            continue

        children = _expand_module(context, current, is_start=current == module_path)
        stack.extend(reversed(children))


def _expand_module(
    context: TraversalContext,
    module_path: str,
    is_start: bool = False,
) -> List[str]:
    """Load one module and return the identifiers of the modules it imports."""
    loaded = load_module(module_path, context.extensions, include_literal=is_start)

    if loaded is None:
        if is_start or should_report_skipped(module_path, context.extensions):
            logger.debug("Skipping unresolved module %s", module_path)
            context.add_skipped(module_path)
        else:
            logger.debug("Ignoring unresolved asset %s", module_path)
        return []

    file_path, text = loaded
    logger.debug("Resolved %s to %s", module_path, file_path)

    current_dir = os.path.dirname(file_path)
    return [
        os.path.normpath(os.path.join(current_dir, specifier))
        for specifier in extract_specifiers(strip_comments(text), context.add_dependency)
    ]

"""Scanner module for import extraction, module resolution and traversal."""

from .parser import strip_comments, extract_specifiers, package_name
from .resolver import DEFAULT_EXTENSIONS, path_variants, load_module
from .builder import list_deps, follow_dependencies

__all__ = [
    "strip_comments",
    "extract_specifiers",
    "package_name",
    "DEFAULT_EXTENSIONS",
    "path_variants",
    "load_module",
    "list_deps",
    "follow_dependencies",
]

"""Data model for a dependency traversal and its result."""

import os
from typing import Iterable, List, NamedTuple, Set, Tuple


class DependencyResult(NamedTuple):
    """Outcome of a traversal: both lists sorted and duplicate-free."""

    skipped_modules: List[str]
    dependencies: List[str]


class TraversalContext:
    """
    Accumulator threaded through a single dependency traversal.

    Holds the configured extensions, the root directory used to report
    skipped modules, and three sets that only ever grow: visited module
    identifiers, skipped module paths and external dependency names.
    """

    def __init__(self, root_file_path: str, extensions: Iterable[str]):
        self.extensions: Tuple[str, ...] = tuple(extensions)
        self.root_dir: str = os.path.dirname(os.path.abspath(root_file_path))
        self._visited: Set[str] = set()
        self._skipped: Set[str] = set()
        self._dependencies: Set[str] = set()

    @property
    def visited(self) -> Set[str]:
        """Return the module identifiers expanded so far."""
        return self._visited.copy()

    @property
    def skipped_modules(self) -> Set[str]:
        """Return skipped module paths, relative to the root directory."""
        return self._skipped.copy()

    @property
    def dependencies(self) -> Set[str]:
        """Return the external dependency names recorded so far."""
        return self._dependencies.copy()

    def mark_visited(self, identifier: str) -> bool:
        """
        Mark a module identifier as visited.

        Returns:
            False if the identifier had already been visited, True otherwise.
        """
        if identifier in self._visited:
            return False
        self._visited.add(identifier)
        return True

    def add_dependency(self, name: str) -> None:
        """Record an external package name."""
        self._dependencies.add(name)

    def add_skipped(self, module_path: str) -> None:
        """Record an unresolvable module, stored relative to the root directory."""
        relative = os.path.relpath(os.path.abspath(module_path), self.root_dir)
        self._skipped.add(relative)

    def to_result(self) -> DependencyResult:
        """Sort both accumulated sets into a DependencyResult."""
        return DependencyResult(
            skipped_modules=sorted(self._skipped),
            dependencies=sorted(self._dependencies),
        )

    def __repr__(self) -> str:
        return (
            f"TraversalContext(visited={len(self._visited)}, "
            f"skipped={len(self._skipped)}, dependencies={len(self._dependencies)})"
        )

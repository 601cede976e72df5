"""Graph module for traversal state and results."""

from .model import DependencyResult, TraversalContext

__all__ = ["DependencyResult", "TraversalContext"]

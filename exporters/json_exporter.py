"""JSON exporter for dependency results (machine-friendly format)."""

import json
from typing import Any, Dict

from graph.model import DependencyResult


def to_json(result: DependencyResult, indent: int = 2) -> str:
    """
    Convert a dependency result to JSON format.

    Args:
        result: The traversal result to export.
        indent: JSON indentation level.

    Returns:
        JSON string with "skipped_modules" and "dependencies" lists.
    """
    data: Dict[str, Any] = {
        "skipped_modules": list(result.skipped_modules),
        "dependencies": list(result.dependencies),
    }

    return json.dumps(data, indent=indent)

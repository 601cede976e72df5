"""YAML exporter for dependency results."""

import yaml

from graph.model import DependencyResult


def to_yaml(result: DependencyResult) -> str:
    """Convert a dependency result to a YAML document, keys in display order."""
    data = {
        "skipped_modules": list(result.skipped_modules),
        "dependencies": list(result.dependencies),
    }
    return yaml.safe_dump(data, sort_keys=False, default_flow_style=False)

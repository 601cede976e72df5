"""Text exporter for dependency results (human-friendly format)."""

from typing import List

from rich.console import Console

from graph.model import DependencyResult

SKIPPED_STYLE = "black on yellow"
DEPENDENCIES_STYLE = "black on green"


def _skipped_banner(result: DependencyResult) -> str:
    return f" {len(result.skipped_modules)} Modules skipped "


def _dependencies_banner(result: DependencyResult) -> str:
    return f" {len(result.dependencies)} Dependencies found "


def to_text(result: DependencyResult) -> str:
    """
    Render a dependency result as plain text.

    The skipped section is only present when modules were skipped.

    Args:
        result: The traversal result to export.

    Returns:
        Count-and-list text, one entry per line.
    """
    lines: List[str] = []

    if result.skipped_modules:
        lines.append(_skipped_banner(result).strip())
        lines.extend(result.skipped_modules)

    lines.append(_dependencies_banner(result).strip())
    lines.extend(result.dependencies)

    return "\n".join(lines)


def print_text(result: DependencyResult, console: Console, err_console: Console) -> None:
    """
    Print a dependency result with highlighted count banners.

    Skipped modules go to ``err_console``, dependencies to ``console``.
    Styles are dropped by rich when the console is not a terminal.
    """
    if result.skipped_modules:
        err_console.print(_skipped_banner(result), style=SKIPPED_STYLE, highlight=False)
        for module_path in result.skipped_modules:
            err_console.print(module_path, markup=False, highlight=False, soft_wrap=True)

    console.print(_dependencies_banner(result), style=DEPENDENCIES_STYLE, highlight=False)
    for dependency in result.dependencies:
        console.print(dependency, markup=False, highlight=False, soft_wrap=True)

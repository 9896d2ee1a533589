"""Shared utility functions for Firebase Architect UI tooling.

Provides JSON/YAML I/O and Rich-based console reporting.  Library modules
stay silent; only the UI generator and the CLI print through these helpers.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any, Iterable, Sequence

import yaml
from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from firebase_architect.scaffolder.ui_generator import UITemplateResult

console = Console()

# ---------------------------------------------------------------------------
# JSON / YAML I/O
# ---------------------------------------------------------------------------


def load_json(path: str | Path) -> dict[str, Any]:
    """Load and parse a JSON file.

    Args:
        path: Path to the JSON file.

    Returns:
        Parsed dictionary.  A non-object top level is wrapped as
        ``{"_root": data}``.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
    """
    raw = Path(path).read_text(encoding="utf-8")
    data = json.loads(raw)
    if not isinstance(data, dict):
        return {"_root": data}
    return data


def save_json(data: dict[str, Any] | list[Any], path: str | Path) -> Path:
    """Save data as pretty-printed JSON, creating parent directories."""
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
    return file_path


def load_structured(path: str | Path) -> dict[str, Any]:
    """Load a ``.json``, ``.yaml`` or ``.yml`` document into a dictionary.

    Raises:
        ValueError: For any other extension, or a YAML document whose top
            level is not a mapping.
    """
    file_path = Path(path)
    suffix = file_path.suffix.lower()
    if suffix == ".json":
        return load_json(file_path)
    if suffix in (".yaml", ".yml"):
        data = yaml.safe_load(file_path.read_text(encoding="utf-8")) or {}
        if not isinstance(data, dict):
            raise ValueError(f"{file_path} must contain a mapping at the top level")
        return data
    raise ValueError(f"Unsupported file type '{suffix}' (expected .json, .yaml or .yml)")


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, Any], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_listing(
    title: str, columns: Sequence[str], rows: Iterable[Sequence[Any]]
) -> None:
    """Print a multi-column table, one row per catalog entry."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    for index, column in enumerate(columns):
        table.add_column(column, style="bold" if index == 0 else None, no_wrap=index == 0)
    for row in rows:
        table.add_row(*(str(cell) for cell in row))
    console.print(table)


def print_template_info(result: "UITemplateResult | None") -> None:
    """Summarise a completed UI template generation."""
    if result is None:
        return
    print_summary_table(
        {
            "Template": result.template_name,
            "Framework": result.framework,
            "Theme file": result.theme_path,
            "Components": f"{len(result.components)} available",
            "Layouts": ", ".join(result.layouts),
        },
        title="UI Template",
    )


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")

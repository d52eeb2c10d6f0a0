"""Rich formatting utilities for CLI output."""

from collections.abc import Callable, Sequence
from datetime import datetime
from typing import Any

from pydantic import BaseModel
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

# Shared console instances
console = Console()
err_console = Console(stderr=True)

Column = tuple[str, str]


def truncate(text: str, limit: int) -> str:
    """Shorten ``text`` to ``limit`` characters, marking the cut with '...'."""
    if len(text) <= limit:
        return text
    return text[: limit - 3] + "..."


def snippet(text: str, limit: int = 60) -> str:
    """Single-line preview of message content."""
    return truncate(" ".join(text.split()), limit)


def display_title(title: str, limit: int) -> str:
    return truncate(title or "(no title)", limit)


def format_ts(ts: int, fmt: str = "%Y-%m-%d %H:%M") -> str:
    """Format a Unix timestamp in local time."""
    if not ts:
        return "-"
    return datetime.fromtimestamp(ts).strftime(fmt)


def format_size(size: int) -> str:
    if size > 1024 * 1024:
        return f"{size / (1024 * 1024):.2f} MB"
    if size > 1024:
        return f"{size / 1024:.2f} KB"
    return f"{size} bytes"


def format_ids(ids: Sequence[int]) -> str:
    return ", ".join(str(i) for i in ids)


def print_json(data: BaseModel | Sequence[BaseModel]) -> None:
    """Print decoded models as JSON."""
    if isinstance(data, BaseModel):
        payload: Any = data.model_dump(mode="json")
    else:
        payload = [item.model_dump(mode="json") for item in data]
    console.print_json(data=payload)


def create_table(columns: Sequence[Column]) -> Table:
    """Create a table with styled columns."""
    table = Table(show_edge=False, header_style="bold")
    for name, style in columns:
        table.add_column(name, style=style)
    return table


def output_list(
    items: Sequence[BaseModel],
    *,
    json_output: bool,
    empty_message: str,
    columns: Sequence[Column],
    row_builder: Callable[[Any], Sequence[Any]],
) -> None:
    """Output a list of models as a table, JSON, or an empty-result message."""
    if json_output:
        print_json(items)
        return
    if not items:
        console.print(empty_message, style="yellow", markup=False)
        return

    table = create_table(columns)
    for item in items:
        table.add_row(*(Text(str(cell)) for cell in row_builder(item)))
    console.print(table)


def print_fields(fields: Sequence[tuple[str, Any]]) -> None:
    """Print ``Label: value`` lines for a single record."""
    for label, value in fields:
        console.print(f"[bold]{label}:[/] {escape(str(value))}")


def print_success(message: str) -> None:
    console.print(f"[green]✓[/] {escape(message)}")


def print_error(message: str) -> None:
    err_console.print(f"[red]Error:[/] {escape(message)}")

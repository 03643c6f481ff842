"""Rich console helpers shared by the command handlers."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from airscope.shared.constants import CLIMessages

# Text colour per CPCB category
CATEGORY_STYLES = {
    "Good": "green",
    "Satisfactory": "bright_green",
    "Moderate": "yellow",
    "Poor": "dark_orange",
    "Very Poor": "red",
    "Severe": "bold red",
}


def get_console() -> Console:
    """A console bound to the current stdout."""
    return Console()


def styled_category(category: str | None) -> str:
    if not category:
        return "-"
    style = CATEGORY_STYLES.get(category, "white")
    return f"[{style}]{category}[/{style}]"


def source_note(source: str) -> str:
    return CLIMessages.SOURCE_NOTE.get(source, source)


def new_table(title: str, *columns: str) -> Table:
    table = Table(title=title, show_header=True, header_style="bold cyan")
    for column in columns:
        table.add_column(column)
    return table

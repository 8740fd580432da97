"""
UI helper functions for consistent report formatting.

Keeps the visual hierarchy of every command the same:
section header, then data items, then tables.
"""

from typing import Dict, Optional, Tuple
from rich.console import Console
from rich.table import Table


def print_section_header(
    title: str,
    console: Optional[Console] = None,
    width: int = 63
) -> None:
    """
    Print a main section header with separator lines.

    Args:
        title: Section title in UPPERCASE
        console: Rich Console instance (creates new if None)
        width: Width of separator line

    Example:
        print_section_header("ACCESS STATISTICS")
    """
    if console is None:
        console = Console()

    console.print(f"\n{'═' * width}")
    console.print(f"[bold blue]{title}[/bold blue]")
    console.print(f"{'═' * width}\n")


def print_data_item(
    label: str,
    value: str,
    color: str = "cyan",
    console: Optional[Console] = None
) -> None:
    """
    Print an indented bullet with a colored value.

    Example:
        print_data_item("Records", "1,234", "green")
    """
    if console is None:
        console = Console()

    console.print(f"    • {label}: [{color}]{value}[/{color}]")


def create_summary_table(
    title: str,
    data: Dict[str, Tuple[str, str]],
    console: Optional[Console] = None
) -> Table:
    """
    Print a two-column summary table.

    Args:
        title: Table title
        data: Dict of {label: (value, color)}
        console: Rich Console instance

    Returns:
        The printed table.
    """
    if console is None:
        console = Console()

    table = Table(title=title, show_lines=False)
    table.add_column("Metric", style="bold", no_wrap=True)
    table.add_column("Value", justify="right")

    for label, (value, color) in data.items():
        table.add_row(label, f"[{color}]{value}[/{color}]")

    console.print(table)
    console.print()
    return table

"""Console presentation of access counts and statistics."""

from typing import TYPE_CHECKING, Optional, Sequence

from rich.console import Console
from rich.table import Table

from .config import MONTH_NAMES
from .ui_helpers import create_summary_table, print_data_item, print_section_header

if TYPE_CHECKING:
    from .aggregators import LogAnalyzer


def print_hourly_counts(hour_counts: Sequence[int], console: Optional[Console] = None) -> None:
    """Print one ``hour: count`` line per hour of the day."""
    if console is None:
        console = Console()

    console.print("Hr: Count", highlight=False)
    for hour, count in enumerate(hour_counts):
        console.print(f"{hour}: {count}", highlight=False)


def print_monthly_counts(month_counts: Sequence[int], console: Optional[Console] = None) -> None:
    """Print one ``month: count`` line per month, months numbered from 1."""
    if console is None:
        console = Console()

    console.print("Month: Count", highlight=False)
    for month, count in enumerate(month_counts, start=1):
        console.print(f"{month}: {count}", highlight=False)


def format_hour(hour: int) -> str:
    """Render an hour index, or n/a for the -1 sentinel."""
    if hour < 0:
        return "n/a"
    return f"{hour:02d}:00"


def format_month(month: int) -> str:
    """Render a month number, or n/a for the 0 sentinel."""
    if not 1 <= month <= len(MONTH_NAMES):
        return "n/a"
    return f"{MONTH_NAMES[month - 1]} ({month})"


class SimpleConsoleUI:
    """Rich console report for an analyzer whose passes have run."""

    def __init__(self, analyzer: 'LogAnalyzer', console: Optional[Console] = None):
        self.analyzer = analyzer
        self.console = console or Console()

    def display_summary(self) -> None:
        """Display the derived statistics."""
        summary = self.analyzer.get_summary_stats()
        busiest_two_hour = summary['busiest_two_hour']

        print_section_header("ACCESS STATISTICS", console=self.console)
        create_summary_table(
            "Hourly",
            {
                "Total Accesses": (f"{summary['total_accesses']:,}", "green"),
                "Busiest Hour": (format_hour(summary['busiest_hour']), "cyan"),
                "Quietest Hour": (format_hour(summary['quietest_hour']), "cyan"),
                "Busiest Two Hours": (
                    f"{format_hour(busiest_two_hour)}-{format_hour((busiest_two_hour + 2) % 24)}",
                    "yellow",
                ),
            },
            console=self.console,
        )
        create_summary_table(
            "Monthly",
            {
                "Busiest Month": (format_month(summary['busiest_month']), "cyan"),
                "Quietest Month": (format_month(summary['quietest_month']), "cyan"),
                "Average per Month": (f"{summary['average_accesses_per_month']:,}", "green"),
            },
            console=self.console,
        )

    def display_distribution(self) -> None:
        """Display hour and month counts as tables with relative bars."""
        hour_counts = self.analyzer.hour_counts
        month_counts = self.analyzer.month_counts

        self.console.print(self._distribution_table(
            "Accesses per Hour", "Hour", [format_hour(h) for h in range(len(hour_counts))], hour_counts))
        self.console.print()
        self.console.print(self._distribution_table(
            "Accesses per Month", "Month", list(MONTH_NAMES), month_counts))
        self.console.print()

    def display_record_counts(self, records: int, skipped: int, bots: int) -> None:
        """Display how many lines were read from the log."""
        print_data_item("Records", f"{records:,}", "green", console=self.console)
        if skipped:
            print_data_item("Unreadable lines", f"{skipped:,}", "yellow", console=self.console)
        if bots:
            print_data_item("Bot requests excluded", f"{bots:,}", "yellow", console=self.console)

    @staticmethod
    def _distribution_table(title: str, label: str, labels, counts, bar_width: int = 40) -> Table:
        table = Table(title=title, show_header=True)
        table.add_column(label, style="bold")
        table.add_column("Count", justify="right", style="green")
        table.add_column("", style="cyan")

        peak = max(counts) if counts else 0
        for name, count in zip(labels, counts):
            bar = "█" * round(count / peak * bar_width) if peak else ""
            table.add_row(name, f"{count:,}", bar)
        return table

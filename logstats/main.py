"""Main CLI entry point for the log analyzer."""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn

from . import __version__
from .aggregators import LogAnalyzer
from .config import DEFAULT_LOGFILE, EXPORT_SETTINGS, SAMPLE_SETTINGS
from .export import DataExporter, create_report_summary
from .log_reader import LogfileReader, create_sample_log_file
from .logger import setup_logger
from .ui import SimpleConsoleUI

logger = logging.getLogger(__name__)

console = Console()


def load_reader(logfile: str, exclude_bots: bool = False) -> LogfileReader:
    """Read and parse a log file, exiting with an error message on failure."""
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        progress.add_task(f"Reading {Path(logfile).name}...", total=None)
        try:
            return LogfileReader(logfile, exclude_bots=exclude_bots)
        except FileNotFoundError as e:
            console.print(f"[red]{e}[/red]")
            console.print("[yellow]Create one with: logstats sample[/yellow]")
            sys.exit(1)
        except OSError as e:
            console.print(f"[red]Error reading {logfile}: {e}[/red]")
            sys.exit(1)


@click.group(context_settings={'help_option_names': ['-h', '--help']})
@click.version_option(__version__, prog_name='logstats')
@click.option('--log-level', type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              default=None, help='Diagnostic log level (default: WARNING)')
@click.option('--log-file', type=click.Path(dir_okay=False), help='Also write diagnostics to this file')
def cli(log_level, log_file):
    """Access Log Time Analyzer - hour-of-day and month-of-year statistics.

    Reads a web server access log and reports when traffic happens: the
    busiest and quietest hours, the busiest two-hour window, and the monthly
    distribution of accesses.

    \b
    Quick Start:
      logstats sample                 # Write a demo.log to play with
      logstats analyze                # Analyze demo.log
      logstats analyze access.log.gz  # Analyze another log
      logstats counts --no-monthly    # Print hourly counts only

    \b
    Supported log lines:
      • "YYYY MM DD HH MM" weblog lines
      • Nginx JSON lines with a "time" field
      • Common/combined log format lines
    """
    setup_logger(log_file=log_file, level=log_level)


@cli.command()
@click.argument('logfile', default=DEFAULT_LOGFILE, type=click.Path(dir_okay=False))
@click.option('--single-pass', is_flag=True, help='Count hours and months in one traversal')
@click.option('--show-counts', is_flag=True, help='Also show the per-hour and per-month tables')
@click.option('--exclude-bots', is_flag=True, help='Exclude bot traffic (JSON and combined logs only)')
@click.option('--output', '-o', help='Output directory for exports')
@click.option('--export-csv', is_flag=True, help='Export results to CSV')
@click.option('--export-json', is_flag=True, help='Export results to JSON')
@click.option('--export-charts', is_flag=True, help='Export charts to HTML')
def analyze(logfile, single_pass, show_counts, exclude_bots, output, export_csv, export_json, export_charts):
    """Analyze a log file and show the time statistics.

    \b
    Examples:
      logstats analyze                          # Analyze demo.log
      logstats analyze access.log --show-counts # Include distribution tables
      logstats analyze access.log --export-csv --export-charts
    """
    reader = load_reader(logfile, exclude_bots=exclude_bots)
    analyzer = LogAnalyzer(reader)
    logger.debug("Analyzing %s with %s", logfile, "one pass" if single_pass else "two passes")

    if single_pass:
        analyzer.analyze_all_data()
    else:
        analyzer.analyze_hourly_data()
        analyzer.analyze_monthly_data()

    ui = SimpleConsoleUI(analyzer, console)
    ui.display_record_counts(len(reader), reader.skipped_lines, reader.bot_lines)
    ui.display_summary()
    if show_counts:
        ui.display_distribution()

    if export_csv or export_json or export_charts:
        handle_exports(analyzer, output, export_csv, export_json, export_charts)


def handle_exports(analyzer: LogAnalyzer, output_dir: Optional[str],
                   export_csv: bool, export_json: bool, export_charts: bool):
    """Handle data exports."""
    exporter = DataExporter(output_dir or EXPORT_SETTINGS['output_dir'])

    if export_csv:
        csv_file = exporter.export_to_csv(analyzer)
        console.print(f"[green]CSV exported to: {csv_file}[/green]")

    if export_json:
        json_file = exporter.export_to_json(analyzer)
        console.print(f"[green]JSON exported to: {json_file}[/green]")

    if export_charts:
        charts_file = exporter.create_charts(analyzer)
        console.print(f"[green]Charts exported to: {charts_file}[/green]")

    summary_file = create_report_summary(analyzer, str(exporter.output_dir / "summary.txt"))
    console.print(f"[green]Summary report: {summary_file}[/green]")


@cli.command()
@click.argument('logfile', default=DEFAULT_LOGFILE, type=click.Path(dir_okay=False))
@click.option('--hourly/--no-hourly', default=True, help='Print the hourly counts')
@click.option('--monthly/--no-monthly', default=True, help='Print the monthly counts')
def counts(logfile, hourly, monthly):
    """Print the raw access count for every hour and month."""
    analyzer = LogAnalyzer(load_reader(logfile))

    if hourly:
        analyzer.analyze_hourly_data()
        analyzer.print_hourly_counts(console)
    if hourly and monthly:
        console.print()
    if monthly:
        analyzer.analyze_monthly_data()
        analyzer.print_monthly_counts(console)


@cli.command()
@click.argument('logfile', default=DEFAULT_LOGFILE, type=click.Path(dir_okay=False))
def data(logfile):
    """Print every record read from the log file."""
    load_reader(logfile).print_data(console)


@cli.command()
@click.argument('path', default=DEFAULT_LOGFILE, type=click.Path(dir_okay=False))
@click.option('--lines', '-n', default=SAMPLE_SETTINGS['num_lines'], show_default=True,
              type=click.IntRange(min=0), help='Number of entries to write')
@click.option('--seed', type=int, help='Random seed for reproducible data')
def sample(path, lines, seed):
    """Write a synthetic weblog file for trying the analyzer."""
    created = create_sample_log_file(path, lines, seed)
    console.print(f"[green]Created sample log file: {created} with {lines:,} entries[/green]")


if __name__ == '__main__':
    cli()

"""Export functionality for access statistics."""

import csv
import json
from datetime import datetime
from pathlib import Path
from typing import Optional

import plotly.graph_objects as go
from plotly.subplots import make_subplots

from .aggregators import LogAnalyzer
from .config import EXPORT_SETTINGS, MONTH_NAMES


def _default_filename(prefix: str, extension: str) -> str:
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return f"{prefix}_{timestamp}.{extension}"


class DataExporter:
    """Handles exporting analyzer results to various formats."""

    def __init__(self, output_dir: Optional[str] = None):
        self.output_dir = Path(output_dir or EXPORT_SETTINGS['output_dir'])
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def export_to_csv(self, analyzer: LogAnalyzer, filename: Optional[str] = None) -> str:
        """Export summary statistics and bucket counts to CSV."""
        filepath = self.output_dir / (filename or _default_filename("access_stats", "csv"))
        summary = analyzer.get_summary_stats()

        with open(filepath, 'w', newline='', encoding='utf-8') as csvfile:
            writer = csv.writer(csvfile, delimiter=EXPORT_SETTINGS['csv_delimiter'])

            writer.writerow(['=== SUMMARY STATISTICS ==='])
            for key, value in summary.items():
                if key in ('hour_counts', 'month_counts'):
                    continue
                writer.writerow([key, value])

            writer.writerow([])

            writer.writerow(['=== HOURLY COUNTS ==='])
            writer.writerow(['Hour', 'Count'])
            for hour, count in enumerate(summary['hour_counts']):
                writer.writerow([hour, count])

            writer.writerow([])

            writer.writerow(['=== MONTHLY COUNTS ==='])
            writer.writerow(['Month', 'Count'])
            for month, count in enumerate(summary['month_counts'], start=1):
                writer.writerow([month, count])

        return str(filepath)

    def export_to_json(self, analyzer: LogAnalyzer, filename: Optional[str] = None) -> str:
        """Export summary statistics and bucket counts to JSON."""
        filepath = self.output_dir / (filename or _default_filename("access_stats", "json"))
        summary = analyzer.get_summary_stats()

        export_data = {
            'export_timestamp': datetime.now().isoformat(),
            'summary': {k: v for k, v in summary.items() if k not in ('hour_counts', 'month_counts')},
            'hour_counts': {str(hour): count for hour, count in enumerate(summary['hour_counts'])},
            'month_counts': {str(month): count for month, count in enumerate(summary['month_counts'], start=1)},
        }

        with open(filepath, 'w', encoding='utf-8') as jsonfile:
            json.dump(export_data, jsonfile, indent=2, ensure_ascii=False)

        return str(filepath)

    def create_charts(self, analyzer: LogAnalyzer, filename: Optional[str] = None) -> str:
        """Create interactive charts and save as HTML."""
        filepath = self.output_dir / (filename or _default_filename("access_charts", "html"))

        fig = make_subplots(
            rows=2, cols=1,
            subplot_titles=['Accesses per Hour', 'Accesses per Month'],
        )

        hour_counts = analyzer.hour_counts
        fig.add_trace(
            go.Bar(x=[f"{hour:02d}" for hour in range(len(hour_counts))], y=list(hour_counts), name="Hours"),
            row=1, col=1
        )

        fig.add_trace(
            go.Bar(x=list(MONTH_NAMES), y=list(analyzer.month_counts), name="Months"),
            row=2, col=1
        )

        fig.update_layout(
            height=EXPORT_SETTINGS['chart_height'],
            width=EXPORT_SETTINGS['chart_width'],
            showlegend=False,
            title_text="Access Log Time Distribution",
            title_x=0.5
        )

        fig.write_html(str(filepath))
        return str(filepath)


def create_report_summary(analyzer: LogAnalyzer, output_file: Optional[str] = None) -> str:
    """Create a human-readable text summary report."""
    if not output_file:
        output_file = str(Path(EXPORT_SETTINGS['output_dir']) / _default_filename("summary", "txt"))

    Path(output_file).parent.mkdir(parents=True, exist_ok=True)

    summary = analyzer.get_summary_stats()
    total = max(summary['total_accesses'], 1)
    month_total = max(sum(summary['month_counts']), 1)

    report = f"""
ACCESS LOG SUMMARY REPORT
=========================
Generated: {datetime.now().strftime(EXPORT_SETTINGS['timestamp_format'])}

OVERVIEW
--------
Total Accesses: {summary['total_accesses']:,}
Busiest Hour: {summary['busiest_hour']}
Quietest Hour: {summary['quietest_hour']}
Busiest Two-Hour Start: {summary['busiest_two_hour']}
Busiest Month: {summary['busiest_month']}
Quietest Month: {summary['quietest_month']}
Average Accesses per Month: {summary['average_accesses_per_month']:,}

HOURLY COUNTS
-------------
"""
    for hour, count in enumerate(summary['hour_counts']):
        percentage = (count / total) * 100
        report += f"{hour:<15} {count:>8,} ({percentage:>5.1f}%)\n"

    report += """
MONTHLY COUNTS
--------------
"""
    for month, count in enumerate(summary['month_counts'], start=1):
        percentage = (count / month_total) * 100
        report += f"{MONTH_NAMES[month - 1]:<15} {count:>8,} ({percentage:>5.1f}%)\n"

    with open(output_file, 'w', encoding='utf-8') as f:
        f.write(report)

    return output_file

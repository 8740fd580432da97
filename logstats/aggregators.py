"""Hour-of-day and month-of-year access aggregation."""

import logging
from typing import Any, Dict, Optional, Tuple

from rich.console import Console

from .config import DEFAULT_LOGFILE, HOURS_PER_DAY, MONTHS_PER_YEAR
from .log_reader import LogfileReader
from . import ui

logger = logging.getLogger(__name__)


class LogAnalyzer:
    """Counts accesses per hour of day and per month of year.

    The reader is any restartable record source exposing ``reset()``,
    ``has_next()`` and ``next_entry()``. Each analysis pass rewinds it and
    rebuilds its own bucket array from scratch, so passes are repeatable.
    """

    def __init__(self, reader=None, logfile_name: str = DEFAULT_LOGFILE):
        self.hour_buckets = [0] * HOURS_PER_DAY
        self.month_buckets = [0] * MONTHS_PER_YEAR
        self.reader = reader if reader is not None else LogfileReader(logfile_name)

    @property
    def hour_counts(self) -> Tuple[int, ...]:
        return tuple(self.hour_buckets)

    @property
    def month_counts(self) -> Tuple[int, ...]:
        return tuple(self.month_buckets)

    def analyze_hourly_data(self) -> None:
        """Count the accesses for each hour of the day."""
        self.reader.reset()
        self.hour_buckets = [0] * HOURS_PER_DAY
        while self.reader.has_next():
            self.hour_buckets[self.reader.next_entry().hour] += 1
        logger.debug("Hourly pass counted %d accesses", sum(self.hour_buckets))

    def analyze_monthly_data(self) -> None:
        """Count the accesses for each month of the year."""
        self.reader.reset()
        self.month_buckets = [0] * MONTHS_PER_YEAR
        while self.reader.has_next():
            # months are 1-based, buckets 0-based
            self.month_buckets[self.reader.next_entry().month - 1] += 1
        logger.debug("Monthly pass counted %d accesses", sum(self.month_buckets))

    def analyze_all_data(self) -> None:
        """Fill both bucket arrays from a single traversal of the reader."""
        self.reader.reset()
        self.hour_buckets = [0] * HOURS_PER_DAY
        self.month_buckets = [0] * MONTHS_PER_YEAR
        while self.reader.has_next():
            record = self.reader.next_entry()
            self.hour_buckets[record.hour] += 1
            self.month_buckets[record.month - 1] += 1
        logger.debug("Single pass counted %d accesses", sum(self.hour_buckets))

    def reset(self) -> None:
        """Zero both bucket arrays."""
        self.hour_buckets = [0] * HOURS_PER_DAY
        self.month_buckets = [0] * MONTHS_PER_YEAR

    def number_of_accesses(self) -> int:
        """Total accesses, summed over the hourly buckets."""
        return sum(self.hour_buckets)

    def busiest_hour(self) -> int:
        """Hour with the most accesses; the earliest hour wins a tie."""
        return _busiest_index(self.hour_buckets)

    def quietest_hour(self) -> int:
        """Hour with the fewest non-zero accesses, or -1 when there are none."""
        return _quietest_index(self.hour_buckets)

    def busiest_two_hour(self) -> int:
        """Start of the busiest pair of consecutive hours.

        The window wraps around midnight: the pair starting at 23 is 23 and 0.
        """
        busiest_start = 0
        busiest_accesses = 0
        for hour, accesses in enumerate(self.hour_buckets):
            accesses += self.hour_buckets[(hour + 1) % len(self.hour_buckets)]
            if accesses > busiest_accesses:
                busiest_start = hour
                busiest_accesses = accesses
        return busiest_start

    def busiest_month(self) -> int:
        """Month (1-12) with the most accesses."""
        return _busiest_index(self.month_buckets) + 1

    def quietest_month(self) -> int:
        """Month (1-12) with the fewest non-zero accesses.

        Returns 0 when no month has any access, since the -1 "no data" index
        is shifted to one-based numbering like any other.
        """
        return _quietest_index(self.month_buckets) + 1

    def average_accesses_per_month(self) -> int:
        """Monthly accesses divided evenly over the year, truncated."""
        return sum(self.month_buckets) // len(self.month_buckets)

    def get_summary_stats(self) -> Dict[str, Any]:
        """Get every derived statistic along with the raw counts."""
        return {
            'total_accesses': self.number_of_accesses(),
            'busiest_hour': self.busiest_hour(),
            'quietest_hour': self.quietest_hour(),
            'busiest_two_hour': self.busiest_two_hour(),
            'busiest_month': self.busiest_month(),
            'quietest_month': self.quietest_month(),
            'average_accesses_per_month': self.average_accesses_per_month(),
            'hour_counts': self.hour_counts,
            'month_counts': self.month_counts,
        }

    def print_hourly_counts(self, console: Optional[Console] = None) -> None:
        """Print the hourly counts set by a prior call to analyze_hourly_data."""
        ui.print_hourly_counts(self.hour_buckets, console)

    def print_monthly_counts(self, console: Optional[Console] = None) -> None:
        """Print the monthly counts set by a prior call to analyze_monthly_data."""
        ui.print_monthly_counts(self.month_buckets, console)

    def print_data(self, console: Optional[Console] = None) -> None:
        """Print the records held by the reader."""
        self.reader.print_data(console)


def _busiest_index(buckets) -> int:
    # strictly greater, so the lowest index keeps a tie
    busiest = 0
    busiest_accesses = 0
    for index, accesses in enumerate(buckets):
        if accesses > busiest_accesses:
            busiest = index
            busiest_accesses = accesses
    return busiest


def _quietest_index(buckets) -> int:
    quietest = -1
    quietest_accesses = None
    for index, accesses in enumerate(buckets):
        if accesses != 0 and (quietest_accesses is None or accesses < quietest_accesses):
            quietest = index
            quietest_accesses = accesses
    return quietest

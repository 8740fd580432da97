"""Log file reading and the restartable record source."""

import gzip
import logging
import random
from pathlib import Path
from typing import Iterator, List, Optional

from rich.console import Console

from .config import SAMPLE_SETTINGS
from .parser import AccessRecord, LogParser

logger = logging.getLogger(__name__)


class LogTailer:
    """Reads the lines of a log file, supporting gzip files."""

    def __init__(self, file_path: str):
        self.file_path = Path(file_path)
        self.file_handle = None

    def __enter__(self):
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def open(self):
        """Open the log file for reading."""
        if not self.file_path.exists():
            raise FileNotFoundError(f"Log file not found: {self.file_path}")

        if self.file_path.suffix == '.gz':
            self.file_handle = gzip.open(self.file_path, 'rt', encoding='utf-8', errors='ignore')
        else:
            self.file_handle = open(self.file_path, 'r', encoding='utf-8', errors='ignore')

    def close(self):
        """Close the file handle."""
        if self.file_handle:
            self.file_handle.close()
            self.file_handle = None

    def lines(self) -> Iterator[str]:
        """Yield each line of the file without its line ending."""
        if not self.file_handle:
            raise RuntimeError("File not opened. Use context manager or call open() first.")

        for line in self.file_handle:
            yield line.rstrip('\n\r')


class LogfileReader:
    """Restartable source of access records read from a log file.

    The whole file is parsed once at construction; ``reset`` rewinds the
    cursor so every traversal yields the same records in the same order.
    """

    def __init__(self, logfile_name: str, parser: Optional[LogParser] = None,
                 exclude_bots: bool = False):
        self.logfile_name = logfile_name
        self.parser = parser or LogParser()
        self.exclude_bots = exclude_bots
        self.skipped_lines = 0
        self.bot_lines = 0
        self.records: List[AccessRecord] = self._load()
        self.position = 0

    def _load(self) -> List[AccessRecord]:
        records = []
        with LogTailer(self.logfile_name) as tailer:
            for line in tailer.lines():
                if not line.strip():
                    continue

                record = self.parser.parse_log_line(line)
                if record is None:
                    self.skipped_lines += 1
                    logger.debug("Skipping unreadable line: %s", line)
                    continue

                if self.exclude_bots and record.is_bot:
                    self.bot_lines += 1
                    continue

                records.append(record)

        logger.info(
            "Loaded %d records from %s (%d skipped, %d bot)",
            len(records), self.logfile_name, self.skipped_lines, self.bot_lines,
        )
        return records

    def reset(self) -> None:
        """Rewind to the first record."""
        self.position = 0

    def has_next(self) -> bool:
        return self.position < len(self.records)

    def next_entry(self) -> AccessRecord:
        """Return the next record and advance the cursor."""
        if not self.has_next():
            raise StopIteration
        record = self.records[self.position]
        self.position += 1
        return record

    def __iter__(self):
        return self

    def __next__(self) -> AccessRecord:
        return self.next_entry()

    def __len__(self) -> int:
        return len(self.records)

    def print_data(self, console: Optional[Console] = None) -> None:
        """Print every record, one per line."""
        if console is None:
            console = Console()

        for record in self.records:
            console.print(str(record))


def create_sample_log_file(file_path: str, num_lines: Optional[int] = None,
                           seed: Optional[int] = None) -> str:
    """Create a sample log file in the whitespace weblog format.

    Entries are written in chronological order, one ``YYYY MM DD HH MM`` line
    per access.
    """
    num_lines = SAMPLE_SETTINGS['num_lines'] if num_lines is None else num_lines
    rand = random.Random(seed)

    entries = []
    for _ in range(num_lines):
        entries.append((
            rand.randint(SAMPLE_SETTINGS['first_year'], SAMPLE_SETTINGS['last_year']),
            rand.randint(1, 12),
            rand.randint(1, 28),
            rand.randint(0, 23),
            rand.randint(0, 59),
        ))
    entries.sort()

    path = Path(file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        for year, month, day, hour, minute in entries:
            f.write(f"{year} {month:02d} {day:02d} {hour:02d} {minute:02d}\n")

    logger.info("Created sample log file %s with %d entries", path, num_lines)
    return str(path)

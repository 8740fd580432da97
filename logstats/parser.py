"""Log line parsing into access records."""

import json
import logging
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from user_agents import parse as parse_user_agent

from .config import BOT_SIGNATURES

logger = logging.getLogger(__name__)

# Epoch values below this (2000-01-01 UTC) are not taken as timestamps
MIN_EPOCH_SECONDS = 946684800

# Common/combined log format, e.g.
# 127.0.0.1 - - [01/Jun/2018:00:07:00 +0000] "GET / HTTP/1.1" 200 512 "-" "curl/7.68.0"
COMMON_LOG_RE = re.compile(
    r'(?P<ip>\S+) \S+ \S+ \[(?P<ts>[^\]]+)\] "(?P<request>[^"]*)" (?P<status>\d{3}) (?P<size>\S+)'
    r'(?: "(?P<referer>[^"]*)" "(?P<user_agent>[^"]*)")?'
)


@dataclass(frozen=True)
class AccessRecord:
    """A single access, reduced to the time fields the analyzer counts."""

    year: int
    month: int
    day: int
    hour: int
    minute: int
    is_bot: bool = False

    @classmethod
    def from_datetime(cls, timestamp: datetime, is_bot: bool = False) -> 'AccessRecord':
        return cls(timestamp.year, timestamp.month, timestamp.day,
                   timestamp.hour, timestamp.minute, is_bot)

    def __str__(self) -> str:
        return f"{self.year} {self.month:02d} {self.day:02d} {self.hour:02d} {self.minute:02d}"


class LogParser:
    """Parses log lines in any of the supported formats.

    Supported formats, tried in order:

    * whitespace weblog lines: ``YYYY MM DD HH MM`` (extra fields ignored)
    * Nginx JSON lines with a ``time`` field
    * common/combined log format lines
    """

    TIMESTAMP_FORMATS = [
        '%Y-%m-%dT%H:%M:%S.%fZ',  # ISO format with microseconds
        '%Y-%m-%dT%H:%M:%SZ',     # ISO format
        '%Y-%m-%dT%H:%M:%S%z',    # ISO with timezone
        '%Y-%m-%dT%H:%M:%S',      # ISO without zone
        '%Y-%m-%d %H:%M:%S',      # Standard format
        '%d/%b/%Y:%H:%M:%S %z',   # Apache/Nginx format
    ]

    def __init__(self):
        self.bot_signatures = {sig.lower() for sig in BOT_SIGNATURES}

    def parse_log_line(self, line: str) -> Optional[AccessRecord]:
        """Parse a single log line, returning None when it cannot be read."""
        line = line.strip()
        if not line:
            return None

        if line.startswith('{'):
            return self._parse_json_line(line)

        record = self._parse_weblog_line(line)
        if record is not None:
            return record

        return self._parse_common_log_line(line)

    def _parse_weblog_line(self, line: str) -> Optional[AccessRecord]:
        fields = line.split()
        if len(fields) < 5:
            return None
        try:
            year, month, day, hour, minute = (int(field) for field in fields[:5])
        except ValueError:
            return None

        if not (1 <= month <= 12 and 1 <= day <= 31 and 0 <= hour <= 23 and 0 <= minute <= 59):
            logger.debug("Out of range fields in line: %s", line)
            return None
        return AccessRecord(year, month, day, hour, minute)

    def _parse_json_line(self, line: str) -> Optional[AccessRecord]:
        try:
            raw_log = json.loads(line)
        except json.JSONDecodeError:
            return None
        if not isinstance(raw_log, dict):
            return None

        timestamp = self._parse_timestamp(str(raw_log.get('time', '')))
        if timestamp is None:
            return None
        return AccessRecord.from_datetime(timestamp, self._is_bot(raw_log.get('user_agent', '')))

    def _parse_common_log_line(self, line: str) -> Optional[AccessRecord]:
        match = COMMON_LOG_RE.match(line)
        if not match:
            return None

        timestamp = self._parse_timestamp(match.group('ts'))
        if timestamp is None:
            return None
        return AccessRecord.from_datetime(timestamp, self._is_bot(match.group('user_agent') or ''))

    def _parse_timestamp(self, time_str: str) -> Optional[datetime]:
        """Parse timestamp from the supported formats."""
        if not time_str:
            return None

        for fmt in self.TIMESTAMP_FORMATS:
            try:
                return datetime.strptime(time_str, fmt)
            except ValueError:
                continue

        # Unix timestamps are bucketed by their UTC wall clock
        try:
            seconds = float(time_str)
        except ValueError:
            seconds = None
        if seconds is not None and seconds >= MIN_EPOCH_SECONDS:
            try:
                return datetime.fromtimestamp(seconds, tz=timezone.utc)
            except (OverflowError, OSError, ValueError):
                pass

        logger.debug("Unparseable timestamp: %s", time_str)
        return None

    def _is_bot(self, ua_str: str) -> bool:
        """Detect if user agent is a bot."""
        if not ua_str or ua_str == '-':
            return False

        ua_lower = ua_str.lower()
        if any(bot_sig in ua_lower for bot_sig in self.bot_signatures):
            return True
        return parse_user_agent(ua_str).is_bot

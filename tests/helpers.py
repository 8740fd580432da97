"""Record builders and an in-memory record source for tests."""

from typing import Iterable, List, Sequence

from logstats.parser import AccessRecord


class ListReader:
    """In-memory record source that replays a fixed list of records."""

    def __init__(self, records: Iterable[AccessRecord]):
        self.records = list(records)
        self.position = 0
        self.resets = 0

    def reset(self) -> None:
        self.position = 0
        self.resets += 1

    def has_next(self) -> bool:
        return self.position < len(self.records)

    def next_entry(self) -> AccessRecord:
        record = self.records[self.position]
        self.position += 1
        return record

    def print_data(self, console=None) -> None:
        for record in self.records:
            console.print(str(record))


def records_for(hours: Sequence[int] = (), months: Sequence[int] = ()) -> List[AccessRecord]:
    """Build one record per hour (month 1), then one per month (hour 0)."""
    records = [AccessRecord(2018, 1, 1, hour, 0) for hour in hours]
    records += [AccessRecord(2018, month, 1, 0, 0) for month in months]
    return records


def records_from_counts(hour_counts: Sequence[int]) -> List[AccessRecord]:
    """Build records so that the hourly buckets equal ``hour_counts``."""
    hours = [hour for hour, count in enumerate(hour_counts) for _ in range(count)]
    return records_for(hours=hours)


def month_records_from_counts(month_counts: Sequence[int]) -> List[AccessRecord]:
    """Build records so that the monthly buckets equal ``month_counts``."""
    months = [month for month, count in enumerate(month_counts, start=1) for _ in range(count)]
    return records_for(months=months)

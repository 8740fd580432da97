"""Hour-of-day and month-of-year statistics for web server access logs."""

__version__ = "1.0.0"

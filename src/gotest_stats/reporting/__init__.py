"""
Reporting modules for gotest-stats.
"""

from .base import ReportGenerator
from .json_reporter import JSONReporter
from .text import TextReporter

__all__ = ["ReportGenerator", "JSONReporter", "TextReporter", "get_reporter"]


def get_reporter(report_format: str) -> ReportGenerator:
    """Return the reporter for a report format name."""
    if report_format == "json":
        return JSONReporter()
    return TextReporter()

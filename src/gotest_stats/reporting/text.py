"""
Tab-separated text reporter.
"""

from typing import List

from ..durations import format_duration
from ..models import Statistic, StatisticReport
from .base import ReportGenerator


class TextReporter(ReportGenerator):
    """Generate one tab-separated line per row.

    pkg-time rows are ``<package>\\t<duration>``; test-time rows are
    ``<test>\\t<package>\\t<duration>\\t<pass|fail>``.
    """

    def generate(self, report: StatisticReport) -> str:
        """Generate text report; empty when there are no rows."""
        lines: List[str] = []

        if report.statistic == Statistic.PKG_TIME:
            for p in report.packages:
                lines.append(f"{p.package}\t{format_duration(p.duration)}\n")
        else:
            for t in report.tests:
                lines.append(
                    f"{t.name}\t{t.package}\t{format_duration(t.duration)}\t{t.status}\n"
                )

        return "".join(lines)

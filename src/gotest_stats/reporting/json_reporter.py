"""
JSON reporter for statistic reports.
"""

import json

from ..durations import format_duration
from ..models import Statistic, StatisticReport
from .base import ReportGenerator


class JSONReporter(ReportGenerator):
    """Generate JSON format for programmatic analysis."""

    def generate(self, report: StatisticReport) -> str:
        """Generate JSON report."""
        if report.statistic == Statistic.PKG_TIME:
            rows = [
                {
                    "package": p.package,
                    "duration_ns": p.duration,
                    "duration": format_duration(p.duration),
                }
                for p in report.packages
            ]
        else:
            rows = [
                {
                    "test": t.name,
                    "package": t.package,
                    "duration_ns": t.duration,
                    "duration": format_duration(t.duration),
                    "status": t.status,
                }
                for t in report.tests
            ]

        output = {"statistic": report.statistic.value, "rows": rows}
        return json.dumps(output, indent=2, ensure_ascii=False) + "\n"

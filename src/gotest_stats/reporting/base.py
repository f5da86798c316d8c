"""
Base class for report generators.
"""

from abc import ABC, abstractmethod

from ..models import StatisticReport


class ReportGenerator(ABC):
    """Base class for rendering statistic reports."""

    @abstractmethod
    def generate(self, report: StatisticReport) -> str:
        """
        Render a statistic report.

        Args:
            report: StatisticReport with sorted rows

        Returns:
            Report as a string
        """
        pass

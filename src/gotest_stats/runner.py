"""
Statistics runner: builds the store from log files and computes reports.
"""

import logging

from .config import StatsConfig
from .exceptions import UnknownStatisticError
from .ingest import read_files
from .models import Statistic, StatisticReport
from .store import StatsStore

logger = logging.getLogger(__name__)


def resolve_statistic(name: str) -> Statistic:
    """
    Look up a statistic by its command-line name.

    Raises:
        UnknownStatisticError: If the name is not a known statistic
    """
    try:
        return Statistic(name)
    except ValueError:
        raise UnknownStatisticError(str(name))


class StatsRunner:
    """Computes statistics for the log files named in a configuration."""

    def __init__(self, config: StatsConfig):
        self.config = config

    def collect(self) -> StatsStore:
        """
        Read every configured log file into a new store.

        Returns:
            Populated StatsStore

        Raises:
            LogFileError: If a file cannot be read
            RecordDecodeError: If a line cannot be decoded
        """
        logger.info("Reading %d log files", len(self.config.files))
        store = read_files(self.config.files, StatsStore())
        logger.info(
            "Collected %d packages and %d tests",
            len(store.packages),
            len(store.tests),
        )
        return store

    def package_time(self) -> StatisticReport:
        """Packages ordered by descending duration."""
        store = self.collect()
        return StatisticReport(Statistic.PKG_TIME, packages=store.packages_by_duration())

    def test_time(self) -> StatisticReport:
        """Tests ordered by descending duration."""
        store = self.collect()
        return StatisticReport(Statistic.TEST_TIME, tests=store.tests_by_duration())

    def run(self) -> StatisticReport:
        """
        Compute the configured statistic.

        The statistic is resolved before any file is read.

        Raises:
            UnknownStatisticError: If the configured statistic is unknown
        """
        statistic = resolve_statistic(self.config.statistic)
        if statistic == Statistic.PKG_TIME:
            return self.package_time()
        return self.test_time()

"""
Data models for gotest-stats.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional

# Zero value of a log timestamp; only timestamps strictly after it count as set.
ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)


class Action(Enum):
    """Event actions that are committed to the statistics store."""

    PASS = "pass"
    FAIL = "fail"


class Statistic(Enum):
    """Statistics the tool can compute."""

    PKG_TIME = "pkg-time"
    TEST_TIME = "test-time"


@dataclass
class RawEvent:
    """A single decoded line of `go test -json` output."""

    action: str = ""
    package: str = ""
    test: str = ""
    output: str = ""
    time: Optional[datetime] = None
    elapsed: float = 0.0

    @property
    def has_time(self) -> bool:
        """Return True if the timestamp is set (strictly after the zero time)."""
        return self.time is not None and self.time > ZERO_TIME

    @property
    def is_eligible(self) -> bool:
        """Return True if the event may be aggregated."""
        return self.has_time and bool(self.package) and bool(self.action)


def make_test_id(package: str, name: str) -> str:
    """Build the composite identity of a test."""
    return f"{package}#{name}"


@dataclass
class TestRecord:
    """Latest known outcome of a single test."""

    package: str
    name: str
    duration: int  # nanoseconds
    passed: bool

    @property
    def id(self) -> str:
        return make_test_id(self.package, self.name)

    @property
    def status(self) -> str:
        return Action.PASS.value if self.passed else Action.FAIL.value


@dataclass
class PackageRecord:
    """Latest known outcome of a package run."""

    package: str
    duration: int  # nanoseconds


@dataclass
class StatisticReport:
    """Rows computed for one statistic, ready to be rendered."""

    statistic: Statistic
    packages: List[PackageRecord] = field(default_factory=list)
    tests: List[TestRecord] = field(default_factory=list)

    @property
    def row_count(self) -> int:
        if self.statistic == Statistic.PKG_TIME:
            return len(self.packages)
        return len(self.tests)

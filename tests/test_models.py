"""Tests for data models."""

from datetime import datetime, timezone

from src.gotest_stats.models import (
    ZERO_TIME,
    PackageRecord,
    RawEvent,
    Statistic,
    StatisticReport,
    TestRecord,
    make_test_id,
)

T1 = datetime(2023, 5, 1, tzinfo=timezone.utc)


class TestRawEvent:
    """Tests for RawEvent eligibility."""

    def test_defaults(self):
        event = RawEvent()
        assert event.action == ""
        assert event.time is None
        assert event.has_time is False
        assert event.is_eligible is False

    def test_eligible(self):
        assert RawEvent(action="pass", package="p", time=T1).is_eligible is True

    def test_zero_time_is_not_set(self):
        event = RawEvent(action="pass", package="p", time=ZERO_TIME)
        assert event.has_time is False
        assert event.is_eligible is False

    def test_empty_package_not_eligible(self):
        assert RawEvent(action="pass", time=T1).is_eligible is False

    def test_empty_action_not_eligible(self):
        assert RawEvent(package="p", time=T1).is_eligible is False


class TestRecords:
    """Tests for TestRecord and PackageRecord."""

    def test_identity(self):
        assert make_test_id("pkgA", "T1") == "pkgA#T1"
        assert TestRecord("pkgA", "T1", 10, True).id == "pkgA#T1"

    def test_status(self):
        assert TestRecord("p", "t", 1, True).status == "pass"
        assert TestRecord("p", "t", 1, False).status == "fail"

    def test_row_count(self):
        report = StatisticReport(Statistic.PKG_TIME, packages=[PackageRecord("p", 1)])
        assert report.row_count == 1
        assert StatisticReport(Statistic.TEST_TIME).row_count == 0

    def test_statistic_values(self):
        assert Statistic("pkg-time") is Statistic.PKG_TIME
        assert Statistic("test-time") is Statistic.TEST_TIME

"""
Aggregation of test events into per-package and per-test statistics.
"""

import logging
from typing import Dict, Iterable, List

from .durations import from_seconds
from .models import Action, PackageRecord, RawEvent, TestRecord, make_test_id

logger = logging.getLogger(__name__)

COMMITTED_ACTIONS = {Action.PASS.value, Action.FAIL.value}


class StatsStore:
    """Latest known state per package and per test.

    Records are keyed by identity (package id, or ``package#test`` for
    tests). A later pass/fail event for the same identity replaces the
    stored record entirely.
    """

    def __init__(self) -> None:
        self.packages: Dict[str, PackageRecord] = {}
        self.tests: Dict[str, TestRecord] = {}

    def apply(self, event: RawEvent) -> None:
        """
        Commit a single eligible event.

        Events with a test name update the test mapping, all others the
        package mapping. Actions other than pass/fail are ignored.

        Args:
            event: Eligible RawEvent
        """
        if event.action not in COMMITTED_ACTIONS:
            return

        duration = from_seconds(event.elapsed)
        if event.test:
            self.tests[make_test_id(event.package, event.test)] = TestRecord(
                package=event.package,
                name=event.test,
                duration=duration,
                passed=event.action == Action.PASS.value,
            )
        else:
            self.packages[event.package] = PackageRecord(
                package=event.package,
                duration=duration,
            )

    def apply_all(self, events: Iterable[RawEvent]) -> None:
        """
        Commit events in order, skipping ineligible ones.

        Args:
            events: RawEvents in file order
        """
        skipped = 0
        for event in events:
            if not event.is_eligible:
                skipped += 1
                continue
            self.apply(event)
        if skipped:
            logger.debug("Skipped %d ineligible events", skipped)

    def packages_by_duration(self) -> List[PackageRecord]:
        """Return all package records, longest first.

        Ties are ordered by package id.
        """
        ordered = sorted(self.packages.values(), key=lambda p: p.package)
        return sorted(ordered, key=lambda p: p.duration, reverse=True)

    def tests_by_duration(self) -> List[TestRecord]:
        """Return all test records, longest first.

        Ties are ordered by test identity.
        """
        ordered = sorted(self.tests.values(), key=lambda t: t.id)
        return sorted(ordered, key=lambda t: t.duration, reverse=True)

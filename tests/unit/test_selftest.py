"""Tests for the built-in self-check suite."""

import io

from tree_harness.failure_log import FailureLog
from tree_harness.selftest import build_selftest_suite, check_hierarchy, check_logging


def test_selftest_suite_structure() -> None:
    """The suite groups the logging and hierarchy checks under 'ttest'."""
    suite = build_selftest_suite()

    assert suite.name == "ttest"
    assert [child.name for child in suite.children] == ["logging", "hierarchy"]


def test_selftest_suite_passes() -> None:
    """A working harness reports no errors for its own checks."""
    suite = build_selftest_suite()

    suite.run()
    sink = io.StringIO()
    suite.report(sink)

    assert suite.error_count() == 0
    assert sink.getvalue() == ""


def test_check_logging_passes() -> None:
    """The logging check records nothing."""
    log = FailureLog("logging")

    check_logging(log)

    assert log.size() == 0


def test_check_hierarchy_passes() -> None:
    """The hierarchy check records nothing."""
    log = FailureLog("hierarchy")

    check_hierarchy(log)

    assert log.size() == 0


def test_build_returns_fresh_tree_each_time() -> None:
    """Each build gives an unrun tree with its own logs."""
    first = build_selftest_suite()
    first.run()

    second = build_selftest_suite()

    assert second is not first
    assert second.error_count() == 0

"""Self-check suite: the harness testing its own log and tree behavior."""

import io

from tree_harness.failure_log import FailureLog
from tree_harness.nodes import TestNode, create_test


def check_logging(log: FailureLog) -> None:
    """Append, conditionally append and report on a fresh log."""
    test_log = FailureLog("test")

    test_log.append("1")
    test_log.append_if("2", False)
    test_log.append_if("3", True)
    test_log.append()

    sink = io.StringIO()
    test_log.report(sink)

    log.append_if("incorrect log", sink.getvalue() != "test::1\ntest::3\ntest\n")


def check_hierarchy(log: FailureLog) -> None:
    """Build a tree failing at every level and check the merged report."""
    compound = create_test(
        "compound",
        [
            create_test("A", lambda failures: failures.append()),
            create_test(
                "sub",
                [
                    create_test("B", lambda failures: failures.append()),
                    create_test("C", lambda failures: failures.append()),
                ],
            ),
        ],
    )

    compound.run()

    log.append_if("error count", compound.error_count() != 3)

    sink = io.StringIO()
    compound.report(sink)

    # Incorporation order is only fixed for sequential runs.
    messages = sorted(sink.getvalue().splitlines())
    expected = ["compound::A", "compound::sub::B", "compound::sub::C"]
    log.append_if("mismatch", messages != expected)


def build_selftest_suite() -> TestNode:
    return create_test(
        "ttest",
        [
            create_test("logging", check_logging),
            create_test("hierarchy", check_hierarchy),
        ],
    )

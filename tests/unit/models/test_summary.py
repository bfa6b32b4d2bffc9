"""Tests for run summary model."""

from tree_harness.models.summary import RunSummary
from tree_harness.nodes import create_test
from tree_harness.testing.factories import RunSummaryFactory


def test_from_node_captures_messages() -> None:
    """Summary holds the root's count and messages."""
    root = create_test("root", [create_test("leaf", lambda log: log.append("x"))])
    root.run()

    summary = RunSummary.from_node(root)

    assert summary.error_count == 1
    assert summary.messages == ("root::leaf::x",)
    assert not summary.succeeded


def test_from_node_is_a_snapshot() -> None:
    """Later runs do not change an existing summary."""
    root = create_test("root", lambda log: log.append())
    root.run()
    summary = RunSummary.from_node(root)

    root.run()

    assert summary.error_count == 1
    assert root.error_count() == 2


def test_succeeded_without_errors() -> None:
    """A summary without messages is a success."""
    summary = RunSummaryFactory.build(messages=[])

    assert summary.error_count == 0
    assert summary.succeeded


def test_factory_count_matches_messages() -> None:
    """Generated summaries are internally consistent."""
    summary = RunSummaryFactory.build()

    assert summary.error_count == len(summary.messages)


def test_to_dict() -> None:
    """Serializes count and messages as plain JSON types."""
    summary = RunSummaryFactory.build(messages=("a::b", "a"))

    assert summary.to_dict() == {"error_count": 2, "messages": ["a::b", "a"]}

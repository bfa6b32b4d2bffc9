"""Hierarchical test composition with qualified failure reports."""

from tree_harness.channel import FailureChannel
from tree_harness.failure_log import FailureLog
from tree_harness.nodes import (
    GroupTest,
    LeafTest,
    NodeOwnershipError,
    TestNode,
    create_test,
    group_test,
    leaf_test,
)

__all__ = [
    "FailureChannel",
    "FailureLog",
    "GroupTest",
    "LeafTest",
    "NodeOwnershipError",
    "TestNode",
    "create_test",
    "group_test",
    "leaf_test",
]

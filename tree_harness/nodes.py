"""Composable test tree: leaf procedures and named groups of sub-tests."""

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from typing import TypeAlias, overload

from tree_harness.failure_log import FailureLog, Sink

log = logging.getLogger(__name__)

Procedure: TypeAlias = Callable[[FailureLog], None]


class NodeOwnershipError(ValueError):
    """Raised when a group is given a child it cannot take ownership of."""


@dataclass(frozen=True, kw_only=True)
class LeafTest:
    """Body of a node that runs a single test procedure."""

    procedure: Procedure


@dataclass(frozen=True, kw_only=True)
class GroupTest:
    """Body of a node that runs its children in declared order."""

    children: Sequence["TestNode"]

    def __post_init__(self) -> None:
        children = tuple(self.children)
        seen: set[int] = set()
        for child in children:
            if not isinstance(child, TestNode):
                raise TypeError(
                    f"Group expects TestNode children, got {type(child).__name__}"
                )
            if id(child) in seen:
                raise NodeOwnershipError(
                    f"Test '{child.name}' is listed more than once in a group"
                )
            seen.add(id(child))
        object.__setattr__(self, "children", children)


TestBody: TypeAlias = LeafTest | GroupTest


@dataclass(eq=False, kw_only=True)
class TestNode:
    """A named test in the tree, owning its failure log.

    Running a node appends to its log; nothing is reset between runs, so
    running twice records every failure twice.

    Build nodes with :func:`create_test`, :func:`leaf_test` or
    :func:`group_test`; only those record which group owns a child.
    """

    __test__ = False

    log: FailureLog
    body: TestBody
    _owner: str | None = field(default=None, init=False, repr=False)

    @property
    def owner(self) -> str | None:
        """Name of the group this node was adopted by, if any."""
        return self._owner

    @property
    def name(self) -> str:
        return self.log.qualified_name

    @property
    def children(self) -> Sequence["TestNode"]:
        match self.body:
            case GroupTest(children=children):
                return children
            case LeafTest():
                return ()

    def run(self) -> None:
        """Execute this node, recording failures in its log.

        Exceptions raised by a test procedure are not caught.
        """
        match self.body:
            case LeafTest(procedure=procedure):
                log.debug("Running test %s", self.name)
                procedure(self.log)
            case GroupTest(children=children):
                log.debug("Running group %s (%d test(s))", self.name, len(children))
                for child in children:
                    child.run()
                    self.log.incorporate(child.log)

    def error_count(self) -> int:
        """Number of failures recorded in this node's log."""
        return self.log.size()

    def report(self, sink: Sink) -> None:
        self.log.report(sink)


def leaf_test(name: str, procedure: Procedure) -> TestNode:
    """Build a node that calls ``procedure`` with its own failure log."""
    if not callable(procedure):
        raise TypeError(f"Test procedure for '{name}' is not callable")
    return TestNode(log=FailureLog(name), body=LeafTest(procedure=procedure))


def group_test(name: str, children: Iterable[TestNode]) -> TestNode:
    """Build a group node that takes ownership of ``children``.

    Raises:
        TypeError: If a child is not a TestNode
        NodeOwnershipError: If a child already belongs to a group or is
            listed more than once

    """
    body = GroupTest(children=tuple(children))
    for child in body.children:
        if child.owner is not None:
            raise NodeOwnershipError(
                f"Test '{child.name}' already belongs to group '{child.owner}'"
            )

    for child in body.children:
        child._owner = name

    return TestNode(log=FailureLog(name), body=body)


@overload
def create_test(name: str, test: Procedure) -> TestNode: ...


@overload
def create_test(name: str, test: Iterable[TestNode]) -> TestNode: ...


def create_test(name: str, test: Procedure | Iterable[TestNode]) -> TestNode:
    """Build a leaf from a procedure or a group from a list of tests.

    Example::

        suite = create_test("suite", [
            create_test("parsing", parsing_test),
            create_test("io", [create_test("read", read_test)]),
        ])

    """
    if callable(test):
        return leaf_test(name, test)
    return group_test(name, test)

"""Loading of test suites from entry points."""

import logging
from collections.abc import Callable
from importlib.metadata import entry_points
from typing import TypeAlias

from tree_harness.nodes import TestNode

log = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "tree_harness.suites"

SuiteFactory: TypeAlias = Callable[[], TestNode]


class SuiteLoadError(Exception):
    """Raised when a suite cannot be loaded."""


class SuiteNotFoundError(SuiteLoadError):
    """Raised when no suite is registered under a key."""


class InvalidSuiteError(SuiteLoadError):
    """Raised when a registered suite target cannot build a test tree."""


def load_suite_factory(key: str) -> SuiteFactory:
    """Load the suite factory registered under ``key``.

    The entry point must name a zero-argument callable returning the root
    test node, e.g. ``selftest = "tree_harness.selftest:build_selftest_suite"``.

    Raises:
        SuiteNotFoundError: If no suite is registered under ``key``
        InvalidSuiteError: If the registered target is not callable

    """
    matches = entry_points(group=ENTRY_POINT_GROUP, name=key)
    if not matches:
        available = sorted(entry_points(group=ENTRY_POINT_GROUP).names)
        raise SuiteNotFoundError(
            f"Suite '{key}' not found. Available suites: {available}"
        )

    # Several distributions may register the same key; the first one wins.
    entry = next(iter(matches))
    log.debug("Loading suite %s from %s", key, entry.value)
    target = entry.load()
    if not callable(target):
        raise InvalidSuiteError(
            f"Suite '{key}' ({entry.value}) must be a callable returning a "
            f"TestNode, got {type(target).__name__}"
        )

    factory: SuiteFactory = target
    return factory

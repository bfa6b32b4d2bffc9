"""Append-only failure log with qualified message names."""

import logging
import threading
from collections.abc import Iterable, Sequence
from typing import Protocol

log = logging.getLogger(__name__)

SEPARATOR = "::"


class Sink(Protocol):
    """Anything a report can be written to (text streams, StringIO, ...)."""

    def write(self, text: str, /) -> object: ...


class FailureLog:
    """Ordered store of failure messages bound to one qualified name.

    Every stored message is either the qualified name itself or the
    qualified name followed by ``::`` and a detail. Messages are never
    removed or edited.

    The log is safe to mutate from several threads. ``append`` holds the
    append lock for that single message. ``incorporate`` additionally holds
    the incorporate lock for its whole batch, so two incorporations into the
    same log never interleave. A plain ``append`` from another thread may
    still land in the middle of an incorporation batch.

    Reporting to a shared stream from several threads can interleave lines
    of different logs.
    """

    def __init__(self, qualified_name: str) -> None:
        self._qualified_name = qualified_name
        self._messages: list[str] = []
        self._append_lock = threading.Lock()
        self._incorporate_lock = threading.Lock()

    def __repr__(self) -> str:
        return f"FailureLog({self._qualified_name!r}, size={self.size()})"

    def __len__(self) -> int:
        return self.size()

    @property
    def qualified_name(self) -> str:
        """Name prefixed to every message of this log."""
        return self._qualified_name

    @property
    def messages(self) -> Sequence[str]:
        """Snapshot of the stored messages in insertion order."""
        with self._append_lock:
            return tuple(self._messages)

    def size(self) -> int:
        """Return the number of stored messages."""
        return len(self._messages)

    def append(self, detail: str | None = None) -> None:
        """Record a failure, optionally with a detail."""
        if detail:
            message = f"{self._qualified_name}{SEPARATOR}{detail}"
        else:
            message = self._qualified_name
        with self._append_lock:
            self._messages.append(message)

    def append_if(self, detail: str | None, condition: bool) -> None:
        """Record a failure only when ``condition`` is true."""
        if condition:
            self.append(detail)

    def append_batch(self, details: Iterable[str | None]) -> int:
        """Append several failures as one contiguous batch.

        The batch cannot interleave with an incorporation or another batch.
        Returns the number of messages appended.
        """
        count = 0
        with self._incorporate_lock:
            for detail in details:
                self.append(detail)
                count += 1
        return count

    def incorporate(self, other: "FailureLog") -> None:
        """Append every message of ``other``, prefixed with this log's name.

        ``other`` is not modified.
        """
        absorbed = other.messages
        self.append_batch(absorbed)
        log.debug(
            "Incorporated %d message(s) from %s into %s",
            len(absorbed),
            other.qualified_name,
            self._qualified_name,
        )

    def report(self, sink: Sink) -> None:
        """Write every message to ``sink``, one per line."""
        for message in self.messages:
            sink.write(f"{message}\n")

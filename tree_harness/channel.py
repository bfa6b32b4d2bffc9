"""Queue-backed failure reporting for procedures running on worker threads."""

import logging
import queue
from collections.abc import Iterator

from tree_harness.failure_log import FailureLog

log = logging.getLogger(__name__)


class FailureChannel:
    """Collects failure records from any thread and feeds them to one log.

    Senders never touch the log. The owning thread calls :meth:`drain` to
    move every pending record into the log as one contiguous batch.
    """

    def __init__(self, target: FailureLog) -> None:
        self._target = target
        self._queue: queue.SimpleQueue[str | None] = queue.SimpleQueue()

    @property
    def target(self) -> FailureLog:
        return self._target

    def send(self, detail: str | None = None) -> None:
        """Queue a failure record; safe to call from any thread."""
        self._queue.put(detail)

    def send_if(self, detail: str | None, condition: bool) -> None:
        if condition:
            self.send(detail)

    def pending(self) -> int:
        """Approximate number of records waiting to be drained."""
        return self._queue.qsize()

    def drain(self) -> int:
        """Append the records queued so far to the target log in FIFO order.

        Records sent while draining stay queued for the next call.
        """
        limit = self._queue.qsize()
        drained = self._target.append_batch(self._pending_records(limit))
        if drained:
            log.debug(
                "Drained %d record(s) into %s", drained, self._target.qualified_name
            )
        return drained

    def _pending_records(self, limit: int) -> Iterator[str | None]:
        for _ in range(limit):
            try:
                yield self._queue.get_nowait()
            except queue.Empty:
                return

"""Summary of a finished test tree run."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from tree_harness.nodes import TestNode


@dataclass(frozen=True, kw_only=True)
class RunSummary:
    """Error count and qualified failure messages of a root node.

    Captured after the run; later runs of the same node do not change it.
    """

    error_count: int
    messages: Sequence[str]

    @property
    def succeeded(self) -> bool:
        return self.error_count == 0

    @classmethod
    def from_node(cls, node: TestNode) -> "RunSummary":
        messages = node.log.messages
        return cls(error_count=len(messages), messages=messages)

    def to_dict(self) -> dict[str, Any]:
        return {"error_count": self.error_count, "messages": list(self.messages)}

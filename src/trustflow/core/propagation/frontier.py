"""Max-priority frontier with lazy invalidation.

The frontier never updates an entry in place. A node whose score changes
is pushed again with its new priority, and the caller discards entries for
nodes it has already finalized when they are popped.

Ordering:
    1. Higher priority first.
    2. Equal priorities pop in ascending identifier order.
    3. Entries for the same identifier and priority pop in push order.

Identifiers sharing a frontier must therefore be mutually comparable.
"""

from __future__ import annotations

import heapq
import itertools
import math

from trustflow.core.graph.models import NodeId


def quantize(net_score: float, scale: int) -> int:
    """Return the integer frontier priority for a net score.

    ``floor(net_score * scale)``. Negative net scores yield negative
    priorities, which sort after every non-negative one.
    """
    return math.floor(net_score * scale)


class PriorityFrontier:
    """A max-priority queue of node identifiers that allows duplicates."""

    def __init__(self) -> None:
        self._heap: list[tuple[int, NodeId, int]] = []
        self._sequence = itertools.count()
        self._pushes = 0
        self._pops = 0

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    @property
    def pushes(self) -> int:
        """Total number of pushes since creation."""
        return self._pushes

    @property
    def pops(self) -> int:
        """Total number of pops since creation."""
        return self._pops

    def push(self, node: NodeId, priority: int) -> None:
        """Add an entry; earlier entries for ``node`` are left in place."""
        # heapq is a min-heap, so the priority is negated.
        heapq.heappush(self._heap, (-priority, node, next(self._sequence)))
        self._pushes += 1

    def pop(self) -> tuple[NodeId, int]:
        """Remove and return the highest-priority ``(node, priority)`` entry.

        Raises:
            IndexError: If the frontier is empty.
        """
        if not self._heap:
            raise IndexError("pop from an empty frontier")
        neg_priority, node, _ = heapq.heappop(self._heap)
        self._pops += 1
        return node, -neg_priority

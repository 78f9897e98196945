"""Node model for the two-channel trust graph.

A node owns its outgoing edges. Each edge carries two independent weight
channels, kept in separate maps:

- ``positive_edges`` -- fraction of trust transferred to the target.
- ``negative_edges`` -- fraction of distrust transferred to the target.

A missing entry in either map means weight 0.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from collections.abc import Hashable

NodeId = Hashable


@dataclass
class Node:
    """Outgoing positive and negative edge sets of a single node.

    Attributes:
        positive_edges: Target identifier to trust weight.
        negative_edges: Target identifier to distrust weight.
    """

    positive_edges: dict[NodeId, float] = field(default_factory=dict)
    negative_edges: dict[NodeId, float] = field(default_factory=dict)

    def add_positive_edge(self, target: NodeId, weight: float) -> None:
        """Record (or overwrite) the trust weight towards ``target``."""
        self.positive_edges[target] = weight

    def add_negative_edge(self, target: NodeId, weight: float) -> None:
        """Record (or overwrite) the distrust weight towards ``target``."""
        self.negative_edges[target] = weight

    def get_positive_weight(self, target: NodeId) -> float:
        return self.positive_edges.get(target, 0.0)

    def get_negative_weight(self, target: NodeId) -> float:
        return self.negative_edges.get(target, 0.0)

    def out_neighbours(self) -> set[NodeId]:
        """Return the union of positive and negative edge targets."""
        return set(self.positive_edges) | set(self.negative_edges)

    @property
    def out_degree(self) -> int:
        """Number of distinct targets across both channels."""
        return len(self.out_neighbours())

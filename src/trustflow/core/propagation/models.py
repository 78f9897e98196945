"""Propagation data models: configuration, score table, results, statistics.

Defines the data structures used by the propagation engine:

- ``PropagationConfig`` -- engine configuration (priority quantization).
- ``ScoreTable`` -- per-run trust/distrust scores plus the visited set.
- ``Result`` -- final scores for one node.
- ``Relaxation`` -- record of a single neighbour update.
- ``PropagationStats`` -- queue and relaxation counters for one run.
- ``PropagationRun`` -- results and statistics of one run.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from trustflow.core.graph.models import NodeId


# ---------------------------------------------------------------------------
# PropagationConfig: engine configuration
# ---------------------------------------------------------------------------


DEFAULT_PRIORITY_SCALE: int = 10


@dataclass
class PropagationConfig:
    """Configuration for the propagation engine.

    Attributes:
        priority_scale: Multiplier applied to a node's net score before it
            is floored into an integer frontier priority. The default of 10
            buckets net scores into tenths, so scores such as 0.54 and 0.50
            share priority 5 and are ordered by identifier.
    """

    priority_scale: int = DEFAULT_PRIORITY_SCALE

    def validate(self) -> None:
        """Raise ValueError if the configuration is invalid.

        Raises:
            ValueError: If ``priority_scale`` is not a positive integer.
        """
        scale = self.priority_scale
        if isinstance(scale, bool) or not isinstance(scale, int):
            raise ValueError(
                f"priority_scale must be an integer, got {type(scale).__name__}"
            )
        if scale <= 0:
            raise ValueError(f"priority_scale must be positive, got {scale}")


# ---------------------------------------------------------------------------
# ScoreTable: mutable per-run state
# ---------------------------------------------------------------------------


class ScoreTable:
    """Trust and distrust scores for every node, plus the visited set.

    A fresh table is created for each propagation run and discarded when
    the run returns. The source starts at trust 1.0; every other node
    starts at 0.0 on both channels.
    """

    def __init__(self, nodes: Iterable[NodeId], source: NodeId) -> None:
        self.p_score: dict[NodeId, float] = {}
        self.n_score: dict[NodeId, float] = {}
        self.visited: set[NodeId] = set()
        for node in nodes:
            self.p_score[node] = 1.0 if node == source else 0.0
            self.n_score[node] = 0.0

    def __len__(self) -> int:
        return len(self.p_score)

    def net_score(self, node: NodeId) -> float:
        """Return ``p_score - n_score`` for a node, unclamped."""
        return self.p_score[node] - self.n_score[node]

    def effective_score(self, node: NodeId) -> float:
        """Return the net score clamped at zero.

        This is the signal a finalized node propagates to its neighbours.
        """
        return max(0.0, self.net_score(node))

    def is_visited(self, node: NodeId) -> bool:
        return node in self.visited

    def mark_visited(self, node: NodeId) -> None:
        self.visited.add(node)


# ---------------------------------------------------------------------------
# Result: final scores for one node
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Result:
    """Final propagated scores for a single node.

    Attributes:
        node: Identifier of the node.
        p_score: Accumulated trust reaching the node from the source.
        n_score: Accumulated distrust reaching the node from the source.
    """

    node: NodeId
    p_score: float
    n_score: float

    @property
    def net_score(self) -> float:
        """Return ``p_score - n_score``."""
        return self.p_score - self.n_score

    def as_dict(self, precision: int | None = None) -> dict[str, Any]:
        """Return the result as a JSON-friendly dictionary.

        Args:
            precision: If given, round the scores to this many places.
        """
        values = (self.p_score, self.n_score, self.net_score)
        if precision is not None:
            values = tuple(round(v, precision) for v in values)
        p_score, n_score, net_score = values
        return {
            "node": self.node,
            "p_score": p_score,
            "n_score": n_score,
            "net_score": net_score,
        }


# ---------------------------------------------------------------------------
# Relaxation / statistics
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Relaxation:
    """A single neighbour update performed by the relaxation loop.

    Attributes:
        node: The finalized node whose edges were followed.
        neighbour: The node whose scores were updated.
        node_score: Clamped net score of ``node`` at the time of the update.
        p_before: Neighbour trust before the update.
        p_after: Neighbour trust after the update.
        n_before: Neighbour distrust before the update.
        n_after: Neighbour distrust after the update.
    """

    node: NodeId
    neighbour: NodeId
    node_score: float
    p_before: float
    p_after: float
    n_before: float
    n_after: float


@dataclass
class PropagationStats:
    """Counters collected during one propagation run.

    Attributes:
        nodes: Number of nodes in the graph.
        pushes: Frontier pushes, initial pushes included.
        pops: Frontier pops, stale ones included.
        stale_pops: Pops discarded because the node was already visited.
        relaxations: Neighbour updates (each one causes exactly one push).
    """

    nodes: int = 0
    pushes: int = 0
    pops: int = 0
    stale_pops: int = 0
    relaxations: int = 0

    def as_dict(self) -> dict[str, int]:
        return {
            "nodes": self.nodes,
            "pushes": self.pushes,
            "pops": self.pops,
            "stale_pops": self.stale_pops,
            "relaxations": self.relaxations,
        }


@dataclass
class PropagationRun:
    """Outcome of one propagation run.

    Attributes:
        source: The node propagation started from.
        results: One ``Result`` per node other than the source.
        stats: Queue and relaxation counters.
    """

    source: NodeId
    results: list[Result] = field(default_factory=list)
    stats: PropagationStats = field(default_factory=PropagationStats)

    def as_mapping(self) -> dict[NodeId, Result]:
        """Return the results keyed by node identifier."""
        return {result.node: result for result in self.results}

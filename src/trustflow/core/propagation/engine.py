"""Best-first trust and distrust propagation engine.

Generalizes single-source shortest-path relaxation to two score channels.
Starting from a source with trust 1.0, nodes are finalized in order of
their (quantized) net score, and each finalized node pulls the scores of
its unvisited neighbours towards its own clamped net score:

    node_score = max(0, p[node] - n[node])

    if node_score > p[nb]:  p[nb] += (node_score - p[nb]) * w_pos(node, nb)
    if node_score > n[nb]:  n[nb] += (node_score - n[nb]) * w_neg(node, nb)

A neighbour whose unclamped net score already exceeds ``node_score`` is
skipped. The comparison is deliberately asymmetric (unclamped neighbour
against clamped node) and must stay that way: comparing two clamped or two
unclamped values changes which paths are allowed to relax a node.

Scores only ever move towards a larger value, so both channels are
non-decreasing for every node over the course of a run.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from trustflow.core.graph.graph import TrustGraph
from trustflow.core.graph.models import NodeId
from trustflow.exceptions import NodeNotFound

from .frontier import PriorityFrontier, quantize
from .models import (
    PropagationConfig,
    PropagationRun,
    PropagationStats,
    Relaxation,
    Result,
    ScoreTable,
)

logger = logging.getLogger(__name__)

RelaxationObserver = Callable[[Relaxation], None]


class PropagationEngine:
    """Single-source trust/distrust propagation over a ``TrustGraph``.

    The engine holds configuration only. All per-run state (score table,
    visited set, frontier) is created inside :meth:`run` and discarded when
    it returns, so one engine may be reused for any number of graphs. The
    graph is never written to.

    Args:
        config: Engine configuration. If None, uses the default
            ``PropagationConfig`` (priority scale 10).

    Raises:
        ValueError: If the configuration is invalid.
    """

    def __init__(self, config: PropagationConfig | None = None) -> None:
        self._config = config or PropagationConfig()
        self._config.validate()

    @property
    def config(self) -> PropagationConfig:
        """Return the engine configuration."""
        return self._config

    def priority(self, net_score: float) -> int:
        """Return the frontier priority for a net score."""
        return quantize(net_score, self._config.priority_scale)

    def compute(self, graph: TrustGraph, source: NodeId) -> list[Result]:
        """Compute propagated scores for every node other than ``source``.

        Args:
            graph: The graph to propagate over.
            source: The node trust originates from.

        Returns:
            One ``Result`` per node except the source, in the graph's node
            iteration order.

        Raises:
            NodeNotFound: If ``source`` is not in the graph.
        """
        return self.run(graph, source).results

    def run(
        self,
        graph: TrustGraph,
        source: NodeId,
        observer: RelaxationObserver | None = None,
    ) -> PropagationRun:
        """Run propagation and return results together with statistics.

        Args:
            graph: The graph to propagate over.
            source: The node trust originates from.
            observer: Optional callable invoked with a ``Relaxation`` record
                after every neighbour update.

        Returns:
            A ``PropagationRun`` holding results and counters.

        Raises:
            NodeNotFound: If ``source`` is not in the graph.
        """
        if source not in graph:
            raise NodeNotFound(source)

        scores = ScoreTable(graph.nodes(), source)
        frontier = PriorityFrontier()
        stats = PropagationStats(nodes=len(scores))

        for node in graph.nodes():
            frontier.push(node, self.priority(scores.net_score(node)))

        while frontier:
            node, _ = frontier.pop()
            if scores.is_visited(node):
                stats.stale_pops += 1
                continue
            scores.mark_visited(node)
            self._relax_neighbours(graph, node, scores, frontier, stats, observer)

        stats.pushes = frontier.pushes
        stats.pops = frontier.pops

        results = [
            Result(node, scores.p_score[node], scores.n_score[node])
            for node in graph.nodes()
            if node != source
        ]
        logger.debug(
            "Propagated from %r over %d nodes: %d pushes, %d pops (%d stale), "
            "%d relaxations",
            source,
            stats.nodes,
            stats.pushes,
            stats.pops,
            stats.stale_pops,
            stats.relaxations,
        )
        return PropagationRun(source=source, results=results, stats=stats)

    def _relax_neighbours(
        self,
        graph: TrustGraph,
        node: NodeId,
        scores: ScoreTable,
        frontier: PriorityFrontier,
        stats: PropagationStats,
        observer: RelaxationObserver | None,
    ) -> None:
        """Relax every unvisited neighbour of a freshly finalized node."""
        node_score = scores.effective_score(node)

        for neighbour in graph.neighbours(node):
            if scores.is_visited(neighbour):
                continue
            # Unclamped neighbour net score against the clamped node score.
            if scores.net_score(neighbour) > node_score:
                continue

            positive_weight = graph.get_positive_weight(node, neighbour)
            negative_weight = graph.get_negative_weight(node, neighbour)

            p_before = scores.p_score[neighbour]
            n_before = scores.n_score[neighbour]
            if node_score > p_before:
                scores.p_score[neighbour] = (
                    p_before + (node_score - p_before) * positive_weight
                )
            if node_score > n_before:
                scores.n_score[neighbour] = (
                    n_before + (node_score - n_before) * negative_weight
                )

            stats.relaxations += 1
            frontier.push(neighbour, self.priority(scores.net_score(neighbour)))

            if observer is not None:
                observer(
                    Relaxation(
                        node=node,
                        neighbour=neighbour,
                        node_score=node_score,
                        p_before=p_before,
                        p_after=scores.p_score[neighbour],
                        n_before=n_before,
                        n_after=scores.n_score[neighbour],
                    )
                )


def compute_scores(graph: TrustGraph, source: NodeId) -> list[Result]:
    """Compute propagated scores with a default-configured engine.

    See :meth:`PropagationEngine.compute`.
    """
    return PropagationEngine().compute(graph, source)

"""Trust graph data structure.

Implements a directed graph keyed by opaque node identifiers whose edges
carry two weight channels (trust and distrust). Edge insertion is the only
way nodes enter the graph: both endpoints are created on demand, and there
is no removal operation.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Iterable

from trustflow.core.graph.models import Node, NodeId
from trustflow.exceptions import InvalidWeight, NodeNotFound


def _check_weight(
    weight: object,
    source: NodeId,
    target: NodeId,
    strict: bool,
) -> float:
    """Validate an edge weight and return it as a float.

    Any real scalar is accepted (numpy scalars and ``Fraction`` included).
    Non-real values, ``bool`` and NaN/infinity are always rejected. In
    strict mode the weight must also lie in [0, 1].

    Raises:
        InvalidWeight: If the weight is not acceptable.
    """
    if isinstance(weight, bool) or not isinstance(weight, numbers.Real):
        raise InvalidWeight(weight, source, target, strict)
    value = float(weight)
    if not math.isfinite(value):
        raise InvalidWeight(weight, source, target, strict)
    if strict and not 0.0 <= value <= 1.0:
        raise InvalidWeight(weight, source, target, strict)
    return value


class TrustGraph:
    """Directed two-channel trust graph.

    Each node keeps its outgoing trust edges and distrust edges separately.
    Re-inserting an edge for the same (source, target) pair overwrites the
    previous weight on that channel; weights never accumulate.

    Thread safety: This class is NOT thread-safe. Build the graph first,
    then treat it as read-only while computations run against it.

    Args:
        strict: When True (the default), weights outside [0, 1] are
            rejected with ``InvalidWeight``. When False, any finite number
            is accepted.
    """

    def __init__(self, strict: bool = True) -> None:
        self._nodes: dict[NodeId, Node] = {}
        self._strict = strict

    @property
    def strict(self) -> bool:
        """Return whether edge weights are restricted to [0, 1]."""
        return self._strict

    @property
    def node_count(self) -> int:
        """Return the number of nodes in the graph."""
        return len(self._nodes)

    @property
    def edge_count(self) -> int:
        """Return the number of distinct (source, target) adjacencies."""
        return sum(node.out_degree for node in self._nodes.values())

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node: object) -> bool:
        return node in self._nodes

    def __repr__(self) -> str:
        return f"TrustGraph(nodes={self.node_count}, edges={self.edge_count})"

    # -- Construction --

    def _ensure_node(self, node: NodeId) -> Node:
        if node not in self._nodes:
            self._nodes[node] = Node()
        return self._nodes[node]

    def add_positive_edge(self, source: NodeId, target: NodeId, weight: float) -> None:
        """Record the trust weight on the edge ``source -> target``.

        Both endpoints are created if they are not yet in the graph. The
        weight is validated before anything is inserted, so a rejected
        edge leaves the graph unchanged.

        Args:
            source: Identifier of the node extending trust.
            target: Identifier of the node receiving trust.
            weight: Fraction of the source's score transferred.

        Raises:
            InvalidWeight: If the weight is not acceptable.
        """
        value = _check_weight(weight, source, target, self._strict)
        self._ensure_node(target)
        self._ensure_node(source).add_positive_edge(target, value)

    def add_negative_edge(self, source: NodeId, target: NodeId, weight: float) -> None:
        """Record the distrust weight on the edge ``source -> target``.

        See :meth:`add_positive_edge` for endpoint creation and validation.
        """
        value = _check_weight(weight, source, target, self._strict)
        self._ensure_node(target)
        self._ensure_node(source).add_negative_edge(target, value)

    # -- Queries --

    def get_node(self, node: NodeId) -> Node:
        """Return the ``Node`` stored for an identifier.

        Raises:
            NodeNotFound: If the identifier was never inserted.
        """
        try:
            return self._nodes[node]
        except KeyError:
            raise NodeNotFound(node) from None

    def get_positive_weight(self, source: NodeId, target: NodeId) -> float:
        """Return the trust weight of ``source -> target``, or 0.0 if absent.

        Raises:
            NodeNotFound: If ``source`` is not in the graph.
        """
        return self.get_node(source).get_positive_weight(target)

    def get_negative_weight(self, source: NodeId, target: NodeId) -> float:
        """Return the distrust weight of ``source -> target``, or 0.0 if absent.

        Raises:
            NodeNotFound: If ``source`` is not in the graph.
        """
        return self.get_node(source).get_negative_weight(target)

    def neighbours(self, node: NodeId) -> set[NodeId]:
        """Return the deduplicated targets of both edge channels of ``node``.

        Raises:
            NodeNotFound: If ``node`` is not in the graph.
        """
        return self.get_node(node).out_neighbours()

    def nodes(self) -> Iterable[NodeId]:
        """Return a live, restartable view of every node identifier."""
        return self._nodes.keys()

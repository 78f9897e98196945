"""trustflow exception hierarchy.

All public exceptions inherit from TrustflowError, giving callers a single
base class to catch when they want to handle any trustflow-specific failure
without swallowing unrelated errors.
"""

from __future__ import annotations

from collections.abc import Hashable


class TrustflowError(Exception):
    """Base exception for all trustflow errors."""


class NodeNotFound(TrustflowError):
    """Raised when a node identifier is absent from the graph.

    Covers edge-weight queries, neighbour queries, and propagation
    requests whose source was never inserted into the graph.
    """

    def __init__(self, node: Hashable) -> None:
        super().__init__(f"Node not found in graph: {node!r}")
        self.node = node


class InvalidWeight(TrustflowError):
    """Raised when an edge weight is rejected at insertion time.

    Weights are fractions of a score transferred along an edge, so a
    strict graph only accepts finite numbers in [0, 1]. A lenient graph
    accepts any finite real number.
    """

    def __init__(
        self,
        weight: object,
        source: Hashable,
        target: Hashable,
        strict: bool = True,
    ) -> None:
        expected = "a finite number in [0, 1]" if strict else "a finite real number"
        super().__init__(
            f"Invalid weight {weight!r} for edge {source!r} -> {target!r}: "
            f"expected {expected}"
        )
        self.weight = weight
        self.source = source
        self.target = target
        self.strict = strict


class InvalidMatrix(TrustflowError):
    """Raised when an EigenTrust input is malformed.

    Covers non-square or ragged local trust matrices, negative or
    non-finite entries, self-ratings on the diagonal, and pre-trust
    vectors whose length does not match the matrix.
    """

"""EigenTrust-style power iteration.

Computes a global trust vector from a local trust matrix by repeated
multiplication, and a one-hop distrust vector weighted by that trust:

    C      = row-normalized local trust (pre-trust for empty rows)
    s_0    = pre_trust
    s_k+1  = C^T s_k                     (fixed number of rounds)

    D      = row-normalized local distrust
    d      = D^T s                       (single pass)

This is independent of the best-first relaxation in
``trustflow.core.propagation`` and is useful for cross-checking it.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np

from .models import LocalTrustMatrix

logger = logging.getLogger(__name__)

DEFAULT_ITERATIONS: int = 30


def _as_matrix(matrix: LocalTrustMatrix | Sequence[Sequence[float]]) -> LocalTrustMatrix:
    if isinstance(matrix, LocalTrustMatrix):
        return matrix
    return LocalTrustMatrix(matrix)


class EigenTrustEngine:
    """Power-iteration trust and distrust computation.

    Args:
        iterations: Number of multiplication rounds for :meth:`trust`.
            Default 30.

    Raises:
        ValueError: If ``iterations`` is not a non-negative integer.
    """

    def __init__(self, iterations: int = DEFAULT_ITERATIONS) -> None:
        if isinstance(iterations, bool) or not isinstance(iterations, int):
            raise ValueError(
                f"iterations must be an integer, got {type(iterations).__name__}"
            )
        if iterations < 0:
            raise ValueError(f"iterations must be non-negative, got {iterations}")
        self._iterations = iterations

    @property
    def iterations(self) -> int:
        """Return the configured number of rounds."""
        return self._iterations

    def trust(
        self,
        matrix: LocalTrustMatrix | Sequence[Sequence[float]],
        pre_trust: Sequence[float],
    ) -> list[float]:
        """Compute the global trust vector.

        Args:
            matrix: Local trust ratings, one row per rating peer.
            pre_trust: Starting distribution and fallback row.

        Returns:
            Global trust per peer, in matrix order.

        Raises:
            InvalidMatrix: If the matrix or pre-trust vector is malformed.
        """
        local = _as_matrix(matrix)
        start = local.pre_trust_vector(pre_trust)
        normalised = local.normalised(start)

        scores = start
        for _ in range(self._iterations):
            scores = normalised.T @ scores

        logger.debug(
            "EigenTrust over %d peers after %d rounds: %s",
            local.size,
            self._iterations,
            np.round(scores, 4).tolist(),
        )
        return scores.tolist()

    def distrust(
        self,
        matrix: LocalTrustMatrix | Sequence[Sequence[float]],
        trust: Sequence[float],
        pre_trust: Sequence[float],
    ) -> list[float]:
        """Compute one-hop distrust weighted by each rater's global trust.

        Args:
            matrix: Local distrust ratings, one row per rating peer.
            trust: Global trust vector, typically from :meth:`trust`.
            pre_trust: Fallback row for peers that rated no one.

        Returns:
            Distrust per peer, in matrix order.

        Raises:
            InvalidMatrix: If any input is malformed.
        """
        local = _as_matrix(matrix)
        weights = local.trust_vector(trust)
        normalised = local.normalised(pre_trust)
        scores = normalised.T @ weights
        logger.debug(
            "EigenTrust distrust over %d peers: %s",
            local.size,
            np.round(scores, 4).tolist(),
        )
        return scores.tolist()

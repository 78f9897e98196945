"""Cross-validation between best-first propagation and EigenTrust.

The two algorithms compute different quantities, but on a star graph where
the source is the only rater they must rank the rated peers identically:
propagation hands each peer its edge weight, and one EigenTrust round from
a pre-trust vector concentrated on the source hands each peer its
normalized rating.
"""

from __future__ import annotations

import pytest

from trustflow.core.eigentrust import EigenTrustEngine
from trustflow.core.graph import TrustGraph
from trustflow.core.propagation import compute_scores

_PEERS = ["S", "A", "B", "C"]
_RATINGS = {"A": 0.9, "B": 0.5, "C": 0.1}


def _star_graph() -> TrustGraph:
    g = TrustGraph()
    for peer, weight in _RATINGS.items():
        g.add_positive_edge("S", peer, weight)
    return g


def _star_matrix() -> list[list[float]]:
    row = [0.0] + [_RATINGS[p] for p in _PEERS[1:]]
    return [row] + [[0.0] * len(_PEERS) for _ in _PEERS[1:]]


class TestStarGraphAgreement:
    """Both algorithms agree on a single-rater star."""

    def test_same_ranking(self) -> None:
        propagated = {r.node: r.net_score for r in compute_scores(_star_graph(), "S")}
        eigen = EigenTrustEngine(iterations=1).trust(_star_matrix(), [1.0, 0.0, 0.0, 0.0])
        eigen_by_peer = dict(zip(_PEERS, eigen))

        def rank(scores: dict) -> list[str]:
            return sorted(_RATINGS, key=lambda peer: -scores[peer])

        assert rank(propagated) == rank(eigen_by_peer) == ["A", "B", "C"]

    def test_scores_proportional(self) -> None:
        """EigenTrust's round equals the propagated scores over their sum."""
        propagated = {r.node: r.p_score for r in compute_scores(_star_graph(), "S")}
        eigen = EigenTrustEngine(iterations=1).trust(_star_matrix(), [1.0, 0.0, 0.0, 0.0])
        total = sum(propagated.values())
        for peer, value in zip(_PEERS[1:], eigen[1:]):
            assert value == pytest.approx(propagated[peer] / total)
        assert eigen[0] == pytest.approx(0.0)

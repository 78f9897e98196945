"""Shared fixtures for trustflow tests."""

from __future__ import annotations

import pytest

from trustflow.core.graph import TrustGraph


@pytest.fixture
def chain_graph() -> TrustGraph:
    """A -> B (0.6), A -> C (0.5), B -> C (0.4), C -> D (0.5), trust only."""
    g = TrustGraph()
    g.add_positive_edge("A", "B", 0.6)
    g.add_positive_edge("A", "C", 0.5)
    g.add_positive_edge("B", "C", 0.4)
    g.add_positive_edge("C", "D", 0.5)
    return g


@pytest.fixture
def distrust_graph() -> TrustGraph:
    """A single distrust edge A -> B with weight 1.0."""
    g = TrustGraph()
    g.add_negative_edge("A", "B", 1.0)
    return g


@pytest.fixture
def mixed_graph() -> TrustGraph:
    """A graph with both channels, a cycle, and an unreachable component.

    S -> A: trust 0.8, distrust 0.5
    S -> B: trust 1.0
    A -> B: distrust 0.4 (cycle back via B -> A)
    B -> A: trust 0.3
    B -> C: distrust 0.5
    X -> Y: trust 1.0 (unreachable from S)
    """
    g = TrustGraph()
    g.add_positive_edge("S", "A", 0.8)
    g.add_negative_edge("S", "A", 0.5)
    g.add_positive_edge("S", "B", 1.0)
    g.add_negative_edge("A", "B", 0.4)
    g.add_positive_edge("B", "A", 0.3)
    g.add_negative_edge("B", "C", 0.5)
    g.add_positive_edge("X", "Y", 1.0)
    return g

"""Tests for the lazy-deletion priority frontier and key quantization."""

from __future__ import annotations

import pytest

from trustflow.core.propagation import PriorityFrontier, quantize


class TestQuantize:
    """floor(net_score * scale) priority keys."""

    @pytest.mark.parametrize(
        ("net_score", "expected"),
        [
            (1.0, 10),
            (0.6, 6),
            (0.54, 5),
            (0.5, 5),
            (0.0, 0),
            (-0.05, -1),
            (-1.0, -10),
        ],
    )
    def test_default_scale(self, net_score: float, expected: int) -> None:
        assert quantize(net_score, 10) == expected

    def test_custom_scale(self) -> None:
        assert quantize(0.54, 100) == 54
        assert quantize(0.54, 1) == 0

    def test_returns_int(self) -> None:
        assert isinstance(quantize(0.75, 10), int)


class TestPriorityFrontier:
    """Ordering, duplicates, and counters."""

    def test_empty_frontier_is_falsy(self) -> None:
        frontier = PriorityFrontier()
        assert not frontier
        assert len(frontier) == 0

    def test_pop_empty_raises(self) -> None:
        with pytest.raises(IndexError):
            PriorityFrontier().pop()

    def test_highest_priority_first(self) -> None:
        frontier = PriorityFrontier()
        frontier.push("low", 1)
        frontier.push("high", 9)
        frontier.push("negative", -3)
        assert [frontier.pop() for _ in range(3)] == [
            ("high", 9),
            ("low", 1),
            ("negative", -3),
        ]

    def test_ties_pop_in_identifier_order(self) -> None:
        frontier = PriorityFrontier()
        for node in ["C", "A", "B"]:
            frontier.push(node, 5)
        assert [frontier.pop()[0] for _ in range(3)] == ["A", "B", "C"]

    def test_duplicates_coexist(self) -> None:
        """Pushing a node again keeps the older entry in the queue."""
        frontier = PriorityFrontier()
        frontier.push("A", 0)
        frontier.push("A", 7)
        assert len(frontier) == 2
        assert frontier.pop() == ("A", 7)
        assert frontier.pop() == ("A", 0)

    def test_counters(self) -> None:
        frontier = PriorityFrontier()
        frontier.push("A", 1)
        frontier.push("B", 2)
        frontier.pop()
        assert frontier.pushes == 2
        assert frontier.pops == 1
        assert len(frontier) == 1

    def test_integer_identifiers(self) -> None:
        frontier = PriorityFrontier()
        frontier.push(3, 0)
        frontier.push(1, 0)
        assert frontier.pop() == (1, 0)

"""Single-source trust and distrust propagation.

This package implements the best-first relaxation engine that spreads
trust and distrust from a source node through a ``TrustGraph``.

Submodules:
    models    -- PropagationConfig, ScoreTable, Result, Relaxation,
                 PropagationStats, PropagationRun
    frontier  -- PriorityFrontier (lazy-deletion max-heap), quantize
    engine    -- PropagationEngine, compute_scores
"""

from trustflow.core.propagation.models import (
    DEFAULT_PRIORITY_SCALE,
    PropagationConfig,
    PropagationRun,
    PropagationStats,
    Relaxation,
    Result,
    ScoreTable,
)
from trustflow.core.propagation.frontier import PriorityFrontier, quantize
from trustflow.core.propagation.engine import PropagationEngine, compute_scores

__all__ = [
    "DEFAULT_PRIORITY_SCALE",
    "PriorityFrontier",
    "PropagationConfig",
    "PropagationEngine",
    "PropagationRun",
    "PropagationStats",
    "Relaxation",
    "Result",
    "ScoreTable",
    "compute_scores",
    "quantize",
]

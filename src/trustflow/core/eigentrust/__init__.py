"""EigenTrust-style power iteration over a local trust matrix.

Submodules:
    models  -- LocalTrustMatrix (validation), normalise_rows
    engine  -- EigenTrustEngine (trust and distrust vectors)
"""

from trustflow.core.eigentrust.models import LocalTrustMatrix, normalise_rows
from trustflow.core.eigentrust.engine import DEFAULT_ITERATIONS, EigenTrustEngine

__all__ = [
    "DEFAULT_ITERATIONS",
    "EigenTrustEngine",
    "LocalTrustMatrix",
    "normalise_rows",
]

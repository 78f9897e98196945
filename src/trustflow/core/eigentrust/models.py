"""Local trust matrix model and row normalization.

A local trust matrix holds one row of ratings per peer: entry ``[i][j]`` is
how much peer ``i`` trusts (or distrusts) peer ``j``. Ratings are raw,
non-negative magnitudes; normalization turns each row into a distribution.

References:
    Kamvar, Schlosser, Garcia-Molina (2003): The EigenTrust Algorithm for
    Reputation Management in P2P Networks.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from trustflow.exceptions import InvalidMatrix


def _as_vector(values: Sequence[float] | np.ndarray, size: int, name: str) -> np.ndarray:
    try:
        vector = np.asarray(values, dtype=float)
    except (TypeError, ValueError) as exc:
        raise InvalidMatrix(f"{name} must be numeric: {exc}") from exc
    if vector.shape != (size,):
        raise InvalidMatrix(
            f"{name} must have {size} entries, got shape {vector.shape}"
        )
    if not np.all(np.isfinite(vector)):
        raise InvalidMatrix(f"{name} must contain only finite values")
    if np.any(vector < 0.0):
        raise InvalidMatrix(f"{name} must be non-negative")
    return vector


class LocalTrustMatrix:
    """Validated square matrix of peer-to-peer ratings.

    Validation rules:
    1. The matrix is two-dimensional, square, and has at least one peer.
    2. Every entry is finite and non-negative.
    3. The diagonal is zero: peers never rate themselves.

    Args:
        values: Nested sequence (or array) of ratings, one row per peer.

    Raises:
        InvalidMatrix: If any validation rule is violated.
    """

    def __init__(self, values: Sequence[Sequence[float]] | np.ndarray) -> None:
        try:
            array = np.array(values, dtype=float)
        except (TypeError, ValueError) as exc:
            raise InvalidMatrix(f"Local trust matrix must be numeric: {exc}") from exc

        if array.ndim != 2 or array.shape[0] != array.shape[1]:
            raise InvalidMatrix(
                f"Local trust matrix must be square, got shape {array.shape}"
            )
        if array.shape[0] == 0:
            raise InvalidMatrix("Local trust matrix must have at least one peer")
        if not np.all(np.isfinite(array)):
            raise InvalidMatrix("Local trust matrix must contain only finite values")
        if np.any(array < 0.0):
            raise InvalidMatrix("Local trust matrix entries must be non-negative")
        diagonal = np.diag(array)
        if np.any(diagonal != 0.0):
            peer = int(np.flatnonzero(diagonal)[0])
            raise InvalidMatrix(f"Peer {peer} must not rate itself")

        self._values = array

    @property
    def size(self) -> int:
        """Return the number of peers."""
        return self._values.shape[0]

    @property
    def values(self) -> np.ndarray:
        """Return a copy of the raw ratings."""
        return self._values.copy()

    def pre_trust_vector(self, pre_trust: Sequence[float] | np.ndarray) -> np.ndarray:
        """Validate a pre-trust vector against this matrix.

        Raises:
            InvalidMatrix: If the vector has the wrong length or contains
                negative or non-finite entries.
        """
        return _as_vector(pre_trust, self.size, "Pre-trust vector")

    def trust_vector(self, trust: Sequence[float] | np.ndarray) -> np.ndarray:
        """Validate a global trust vector against this matrix."""
        return _as_vector(trust, self.size, "Trust vector")

    def normalised(self, pre_trust: Sequence[float] | np.ndarray) -> np.ndarray:
        """Return the row-normalized matrix. See :func:`normalise_rows`."""
        return normalise_rows(self._values, self.pre_trust_vector(pre_trust))


def normalise_rows(matrix: np.ndarray, pre_trust: np.ndarray) -> np.ndarray:
    """Divide each row by its sum.

    A peer with no outgoing ratings (row sum 0) defers to the pre-trusted
    peers: its row is replaced by ``pre_trust``.

    Args:
        matrix: Square array of non-negative ratings.
        pre_trust: Fallback distribution, one entry per peer.

    Returns:
        A new array of the same shape.
    """
    sums = matrix.sum(axis=1)
    normalised = np.empty_like(matrix, dtype=float)
    for i, row_sum in enumerate(sums):
        if row_sum == 0.0:
            normalised[i, :] = pre_trust
        else:
            normalised[i, :] = matrix[i, :] / row_sum
    return normalised

"""Matrix transpose."""

from __future__ import annotations

import numpy as np

from matrix_converter.types import Matrix


def transpose(matrix: Matrix) -> Matrix:
    """Return the C x R transpose of an R x C matrix as a new array."""
    return np.ascontiguousarray(np.asarray(matrix, dtype=np.float64).T)

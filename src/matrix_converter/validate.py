"""Matrix validation helpers."""

from __future__ import annotations

import numpy as np

from matrix_converter.errors import EmptyMatrixError, RaggedMatrixError
from matrix_converter.types import Matrix, RowSource


def validate_matrix(rows: RowSource, file: str) -> Matrix:
    """Drop empty rows and check that the rest form a rectangle.

    Parameters
    ----------
    rows : Iterable[list[float]]
        Parsed rows, possibly lazy. Parse errors raised while iterating
        propagate unchanged.
    file : str
        Input file name used in error messages.

    Returns
    -------
    numpy.ndarray
        2-D ``float64`` array with at least one row.

    Raises
    ------
    EmptyMatrixError
        If no non-empty row remains.
    RaggedMatrixError
        If a row length differs from the first non-empty row. The reported
        row number counts non-empty rows only.
    """
    kept = [row for row in rows if row]
    if not kept:
        raise EmptyMatrixError(file=file)

    expected = len(kept[0])
    for number, row in enumerate(kept, start=1):
        if len(row) != expected:
            raise RaggedMatrixError(
                file=file, line=number, expected=expected, actual=len(row)
            )
    return np.array(kept, dtype=np.float64)

"""Application ports for the reading and writing steps."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from matrix_converter.naming import OutputPattern
from matrix_converter.types import Matrix, PathLike, RowStream


class MatrixReader(Protocol):
    """Read an input file into raw rows."""

    def read(self, input_path: PathLike) -> RowStream:
        """Return lazily parsed rows, blank lines as empty rows.

        Error messages name ``input_path`` exactly as given.
        """


class MatrixWriter(Protocol):
    """Write a validated matrix to disk."""

    def write_matrix(self, output_path: Path, matrix: Matrix) -> Path:
        """Write all rows to one file and return its path."""

    def write_rows(self, pattern: OutputPattern, matrix: Matrix) -> list[Path]:
        """Write one file per row and return the paths in row order."""

"""Matrix writers for text output files."""

from __future__ import annotations

from pathlib import Path

from matrix_converter.naming import OutputPattern
from matrix_converter.types import Matrix
from matrix_converter.writing import write_matrix_file, write_row_files


class TextMatrixWriter:
    """Write matrices as space-separated text, one row per line."""

    def write_matrix(self, output_path: Path, matrix: Matrix) -> Path:
        """Write every row of ``matrix`` to ``output_path``."""
        return write_matrix_file(output_path, matrix)

    def write_rows(self, pattern: OutputPattern, matrix: Matrix) -> list[Path]:
        """Write each row of ``matrix`` to the file ``pattern`` names for it."""
        return write_row_files(pattern, matrix)

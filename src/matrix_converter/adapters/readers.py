"""Matrix readers for text input files."""

from __future__ import annotations

from matrix_converter.parsing import read_rows
from matrix_converter.types import PathLike, RowStream


class TextMatrixReader:
    """Read whitespace-delimited numeric text files."""

    def read(self, input_path: PathLike) -> RowStream:
        """Read ``input_path`` and return its lazily parsed rows.

        Raises
        ------
        FileAccessError
            If the file cannot be opened or read.
        """
        return read_rows(input_path)

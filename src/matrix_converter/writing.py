"""Serialization of matrix rows to text files."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from matrix_converter.errors import FileAccessError
from matrix_converter.naming import OutputPattern
from matrix_converter.types import Matrix, PathLike


def format_value(value: float) -> str:
    """Render a float in shortest round-trip form.

    An integral value drops its ``.0`` suffix, so ``1.0`` renders as ``1``.
    """
    text = repr(float(value))
    if text.endswith(".0"):
        return text[:-2]
    return text


def format_row(row: Iterable[float]) -> str:
    """Render a row as space-separated values without a line terminator."""
    return " ".join(format_value(value) for value in row)


def _write_rows(path: Path, rows: Iterable[Iterable[float]], first_row: int) -> None:
    name = str(path)
    try:
        handle = path.open("w", encoding="utf-8", newline="\n")
    except OSError as exc:
        raise FileAccessError(
            f"Could not open the file '{name}' for writing.", file=name
        ) from exc

    number = first_row
    try:
        with handle:
            for number, row in enumerate(rows, start=first_row):
                handle.write(format_row(row) + "\n")
    except OSError as exc:
        raise FileAccessError(
            f"Failed to write row {number} to the file '{name}'.",
            file=name,
            line=number,
        ) from exc


def write_matrix_file(path: PathLike, matrix: Matrix) -> Path:
    """Write all rows of ``matrix`` to a single file.

    Returns
    -------
    Path
        The written file.

    Raises
    ------
    FileAccessError
        If the file cannot be opened or a row cannot be written.
    """
    output_path = Path(path)
    _write_rows(output_path, matrix.tolist(), first_row=1)
    return output_path


def write_row_files(pattern: OutputPattern, matrix: Matrix) -> list[Path]:
    """Write each row of ``matrix`` to its own file.

    Row ``i`` (1-based) goes to ``pattern.path_for(i)``. Writing stops at the
    first failure; files written before it are left in place.

    Raises
    ------
    FileAccessError
        If a file cannot be opened or its row cannot be written.
    """
    written: list[Path] = []
    for index, row in enumerate(matrix.tolist(), start=1):
        output_path = pattern.path_for(index)
        _write_rows(output_path, [row], first_row=index)
        written.append(output_path)
    return written

"""Top-level API for text matrix conversion."""

from __future__ import annotations

from pathlib import Path

from matrix_converter.application.options import ConversionRequest
from matrix_converter.application.results import (
    ConversionFailure,
    ConversionResult,
    ConversionSuccess,
)

__version__ = "0.1.0"


def convert_matrix_file(
    input_path: str | Path,
    output_path: str | Path,
    *,
    transpose: bool = False,
    split_rows: bool = False,
    replacement_token: str = "#",
) -> ConversionSuccess:
    """Convert a whitespace-delimited numeric text matrix.

    Parameters
    ----------
    input_path : str | Path
        Text matrix to read.
    output_path : str | Path
        Output file, or the per-row filename pattern when ``split_rows`` is
        set.
    transpose : bool, default=False
        Transpose the matrix before writing.
    split_rows : bool, default=False
        Write each row to its own file.
    replacement_token : str, default="#"
        Substring of ``output_path`` replaced by the 1-based row number in
        split mode.

    Returns
    -------
    ConversionSuccess
        Counts and paths of the written output.

    Raises
    ------
    ConversionError
        Subclass describing the first failure of the run.
    """
    from .api import convert_matrix_file as _impl

    return _impl(
        input_path=input_path,
        output_path=output_path,
        transpose=transpose,
        split_rows=split_rows,
        replacement_token=replacement_token,
    )


def run_conversion(request: ConversionRequest) -> ConversionResult:
    """Run a conversion request and return a success or failure value."""
    from .api import run_conversion as _impl

    return _impl(request)


__all__ = [
    "ConversionRequest",
    "ConversionSuccess",
    "ConversionFailure",
    "ConversionResult",
    "convert_matrix_file",
    "run_conversion",
]

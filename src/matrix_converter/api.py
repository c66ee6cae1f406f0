"""Public file-based conversion API (delegates to application use-cases)."""

from __future__ import annotations

from pathlib import Path

from matrix_converter.application.options import ConversionRequest
from matrix_converter.application.results import ConversionResult, ConversionSuccess
from matrix_converter.application.use_cases import convert_matrix
from matrix_converter.application.use_cases import run_conversion as _run_conversion


def convert_matrix_file(
    input_path: str | Path,
    output_path: str | Path,
    transpose: bool = False,
    split_rows: bool = False,
    replacement_token: str = "#",
) -> ConversionSuccess:
    """Convert a text matrix file, raising a ``ConversionError`` on failure."""
    request = ConversionRequest(
        input_path=input_path,
        output_pattern=str(output_path),
        transpose=transpose,
        split_rows=split_rows,
        replacement_token=replacement_token,
    )
    return convert_matrix(request)


def run_conversion(request: ConversionRequest) -> ConversionResult:
    """Run a conversion request and return its success or failure value."""
    return _run_conversion(request)

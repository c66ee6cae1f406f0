"""Application-layer use-cases and request/result objects."""

from __future__ import annotations

from matrix_converter.application.options import ConversionRequest
from matrix_converter.application.ports import MatrixReader, MatrixWriter
from matrix_converter.application.results import (
    ConversionFailure,
    ConversionResult,
    ConversionSuccess,
    PipelineState,
)


def convert_matrix(
    request: ConversionRequest,
    *,
    reader: MatrixReader | None = None,
    writer: MatrixWriter | None = None,
) -> ConversionSuccess:
    """Convert a matrix file via lazy use-case import."""
    from matrix_converter.application.use_cases import convert_matrix as _impl

    return _impl(request, reader=reader, writer=writer)


def run_conversion(
    request: ConversionRequest,
    *,
    reader: MatrixReader | None = None,
    writer: MatrixWriter | None = None,
) -> ConversionResult:
    """Convert a matrix file and return the outcome via lazy use-case import."""
    from matrix_converter.application.use_cases import run_conversion as _impl

    return _impl(request, reader=reader, writer=writer)


__all__ = [
    "ConversionRequest",
    "ConversionSuccess",
    "ConversionFailure",
    "ConversionResult",
    "PipelineState",
    "convert_matrix",
    "run_conversion",
]

"""Typed request object consumed by the conversion use-cases."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ConversionRequest:
    """One conversion run's inputs.

    Parameters
    ----------
    input_path : str | Path
        Text matrix to read.
    output_pattern : str
        Output file path, or the per-row filename pattern when
        ``split_rows`` is set.
    transpose : bool, default=False
        Transpose the matrix before writing.
    split_rows : bool, default=False
        Write each row to its own file named from ``output_pattern``.
    replacement_token : str, default="#"
        Substring of ``output_pattern`` replaced by the 1-based row number.
        Ignored unless ``split_rows`` is set.
    """

    input_path: str | Path
    output_pattern: str
    transpose: bool = False
    split_rows: bool = False
    replacement_token: str = "#"

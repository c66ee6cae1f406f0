"""Unit tests for text serialization of matrices."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest

from matrix_converter.errors import FileAccessError
from matrix_converter.naming import OutputPattern
from matrix_converter.writing import (
    format_row,
    format_value,
    write_matrix_file,
    write_row_files,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (1.0, "1"),
        (-2.0, "-2"),
        (-0.0, "-0"),
        (0.1, "0.1"),
        (2.5, "2.5"),
        (1e16, "1e+16"),
        (1e-07, "1e-07"),
        (np.float64(3.0), "3"),
        (123456789.123456789, "123456789.12345679"),
    ],
)
def test_format_value(value: float, expected: str) -> None:
    """Render shortest round-trip text without an integral .0 suffix."""
    assert format_value(value) == expected


def test_format_value_round_trips() -> None:
    """Rendered text parses back to the same float."""
    for value in (0.1, 1 / 3, 2.0**-1074, 1.7976931348623157e308, -123.456):
        assert float(format_value(value)) == value


def test_format_row() -> None:
    """Join values with single spaces."""
    assert format_row([1.0, 2.5, -3.0]) == "1 2.5 -3"


def test_write_matrix_file(tmp_path: Path) -> None:
    """Write all rows to one file, truncating existing content."""
    output = tmp_path / "out.txt"
    output.write_text("stale content that is longer than the new one\n" * 3)
    path = write_matrix_file(output, np.array([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]))
    assert path == output
    assert output.read_bytes() == b"1 2 3\n4 5 6\n"


def test_write_matrix_file_open_failure(tmp_path: Path) -> None:
    """Fail with a file access error when the directory does not exist."""
    output = tmp_path / "missing" / "out.txt"
    with pytest.raises(FileAccessError) as info:
        write_matrix_file(output, np.array([[1.0]]))
    assert info.value.file == str(output)
    assert "for writing" in str(info.value)


def test_write_row_files(tmp_path: Path) -> None:
    """Write each row to its own numbered file."""
    pattern = OutputPattern(prefix=str(tmp_path / "row_"), suffix=".dat")
    paths = write_row_files(pattern, np.array([[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]]))
    assert paths == [tmp_path / f"row_{i}.dat" for i in (1, 2, 3)]
    assert [p.read_text() for p in paths] == ["1 2\n", "3 4\n", "5 6\n"]


def test_write_row_files_stops_at_first_failure(tmp_path: Path) -> None:
    """Stop at the failing row and keep files written before it."""
    (tmp_path / "row_2").mkdir()
    pattern = OutputPattern(prefix=str(tmp_path / "row_"), suffix="")
    with pytest.raises(FileAccessError) as info:
        write_row_files(pattern, np.array([[1.0], [2.0], [3.0]]))
    assert info.value.file == str(tmp_path / "row_2")
    assert (tmp_path / "row_1").read_text() == "1\n"
    assert not (tmp_path / "row_3").exists()

"""Unit tests for line parsing and input reading."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from matrix_converter.errors import FileAccessError, MatrixParseError
from matrix_converter.parsing import (
    iter_lines,
    parse_line,
    parse_number,
    parse_rows,
    read_matrix_text,
    read_rows,
)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("", []),
        ("a", ["a"]),
        ("a\n", ["a"]),
        ("a\nb", ["a", "b"]),
        ("a\r\nb\r\n", ["a", "b"]),
        ("a\rb", ["a", "b"]),
        ("a\n\nb\n", ["a", "", "b"]),
        ("\n", [""]),
    ],
)
def test_iter_lines(text: str, expected: list[str]) -> None:
    """Split on every newline convention; unterminated tail is the last line."""
    assert list(iter_lines(text)) == expected


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ("1", 1.0),
        ("-2", -2.0),
        ("+3.5", 3.5),
        ("4.", 4.0),
        (".25", 0.25),
        ("1e3", 1000.0),
        ("-1.5E-2", -0.015),
        ("0.1", 0.1),
    ],
)
def test_parse_number_accepts_decimal_syntax(token: str, expected: float) -> None:
    """Accept sign, digits, fraction and exponent."""
    assert parse_number(token) == expected


@pytest.mark.parametrize(
    "token",
    [
        "abc",
        "1.5abc",
        "1,5",
        "inf",
        "nan",
        "1_000",
        "0x10",
        "e5",
        ".",
        "--1",
        "1e",
        "1e999",
        "-1e400",
    ],
)
def test_parse_number_rejects_non_decimal_tokens(token: str) -> None:
    """Reject anything that is not a plain decimal number."""
    with pytest.raises(ValueError):
        parse_number(token)


def test_parse_line_splits_on_whitespace_runs() -> None:
    """Tokenize on any run of spaces and tabs."""
    assert parse_line("  1\t 2   3.5 ") == [1.0, 2.0, 3.5]
    assert parse_line("   \t ") == []


def test_parse_line_splits_only_on_ascii_whitespace() -> None:
    """Split on C-locale whitespace; other Unicode spaces stay inside a token."""
    assert parse_line("1\v2\f3\r") == [1.0, 2.0, 3.0]
    for line in ("1\xa02", "1\x1c2", "1\u20282", "1\u30002"):
        with pytest.raises(ValueError):
            parse_line(line)


def test_parse_rows_rejects_non_breaking_space() -> None:
    """Report a line holding a non-breaking space between numbers."""
    with pytest.raises(MatrixParseError) as info:
        list(parse_rows("1 2\n3\xa04\n", "in.txt"))
    assert info.value.line == 2


def test_parse_rows_keeps_blank_lines_as_empty_rows() -> None:
    """Yield one row per line, empty rows for blank lines."""
    rows = list(parse_rows("1 2\n\n3 4\n", "in.txt"))
    assert rows == [[1.0, 2.0], [], [3.0, 4.0]]


def test_parse_rows_decodes_exact_values() -> None:
    """Decode each token to the same float as the literal."""
    rows = list(parse_rows("0.1 1e-300 123456789.123456789\n", "in.txt"))
    assert rows == [[0.1, 1e-300, 123456789.123456789]]


def test_parse_rows_reports_line_of_bad_token() -> None:
    """Cite the 1-based line number and file of the first bad token."""
    with pytest.raises(MatrixParseError) as info:
        list(parse_rows("1 2\n\n3 x\n4 5\n", "in.txt"))
    assert info.value.line == 3
    assert info.value.file == "in.txt"
    assert str(info.value) == "Line 3 in file 'in.txt' could not be parsed to the end."


def test_parse_rows_is_lazy() -> None:
    """Rows before a bad line are produced before the error is raised."""
    rows = parse_rows("1\nbad\n", "in.txt")
    assert next(rows) == [1.0]
    with pytest.raises(MatrixParseError):
        next(rows)


def test_read_matrix_text_missing_file(tmp_path: Path) -> None:
    """Raise a file access error naming the file when it cannot be opened."""
    missing = tmp_path / "missing.txt"
    with pytest.raises(FileAccessError) as info:
        read_matrix_text(missing)
    assert info.value.file == str(missing)
    assert "Could not open the file" in str(info.value)


def test_read_matrix_text_undecodable_content(tmp_path: Path) -> None:
    """Treat undecodable bytes as a read failure."""
    path = tmp_path / "binary.txt"
    path.write_bytes(b"1 2\n\xff\xfe\n")
    with pytest.raises(FileAccessError, match="could not be read"):
        read_matrix_text(path)


def test_read_rows_from_file(write_input: Callable[..., Path]) -> None:
    """Read and parse a file with Windows line endings."""
    path = write_input("1 2\r\n3 4\r\n")
    assert list(read_rows(path)) == [[1.0, 2.0], [3.0, 4.0]]

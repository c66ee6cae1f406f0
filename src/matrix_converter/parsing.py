"""Parsing of whitespace-delimited numeric text into float rows."""

from __future__ import annotations

import math
import re
from collections.abc import Iterator
from pathlib import Path

from matrix_converter.errors import FileAccessError, MatrixParseError
from matrix_converter.types import PathLike, Row, RowStream

_LINE_BREAK = re.compile(r"\r\n|\r|\n")
# Sign, digits, optional fraction, optional exponent. No inf/nan/hex/underscores.
_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
# C-locale whitespace only; other Unicode spaces are part of a token.
_WHITESPACE = re.compile(r"[ \t\n\v\f\r]+")


def read_matrix_text(path: PathLike) -> str:
    """Read the full text content of a matrix file.

    Parameters
    ----------
    path : str | Path
        Input file path.

    Returns
    -------
    str
        File content decoded as UTF-8.

    Raises
    ------
    FileAccessError
        If the file cannot be opened or fails to read to the end.
    """
    name = str(path)
    try:
        handle = Path(path).open("r", encoding="utf-8", newline="")
    except OSError as exc:
        raise FileAccessError(
            f"Could not open the file '{name}'.", file=name
        ) from exc
    with handle:
        try:
            return handle.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise FileAccessError(
                f"The file '{name}' could not be read.", file=name
            ) from exc


def iter_lines(text: str) -> Iterator[str]:
    """Yield lines split on ``\\n``, ``\\r\\n`` or ``\\r``.

    Unterminated trailing content is the final line; a trailing terminator
    does not produce an extra empty line.
    """
    if not text:
        return
    parts = _LINE_BREAK.split(text)
    if parts[-1] == "":
        parts.pop()
    yield from parts


def parse_number(token: str) -> float:
    """Parse a single numeric token.

    Raises
    ------
    ValueError
        If the token is not a plain decimal number or is out of the
        float64 range.
    """
    if _NUMBER.fullmatch(token) is None:
        raise ValueError(f"not a number: {token!r}")
    value = float(token)
    if math.isinf(value):
        raise ValueError(f"out of range: {token!r}")
    return value


def parse_line(line: str) -> Row:
    """Parse one line into a row; a blank line gives an empty row."""
    return [parse_number(token) for token in _WHITESPACE.split(line) if token]


def parse_rows(text: str, file: str) -> RowStream:
    """Lazily parse text into rows.

    Parameters
    ----------
    text : str
        Full input content.
    file : str
        Input file name used in error messages.

    Yields
    ------
    list[float]
        One row per input line, empty for blank lines.

    Raises
    ------
    MatrixParseError
        On the first line holding a token that is not a number.
    """
    for number, line in enumerate(iter_lines(text), start=1):
        try:
            row = parse_line(line)
        except ValueError as exc:
            raise MatrixParseError(file=file, line=number) from exc
        yield row


def read_rows(path: PathLike) -> RowStream:
    """Read a matrix file and return its lazily parsed rows."""
    return parse_rows(read_matrix_text(path), str(path))

"""Error taxonomy for matrix conversion runs."""

from __future__ import annotations


class ConversionError(Exception):
    """Base class for all conversion failures.

    Parameters
    ----------
    message : str
        Human-readable message, suitable for display as-is.
    file : str | None, default=None
        File the failure refers to.
    line : int | None, default=None
        1-based line (or row) number the failure refers to.
    """

    kind = "ConversionError"
    exit_code = 1

    def __init__(
        self,
        message: str,
        *,
        file: str | None = None,
        line: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.file = file
        self.line = line


class InvalidRequestError(ConversionError):
    """Raised when request parameters fail validation."""

    kind = "InvalidRequest"
    exit_code = 2


class FileAccessError(ConversionError):
    """Raised when a file cannot be opened, read or written."""

    kind = "IoError"
    exit_code = 2


class MatrixParseError(ConversionError):
    """Raised when a line holds a token that is not a number."""

    kind = "ParseError"
    exit_code = 3

    def __init__(self, *, file: str, line: int) -> None:
        super().__init__(
            f"Line {line} in file '{file}' could not be parsed to the end.",
            file=file,
            line=line,
        )


class EmptyMatrixError(ConversionError):
    """Raised when the input contains no non-empty rows."""

    kind = "EmptyMatrixError"
    exit_code = 3

    def __init__(self, *, file: str) -> None:
        super().__init__(
            f"The file '{file}' does not contain samples.",
            file=file,
        )


class RaggedMatrixError(ConversionError):
    """Raised when a row length differs from the first row length."""

    kind = "RaggedMatrixError"
    exit_code = 3

    def __init__(self, *, file: str, line: int, expected: int, actual: int) -> None:
        super().__init__(
            f"Row {line} of the matrix in file '{file}' contains {actual} "
            f"samples, but the first row contains {expected}.",
            file=file,
            line=line,
        )
        self.expected = expected
        self.actual = actual


class EmptyTokenError(ConversionError):
    """Raised when per-row output is requested without a replacement token."""

    kind = "EmptyTokenError"
    exit_code = 4

    def __init__(self) -> None:
        super().__init__(
            "No characters to be replaced in the output file pattern "
            "have been specified."
        )


class TokenNotFoundError(ConversionError):
    """Raised when the replacement token does not occur in the output pattern."""

    kind = "TokenNotFoundError"
    exit_code = 4

    def __init__(self, *, pattern: str, token: str) -> None:
        super().__init__(
            f"Replacement characters '{token}' could not be found "
            f"in the output file pattern '{pattern}'."
        )
        self.pattern = pattern
        self.token = token

"""Output filename planning for per-row split mode."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from matrix_converter.errors import EmptyTokenError, TokenNotFoundError


@dataclass(frozen=True)
class OutputPattern:
    """Output pattern split around the replacement token.

    Parameters
    ----------
    prefix : str
        Text before the first token occurrence.
    suffix : str
        Text after the first token occurrence, kept verbatim.
    """

    prefix: str
    suffix: str

    def filename_for(self, index: int) -> str:
        """Return the filename for a 1-based row index."""
        return f"{self.prefix}{index}{self.suffix}"

    def path_for(self, index: int) -> Path:
        """Return :meth:`filename_for` as a path."""
        return Path(self.filename_for(index))


def plan_output_pattern(pattern: str, token: str) -> OutputPattern:
    """Locate the leftmost occurrence of ``token`` in ``pattern``.

    Raises
    ------
    EmptyTokenError
        If ``token`` is empty.
    TokenNotFoundError
        If ``token`` does not occur in ``pattern``.
    """
    if not token:
        raise EmptyTokenError()
    position = pattern.find(token)
    if position < 0:
        raise TokenNotFoundError(pattern=pattern, token=token)
    return OutputPattern(
        prefix=pattern[:position],
        suffix=pattern[position + len(token) :],
    )

"""Application-layer result objects."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path

from matrix_converter.errors import ConversionError


class PipelineState(enum.Enum):
    """Stages of a single conversion run."""

    IDLE = "idle"
    PARSING = "parsing"
    VALIDATING = "validating"
    TRANSPOSING = "transposing"
    PLANNING = "planning"
    WRITING = "writing"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True)
class ConversionSuccess:
    """Outcome of a completed run."""

    files_written: int
    rows_written: int
    columns: int
    output_paths: tuple[Path, ...]
    ok: bool = True


@dataclass(frozen=True)
class ConversionFailure:
    """Outcome of a failed run.

    ``stage`` is the pipeline state that was active when the error occurred.
    """

    kind: str
    message: str
    stage: PipelineState
    exit_code: int = 1
    file: str | None = None
    line: int | None = None
    ok: bool = False

    @classmethod
    def from_error(
        cls, error: ConversionError, stage: PipelineState
    ) -> ConversionFailure:
        """Build a failure from a raised conversion error."""
        return cls(
            kind=error.kind,
            message=error.message,
            stage=stage,
            exit_code=error.exit_code,
            file=error.file,
            line=error.line,
        )


type ConversionResult = ConversionSuccess | ConversionFailure

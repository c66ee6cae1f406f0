"""Application use-cases orchestrating matrix conversion runs."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from matrix_converter.adapters.readers import TextMatrixReader
from matrix_converter.adapters.writers import TextMatrixWriter
from matrix_converter.application.options import ConversionRequest
from matrix_converter.application.ports import MatrixReader, MatrixWriter
from matrix_converter.application.results import (
    ConversionFailure,
    ConversionResult,
    ConversionSuccess,
    PipelineState,
)
from matrix_converter.errors import ConversionError, InvalidRequestError
from matrix_converter.naming import plan_output_pattern
from matrix_converter.schemas import ConversionConfig
from matrix_converter.transpose import transpose
from matrix_converter.validate import validate_matrix

logger = logging.getLogger(__name__)


class ConversionPipeline:
    """Sequential state machine for one conversion run.

    States advance ``IDLE -> PARSING -> VALIDATING -> [TRANSPOSING] ->
    [PLANNING] -> WRITING -> DONE``. The first error moves the pipeline to
    ``FAILED`` and is re-raised; ``failed_stage`` keeps the state it occurred
    in. A pipeline runs at most once.
    """

    def __init__(
        self,
        request: ConversionRequest,
        *,
        reader: MatrixReader | None = None,
        writer: MatrixWriter | None = None,
    ) -> None:
        self.request = request
        self.reader = reader or TextMatrixReader()
        self.writer = writer or TextMatrixWriter()
        self.state = PipelineState.IDLE
        self.failed_stage: PipelineState | None = None

    def _enter(self, state: PipelineState) -> None:
        logger.debug("conversion state %s -> %s", self.state.value, state.value)
        self.state = state

    def run(self) -> ConversionSuccess:
        """Run every stage in order and return the success outcome.

        Raises
        ------
        ConversionError
            The first failure of any stage.
        RuntimeError
            If the pipeline has already run.
        """
        if self.state is not PipelineState.IDLE:
            raise RuntimeError("conversion pipeline has already run")
        try:
            result = self._run_stages()
        except Exception:
            self.failed_stage = self.state
            self._enter(PipelineState.FAILED)
            raise
        self._enter(PipelineState.DONE)
        logger.info(
            "wrote %d file(s) with %d row(s) from %s",
            result.files_written,
            result.rows_written,
            self.request.input_path,
        )
        return result

    def _run_stages(self) -> ConversionSuccess:
        try:
            config = ConversionConfig(
                input_path=self.request.input_path,
                output_pattern=self.request.output_pattern,
                transpose=self.request.transpose,
                split_rows=self.request.split_rows,
                replacement_token=self.request.replacement_token,
            )
        except ValidationError as exc:
            raise InvalidRequestError(
                f"Invalid conversion parameters: {exc}"
            ) from exc

        # Messages name the input as given, not as normalized by Path.
        input_path = self.request.input_path

        self._enter(PipelineState.PARSING)
        rows = list(self.reader.read(input_path))

        self._enter(PipelineState.VALIDATING)
        matrix = validate_matrix(rows, str(input_path))

        if config.transpose:
            self._enter(PipelineState.TRANSPOSING)
            matrix = transpose(matrix)

        pattern = None
        if config.split_rows:
            self._enter(PipelineState.PLANNING)
            pattern = plan_output_pattern(
                config.output_pattern, config.replacement_token
            )

        self._enter(PipelineState.WRITING)
        if pattern is not None:
            paths = tuple(self.writer.write_rows(pattern, matrix))
        else:
            paths = (self.writer.write_matrix(Path(config.output_pattern), matrix),)

        row_count, column_count = matrix.shape
        return ConversionSuccess(
            files_written=len(paths),
            rows_written=row_count,
            columns=column_count,
            output_paths=paths,
        )


def convert_matrix(
    request: ConversionRequest,
    *,
    reader: MatrixReader | None = None,
    writer: MatrixWriter | None = None,
) -> ConversionSuccess:
    """Use-case: convert one matrix file, raising on failure."""
    return ConversionPipeline(request, reader=reader, writer=writer).run()


def run_conversion(
    request: ConversionRequest,
    *,
    reader: MatrixReader | None = None,
    writer: MatrixWriter | None = None,
) -> ConversionResult:
    """Use-case: convert one matrix file and report the outcome as a value.

    Conversion errors become a :class:`ConversionFailure`; any other
    exception propagates.
    """
    pipeline = ConversionPipeline(request, reader=reader, writer=writer)
    try:
        return pipeline.run()
    except ConversionError as exc:
        stage = pipeline.failed_stage or PipelineState.IDLE
        logger.warning("conversion failed during %s: %s", stage.value, exc.message)
        return ConversionFailure.from_error(exc, stage)

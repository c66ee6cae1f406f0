"""Background worker running conversions off the caller's thread."""

from __future__ import annotations

import logging
from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor
from types import TracebackType

from matrix_converter.application.options import ConversionRequest
from matrix_converter.application.results import ConversionResult
from matrix_converter.application.use_cases import run_conversion

logger = logging.getLogger(__name__)

type ResultCallback = Callable[[ConversionResult], None]


class ConversionWorker:
    """Run conversion requests one at a time on a dedicated thread.

    Requests submitted to the same worker never overlap. Each submission
    returns a future resolving to the run's :data:`ConversionResult`; an
    optional callback receives the same value on the worker thread.
    """

    def __init__(
        self,
        runner: Callable[[ConversionRequest], ConversionResult] = run_conversion,
    ) -> None:
        self._runner = runner
        self._executor = ThreadPoolExecutor(
            max_workers=1, thread_name_prefix="matrix-conversion"
        )

    def submit(
        self,
        request: ConversionRequest,
        callback: ResultCallback | None = None,
    ) -> Future[ConversionResult]:
        """Queue ``request`` and return a future for its result.

        Raises
        ------
        RuntimeError
            If the worker has been shut down.
        """
        return self._executor.submit(self._run, request, callback)

    def _run(
        self, request: ConversionRequest, callback: ResultCallback | None
    ) -> ConversionResult:
        logger.debug("running conversion of %s", request.input_path)
        result = self._runner(request)
        if callback is not None:
            try:
                callback(result)
            except Exception:
                logger.exception("conversion result callback failed")
        return result

    def shutdown(self, wait: bool = True) -> None:
        """Stop accepting requests; optionally wait for queued runs."""
        self._executor.shutdown(wait=wait)

    def __enter__(self) -> ConversionWorker:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.shutdown(wait=True)

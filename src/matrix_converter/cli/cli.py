#!/usr/bin/env python3
"""
matrix_converter.cli.app

Typer-based CLI for converting whitespace-delimited numeric text matrices.

Values not given on the command line are taken from the settings file, and
the values used are written back after each run, so a repeated conversion
only needs ``convert-matrix convert``.

Examples
--------
Copy a matrix, normalizing its formatting:

    convert-matrix convert data.txt out.txt

Transpose and write each resulting row to its own file:

    convert-matrix convert data.txt "row_#.dat" --transpose --split-rows --token "#"
"""

from __future__ import annotations

import logging
import traceback
from pathlib import Path
from typing import Any

import typer
from click.core import ParameterSource

from matrix_converter.errors import ConversionError
from matrix_converter.settings import (
    SettingsStore,
    resolve_settings_path,
    settings_from_request,
)

app = typer.Typer(
    name="convert-matrix",
    help="Convert, transpose and split whitespace-delimited numeric text matrices.",
    no_args_is_help=True,
)

SETTINGS_HELP = (
    "Settings file for remembered values "
    "(default: $MATRIX_CONVERTER_SETTINGS or ./settings.json)."
)

logger = logging.getLogger(__name__)


# -----------------------------
# Utilities
# -----------------------------
def _print_conversion_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly conversion error.

    Parameters
    ----------
    exc : Exception
        Exception raised during conversion.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.echo(f"✗ {type(exc).__name__}: {exc}", err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _given(ctx: typer.Context, name: str) -> bool:
    """Return whether parameter ``name`` was set on the command line."""
    return ctx.get_parameter_source(name) not in (None, ParameterSource.DEFAULT)


def _save_settings(store: SettingsStore, kwargs: dict[str, Any]) -> None:
    from matrix_converter.application.options import ConversionRequest

    request = ConversionRequest(
        input_path=kwargs["input_path"],
        output_pattern=kwargs["output_path"],
        transpose=kwargs["transpose"],
        split_rows=kwargs["split_rows"],
        replacement_token=kwargs["replacement_token"],
    )
    try:
        store.save(settings_from_request(request))
    except OSError as exc:
        logger.warning("could not save settings to %s: %s", store.path, exc)


# -----------------------------
# Global options
# -----------------------------
@app.callback()
def _main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Show debug logs and full tracebacks on error."),
) -> None:
    """Initialize shared CLI state.

    Parameters
    ----------
    ctx : typer.Context
        Typer context object used to store shared state.
    debug : bool, default=False
        Whether to enable debug logging and error output.
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = {"debug": debug}


# -----------------------------
# Commands
# -----------------------------
@app.command("convert")
def convert_cmd(
    ctx: typer.Context,
    input_path: str | None = typer.Argument(
        None, help="Text matrix to read. Defaults to the remembered input file."
    ),
    output_path: str | None = typer.Argument(
        None,
        help="Output file, or filename pattern with --split-rows. "
        "Defaults to the remembered output.",
    ),
    transpose: bool = typer.Option(
        False, "--transpose/--no-transpose", help="Transpose the matrix before writing."
    ),
    split_rows: bool = typer.Option(
        False,
        "--split-rows/--no-split-rows",
        help="Write each row to its own file named from the output pattern.",
    ),
    token: str | None = typer.Option(
        None,
        "--token",
        help="Substring of the output pattern replaced by the 1-based row number.",
    ),
    settings_path: Path | None = typer.Option(None, "--settings", help=SETTINGS_HELP),
    save: bool = typer.Option(
        True, "--save/--no-save", help="Remember the values used for the next run."
    ),
) -> None:
    """Convert a text matrix file.

    Parameters
    ----------
    ctx : typer.Context
        Typer context containing global options.
    input_path : str | None
        Input file path; falls back to the stored value.
    output_path : str | None
        Output path or per-row pattern; falls back to the stored value.
    transpose : bool, default=False
        Whether to transpose before writing.
    split_rows : bool, default=False
        Whether to write one file per row.
    token : str | None
        Replacement token for ``--split-rows``.

    Notes
    -----
    - Files written before a failing row are kept.
    - The settings file is updated even when the conversion fails.
    """
    debug: bool = bool(ctx.obj.get("debug", False))

    store = SettingsStore(resolve_settings_path(settings_path))
    stored = store.load()

    kwargs: dict[str, Any] = {
        "input_path": input_path if input_path is not None else stored.input_path,
        "output_path": output_path if output_path is not None else stored.output_pattern,
        "transpose": transpose if _given(ctx, "transpose") else stored.transpose,
        "split_rows": split_rows if _given(ctx, "split_rows") else stored.split_rows,
        "replacement_token": token if token is not None else stored.replacement_token,
    }

    try:
        from matrix_converter.api import convert_matrix_file

        result = convert_matrix_file(**kwargs)
        typer.echo(
            f"✓ Wrote {result.files_written} file(s): "
            f"{result.rows_written} row(s) x {result.columns} column(s)"
        )
        for path in result.output_paths:
            logger.debug("wrote %s", path)
    except ConversionError as exc:
        raise typer.Exit(code=_print_conversion_error(exc, debug))
    except Exception as exc:
        # Unexpected crash: still show a clean message; debug prints traceback.
        raise typer.Exit(code=_print_conversion_error(exc, debug))
    finally:
        if save:
            _save_settings(store, kwargs)


@app.command("settings")
def settings_cmd(
    settings_path: Path | None = typer.Option(None, "--settings", help=SETTINGS_HELP),
) -> None:
    """Print the remembered conversion values."""
    store = SettingsStore(resolve_settings_path(settings_path))
    stored = store.load()
    typer.echo(f"settings file: {store.path}")
    typer.echo(f"input: {stored.input_path or '<unset>'}")
    typer.echo(f"output: {stored.output_pattern or '<unset>'}")
    typer.echo(f"transpose: {stored.transpose}")
    typer.echo(f"split rows: {stored.split_rows}")
    typer.echo(f"token: {stored.replacement_token!r}")


if __name__ == "__main__":
    app()

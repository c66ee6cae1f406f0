"""End-to-end smoke tests for the installed CLI entrypoint."""

from __future__ import annotations

import subprocess
from pathlib import Path

import matrix_converter


def test_package_import_smoke() -> None:
    """Ensure package can be imported in the test process."""
    assert matrix_converter.__version__


def test_cli_help_smoke() -> None:
    """Ensure the installed CLI entrypoint responds to --help."""
    result = subprocess.run(
        ["convert-matrix", "--help"],
        capture_output=True,
        text=True,
        check=False,
    )

    assert result.returncode == 0, result.stderr
    assert "convert" in result.stdout
    assert "settings" in result.stdout


def test_cli_transpose_roundtrip(tmp_path: Path) -> None:
    """Transpose a file through the installed CLI."""
    source = tmp_path / "in.txt"
    source.write_text("1 2 3\n4 5 6\n")
    output = tmp_path / "out.txt"
    result = subprocess.run(
        [
            "convert-matrix",
            "convert",
            str(source),
            str(output),
            "--transpose",
            "--settings",
            str(tmp_path / "settings.json"),
        ],
        capture_output=True,
        text=True,
        check=False,
    )

    assert result.returncode == 0, result.stderr
    assert output.read_text() == "1 4\n2 5\n3 6\n"


def test_cli_missing_input_fails_cleanly(tmp_path: Path) -> None:
    """Return a user-facing error for a missing input file."""
    result = subprocess.run(
        [
            "convert-matrix",
            "convert",
            str(tmp_path / "definitely-missing.txt"),
            str(tmp_path / "out.txt"),
            "--settings",
            str(tmp_path / "settings.json"),
        ],
        capture_output=True,
        text=True,
        check=False,
    )

    assert result.returncode == 2
    assert "could not open the file" in result.stderr.lower()

"""Persisted request settings restored between runs."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from pydantic import ValidationError

from matrix_converter.application.options import ConversionRequest
from matrix_converter.schemas import StoredSettings

logger = logging.getLogger(__name__)

SETTINGS_ENV_VAR = "MATRIX_CONVERTER_SETTINGS"
DEFAULT_SETTINGS_FILE = "settings.json"


def resolve_settings_path(explicit: Path | None = None) -> Path:
    """Return the settings file path.

    Precedence: ``explicit``, then ``$MATRIX_CONVERTER_SETTINGS``, then
    ``settings.json`` in the working directory.
    """
    if explicit is not None:
        return explicit
    from_env = os.getenv(SETTINGS_ENV_VAR, "").strip()
    if from_env:
        return Path(from_env).expanduser()
    return Path(DEFAULT_SETTINGS_FILE)


class SettingsStore:
    """JSON key-value store for the last used request fields."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def load(self) -> StoredSettings:
        """Load stored settings; defaults when missing or unreadable."""
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return StoredSettings()
        except OSError as exc:
            logger.warning("could not read settings file %s: %s", self.path, exc)
            return StoredSettings()
        try:
            return StoredSettings.model_validate_json(text)
        except ValidationError as exc:
            logger.warning("ignoring invalid settings file %s: %s", self.path, exc)
            return StoredSettings()

    def save(self, settings: StoredSettings) -> None:
        """Write ``settings``, replacing the previous file content."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(settings.model_dump_json(indent=2) + "\n", encoding="utf-8")


def settings_from_request(request: ConversionRequest) -> StoredSettings:
    """Capture the fields of ``request`` for storage."""
    return StoredSettings(
        input_path=str(request.input_path),
        output_pattern=request.output_pattern,
        transpose=request.transpose,
        split_rows=request.split_rows,
        replacement_token=request.replacement_token,
    )


def request_from_settings(settings: StoredSettings) -> ConversionRequest:
    """Build a request from stored fields."""
    return ConversionRequest(
        input_path=settings.input_path,
        output_pattern=settings.output_pattern,
        transpose=settings.transpose,
        split_rows=settings.split_rows,
        replacement_token=settings.replacement_token,
    )

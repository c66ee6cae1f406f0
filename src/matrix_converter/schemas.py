"""Pydantic schemas for runtime validation of conversion inputs."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator


def _require_text(value: object, field: str) -> object:
    if value is None or not str(value).strip():
        raise ValueError(f"{field} cannot be empty.")
    return value


class ConversionConfig(BaseModel):
    """Validated input for a file-based matrix conversion."""

    model_config = ConfigDict(extra="forbid")

    input_path: Path
    output_pattern: str
    transpose: bool = False
    split_rows: bool = False
    replacement_token: str = "#"

    @field_validator("input_path", mode="before")
    @classmethod
    def _validate_input_path(cls, value: object) -> object:
        return _require_text(value, "input_path")

    @field_validator("output_pattern", mode="before")
    @classmethod
    def _validate_output_pattern(cls, value: object) -> object:
        return _require_text(value, "output_pattern")


class StoredSettings(BaseModel):
    """Persisted request fields, restored between runs."""

    model_config = ConfigDict(extra="ignore")

    input_path: str = ""
    output_pattern: str = ""
    transpose: bool = False
    split_rows: bool = False
    replacement_token: str = "#"

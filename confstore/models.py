"""Pydantic contracts for constructing a config store."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class StoreOptions(BaseModel):
    """Where the store lives and how it is initialised."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    cwd: Optional[Path] = Field(None, description="Directory holding the config file")
    project_name: Optional[str] = Field(
        None, description="Application name used for the platform config directory"
    )
    config_name: str = Field("config", description="File name without the .json suffix")
    defaults: Optional[Dict[str, Any]] = Field(
        None, description="Values merged beneath persisted ones at construction"
    )
    use_async: bool = Field(
        False, alias="async", description="Skip construction-time I/O; defaults merge on request"
    )
    search_from: Optional[Path] = Field(
        None, description="Directory to search upward from for pyproject.toml"
    )

    @field_validator("config_name")
    @classmethod
    def _plain_file_name(cls, value: str) -> str:
        if not value or "/" in value or "\\" in value:
            raise ValueError("config_name must be a non-empty file name without separators")
        return value

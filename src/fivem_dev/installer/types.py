"""Installer domain types."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from .constants import EXCLUDED_NAMES


class DestinationRoot(BaseModel):
    label: str
    path: Path


class CopyTask(BaseModel):
    """A source directory to be copied into a destination directory."""

    model_config = ConfigDict(frozen=True)

    source: Path
    destination: Path
    excludes: frozenset[str] = EXCLUDED_NAMES


class CopyResult(BaseModel):
    success: bool
    source: Path
    destination: Path
    files_copied: int = 0
    dirs_created: int = 0
    skipped: list[str] = Field(default_factory=list)
    error: str | None = None


class InstallConfig(BaseModel):
    package_root: Path
    home_dir: Path
    destinations: list[DestinationRoot] = Field(min_length=1)
    excludes: frozenset[str] = EXCLUDED_NAMES


class InstallResult(BaseModel):
    success: bool
    results: list[CopyResult] = Field(default_factory=list)
    failed_destination: Path | None = None
    error: str | None = None

# Path: config/settings.py
# Purpose: Provide typed run configuration for icon harvesting.
# Layer: config.
# Details: Centralizes source/destination roots, accepted extensions, the size ladder, and worker sizing.

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Set, Tuple

from pydantic import BaseModel, Field, field_validator

DEFAULT_EXTENSIONS = {".exe", ".dll", ".ico"}
DEFAULT_SIZE_LADDER = (256, 128, 64, 48, 32, 16)


def _default_workers() -> int:
    return os.cpu_count() or 1


class ScanSettings(BaseModel):
    """Settings for a single harvesting run."""

    source_root: Path = Field(description="Directory tree scanned for icon-bearing files.")
    output_root: Path = Field(description="Directory receiving the size-bucketed PNG files.")
    extensions: Set[str] = Field(
        default_factory=lambda: set(DEFAULT_EXTENSIONS),
        description="File suffixes that are scanned (case-insensitive).",
    )
    size_ladder: Tuple[int, ...] = Field(
        default=DEFAULT_SIZE_LADDER,
        description="Preferred square output sizes, largest first.",
    )
    max_workers: int = Field(default_factory=_default_workers, ge=1, description="Worker pool size.")
    queue_factor: int = Field(default=2, ge=1, description="In-flight files allowed per worker.")
    serialize_names: bool = Field(
        default=False,
        description="Serialize name resolution per output name so racing workers never collide.",
    )
    show_progress: bool = Field(default=False, description="Display a progress bar while files are processed.")
    log_level: str = Field(default="INFO", description="Verbosity level for application logs.")

    @field_validator("extensions")
    @classmethod
    def _normalize_extensions(cls, value: Set[str]) -> Set[str]:
        normalized = set()
        for ext in value:
            ext = ext.strip().lower()
            if not ext:
                continue
            normalized.add(ext if ext.startswith(".") else f".{ext}")
        if not normalized:
            raise ValueError("At least one extension is required.")
        return normalized

    @field_validator("size_ladder")
    @classmethod
    def _normalize_ladder(cls, value: Tuple[int, ...]) -> Tuple[int, ...]:
        if any(size <= 0 for size in value):
            raise ValueError("Ladder sizes must be positive.")
        return tuple(sorted(set(value), reverse=True))

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return level

    @property
    def max_in_flight(self) -> int:
        """Upper bound on files submitted to the pool but not yet finished."""

        return self.max_workers * self.queue_factor

    @classmethod
    def from_env(cls, source_root: Path | str, output_root: Path | str, **overrides) -> "ScanSettings":
        """Instantiate settings, letting ICON_HARVEST_* environment variables fill unset fields."""

        values = {}
        extensions = os.environ.get("ICON_HARVEST_EXTENSIONS")
        if extensions:
            values["extensions"] = {ext for ext in extensions.split(",") if ext.strip()}
        workers = os.environ.get("ICON_HARVEST_WORKERS")
        if workers:
            values["max_workers"] = int(workers)
        log_level = os.environ.get("ICON_HARVEST_LOG_LEVEL")
        if log_level:
            values["log_level"] = log_level
        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(source_root=Path(source_root), output_root=Path(output_root), **values)


__all__ = ["ScanSettings", "DEFAULT_EXTENSIONS", "DEFAULT_SIZE_LADDER"]

# Path: core/models/domain.py
# Purpose: Define domain models shared across scanning, decoding, deduplication, and output.
# Layer: core/models.
# Details: Lightweight dataclasses passed between pipeline stages; decode outcomes are an explicit union.

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from pathlib import Path
from typing import Optional, Tuple, Union

from PIL import Image

Size = Tuple[int, int]

# Portable Executable suffixes that can carry icon group resources.
PE_SUFFIXES = {".exe", ".dll", ".cpl", ".ocx", ".scr"}


class IconKind(str, Enum):
    """Container type of a candidate file, which decides how its icon is decoded."""

    ICON = "ico"
    EXECUTABLE = "executable"

    @classmethod
    def for_path(cls, path: Path) -> Optional["IconKind"]:
        suffix = path.suffix.lower()
        if suffix == ".ico":
            return cls.ICON
        if suffix in PE_SUFFIXES:
            return cls.EXECUTABLE
        return None


@dataclass
class ExtractedIcon:
    """A decoded bitmap together with its natural (pre-resize) dimensions."""

    image: Image.Image
    native_size: Size
    source: Path


@dataclass(frozen=True)
class NoIcon:
    """Decode outcome for files that yield nothing (no icon resource, corrupt, or unreadable)."""

    source: Path
    reason: str
    error: Optional[BaseException] = None

    @property
    def failed(self) -> bool:
        """True when decoding raised rather than finding no icon."""

        return self.error is not None


DecodeResult = Union[ExtractedIcon, NoIcon]


@dataclass(frozen=True)
class OutputRecord:
    """Where a unique icon was persisted and which source file won it."""

    source: Path
    destination: Path
    size: Size
    digest: str


@dataclass(frozen=True)
class RunSummary:
    """Counters and timing reported at the end of a run."""

    files_scanned: int
    files_with_icons: int
    icons_saved: int
    elapsed: timedelta = timedelta(0)

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.files_scanned, self.files_with_icons, self.icons_saved)

# Path: core/decoders/base.py
# Purpose: Define the IconDecoder interface that turns a candidate file into at most one icon bitmap.
# Layer: core/decoders.
# Details: Decoders return an explicit ExtractedIcon | NoIcon outcome and never raise for bad input files.

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from core.models.domain import DecodeResult, IconKind


class IconDecoder(Protocol):
    """Extract the primary icon of a file at its best available native resolution."""

    def decode(self, path: Path, kind: IconKind) -> DecodeResult:
        """Return an ExtractedIcon, or NoIcon when the file has none, is corrupt, or is unreadable."""

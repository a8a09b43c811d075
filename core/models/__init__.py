# Path: core/models/__init__.py
# Purpose: Package initializer for domain models.
# Layer: core/models.
# Details: Exposes dataclasses shared across pipeline stages.

from .domain import DecodeResult, ExtractedIcon, IconKind, NoIcon, OutputRecord, RunSummary, Size

__all__ = ["DecodeResult", "ExtractedIcon", "IconKind", "NoIcon", "OutputRecord", "RunSummary", "Size"]

# Path: core/icons/__init__.py
# Purpose: Package initializer for per-icon processing stages.
# Layer: core/icons.
# Details: Exposes sizing, hashing, deduplication state, and PNG output helpers.

from .hashing import compute_digest, normalize_pixels
from .registry import DedupRegistry, RunCounters
from .sizing import canonicalize, choose_target_size, to_canonical
from .writer import IconWriter, build_base_name, make_safe_file_name

__all__ = [
    "DedupRegistry",
    "IconWriter",
    "RunCounters",
    "build_base_name",
    "canonicalize",
    "choose_target_size",
    "compute_digest",
    "make_safe_file_name",
    "normalize_pixels",
    "to_canonical",
]

# Path: core/icons/hashing.py
# Purpose: Compute content digests for canonical icons.
# Layer: core/icons.
# Details: Pixels are normalized to tightly packed RGBA rows before SHA-256, so storage mode never changes the key.

from __future__ import annotations

import hashlib

import numpy as np
from PIL import Image

DIGEST_HEX_LENGTH = hashlib.sha256().digest_size * 2


def normalize_pixels(image: Image.Image) -> np.ndarray:
    """Return an (height, width, 4) uint8 RGBA array with no row padding."""

    rgba = image if image.mode == "RGBA" else image.convert("RGBA")
    pixels = np.asarray(rgba, dtype=np.uint8)
    return np.ascontiguousarray(pixels)


def compute_digest(image: Image.Image) -> str:
    """Return the SHA-256 hex digest of the normalized pixel buffer of *image*."""

    buffer = normalize_pixels(image).tobytes()
    return hashlib.sha256(buffer).hexdigest()

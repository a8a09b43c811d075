# Path: core/icons/sizing.py
# Purpose: Pick a canonical square size from the preference ladder and resize icons to it.
# Layer: core/icons.
# Details: Downscales with bicubic filtering; icons smaller than every ladder tier keep their native size.

from __future__ import annotations

from typing import Sequence

from PIL import Image

from config.settings import DEFAULT_SIZE_LADDER
from core.models.domain import Size


def choose_target_size(native: Size, ladder: Sequence[int] = DEFAULT_SIZE_LADDER) -> Size:
    """Return the largest ladder tier that fits inside *native*, or *native* itself.

    The ladder is expected largest first.
    """

    width, height = native
    for tier in ladder:
        if width >= tier and height >= tier:
            return (tier, tier)
    return (width, height)


def to_canonical(image: Image.Image, target: Size) -> Image.Image:
    """Return a copy of *image* stretched to exactly *target*."""

    if image.size == tuple(target):
        return image.copy()
    if image.mode != "RGBA":
        image = image.convert("RGBA")
    return image.resize(target, Image.Resampling.BICUBIC)


def canonicalize(image: Image.Image, ladder: Sequence[int] = DEFAULT_SIZE_LADDER) -> Image.Image:
    """Resize *image* to its ladder tier in one step."""

    return to_canonical(image, choose_target_size(image.size, ladder))

from __future__ import annotations

from PIL import Image

from core.icons.hashing import DIGEST_HEX_LENGTH, compute_digest, normalize_pixels
from tests.helpers import make_icon


def test_digest_is_fixed_width_hex() -> None:
    digest = compute_digest(make_icon((16, 16)))

    assert len(digest) == DIGEST_HEX_LENGTH == 64
    int(digest, 16)


def test_identical_pixels_hash_identically() -> None:
    assert compute_digest(make_icon((48, 48))) == compute_digest(make_icon((48, 48)))


def test_pixel_mode_does_not_change_digest() -> None:
    rgba = Image.new("RGBA", (32, 32), (100, 100, 100, 255))
    rgb = Image.new("RGB", (32, 32), (100, 100, 100))
    grey = Image.new("L", (32, 32), 100)

    assert compute_digest(rgba) == compute_digest(rgb) == compute_digest(grey)


def test_different_pixels_hash_differently() -> None:
    first = make_icon((32, 32))
    second = make_icon((32, 32), accent=(0, 255, 0, 255))

    assert compute_digest(first) != compute_digest(second)


def test_alpha_is_part_of_the_digest() -> None:
    opaque = Image.new("RGBA", (8, 8), (255, 0, 0, 255))
    translucent = Image.new("RGBA", (8, 8), (255, 0, 0, 128))

    assert compute_digest(opaque) != compute_digest(translucent)


def test_normalized_buffer_has_no_padding() -> None:
    # 3 pixels wide rows are 12 bytes; no stride alignment is applied.
    pixels = normalize_pixels(Image.new("RGB", (3, 5), (1, 2, 3)))

    assert pixels.shape == (5, 3, 4)
    assert pixels.flags["C_CONTIGUOUS"]
    assert len(pixels.tobytes()) == 3 * 5 * 4
    assert tuple(pixels[0, 0]) == (1, 2, 3, 255)

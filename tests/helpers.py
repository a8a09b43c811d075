from __future__ import annotations

from pathlib import Path
from typing import Dict, Tuple

from PIL import Image

from core.decoders.pillow_decoder import PillowIconDecoder
from core.models.domain import DecodeResult, ExtractedIcon, IconKind, NoIcon


def make_icon(size: Tuple[int, int], color=(200, 40, 40, 255), accent=(20, 20, 220, 255)) -> Image.Image:
    """RGBA test icon with a contrasting block so resizing is not trivial."""

    image = Image.new("RGBA", size, color)
    width, height = size
    block = Image.new("RGBA", (max(1, width // 2), max(1, height // 2)), accent)
    image.paste(block, (width // 4, height // 4))
    return image


def write_ico(path: Path, image: Image.Image) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    image.save(path, format="ICO", sizes=[image.size])
    return path


class StubDecoder:
    """Decoder for tests: .ico goes through Pillow, executables map to preset images."""

    def __init__(self, executables: Dict[str, Image.Image] | None = None) -> None:
        self.executables = executables or {}
        self.ico = PillowIconDecoder()

    def decode(self, path: Path, kind: IconKind) -> DecodeResult:
        if kind is IconKind.ICON:
            return self.ico.decode(path, kind)
        image = self.executables.get(path.name)
        if image is None:
            return NoIcon(source=path, reason="no icon resources")
        return ExtractedIcon(image=image.copy(), native_size=image.size, source=path)

# Path: core/decoders/pillow_decoder.py
# Purpose: Decode icons from .ico containers and PE executables/libraries.
# Layer: core/decoders.
# Details: ICO files are read with Pillow; PE files go through icoextract to get their first icon group as an ICO stream.

from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO, Union

from icoextract import IconExtractor, NoIconsAvailableError
from PIL import Image

from core.models.domain import DecodeResult, ExtractedIcon, IconKind, NoIcon

logger = logging.getLogger(__name__)


class PillowIconDecoder:
    """IconDecoder backed by Pillow's ICO plugin and icoextract's PE resource reader.

    Pillow opens an ICO at its largest frame, which is the representative size we keep.
    """

    def decode(self, path: Path, kind: IconKind) -> DecodeResult:
        try:
            if kind is IconKind.ICON:
                return self._from_ico(path, path)
            if kind is IconKind.EXECUTABLE:
                return self._from_executable(path)
        except NoIconsAvailableError:
            return NoIcon(source=path, reason="no icon resources")
        except Exception as exc:  # noqa: BLE001 - any decode failure means "no icon"
            logger.debug("Error file %s: %s", path, exc)
            return NoIcon(source=path, reason=str(exc) or type(exc).__name__, error=exc)
        return NoIcon(source=path, reason=f"unsupported kind {kind!r}")

    def _from_executable(self, path: Path) -> DecodeResult:
        extractor = IconExtractor(str(path))
        stream = extractor.get_icon(num=0)
        return self._from_ico(stream, path)

    @staticmethod
    def _from_ico(fp: Union[Path, BinaryIO], source: Path) -> DecodeResult:
        with Image.open(fp) as img:
            img.load()
            bitmap = img.convert("RGBA")
        if bitmap.width == 0 or bitmap.height == 0:
            return NoIcon(source=source, reason="empty bitmap")
        return ExtractedIcon(image=bitmap, native_size=bitmap.size, source=source)

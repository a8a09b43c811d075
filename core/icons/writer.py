# Path: core/icons/writer.py
# Purpose: Persist unique icons as PNG files grouped by pixel dimensions.
# Layer: core/icons.
# Details: Names derive from the source file; collisions get a numeric suffix and writes use exclusive create.

from __future__ import annotations

import logging
from collections import defaultdict
from contextlib import nullcontext
from io import BytesIO
from pathlib import Path
from threading import Lock
from typing import DefaultDict, Tuple

from PIL import Image

from core.models.domain import Size

logger = logging.getLogger(__name__)

# Characters rejected in Windows file names, plus ASCII control characters.
_INVALID_NAME_CHARS = set('<>:"/\\|?*') | {chr(code) for code in range(32)}
_PLACEHOLDER = "_"


def make_safe_file_name(name: str) -> str:
    """Replace characters that are not valid in file names with a placeholder."""

    return "".join(_PLACEHOLDER if ch in _INVALID_NAME_CHARS else ch for ch in name)


def build_base_name(source: Path | str, size: Size) -> str:
    """Return ``<stem>_<W>x<H>`` for *source*; deterministic, not unique."""

    stem = Path(source).stem
    width, height = size
    return f"{make_safe_file_name(stem)}_{width}x{height}"


class IconWriter:
    """Write icons under ``<output_root>/<W>x<H>/<base>[_<n>].png``.

    Resolving a free name and creating the file are two separate steps. Two workers saving
    different icons under the same base name can both see the name as free; the loser's
    exclusive create then raises FileExistsError. Pass ``serialize_names=True`` to take a
    lock per (directory, base name) around both steps.
    """

    def __init__(self, output_root: Path | str, serialize_names: bool = False) -> None:
        self.output_root = Path(output_root)
        self.serialize_names = serialize_names
        self._name_locks: DefaultDict[Tuple[Path, str], Lock] = defaultdict(Lock)
        self._locks_guard = Lock()

    def bucket_for(self, size: Size) -> Path:
        width, height = size
        return self.output_root / f"{width}x{height}"

    def resolve_path(self, directory: Path, base_name: str) -> Path:
        """Return the first ``base_name[_n].png`` in *directory* that does not exist yet."""

        candidate = directory / f"{base_name}.png"
        counter = 1
        while candidate.exists():
            candidate = directory / f"{base_name}_{counter}.png"
            counter += 1
        return candidate

    def save(self, image: Image.Image, base_name: str) -> Path:
        """Encode *image* as PNG and write it without overwriting anything.

        Raises FileExistsError if the resolved path appears before it is opened.
        """

        directory = self.bucket_for(image.size)
        directory.mkdir(parents=True, exist_ok=True)

        payload = BytesIO()
        image.save(payload, format="PNG")

        with self._name_lock(directory, base_name):
            destination = self.resolve_path(directory, base_name)
            with destination.open("xb") as stream:
                stream.write(payload.getvalue())

        logger.debug("Wrote %s", destination)
        return destination

    def _name_lock(self, directory: Path, base_name: str):
        if not self.serialize_names:
            return nullcontext()
        with self._locks_guard:
            return self._name_locks[(directory, base_name)]

# Path: core/scanning/walker.py
# Purpose: Walk a directory tree and yield files whose suffix is in an allow-set.
# Layer: core/scanning.
# Details: Iterative depth-first traversal with an explicit stack; unlistable directories are skipped via a hook.

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable, Iterable, Iterator, List, Optional

logger = logging.getLogger(__name__)

SkipHook = Callable[[Path, OSError], None]


def _log_skip(directory: Path, exc: OSError) -> None:
    logger.debug("Skipping directory %s: %s", directory, exc)


class TreeWalker:
    """Lazily enumerate candidate files under a root directory.

    Sibling order is whatever the filesystem returns; callers must not depend on it.
    Symlinked directories are not descended into, so link cycles cannot trap the walk.
    """

    def __init__(self, extensions: Iterable[str], on_skip: Optional[SkipHook] = None) -> None:
        self.extensions = {ext.lower() for ext in extensions}
        self.on_skip: SkipHook = on_skip or _log_skip

    def matches(self, path: Path) -> bool:
        """Return True if *path* carries one of the accepted suffixes."""

        return path.suffix.lower() in self.extensions

    def walk(self, root: Path | str) -> Iterator[Path]:
        """Yield absolute paths of matching files below *root*.

        Each call starts a fresh traversal. The root is not validated here.
        """

        stack: List[Path] = [Path(root).absolute()]
        while stack:
            current = stack.pop()
            try:
                with os.scandir(current) as it:
                    entries = list(it)
            except OSError as exc:
                self.on_skip(current, exc)
                continue

            files: List[Path] = []
            for entry in entries:
                try:
                    if entry.is_dir(follow_symlinks=False):
                        stack.append(Path(entry.path))
                    elif entry.is_file():
                        files.append(Path(entry.path))
                except OSError as exc:
                    self.on_skip(Path(entry.path), exc)

            for path in files:
                if self.matches(path):
                    yield path

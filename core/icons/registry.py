# Path: core/icons/registry.py
# Purpose: Provide the thread-safe state shared by pipeline workers.
# Layer: core/icons.
# Details: DedupRegistry admits each digest exactly once; RunCounters tracks scanned/with-icons/saved totals.

from __future__ import annotations

from threading import Lock
from typing import Set

from core.models.domain import RunSummary


class DedupRegistry:
    """Set of digests admitted during one run. First caller for a digest wins."""

    def __init__(self) -> None:
        self._seen: Set[str] = set()
        self._lock = Lock()

    def admit(self, digest: str) -> bool:
        """Insert *digest* if absent and return True only for the inserting caller."""

        with self._lock:
            if digest in self._seen:
                return False
            self._seen.add(digest)
            return True

    def __len__(self) -> int:
        with self._lock:
            return len(self._seen)


class RunCounters:
    """Monotonic counters updated concurrently by workers."""

    def __init__(self) -> None:
        self._lock = Lock()
        self._files_scanned = 0
        self._files_with_icons = 0
        self._icons_saved = 0

    def file_scanned(self) -> None:
        with self._lock:
            self._files_scanned += 1

    def file_with_icons(self) -> None:
        with self._lock:
            self._files_with_icons += 1

    def icon_saved(self) -> None:
        with self._lock:
            self._icons_saved += 1

    def snapshot(self) -> RunSummary:
        """Return the current totals (elapsed time is filled in by the caller)."""

        with self._lock:
            return RunSummary(
                files_scanned=self._files_scanned,
                files_with_icons=self._files_with_icons,
                icons_saved=self._icons_saved,
            )

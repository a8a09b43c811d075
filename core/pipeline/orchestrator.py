# Path: core/pipeline/orchestrator.py
# Purpose: Run decode, resize, hash, dedup, and save for every candidate file on a bounded worker pool.
# Layer: core/pipeline.
# Details: The walker feeds the pool lazily; per-file errors are logged and never abort the run.

from __future__ import annotations

import logging
import time
from concurrent.futures import FIRST_COMPLETED, Future, ThreadPoolExecutor, wait
from datetime import timedelta
from pathlib import Path
from typing import Iterable, Optional, Sequence, Set

from tqdm import tqdm

from config.settings import DEFAULT_SIZE_LADDER
from core.decoders.base import IconDecoder
from core.icons.hashing import compute_digest
from core.icons.registry import DedupRegistry, RunCounters
from core.icons.sizing import canonicalize
from core.icons.writer import IconWriter, build_base_name
from core.models.domain import ExtractedIcon, IconKind, NoIcon, OutputRecord, RunSummary

logger = logging.getLogger(__name__)


class IconPipeline:
    """Process candidate files in parallel and persist each distinct icon once.

    Shared state (registry and counters) is injected so callers can inspect or reuse it.
    """

    def __init__(
        self,
        decoder: IconDecoder,
        writer: IconWriter,
        registry: Optional[DedupRegistry] = None,
        counters: Optional[RunCounters] = None,
        ladder: Sequence[int] = DEFAULT_SIZE_LADDER,
        max_workers: int = 1,
        max_in_flight: Optional[int] = None,
        show_progress: bool = False,
    ) -> None:
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self.decoder = decoder
        self.writer = writer
        self.registry = registry if registry is not None else DedupRegistry()
        self.counters = counters if counters is not None else RunCounters()
        self.ladder = tuple(ladder)
        self.max_workers = max_workers
        self.max_in_flight = max(max_in_flight or max_workers * 2, max_workers)
        self.show_progress = show_progress

    def run(self, paths: Iterable[Path]) -> RunSummary:
        """Consume *paths* to exhaustion and return the run totals."""

        started = time.perf_counter()
        pending: Set[Future] = set()
        with ThreadPoolExecutor(max_workers=self.max_workers, thread_name_prefix="icon") as executor, tqdm(
            desc="Extracting icons", unit="file", disable=not self.show_progress
        ) as progress:
            for path in paths:
                if len(pending) >= self.max_in_flight:
                    done, pending = wait(pending, return_when=FIRST_COMPLETED)
                    progress.update(len(done))
                pending.add(executor.submit(self.process_file, path))
            for _ in _drain(pending):
                progress.update(1)

        elapsed = timedelta(seconds=time.perf_counter() - started)
        summary = self.counters.snapshot()
        return RunSummary(
            files_scanned=summary.files_scanned,
            files_with_icons=summary.files_with_icons,
            icons_saved=summary.icons_saved,
            elapsed=elapsed,
        )

    def process_file(self, path: Path) -> Optional[OutputRecord]:
        """Run the whole per-file pipeline; returns the record when an icon was saved."""

        try:
            self.counters.file_scanned()
            kind = IconKind.for_path(path)
            if kind is None:
                return None

            result = self.decoder.decode(path, kind)
            if isinstance(result, NoIcon):
                return None

            self.counters.file_with_icons()
            return self._keep_if_unique(result)
        except Exception as exc:  # noqa: BLE001 - one bad file must not stop the run
            logger.error("Error file %s: %s", path, exc)
            return None

    def _keep_if_unique(self, icon: ExtractedIcon) -> Optional[OutputRecord]:
        with icon.image, canonicalize(icon.image, self.ladder) as canonical:
            digest = compute_digest(canonical)
            if not self.registry.admit(digest):
                return None

            base_name = build_base_name(icon.source, canonical.size)
            destination = self.writer.save(canonical, base_name)
            self.counters.icon_saved()
            logger.debug("Saved %s -> %s", icon.source, destination)
            return OutputRecord(source=icon.source, destination=destination, size=canonical.size, digest=digest)


def _drain(pending: Set[Future]) -> Iterable[Future]:
    while pending:
        done, pending = wait(pending, return_when=FIRST_COMPLETED)
        yield from done

# Path: scripts/extract_icons.py
# Purpose: CLI tool to harvest unique icons from a directory tree into size-bucketed PNG folders.
# Layer: scripts.
# Details: Validates arguments, wires walker, decoder, writer, and pipeline together, then prints a summary.

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, List, Optional

# Ensure project root is on sys.path when running as a script.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from pydantic import ValidationError

from config import ScanSettings
from core.decoders.pillow_decoder import PillowIconDecoder
from core.icons.writer import IconWriter
from core.models.domain import RunSummary
from core.pipeline.orchestrator import IconPipeline
from core.scanning.walker import TreeWalker

PROG = "icon-harvest"


class _UsageParser(argparse.ArgumentParser):
    """ArgumentParser that reports usage on stdout and exits with status 1."""

    def error(self, message: str) -> None:  # type: ignore[override]
        self.print_usage(sys.stdout)
        print(f"Usage error: {message}")
        print(f"Example   : {PROG} C:\\ C:\\IconsExport")
        raise SystemExit(1)


def build_parser() -> argparse.ArgumentParser:
    parser = _UsageParser(prog=PROG, description="Extract unique icons from executables, libraries, and .ico files.")
    parser.add_argument("source", type=Path, help="Directory tree to scan")
    parser.add_argument("destination", type=Path, help="Directory receiving <W>x<H>/ folders of PNG icons")
    parser.add_argument("--workers", type=int, default=None, help="Worker threads (defaults to CPU count)")
    parser.add_argument(
        "--extensions",
        default=None,
        help="Comma separated suffixes to scan (default: .exe,.dll,.ico)",
    )
    parser.add_argument("--progress", action="store_true", help="Show a progress bar while scanning")
    parser.add_argument("--serialize-names", action="store_true", help="Lock output names so racing saves never collide")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help=(
            "Also print skipped directories and 'Error file' lines for files whose icon could not be "
            "decoded; corrupt or unreadable executables are otherwise only counted as scanned"
        ),
    )
    return parser


def configure_logging(level: str) -> logging.Handler:
    """Send log records to stdout as bare messages, matching the summary output.

    Returns the attached handler so the caller can detach it when the run ends.
    """

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root = logging.getLogger()
    root.addHandler(handler)
    root.setLevel(level)
    return handler


def _split_extensions(raw: Optional[str]) -> Optional[set]:
    if not raw:
        return None
    return {ext for ext in raw.split(",") if ext.strip()}


def print_summary(summary: RunSummary) -> None:
    print()
    print("Done.")
    print(f"Files scanned         : {summary.files_scanned}")
    print(f"Files with icons      : {summary.files_with_icons}")
    print(f"Unique icons saved    : {summary.icons_saved}")
    print(f"Total time            : {summary.elapsed}")


def run(settings: ScanSettings) -> RunSummary:
    """Scan ``settings.source_root`` and write unique icons below ``settings.output_root``."""

    settings.output_root.mkdir(parents=True, exist_ok=True)
    walker = TreeWalker(settings.extensions)
    pipeline = IconPipeline(
        decoder=PillowIconDecoder(),
        writer=IconWriter(settings.output_root, serialize_names=settings.serialize_names),
        ladder=settings.size_ladder,
        max_workers=settings.max_workers,
        max_in_flight=settings.max_in_flight,
        show_progress=settings.show_progress,
    )
    return pipeline.run(walker.walk(settings.source_root))


def main(argv: Optional[Iterable[str]] = None) -> int:
    """Entry point for the CLI; returns the process exit code."""

    parser = build_parser()
    arg_list: Optional[List[str]] = list(argv) if argv is not None else None
    try:
        args = parser.parse_args(arg_list)
    except SystemExit as exc:
        return int(exc.code or 0)

    if not args.source.is_dir():
        parser.print_usage(sys.stdout)
        print(f"Source directory not found: {args.source}")
        return 1

    try:
        settings = ScanSettings.from_env(
            args.source,
            args.destination,
            extensions=_split_extensions(args.extensions),
            max_workers=args.workers,
            show_progress=args.progress or None,
            serialize_names=args.serialize_names or None,
            log_level="DEBUG" if args.verbose else None,
        )
    except (ValidationError, ValueError) as exc:
        print(f"Invalid settings: {exc}")
        return 1

    root = logging.getLogger()
    previous_level = root.level
    handler = configure_logging(settings.log_level)
    try:
        print(f"Source      : {settings.source_root}")
        print(f"Destination : {settings.output_root}")
        print()

        summary = run(settings)
        print_summary(summary)
    finally:
        root.removeHandler(handler)
        root.setLevel(previous_level)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

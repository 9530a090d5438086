"""
aggregate.py
Reduce an entry list to Stats, and chain walk -> filter/sort -> aggregate
for a complete scan of one directory.
"""

from __future__ import annotations
import logging
import time
from pathlib import Path
from typing import Iterable, Optional, Union
from .filters import apply
from .types import Entry, EntryKind, ScanResult, Stats, TraversalConfig
from .util import elapsed_ms
from .walker import walk

log = logging.getLogger(__name__)


def aggregate(entries: Iterable[Entry], elapsed: int = 0, error_count: int = 0) -> Stats:
    """Count files and directories, sum file sizes, pick the first largest file."""
    stats = Stats(elapsed_ms=elapsed, error_count=error_count)
    for e in entries:
        if e.kind is EntryKind.DIRECTORY:
            stats.dir_count += 1
        elif e.kind is EntryKind.REGULAR_FILE:
            stats.file_count += 1
            stats.total_bytes += e.size_bytes
            if stats.largest_file is None or e.size_bytes > stats.largest_file.size_bytes:
                stats.largest_file = e
        elif e.kind in (EntryKind.SYMBOLIC_LINK, EntryKind.OTHER):
            # listed, never counted
            pass
    return stats


def scan_directory(root: Union[str, Path], cfg: Optional[TraversalConfig] = None) -> ScanResult:
    cfg = cfg or TraversalConfig()
    started = time.time()
    outcome = walk(root, cfg)
    outcome.entries = apply(outcome.entries, cfg)
    stats = aggregate(outcome.entries, elapsed_ms(started), len(outcome.error_messages))
    log.info(
        "scanned %s: %d files, %d dirs, %d errors",
        outcome.root, stats.file_count, stats.dir_count, stats.error_count,
    )
    return ScanResult(outcome=outcome, stats=stats)

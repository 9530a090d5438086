"""
discover.py
Font discovery shared by the copy, listing and metadata paths:
- Recursive walk with a fixed depth cap, hidden entries excluded
- Size ceiling per file (oversized files are skipped)
- Keep regular files whose extension is in the allowlist
- Stable order (by name; only files survive the allowlist)
"""

from __future__ import annotations
from pathlib import Path
from typing import AbstractSet, Union
from .filters import sort_entries
from .mime import FONT_EXTENSIONS
from .types import EntryKind, TraversalConfig, TraversalOutcome
from .walker import walk

FONT_SCAN_MAX_DEPTH = 4
FONT_MAX_FILE_SIZE = 50 * 1024 * 1024


def font_walk_config(max_depth: int = FONT_SCAN_MAX_DEPTH, max_file_size: int = FONT_MAX_FILE_SIZE) -> TraversalConfig:
    return TraversalConfig(
        recursive=True,
        include_hidden=False,
        max_depth=max_depth,
        follow_symlinks=False,
        max_entry_size=max_file_size if max_file_size > 0 else None,
    )


def discover_fonts(
    root: Union[str, Path],
    max_depth: int = FONT_SCAN_MAX_DEPTH,
    max_file_size: int = FONT_MAX_FILE_SIZE,
    extensions: AbstractSet[str] = FONT_EXTENSIONS,
) -> TraversalOutcome:
    """Walk root and return only the allowlisted regular files, sorted."""
    outcome = walk(root, font_walk_config(max_depth, max_file_size))
    outcome.entries = sort_entries(
        e for e in outcome.entries
        if e.kind is EntryKind.REGULAR_FILE and e.extension in extensions
    )
    return outcome

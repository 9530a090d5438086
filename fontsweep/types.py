"""
types.py
Dataclasses used across modules: Entry, TraversalConfig, TraversalOutcome,
Stats, CopyOutcome, font-parse records and the application Config.

Result records are plain data so they can be rendered as text or dumped as JSON.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional, List, FrozenSet


class EntryKind(str, Enum):
    DIRECTORY = "directory"
    REGULAR_FILE = "file"
    SYMBOLIC_LINK = "symlink"
    OTHER = "other"


@dataclass(frozen=True)
class Entry:
    name: str
    absolute_path: Path
    kind: EntryKind
    size_bytes: int
    modified_unix_seconds: int
    extension: Optional[str] = None
    content_type: Optional[str] = None
    is_hidden: bool = False


@dataclass(frozen=True)
class TraversalConfig:
    recursive: bool = False
    include_hidden: bool = False
    max_depth: Optional[int] = None
    follow_symlinks: bool = False
    name_filters: FrozenSet[str] = frozenset()
    max_entry_size: Optional[int] = None


@dataclass
class TraversalOutcome:
    root: Path
    entries: List[Entry] = field(default_factory=list)
    error_messages: List[str] = field(default_factory=list)


@dataclass
class Stats:
    file_count: int = 0
    dir_count: int = 0
    total_bytes: int = 0
    largest_file: Optional[Entry] = None
    elapsed_ms: int = 0
    error_count: int = 0


@dataclass
class ScanResult:
    outcome: TraversalOutcome
    stats: Stats


@dataclass
class CopyDetail:
    name: str
    size: int
    success: bool
    error: Optional[str] = None


@dataclass
class CopyOutcome:
    source_root: Path
    target_root: Path
    discovered: int = 0
    succeeded: int = 0
    failed: int = 0
    total_bytes_copied: int = 0
    elapsed_ms: int = 0
    per_file: List[CopyDetail] = field(default_factory=list)
    fatal_errors: List[str] = field(default_factory=list)
    # non-fatal listing failures hit while discovering fonts
    scan_errors: List[str] = field(default_factory=list)


@dataclass
class FontMapping:
    file_path: str
    font_name: str
    family_name: Optional[str]
    style_name: Optional[str]
    is_bold: bool
    is_italic: bool


@dataclass
class FontParseResult:
    total_files: int = 0
    successful_parses: int = 0
    failed_parses: int = 0
    mappings: List[FontMapping] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)


@dataclass
class Config:
    # scan
    scan_recursive: bool
    scan_include_hidden: bool
    scan_max_depth: Optional[int]
    scan_follow_symlinks: bool
    scan_name_filters: List[str]
    scan_max_entry_size_mb: int
    # copy
    copy_overwrite: bool
    copy_max_depth: int
    copy_max_file_size_mb: int
    # runtime
    log_level: str
    # output
    summary_dir: Optional[Path]

    def traversal_config(self) -> TraversalConfig:
        max_size = self.scan_max_entry_size_mb * 1024 * 1024 if self.scan_max_entry_size_mb > 0 else None
        return TraversalConfig(
            recursive=self.scan_recursive,
            include_hidden=self.scan_include_hidden,
            max_depth=self.scan_max_depth,
            follow_symlinks=self.scan_follow_symlinks,
            name_filters=frozenset(self.scan_name_filters),
            max_entry_size=max_size,
        )

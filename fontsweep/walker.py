"""
walker.py
Depth-bounded directory traversal:
- Probe the root (exists, is a directory, can be listed) before doing anything
- Walk an explicit work-list of (directory, depth) pairs instead of recursing
- Record unreadable directories and entries as messages and keep going
- Guard against symlink cycles with a visited set when links are followed
"""

from __future__ import annotations
import logging
import os
import stat
from pathlib import Path
from typing import List, Optional, Set, Tuple, Union
from .classifier import classify
from .types import EntryKind, TraversalConfig, TraversalOutcome

log = logging.getLogger(__name__)


def probe_root(root: Path) -> Optional[str]:
    """Return a description of why root cannot be walked, or None if it can."""
    try:
        st = os.stat(root)
    except (FileNotFoundError, NotADirectoryError):
        return f"root does not exist: {root}"
    except OSError as e:
        return f"root is not readable: {root}: {e}"
    if not stat.S_ISDIR(st.st_mode):
        return f"root is not a directory: {root}"
    try:
        with os.scandir(root) as it:
            next(it, None)
    except OSError as e:
        return f"root is not readable: {root}: {e}"
    return None


def _identity(path: Path) -> Tuple[int, int]:
    st = os.stat(path)
    return st.st_dev, st.st_ino


def _may_descend(cfg: TraversalConfig, depth: int) -> bool:
    if not cfg.recursive:
        return False
    return cfg.max_depth is None or depth < cfg.max_depth


def walk(root: Union[str, Path], cfg: Optional[TraversalConfig] = None) -> TraversalOutcome:
    """
    Classify every child of root and, when recursive, of its subdirectories.
    Depth 0 is root's immediate children; a directory found at depth d is
    entered only while d < max_depth. Entries come back in discovery order.
    """
    cfg = cfg or TraversalConfig()
    root = Path(root)
    outcome = TraversalOutcome(root=root)

    problem = probe_root(root)
    if problem:
        log.warning("%s", problem)
        outcome.error_messages.append(problem)
        return outcome

    visited: Set[Tuple[int, int]] = set()
    if cfg.follow_symlinks:
        visited.add(_identity(root))

    pending: List[Tuple[Path, int]] = [(root, 0)]
    while pending:
        directory, depth = pending.pop()
        try:
            with os.scandir(directory) as it:
                children = list(it)
        except OSError as e:
            msg = f"cannot read directory {directory}: {e}"
            log.warning("%s", msg)
            outcome.error_messages.append(msg)
            continue

        log.debug("listed %s (%d children, depth %d)", directory, len(children), depth)
        subdirs: List[Tuple[Path, int]] = []
        for child in children:
            try:
                entry = classify(child, cfg)
            except OSError as e:
                msg = f"cannot read metadata for {child.path}: {e}"
                log.warning("%s", msg)
                outcome.error_messages.append(msg)
                continue
            if entry is None:
                continue
            outcome.entries.append(entry)

            if entry.kind is not EntryKind.DIRECTORY or not _may_descend(cfg, depth):
                continue
            if cfg.follow_symlinks:
                try:
                    ident = _identity(entry.absolute_path)
                except OSError as e:
                    msg = f"cannot read metadata for {entry.absolute_path}: {e}"
                    log.warning("%s", msg)
                    outcome.error_messages.append(msg)
                    continue
                if ident in visited:
                    msg = f"skipped already visited directory: {entry.absolute_path}"
                    log.warning("%s", msg)
                    outcome.error_messages.append(msg)
                    continue
                visited.add(ident)
            subdirs.append((entry.absolute_path, depth + 1))

        # reversed so siblings pop in listing order
        pending.extend(reversed(subdirs))

    return outcome

"""
copier.py
Bulk copy of font files into one flat target directory:
  - Validate the source root, create the target root
  - Discover fonts (depth-capped walk, allowlist, name order)
  - Copy each file to target/<name>; record success or the failure reason
  - Never stop the batch because one file failed
Nested source structure is not preserved: same-named files collide and the
later one wins (overwrite) or fails with "already exists".
"""

from __future__ import annotations
import logging, os, shutil, stat, time
from pathlib import Path
from typing import Union
from .discover import FONT_MAX_FILE_SIZE, FONT_SCAN_MAX_DEPTH, discover_fonts
from .types import CopyDetail, CopyOutcome, Entry
from .util import elapsed_ms, ensure_dir
from .walker import probe_root

log = logging.getLogger(__name__)

ALREADY_EXISTS = "already exists"


def copy_one(entry: Entry, target_root: Path, overwrite: bool) -> CopyDetail:
    dest = target_root / entry.name
    try:
        # lstat so a dangling link at dest still counts as present
        try:
            is_link = stat.S_ISLNK(os.lstat(dest).st_mode)
            exists = True
        except FileNotFoundError:
            is_link = exists = False
        if exists and not overwrite:
            log.info("skip %s: %s", entry.name, ALREADY_EXISTS)
            return CopyDetail(entry.name, entry.size_bytes, False, ALREADY_EXISTS)
        if is_link:
            # replace the link itself, never write through it
            dest.unlink()
        shutil.copyfile(entry.absolute_path, dest)
        shutil.copymode(entry.absolute_path, dest)
        copied = dest.stat().st_size
    except OSError as e:
        log.warning("copy failed %s: %s", entry.name, e)
        return CopyDetail(entry.name, entry.size_bytes, False, str(e))
    log.debug("copied %s -> %s", entry.absolute_path, dest)
    return CopyDetail(entry.name, copied, True)


def copy_tree(
    source: Union[str, Path],
    target: Union[str, Path],
    overwrite: bool = False,
    max_depth: int = FONT_SCAN_MAX_DEPTH,
    max_file_size: int = FONT_MAX_FILE_SIZE,
) -> CopyOutcome:
    started = time.time()
    source_root = Path(source)
    target_root = Path(target)
    result = CopyOutcome(source_root=source_root, target_root=target_root)
    log.info("copying fonts %s -> %s (overwrite=%s)", source_root, target_root, overwrite)

    problem = probe_root(source_root)
    if problem:
        result.fatal_errors.append(f"invalid source directory: {problem}")
        result.elapsed_ms = elapsed_ms(started)
        return result

    try:
        ensure_dir(target_root)
    except OSError as e:
        result.fatal_errors.append(f"cannot create target directory: {e}")
        result.elapsed_ms = elapsed_ms(started)
        return result

    discovery = discover_fonts(source_root, max_depth=max_depth, max_file_size=max_file_size)
    result.scan_errors.extend(discovery.error_messages)
    result.discovered = len(discovery.entries)

    for entry in discovery.entries:
        detail = copy_one(entry, target_root, overwrite)
        if detail.success:
            result.succeeded += 1
            result.total_bytes_copied += detail.size
        else:
            result.failed += 1
        result.per_file.append(detail)

    result.elapsed_ms = elapsed_ms(started)
    log.info("copy finished: %d succeeded, %d failed", result.succeeded, result.failed)
    return result

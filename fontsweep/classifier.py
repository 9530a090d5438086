"""
classifier.py
Turn one directory child into an Entry, or None when policy excludes it:
- hidden names (leading dot) unless include_hidden
- symlinks unless follow_symlinks (followed links take their target's kind)
- regular files above max_entry_size
Metadata failures raise OSError; the walker records them and moves on.
"""

from __future__ import annotations
import os
import stat
from pathlib import Path
from typing import Optional, Union
from .mime import content_type_for
from .types import Entry, EntryKind, TraversalConfig

PathLike = Union[os.DirEntry, Path, str]


def kind_from_mode(mode: int) -> EntryKind:
    if stat.S_ISDIR(mode):
        return EntryKind.DIRECTORY
    if stat.S_ISREG(mode):
        return EntryKind.REGULAR_FILE
    if stat.S_ISLNK(mode):
        return EntryKind.SYMBOLIC_LINK
    return EntryKind.OTHER


def extension_of(name: str) -> Optional[str]:
    """Lowercase suffix after the last dot; None for 'README', '.bashrc' or 'file.'."""
    ext = os.path.splitext(name)[1]
    if len(ext) <= 1:
        return None
    return ext[1:].lower()


def classify(child: PathLike, cfg: TraversalConfig) -> Optional[Entry]:
    path = os.fspath(child)
    name = os.path.basename(path)
    hidden = name.startswith(".")
    if hidden and not cfg.include_hidden:
        return None

    st = os.stat(path, follow_symlinks=False)
    kind = kind_from_mode(st.st_mode)
    if kind is EntryKind.SYMBOLIC_LINK:
        if not cfg.follow_symlinks:
            return None
        try:
            st = os.stat(path, follow_symlinks=True)
            kind = kind_from_mode(st.st_mode)
        except OSError:
            # dangling or looping link: keep the link's own metadata
            pass

    if kind is EntryKind.REGULAR_FILE and cfg.max_entry_size is not None:
        if st.st_size > cfg.max_entry_size:
            return None

    ext = extension_of(name)
    return Entry(
        name=name,
        absolute_path=Path(os.path.abspath(path)),
        kind=kind,
        size_bytes=0 if kind is EntryKind.DIRECTORY else int(st.st_size),
        modified_unix_seconds=max(0, int(st.st_mtime)),
        extension=ext,
        content_type=None if kind is EntryKind.DIRECTORY else content_type_for(ext),
        is_hidden=hidden,
    )

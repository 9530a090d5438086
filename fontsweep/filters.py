"""
filters.py
Post-traversal filter and sort.
A filter string keeps an entry when it is a substring of the name, equals the
extension, or is a substring of the content type. Filters are OR-combined.
Order: directories first, then everything else, each group by name.
"""

from __future__ import annotations
from typing import AbstractSet, Iterable, List
from .types import Entry, EntryKind, TraversalConfig


def matches(entry: Entry, filters: AbstractSet[str]) -> bool:
    for f in filters:
        if f in entry.name:
            return True
        if entry.extension is not None and f == entry.extension:
            return True
        if entry.content_type is not None and f in entry.content_type:
            return True
    return False


def sort_key(entry: Entry):
    return (entry.kind is not EntryKind.DIRECTORY, entry.name)


def sort_entries(entries: Iterable[Entry]) -> List[Entry]:
    return sorted(entries, key=sort_key)


def apply(entries: Iterable[Entry], cfg: TraversalConfig) -> List[Entry]:
    if cfg.name_filters:
        entries = [e for e in entries if matches(e, cfg.name_filters)]
    return sort_entries(entries)

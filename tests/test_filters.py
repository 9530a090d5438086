"""
Tests for filtering and ordering.
"""
from pathlib import Path
from fontsweep.filters import apply, matches, sort_entries
from fontsweep.types import Entry, EntryKind, TraversalConfig


def make_entry(name, kind=EntryKind.REGULAR_FILE, ext=None, ctype=None, size=1):
    return Entry(
        name=name,
        absolute_path=Path("/data") / name,
        kind=kind,
        size_bytes=size,
        modified_unix_seconds=0,
        extension=ext,
        content_type=ctype,
    )


ENTRIES = [
    make_entry("c.txt", ext="txt", ctype="text/plain"),
    make_entry("zeta", kind=EntryKind.DIRECTORY),
    make_entry("a.ttf", ext="ttf", ctype="font/ttf"),
    make_entry("link", kind=EntryKind.SYMBOLIC_LINK),
    make_entry("alpha", kind=EntryKind.DIRECTORY),
    make_entry("b.otf", ext="otf", ctype="font/otf"),
]


def test_no_filters_is_passthrough():
    """Empty filter set keeps everything."""
    assert len(apply(ENTRIES, TraversalConfig())) == len(ENTRIES)


def test_directories_first_then_names():
    """Directories lead; links sort with files by name."""
    ordered = [e.name for e in sort_entries(ENTRIES)]
    assert ordered == ["alpha", "zeta", "a.ttf", "b.otf", "c.txt", "link"]


def test_sorting_is_idempotent():
    once = sort_entries(ENTRIES)
    assert sort_entries(once) == once


def test_sort_is_stable_for_equal_names():
    """Same-named files from different directories keep discovery order."""
    first = Entry("x.ttf", Path("/one/x.ttf"), EntryKind.REGULAR_FILE, 1, 0, "ttf", "font/ttf")
    second = Entry("x.ttf", Path("/two/x.ttf"), EntryKind.REGULAR_FILE, 2, 0, "ttf", "font/ttf")
    assert sort_entries([first, second]) == [first, second]
    assert sort_entries([second, first]) == [second, first]


def test_filter_by_extension():
    kept = apply(ENTRIES, TraversalConfig(name_filters=frozenset({"otf"})))
    assert [e.name for e in kept] == ["b.otf"]


def test_filter_by_content_type_substring():
    """'font' matches through the content type."""
    kept = apply(ENTRIES, TraversalConfig(name_filters=frozenset({"font"})))
    assert [e.name for e in kept] == ["a.ttf", "b.otf"]


def test_filter_by_name_substring():
    kept = apply(ENTRIES, TraversalConfig(name_filters=frozenset({"alp"})))
    assert [e.name for e in kept] == ["alpha"]


def test_filters_are_or_combined():
    kept = apply(ENTRIES, TraversalConfig(name_filters=frozenset({"txt", "zeta"})))
    assert [e.name for e in kept] == ["zeta", "c.txt"]


def test_matches_requires_exact_extension():
    """Extension match is equality, not substring."""
    entry = make_entry("sample", ext="woff2")
    assert matches(entry, {"woff2"})
    assert not matches(entry, {"woff"})

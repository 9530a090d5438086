"""
api.py
String-in / string-out entry points for a host process.
Arguments arrive as primitives (str, bytes, bool, int). A conversion failure is
reported as the returned text and never reaches the engine; engine failures
are already carried in the result records and show up in the rendered report.
"""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional
from .aggregate import scan_directory
from .copier import copy_tree
from .discover import discover_fonts
from .fontmeta import parse_fonts_directory
from .report import format_copy_report, format_font_listing, format_font_report, format_scan_report
from .types import TraversalConfig

log = logging.getLogger(__name__)


class ArgumentConversionError(ValueError):
    pass


def _to_text(value, label: str) -> str:
    if isinstance(value, bytes):
        try:
            value = value.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ArgumentConversionError(f"{label}: not valid UTF-8 ({e.reason})")
    if not isinstance(value, str):
        raise ArgumentConversionError(f"{label}: expected a string, got {type(value).__name__}")
    return value


def _to_path(value, label: str) -> Path:
    text = _to_text(value, label).strip()
    if not text:
        raise ArgumentConversionError(f"{label}: empty path")
    return Path(text)


def _to_bool(value, label: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    raise ArgumentConversionError(f"{label}: expected a boolean, got {type(value).__name__}")


def _to_optional_int(value, label: str) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ArgumentConversionError(f"{label}: expected an integer, got {type(value).__name__}")
    return value if value >= 0 else None


def _conversion_failed(e: ArgumentConversionError) -> str:
    msg = f"argument conversion failed: {e}"
    log.error("%s", msg)
    return msg


def scan_directory_report(
    root,
    recursive=False,
    include_hidden=False,
    max_depth=None,
    follow_symlinks=False,
    name_filters="",
    max_entry_size=None,
) -> str:
    """Scan root and return the text report. name_filters is comma-separated."""
    try:
        path = _to_path(root, "root")
        filters = _to_text(name_filters, "name_filters")
        cfg = TraversalConfig(
            recursive=_to_bool(recursive, "recursive"),
            include_hidden=_to_bool(include_hidden, "include_hidden"),
            max_depth=_to_optional_int(max_depth, "max_depth"),
            follow_symlinks=_to_bool(follow_symlinks, "follow_symlinks"),
            name_filters=frozenset(f.strip() for f in filters.split(",") if f.strip()),
            max_entry_size=_to_optional_int(max_entry_size, "max_entry_size"),
        )
    except ArgumentConversionError as e:
        return _conversion_failed(e)
    return format_scan_report(scan_directory(path, cfg))


def load_fonts_info(directory) -> str:
    try:
        path = _to_path(directory, "directory")
    except ArgumentConversionError as e:
        return _conversion_failed(e)
    log.info("listing fonts in %s", path)
    return format_font_listing(discover_fonts(path))


def copy_font_files(source, target, overwrite=False) -> str:
    try:
        source_path = _to_path(source, "source")
        target_path = _to_path(target, "target")
        overwrite_flag = _to_bool(overwrite, "overwrite")
    except ArgumentConversionError as e:
        return _conversion_failed(e)
    return format_copy_report(copy_tree(source_path, target_path, overwrite_flag))


def parse_fonts_and_format(directory) -> str:
    try:
        path = _to_path(directory, "directory")
    except ArgumentConversionError as e:
        return _conversion_failed(e)
    return format_font_report(parse_fonts_directory(path))

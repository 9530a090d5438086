"""
fontmeta.py
Font name/style extraction on top of fontTools.

For every parseable font under a directory, read the first face and report:
- font_name: full name, else PostScript name, else family name
- family_name / style_name from the name table
- is_bold from OS/2 usWeightClass, is_italic from OS/2 fsSelection
  (head.macStyle when there is no OS/2 table)
A file that cannot be parsed is counted as failed with its reason; the rest
of the directory is still processed.
"""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional, Tuple, Union

from fontTools.ttLib import TTFont

from .classifier import extension_of
from .discover import FONT_MAX_FILE_SIZE, FONT_SCAN_MAX_DEPTH, discover_fonts
from .mime import FONT_EXTENSIONS
from .types import FontMapping, FontParseResult

log = logging.getLogger(__name__)

# fontTools cannot read Embedded OpenType
PARSEABLE_EXTENSIONS = FONT_EXTENSIONS - {"eot"}

NAME_FAMILY = 1
NAME_SUBFAMILY = 2
NAME_FULL = 4
NAME_POSTSCRIPT = 6

FS_SELECTION_ITALIC = 1 << 0
FS_SELECTION_OBLIQUE = 1 << 9
MAC_STYLE_BOLD = 1 << 0
MAC_STYLE_ITALIC = 1 << 1
BOLD_WEIGHT = 600


def _name(font: TTFont, name_id: int) -> Optional[str]:
    if "name" not in font:
        return None
    value = font["name"].getDebugName(name_id)
    return value or None


def _style_flags(font: TTFont) -> Tuple[bool, bool]:
    if "OS/2" in font:
        os2 = font["OS/2"]
        is_bold = os2.usWeightClass >= BOLD_WEIGHT
        is_italic = bool(os2.fsSelection & (FS_SELECTION_ITALIC | FS_SELECTION_OBLIQUE))
        return is_bold, is_italic
    if "head" in font:
        mac_style = font["head"].macStyle
        return bool(mac_style & MAC_STYLE_BOLD), bool(mac_style & MAC_STYLE_ITALIC)
    return False, False


def extract_font_info(path: Union[str, Path]) -> FontMapping:
    """Parse one font file. Raises on unreadable or unsupported files."""
    path = Path(path)
    if extension_of(path.name) not in PARSEABLE_EXTENSIONS:
        raise ValueError(f"unsupported font format: {path.name}")

    # fontNumber only matters for .ttc/.otc collections
    font = TTFont(str(path), fontNumber=0)
    try:
        font_name = _name(font, NAME_FULL) or _name(font, NAME_POSTSCRIPT) or _name(font, NAME_FAMILY)
        if not font_name:
            raise ValueError("no usable name record")
        is_bold, is_italic = _style_flags(font)
        return FontMapping(
            file_path=str(path),
            font_name=font_name,
            family_name=_name(font, NAME_FAMILY),
            style_name=_name(font, NAME_SUBFAMILY),
            is_bold=is_bold,
            is_italic=is_italic,
        )
    finally:
        font.close()


def parse_fonts_directory(
    directory: Union[str, Path],
    max_depth: int = FONT_SCAN_MAX_DEPTH,
    max_file_size: int = FONT_MAX_FILE_SIZE,
) -> FontParseResult:
    result = FontParseResult()
    log.info("parsing fonts under %s", directory)

    discovery = discover_fonts(
        directory, max_depth=max_depth, max_file_size=max_file_size, extensions=PARSEABLE_EXTENSIONS
    )
    result.errors.extend(discovery.error_messages)
    result.total_files = len(discovery.entries)

    for entry in discovery.entries:
        try:
            mapping = extract_font_info(entry.absolute_path)
        except Exception as e:
            msg = f"failed to parse {entry.absolute_path}: {e}"
            log.warning("%s", msg)
            result.errors.append(msg)
            result.failed_parses += 1
            continue
        result.mappings.append(mapping)
        result.successful_parses += 1

    log.info("font parse finished: %d ok, %d failed", result.successful_parses, result.failed_parses)
    return result

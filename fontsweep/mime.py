"""
mime.py
Static extension -> content-type table and the canonical font-extension set.
Keys are lowercase extensions without the leading dot.
"""

from __future__ import annotations
from types import MappingProxyType
from typing import Optional

FONT_EXTENSIONS = frozenset({"ttf", "otf", "ttc", "otc", "woff", "woff2", "eot"})

_CONTENT_TYPES = {
    # fonts
    "ttf": "font/ttf", "otf": "font/otf", "ttc": "font/collection", "otc": "font/collection",
    "woff": "font/woff", "woff2": "font/woff2", "eot": "application/vnd.ms-fontobject",
    # images
    "png": "image/png", "jpg": "image/jpeg", "jpeg": "image/jpeg", "gif": "image/gif",
    "bmp": "image/bmp", "webp": "image/webp", "svg": "image/svg+xml", "ico": "image/x-icon",
    "tif": "image/tiff", "tiff": "image/tiff",
    # documents
    "pdf": "application/pdf", "doc": "application/msword",
    "docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "xls": "application/vnd.ms-excel",
    "xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    "ppt": "application/vnd.ms-powerpoint",
    "pptx": "application/vnd.openxmlformats-officedocument.presentationml.presentation",
    "rtf": "application/rtf", "zip": "application/zip", "json": "application/json",
    "xml": "application/xml",
    # audio
    "mp3": "audio/mpeg", "wav": "audio/wav", "flac": "audio/flac", "ogg": "audio/ogg",
    "aac": "audio/aac", "m4a": "audio/mp4",
    # video
    "mp4": "video/mp4", "mkv": "video/x-matroska", "avi": "video/x-msvideo",
    "mov": "video/quicktime", "webm": "video/webm",
    # text
    "txt": "text/plain", "md": "text/markdown", "csv": "text/csv", "html": "text/html",
    "htm": "text/html", "css": "text/css", "js": "text/javascript", "log": "text/plain",
}

CONTENT_TYPES = MappingProxyType(_CONTENT_TYPES)


def content_type_for(extension: Optional[str]) -> Optional[str]:
    """Return the content type for a lowercase extension, or None when unknown."""
    if not extension:
        return None
    return CONTENT_TYPES.get(extension)


def is_font_extension(extension: Optional[str]) -> bool:
    return extension in FONT_EXTENSIONS

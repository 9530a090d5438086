"""
Tests for the extension -> content-type table.
"""
import pytest
from fontsweep.mime import CONTENT_TYPES, FONT_EXTENSIONS, content_type_for, is_font_extension


def test_woff2_is_a_font():
    """woff2 maps to font/woff2."""
    assert content_type_for("woff2") == "font/woff2"


def test_unknown_extension_has_no_type():
    """Unrecognized or missing extensions yield no content type."""
    assert content_type_for("xyz") is None
    assert content_type_for(None) is None
    assert content_type_for("") is None


@pytest.mark.parametrize("ext,expected", [
    ("ttf", "font/ttf"),
    ("png", "image/png"),
    ("txt", "text/plain"),
    ("pdf", "application/pdf"),
    ("mp3", "audio/mpeg"),
    ("mp4", "video/mp4"),
])
def test_known_categories(ext, expected):
    """Fonts, images, documents, audio, video and text are covered."""
    assert content_type_for(ext) == expected


def test_every_font_extension_has_a_type():
    """The font allowlist and the type table agree."""
    for ext in FONT_EXTENSIONS:
        assert content_type_for(ext) is not None
    assert FONT_EXTENSIONS == {"ttf", "otf", "ttc", "otc", "woff", "woff2", "eot"}


def test_table_is_read_only():
    """The shared table cannot be modified at runtime."""
    with pytest.raises(TypeError):
        CONTENT_TYPES["new"] = "x/y"


def test_is_font_extension():
    assert is_font_extension("otc")
    assert not is_font_extension("txt")
    assert not is_font_extension(None)

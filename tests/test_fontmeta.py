"""
Tests for font name/style extraction.
"""
import pytest
from fontsweep.fontmeta import PARSEABLE_EXTENSIONS, extract_font_info, parse_fonts_directory


def test_extract_regular_font(build_font, tmp_path):
    path = build_font(tmp_path / "demo.ttf")
    info = extract_font_info(path)
    assert info.font_name == "Demo Sans Regular"
    assert info.family_name == "Demo Sans"
    assert info.style_name == "Regular"
    assert info.is_bold is False
    assert info.is_italic is False
    assert info.file_path == str(path)


def test_bold_from_weight(build_font, tmp_path):
    path = build_font(tmp_path / "bold.ttf", style="Bold", weight=700)
    info = extract_font_info(path)
    assert info.is_bold is True
    assert info.style_name == "Bold"


def test_italic_from_fs_selection(build_font, tmp_path):
    path = build_font(tmp_path / "italic.ttf", style="Italic", fs_selection=0x0001)
    assert extract_font_info(path).is_italic is True


def test_garbage_data_raises(tmp_path):
    path = tmp_path / "broken.ttf"
    path.write_bytes(b"definitely not a font")
    with pytest.raises(Exception):
        extract_font_info(path)


def test_unsupported_extension(tmp_path):
    path = tmp_path / "legacy.eot"
    path.write_bytes(b"\0" * 16)
    with pytest.raises(ValueError, match="unsupported"):
        extract_font_info(path)
    assert "eot" not in PARSEABLE_EXTENSIONS


def test_parse_directory_accounting(build_font, tmp_path, write_file):
    """Good and bad fonts are counted separately; non-fonts are ignored."""
    root = tmp_path / "fonts"
    build_font(root / "good.ttf")
    build_font(root / "nested" / "also-good.ttf", family="Other", style="Bold", weight=700)
    write_file(root / "bad.otf", 12)
    write_file(root / "notes.txt", 3)
    write_file(root / "legacy.eot", 3)

    result = parse_fonts_directory(root)
    assert result.total_files == 3
    assert result.successful_parses == 2
    assert result.failed_parses == 1
    assert result.successful_parses + result.failed_parses == result.total_files
    assert sorted(m.font_name for m in result.mappings) == ["Demo Sans Regular", "Other Bold"]
    assert len(result.errors) == 1
    assert "bad.otf" in result.errors[0]


def test_parse_missing_directory(tmp_path):
    result = parse_fonts_directory(tmp_path / "missing")
    assert result.total_files == 0
    assert len(result.errors) == 1

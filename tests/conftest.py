"""
Pytest configuration and shared fixtures.
"""
import pytest
from pathlib import Path
from fontsweep.types import Config


def _write(path: Path, size: int) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"x" * size)
    return path


@pytest.fixture
def write_file():
    """Create a file of the given size, making parent directories."""
    return _write


@pytest.fixture
def font_dir(tmp_path):
    """a.ttf (10 bytes), b.otf (20), c.txt (5) and hidden .d.ttf."""
    root = tmp_path / "fonts"
    _write(root / "a.ttf", 10)
    _write(root / "b.otf", 20)
    _write(root / "c.txt", 5)
    _write(root / ".d.ttf", 7)
    return root


@pytest.fixture
def nested_dir(tmp_path):
    """
    tree/
      top.txt
      sub1/mid.ttf
      sub1/sub2/deep.woff2
      sub1/sub2/sub3/deeper.otf
    """
    root = tmp_path / "tree"
    _write(root / "top.txt", 3)
    _write(root / "sub1" / "mid.ttf", 11)
    _write(root / "sub1" / "sub2" / "deep.woff2", 13)
    _write(root / "sub1" / "sub2" / "sub3" / "deeper.otf", 17)
    return root


@pytest.fixture
def build_font():
    """Factory that writes a minimal but valid TrueType font."""
    from fontTools.fontBuilder import FontBuilder
    from fontTools.pens.ttGlyphPen import TTGlyphPen

    def build(path: Path, family="Demo Sans", style="Regular", weight=400, fs_selection=0x0040) -> Path:
        pen = TTGlyphPen(None)
        pen.moveTo((100, 0))
        pen.lineTo((100, 700))
        pen.lineTo((500, 700))
        pen.lineTo((500, 0))
        pen.closePath()
        glyph = pen.glyph()

        fb = FontBuilder(1000, isTTF=True)
        fb.setupGlyphOrder([".notdef", "A"])
        fb.setupCharacterMap({ord("A"): "A"})
        fb.setupGlyf({".notdef": glyph, "A": glyph})
        fb.setupHorizontalMetrics({".notdef": (600, 100), "A": (600, 100)})
        fb.setupHorizontalHeader(ascent=800, descent=-200)
        fb.setupNameTable({
            "familyName": family,
            "styleName": style,
            "fullName": f"{family} {style}",
            "psName": f"{family.replace(' ', '')}-{style}",
        })
        fb.setupOS2(sTypoAscender=800, usWinAscent=800, usWinDescent=200,
                    usWeightClass=weight, fsSelection=fs_selection)
        fb.setupPost()
        path.parent.mkdir(parents=True, exist_ok=True)
        fb.save(str(path))
        return path

    return build


@pytest.fixture
def temp_config_file(tmp_path):
    """Create a temporary configuration file for testing."""
    toml_content = """
[scan]
recursive = true
include_hidden = true
max_depth = 2
follow_symlinks = false
name_filters = ["ttf", "font"]
max_entry_size_mb = 10

[copy]
overwrite = true
max_depth = 3
max_file_size_mb = 20

[runtime]
log_level = "debug"

[output]
summary_dir = "/tmp/fontsweep-test-summaries"
"""
    path = tmp_path / "fontsweep.toml"
    path.write_text(toml_content)
    return path


@pytest.fixture
def sample_config():
    """Create a sample configuration object for testing."""
    return Config(
        scan_recursive=False,
        scan_include_hidden=False,
        scan_max_depth=None,
        scan_follow_symlinks=False,
        scan_name_filters=[],
        scan_max_entry_size_mb=0,
        copy_overwrite=False,
        copy_max_depth=4,
        copy_max_file_size_mb=50,
        log_level="INFO",
        summary_dir=None,
    )

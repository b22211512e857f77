from __future__ import annotations

import json
from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

from fontello_svg.glyphdb import GlyphShape


@pytest.fixture
def config() -> dict:
    return {
        "name": "demo",
        "css_prefix_text": "icon-",
        "glyphs": [
            {"uid": "u-search", "css": "search", "code": 59392, "src": "fontawesome"},
            {"uid": "u-search-entypo", "css": "search-2", "code": 59393, "src": "entypo"},
            {"uid": "u-progress", "css": "progress-5", "code": 59394, "src": "iconic"},
            {
                "uid": "u-logo",
                "css": "logo",
                "code": 59395,
                "src": "custom_icons",
                "selected": True,
                "svg": {"path": "M0 0L10 10Z", "width": 1000},
            },
            {
                "uid": "u-draft",
                "css": "draft",
                "code": 59396,
                "src": "custom_icons",
                "selected": False,
                "svg": {"path": "M1 1Z", "width": 500},
            },
        ],
    }


@pytest.fixture
def db() -> dict:
    return {
        "u-search": GlyphShape(width=928, path="M643 0Z"),
        "u-search-entypo": GlyphShape(width=1000, path="M10 20Z"),
        "u-progress": GlyphShape(width=857, path="M0 500Z"),
    }


@pytest.fixture
def config_file(tmp_path: Path, config: dict) -> Path:
    path = tmp_path / "config.json"
    path.write_text(json.dumps(config), encoding="utf-8")
    return path


def _build_font(path: Path, upm: int = 1000, codes=(0xE800,)) -> Path:
    """Write a font whose codepoints all map to a 500x500 square, advance 600."""
    k = upm // 1000
    pen = TTGlyphPen(None)
    pen.moveTo((0, 0))
    pen.lineTo((0, 500 * k))
    pen.lineTo((500 * k, 500 * k))
    pen.lineTo((500 * k, 0))
    pen.closePath()

    fb = FontBuilder(upm, isTTF=True)
    fb.setupGlyphOrder([".notdef", "square"])
    fb.setupCharacterMap({code: "square" for code in codes})
    fb.setupGlyf({".notdef": TTGlyphPen(None).glyph(), "square": pen.glyph()})
    fb.setupHorizontalMetrics({".notdef": (500 * k, 0), "square": (600 * k, 0)})
    fb.setupHorizontalHeader(ascent=850 * k, descent=-150 * k)
    fb.setupNameTable({"familyName": "Test", "styleName": "Regular"})
    fb.setupPost()
    fb.setupMaxp()
    fb.save(str(path))
    return path


@pytest.fixture
def build_font():
    return _build_font

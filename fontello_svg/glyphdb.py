"""Glyph shape database: Fontello uid -> (advance width, SVG path data).

Shapes come from a JSON dump of Fontello's server config and, optionally, from
a compiled Fontello font, where the manifest's codepoints locate the outlines.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable

from fontTools.pens.svgPathPen import SVGPathPen
from fontTools.pens.transformPen import TransformPen
from fontTools.ttLib import TTFont

from .manifest import RawGlyph


# Fontello glyph paths live in a 1000 unit em, y axis pointing down.
EM = 1000


@dataclass(frozen=True)
class GlyphShape:
    width: float
    path: str


def _ntos(value: float) -> str:
    rounded = round(value, 2)
    if float(rounded).is_integer():
        return str(int(rounded))
    return str(rounded)


def parse_glyph_db(data: dict, origin: str = "<glyph db>") -> Dict[str, GlyphShape]:
    if not isinstance(data, dict):
        raise ValueError(f"{origin}: glyph database must be a JSON object")
    entries = data.get("uids", data)
    if not isinstance(entries, dict):
        raise ValueError(f"{origin}: 'uids' must be an object")

    shapes: Dict[str, GlyphShape] = {}
    for uid, entry in entries.items():
        svg = entry.get("svg", entry) if isinstance(entry, dict) else None
        if not isinstance(svg, dict):
            raise ValueError(f"{origin}: invalid entry for uid '{uid}'")
        width = svg.get("width")
        path = svg.get("d", svg.get("path"))
        if not isinstance(width, (int, float)) or not isinstance(path, str):
            raise ValueError(f"{origin}: uid '{uid}' needs a numeric width and a path")
        shapes[uid] = GlyphShape(width=width, path=path)
    return shapes


def load_glyph_db(path: Path) -> Dict[str, GlyphShape]:
    if not path.exists():
        raise FileNotFoundError(f"Glyph database not found: {path}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc
    return parse_glyph_db(data, str(path))


def load_font_shapes(path: Path, raw_glyphs: Iterable[RawGlyph]) -> Dict[str, GlyphShape]:
    """Extract outlines for the manifest glyphs from a compiled font.

    Glyphs are matched by their ``code``; outlines are scaled to the 1000 unit
    em and flipped so the ascender sits at y=0.
    """
    if not path.exists():
        raise FileNotFoundError(f"Font not found: {path}")

    font = TTFont(path)
    cmap = font.getBestCmap() or {}
    glyph_set = font.getGlyphSet()
    hmtx = font["hmtx"]
    scale = EM / font["head"].unitsPerEm
    ascent = font["hhea"].ascent * scale

    shapes: Dict[str, GlyphShape] = {}
    for raw in raw_glyphs:
        if raw.uid is None or raw.code is None:
            continue
        glyph_name = cmap.get(raw.code)
        if glyph_name is None:
            continue
        pen = SVGPathPen(glyph_set, ntos=_ntos)
        glyph_set[glyph_name].draw(TransformPen(pen, (scale, 0, 0, -scale, 0, ascent)))
        advance, _ = hmtx[glyph_name]
        width = round(advance * scale, 2)
        shapes[raw.uid] = GlyphShape(width=int(width) if width.is_integer() else width, path=pen.getCommands())
    return shapes

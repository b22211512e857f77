"""Export the glyphs of a Fontello config.json as SVG files and CSS."""

from .catalog import all_glyphs, missing_glyphs
from .download import fetch_svgs, write_css, write_svgs
from .glyph import Glyph, create_glyph, glyph_creator, glyph_from_raw
from .names import IdAllocator, fix_names
from .sources import svg_url

__version__ = "0.2.0"

__all__ = [
    "Glyph",
    "IdAllocator",
    "all_glyphs",
    "create_glyph",
    "fetch_svgs",
    "fix_names",
    "glyph_creator",
    "glyph_from_raw",
    "missing_glyphs",
    "svg_url",
    "write_css",
    "write_svgs",
]

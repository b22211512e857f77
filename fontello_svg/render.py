from __future__ import annotations

import html
import xml.etree.ElementTree as ET
from typing import Iterable, Optional

from .glyph import Glyph
from .manifest import DEFAULT_CSS_PREFIX


SVG_NS = "http://www.w3.org/2000/svg"
SVG_HEIGHT = 1000

ET.register_namespace("", SVG_NS)


def _attr(value: Optional[object]) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return html.escape(str(value), quote=True)


def svg_document(glyph: Glyph, fill: str = "", viewbox: bool = True) -> str:
    """Render a glyph as a standalone SVG document."""
    width = _attr(glyph.width)
    parts = [f'<svg height="{SVG_HEIGHT}" width="{width}"']
    if viewbox:
        parts.append(f' viewBox="0 0 {width} {SVG_HEIGHT}"')
    parts.append(f' xmlns="{SVG_NS}"><path')
    if fill:
        parts.append(f' fill="{_attr(fill)}"')
    parts.append(f' d="{_attr(glyph.path)}"/></svg>')
    return "".join(parts)


def recolor_svg(content: str, fill: str) -> str:
    """Set ``fill`` on every path of a downloaded SVG document.

    Raises ``ValueError`` when the content is not parseable SVG.
    """
    try:
        root = ET.fromstring(content)
    except ET.ParseError as exc:
        raise ValueError(f"Failed to parse SVG: {exc}") from exc
    if fill:
        for path in root.iter(f"{{{SVG_NS}}}path"):
            path.set("fill", fill)
        for path in root.iter("path"):
            path.set("fill", fill)
    return ET.tostring(root, encoding="unicode")


def css_text(glyphs: Iterable[Glyph], url_path: str = "", prefix: str = DEFAULT_CSS_PREFIX) -> str:
    return "".join(glyph.css_declarations(url_path or "", prefix) for glyph in glyphs)

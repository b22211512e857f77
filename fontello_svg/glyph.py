from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from typing import Callable, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from .glyphdb import GlyphShape
from .manifest import DEFAULT_CSS_PREFIX, RawGlyph
from .names import IdAllocator
from .sources import COLLECTION_FILTERS, CollectionFilter, svg_url


DEFAULT_COLORS: Dict[str, str] = {"black": "#000000"}
DEFAULT_FILE_FORMAT = "{0}-{1}-{2}.svg"

FORMAT_SLOT = re.compile(r"{(\d+)}")

Colors = Union[Mapping[str, str], Sequence[Tuple[str, str]]]


def format_filename(template: str, *args: str) -> str:
    """Fill ``{0}``, ``{1}``... slots; slots without an argument stay as-is."""

    def fill(match: re.Match) -> str:
        index = int(match.group(1))
        return str(args[index]) if index < len(args) else match.group(0)

    return FORMAT_SLOT.sub(fill, template)


@dataclass(frozen=True)
class Glyph:
    id: str
    name: str
    collection: str
    colors: Tuple[Tuple[str, str], ...] = tuple(DEFAULT_COLORS.items())
    file_format: str = DEFAULT_FILE_FORMAT
    url: Optional[str] = None
    uid: Optional[str] = None
    width: Optional[float] = None
    path: Optional[str] = None

    def __post_init__(self) -> None:
        colors = self.colors
        if isinstance(colors, Mapping):
            colors = colors.items()
        object.__setattr__(self, "colors", tuple((str(k), str(v)) for k, v in colors))
        if not self.colors:
            raise ValueError(f"Glyph '{self.id}' needs at least one color")

    @property
    def color_names(self) -> List[str]:
        return [name for name, _ in self.colors]

    @property
    def color_map(self) -> Dict[str, str]:
        return dict(self.colors)

    def valid_color(self, color: str) -> str:
        """Return ``color`` if declared, otherwise the first declared color."""
        names = self.color_names
        return color if color in names else names[0]

    def filename(self, color: str) -> str:
        return format_filename(self.file_format, self.collection, self.name, self.valid_color(color))

    def filenames(self) -> List[str]:
        return [self.filename(color) for color in self.color_names]

    def css_name(self, color: str, prefix: str = DEFAULT_CSS_PREFIX) -> str:
        return f".{prefix}{self.id}-{self.valid_color(color)}"

    def css_declarations(self, url_path: str = "", prefix: str = DEFAULT_CSS_PREFIX) -> str:
        return "".join(
            f"{self.css_name(color, prefix)} {{ background-image: url({url_path}{self.filename(color)}) }}\n"
            for color in self.color_names
        )


def create_glyph(
    name: str,
    collection: str,
    id: Optional[str] = None,
    colors: Optional[Colors] = None,
    file_format: Optional[str] = None,
    filters: Sequence[CollectionFilter] = COLLECTION_FILTERS,
) -> Glyph:
    """Build a glyph from a bare name; shape data is left unresolved."""
    return Glyph(
        id=id or name,
        name=name,
        collection=collection,
        colors=colors or DEFAULT_COLORS,
        file_format=file_format or DEFAULT_FILE_FORMAT,
        url=svg_url(name, collection, filters),
    )


def glyph_creator(
    colors: Optional[Colors] = None,
    file_format: Optional[str] = None,
) -> Callable[..., Glyph]:
    """Return a glyph factory that numbers repeated names (-2, -3, ...)."""
    allocate = IdAllocator()

    def create(name: str, collection: str, glyph_colors: Optional[Colors] = None) -> Glyph:
        return create_glyph(name, collection, allocate(name), glyph_colors or colors, file_format)

    return create


def glyph_from_raw(
    raw: RawGlyph,
    id: Optional[str] = None,
    colors: Optional[Colors] = None,
    file_format: Optional[str] = None,
    db: Optional[Mapping[str, GlyphShape]] = None,
    filters: Sequence[CollectionFilter] = COLLECTION_FILTERS,
) -> List[Glyph]:
    """Convert a manifest entry to zero or one glyph.

    Custom icons are only kept when selected. Other glyphs get their outline
    from ``db``; an unknown uid still yields a glyph, without shape data.
    """
    if raw.is_custom and not raw.selected:
        return []

    url = None
    width = path = None
    if raw.is_custom:
        if raw.svg is not None:
            width, path = raw.svg.width, raw.svg.path
    else:
        url = svg_url(raw.css, raw.src, filters)
        shape = (db or {}).get(raw.uid) if raw.uid is not None else None
        if shape is None:
            print(f"Warning: no glyph data for {raw.src}:{raw.css} [{raw.uid}]", file=sys.stderr)
        else:
            width, path = shape.width, shape.path

    return [
        Glyph(
            id=id or raw.css,
            name=raw.css,
            collection=raw.src,
            colors=colors or DEFAULT_COLORS,
            file_format=file_format or DEFAULT_FILE_FORMAT,
            url=url,
            uid=raw.uid,
            width=width,
            path=path,
        )
    ]

from __future__ import annotations

import os
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import List, Mapping, Optional, Sequence

from .glyph import Colors, Glyph, glyph_from_raw
from .glyphdb import GlyphShape
from .manifest import raw_glyphs
from .names import IdAllocator, fix_names
from .sources import COLLECTION_FILTERS, CollectionFilter


DEFAULT_JOBS = max(os.cpu_count() or 4, 4)


def all_glyphs(
    config: dict,
    colors: Optional[Colors] = None,
    file_format: Optional[str] = None,
    db: Optional[Mapping[str, GlyphShape]] = None,
    filters: Sequence[CollectionFilter] = COLLECTION_FILTERS,
) -> List[Glyph]:
    """Build the glyph catalog of a Fontello config, in manifest order."""
    allocate = IdAllocator()
    glyphs: List[Glyph] = []
    for raw in fix_names(raw_glyphs(config)):
        glyph_id = allocate(raw.css)
        glyphs.extend(glyph_from_raw(raw, glyph_id, colors, file_format, db, filters))
    return glyphs


def _is_complete(glyph: Glyph, svg_dir: Path) -> bool:
    return all((svg_dir / filename).exists() for filename in glyph.filenames())


def missing_glyphs(glyphs: Sequence[Glyph], svg_dir: Path, jobs: int = DEFAULT_JOBS) -> List[Glyph]:
    """Return the glyphs with at least one SVG file missing from ``svg_dir``."""
    with ThreadPoolExecutor(max_workers=jobs) as pool:
        complete = list(pool.map(lambda glyph: _is_complete(glyph, svg_dir), glyphs))
    return [glyph for glyph, done in zip(glyphs, complete) if not done]

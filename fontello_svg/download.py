"""SVG and CSS output.

Work runs on a thread pool; results are collected on the calling thread, which
is the only one emitting events.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

import requests

from .catalog import DEFAULT_JOBS
from .events import FETCH_ERROR, SVG_WRITE, Events, FetchError
from .glyph import Glyph
from .manifest import DEFAULT_CSS_PREFIX
from .render import css_text, recolor_svg, svg_document
from .sources import svg_url


FETCH_TIMEOUT = 30
CSS_FILENAME = "index.css"


def _write_text(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def _write_glyph(glyph: Glyph, color: str, fill: str, svg_dir: Path, viewbox: bool) -> Path:
    return _write_text(svg_dir / glyph.filename(color), svg_document(glyph, fill, viewbox))


def write_svgs(
    glyphs: Sequence[Glyph],
    svg_dir: Path,
    events: Optional[Events] = None,
    viewbox: bool = True,
    jobs: int = DEFAULT_JOBS,
) -> List[Path]:
    """Render every glyph/color pair from its own outline and write it.

    A failed write is fatal and propagates once the pool has drained.
    """
    events = events or Events()
    written: List[Path] = []
    with ThreadPoolExecutor(max_workers=jobs) as pool:
        futures = [
            pool.submit(_write_glyph, glyph, color, fill, svg_dir, viewbox)
            for glyph in glyphs
            for color, fill in glyph.colors
        ]
        for fut in as_completed(futures):
            path = fut.result()
            written.append(path)
            events.emit(SVG_WRITE, path)
    return written


def _fetch_glyph(
    session: requests.Session, glyph: Glyph, svg_dir: Path
) -> Tuple[List[Path], Optional[FetchError]]:
    url = glyph.url or svg_url(glyph.name, glyph.collection)
    try:
        response = session.get(url, timeout=FETCH_TIMEOUT)
    except requests.RequestException as exc:
        return [], FetchError(url, str(exc))
    if response.status_code != 200:
        return [], FetchError(url, f"HTTP {response.status_code}")

    try:
        documents = [(glyph.filename(color), recolor_svg(response.text, fill)) for color, fill in glyph.colors]
    except ValueError as exc:
        return [], FetchError(url, str(exc))

    return [_write_text(svg_dir / filename, text) for filename, text in documents], None


def fetch_svgs(
    glyphs: Sequence[Glyph],
    svg_dir: Path,
    events: Optional[Events] = None,
    session: Optional[requests.Session] = None,
    jobs: int = DEFAULT_JOBS,
) -> List[Path]:
    """Download each glyph's source SVG and write one recolored copy per color.

    Download failures are reported through ``fetch-error`` and skipped.
    """
    events = events or Events()
    own_session = session is None
    if own_session:
        session = requests.Session()

    written: List[Path] = []
    try:
        with ThreadPoolExecutor(max_workers=jobs) as pool:
            futures = [pool.submit(_fetch_glyph, session, glyph, svg_dir) for glyph in glyphs]
            for fut in as_completed(futures):
                paths, error = fut.result()
                if error is not None:
                    events.emit(FETCH_ERROR, error)
                    continue
                for path in paths:
                    written.append(path)
                    events.emit(SVG_WRITE, path)
    finally:
        if own_session:
            session.close()
    return written


def write_css(
    glyphs: Sequence[Glyph],
    css_path: Path,
    url_path: str = "",
    prefix: str = DEFAULT_CSS_PREFIX,
) -> Path:
    return _write_text(css_path, css_text(glyphs, url_path, prefix))

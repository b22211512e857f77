from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import Dict

from .catalog import DEFAULT_JOBS, all_glyphs, missing_glyphs
from .download import CSS_FILENAME, fetch_svgs, write_css, write_svgs
from .events import FETCH_ERROR, SVG_WRITE, Events, FetchError
from .glyph import DEFAULT_COLORS, DEFAULT_FILE_FORMAT
from .glyphdb import GlyphShape, load_font_shapes, load_glyph_db
from .manifest import css_prefix, load_manifest, raw_glyphs


NO_FILL_COLORS = {"": ""}


def parse_colors(value: str) -> Dict[str, str]:
    """Parse ``"black:rgb(0,0,0) | red:rgb(255,0,0)"`` into an ordered dict."""
    colors: Dict[str, str] = {}
    for pair in value.split("|"):
        if ":" not in pair:
            raise argparse.ArgumentTypeError(f"Expected name:value, got '{pair.strip()}'")
        name, color = (part.strip() for part in pair.split(":", 1))
        colors[name] = color
    return colors


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Expected an integer, got '{value}'") from exc
    if number < 1:
        raise argparse.ArgumentTypeError(f"Expected a positive integer, got {number}")
    return number


def relative_path(path: Path) -> str:
    return os.path.relpath(path, Path.cwd())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fontello-svg",
        description="Export the glyphs of a Fontello config as SVG files and a CSS sprite sheet.",
    )
    parser.add_argument("-c", "--config", type=Path, required=True, help="Fontello configuration file")
    parser.add_argument("-o", "--out", type=Path, required=True, help="Export directory")
    parser.add_argument(
        "-f",
        "--fill-colors",
        type=parse_colors,
        default=None,
        help='Colors to export, e.g. "black:rgb(0,0,0) | red:rgb(255,0,0)"',
    )
    parser.add_argument("--no-fill-colors", action="store_true", help="Do not add a fill attribute")
    parser.add_argument("-p", "--css-path", default="", help="URL path prefixed to the SVG backgrounds in the CSS")
    parser.add_argument(
        "--file-format",
        default=DEFAULT_FILE_FORMAT,
        help='SVG filename: {0} collection, {1} name, {2} color (default: "{0}-{1}-{2}.svg")',
    )
    parser.add_argument("--no-css", dest="css", action="store_false", help="Do not create the CSS file")
    parser.add_argument("--no-skip", dest="skip", action="store_false", help="Do not skip existing files")
    parser.add_argument("--no-viewbox", dest="viewbox", action="store_false", help="Do not add a viewBox")
    parser.add_argument("--classic", action="store_true", help="Download the source SVG of each glyph")
    parser.add_argument("--glyph-db", type=Path, help="JSON dump of the Fontello glyph database (uid -> svg)")
    parser.add_argument("--font", type=Path, help="Compiled Fontello font used for glyphs missing from --glyph-db")
    parser.add_argument("--jobs", type=positive_int, default=DEFAULT_JOBS, help="Number of parallel workers")
    parser.add_argument("--verbose", action="store_true", help="Verbose output")
    return parser


def load_shapes(args: argparse.Namespace, config: dict) -> Dict[str, GlyphShape]:
    shapes: Dict[str, GlyphShape] = {}
    if args.font:
        shapes.update(load_font_shapes(args.font, raw_glyphs(config)))
    if args.glyph_db:
        shapes.update(load_glyph_db(args.glyph_db))
    return shapes


def run(args: argparse.Namespace) -> int:
    config = load_manifest(args.config)
    out = args.out.resolve()
    if args.no_fill_colors:
        colors = NO_FILL_COLORS
    else:
        colors = args.fill_colors or DEFAULT_COLORS

    glyphs = all_glyphs(config, colors, args.file_format, load_shapes(args, config))
    out.mkdir(parents=True, exist_ok=True)

    pending = missing_glyphs(glyphs, out, args.jobs) if args.skip else glyphs
    if args.skip and args.verbose:
        pending_ids = {glyph.id for glyph in pending}
        for glyph in glyphs:
            if glyph.id not in pending_ids:
                print(f"  [skipped] existing SVG: {glyph.name}-{glyph.collection}")

    events = Events()

    def report_error(error: FetchError) -> None:
        print(f"  [error] download failed: {error.url}")

    def report_write(path: Path) -> None:
        print(f"  [saved] {relative_path(path)}")

    events.on(FETCH_ERROR, report_error)
    events.on(SVG_WRITE, report_write)

    if args.classic:
        fetch_svgs(pending, out, events, jobs=args.jobs)
    else:
        write_svgs(pending, out, events, viewbox=args.viewbox, jobs=args.jobs)

    if args.css:
        css_path = write_css(glyphs, out / CSS_FILENAME, args.css_path, css_prefix(config))
        print(f"  [saved] {relative_path(css_path)}")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return run(args)
    except Exception as exc:  # noqa: BLE001
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

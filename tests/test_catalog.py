from __future__ import annotations

from pathlib import Path

import pytest

from fontello_svg.catalog import all_glyphs, missing_glyphs
from fontello_svg.glyph import create_glyph


def test_catalog_order_ids_and_selection(config, db):
    glyphs = all_glyphs(config, db=db)
    assert [g.id for g in glyphs] == ["search", "search-2", "progress-5", "logo"]
    assert [g.name for g in glyphs] == ["search", "search", "progress-5", "logo"]
    assert [g.collection for g in glyphs] == ["fontawesome", "entypo", "iconic", "custom_icons"]


def test_catalog_resolves_outlines(config, db):
    glyphs = {g.id: g for g in all_glyphs(config, db=db)}
    assert glyphs["search-2"].path == "M10 20Z"
    assert glyphs["logo"].width == 1000
    assert glyphs["logo"].path == "M0 0L10 10Z"


def test_catalog_applies_colors_and_template(config, db):
    colors = {"black": "#000", "red": "#f00"}
    glyphs = all_glyphs(config, colors, "{1}.{2}.svg", db)
    assert all(g.color_map == colors for g in glyphs)
    assert glyphs[0].filenames() == ["search.black.svg", "search.red.svg"]


def test_search_and_search_2():
    config = {"glyphs": [{"css": "search", "src": "fontawesome"}, {"css": "search-2", "src": "entypo"}]}
    glyphs = all_glyphs(config, db={})
    assert [(g.id, g.name) for g in glyphs] == [("search", "search"), ("search-2", "search")]


def test_unselected_entries_still_consume_an_id(db):
    config = {
        "glyphs": [
            {"css": "logo", "src": "custom_icons", "selected": False, "svg": {"path": "M0 0", "width": 1}},
            {"css": "logo", "src": "custom_icons", "selected": True, "svg": {"path": "M1 1", "width": 1}},
        ]
    }
    assert [g.id for g in all_glyphs(config, db=db)] == ["logo-2"]


def test_missing_glyphs_list_is_a_precondition():
    with pytest.raises(KeyError):
        all_glyphs({}, db={})


def test_default_colors(config, db):
    glyphs = all_glyphs(config, db=db)
    assert glyphs[0].color_map == {"black": "#000000"}


def _touch(directory: Path, *names: str) -> None:
    for name in names:
        (directory / name).write_text("<svg/>", encoding="utf-8")


def test_missing_glyphs_checks_every_color(tmp_path):
    colors = {"black": "#000", "red": "#f00"}
    complete = create_glyph("home", "entypo", colors=colors)
    partial = create_glyph("search", "entypo", colors=colors)
    absent = create_glyph("star", "entypo", colors=colors)
    _touch(tmp_path, *complete.filenames())
    _touch(tmp_path, partial.filename("black"))

    missing = missing_glyphs([complete, partial, absent], tmp_path, jobs=2)
    assert missing == [partial, absent]


def test_missing_glyphs_on_empty_directory(tmp_path):
    glyphs = [create_glyph("home", "entypo"), create_glyph("star", "entypo")]
    assert missing_glyphs(glyphs, tmp_path) == glyphs


def test_missing_glyphs_when_all_present(tmp_path):
    glyph = create_glyph("home", "entypo")
    _touch(tmp_path, *glyph.filenames())
    assert missing_glyphs([glyph], tmp_path) == []

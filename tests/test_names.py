from __future__ import annotations

from fontello_svg.manifest import RawGlyph
from fontello_svg.names import IdAllocator, fix_names


def raws(*names: str) -> list[RawGlyph]:
    return [RawGlyph(css=name, src="fontawesome") for name in names]


def css(glyphs: list[RawGlyph]) -> list[str]:
    return [glyph.css for glyph in glyphs]


def test_suffix_removed_when_base_name_exists():
    assert css(fix_names(raws("search", "search-2"))) == ["search", "search"]


def test_suffix_kept_when_it_is_part_of_the_name():
    assert css(fix_names(raws("progress-5", "progress-15"))) == ["progress-5", "progress-15"]


def test_zero_leading_suffix_is_never_a_counter():
    assert css(fix_names(raws("progress", "progress-05"))) == ["progress", "progress-05"]


def test_decisions_use_original_names_regardless_of_order():
    assert css(fix_names(raws("home-3", "home"))) == ["home", "home"]


def test_input_entries_are_not_mutated():
    entries = raws("search", "search-2")
    fixed = fix_names(entries)
    assert entries[1].css == "search-2"
    assert fixed[0] is entries[0]
    assert fixed[1] is not entries[1]
    assert fixed[1].src == "fontawesome"


def test_normalization_is_idempotent():
    cases = [
        ("search", "search-2", "progress-5"),
        ("a", "a-2", "a-2-3", "b-7"),
        ("x-1", "x-10", "x"),
        (),
    ]
    for names in cases:
        once = fix_names(raws(*names))
        assert css(fix_names(once)) == css(once)


def test_chained_suffixes_resolve_to_the_existing_base():
    assert css(fix_names(raws("a", "a-2", "a-2-3"))) == ["a", "a", "a"]


def test_allocator_first_occurrence_keeps_name():
    allocate = IdAllocator()
    assert allocate("search") == "search"
    assert allocate("home") == "home"


def test_allocator_numbers_repeats_from_two():
    allocate = IdAllocator()
    assert [allocate("search") for _ in range(4)] == ["search", "search-2", "search-3", "search-4"]


def test_allocator_never_reissues_an_id():
    allocate = IdAllocator()
    names = ["a", "a-2", "a", "a", "a-2", "b", "a-3", "b"]
    ids = [allocate.allocate(name) for name in names]
    assert len(ids) == len(set(ids))
    assert ids[:3] == ["a", "a-2", "a-3"]


def test_allocators_are_independent():
    first, second = IdAllocator(), IdAllocator()
    first("search")
    assert second("search") == "search"

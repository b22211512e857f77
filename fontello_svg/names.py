"""Glyph name cleanup and unique id allocation."""

from __future__ import annotations

import re
from dataclasses import replace
from typing import Dict, Iterable, List, Set

from .manifest import RawGlyph


COUNT_SUFFIX = re.compile(r"-[1-9][0-9]*$")


def strip_count_suffix(name: str) -> str:
    return COUNT_SUFFIX.sub("", name)


def fix_names(raw_glyphs: Iterable[RawGlyph]) -> List[RawGlyph]:
    """Drop numbered suffixes that Fontello added to disambiguate names.

    A suffix can be part of the pictogram name ("progress-5") or it can have
    been added because a glyph from another collection already uses the name
    ("search-2"). It is only removed in the second case, i.e. when the bare
    name is also present in the manifest.
    """
    raw_glyphs = list(raw_glyphs)
    known = {raw.css for raw in raw_glyphs}
    fixed: List[RawGlyph] = []
    for raw in raw_glyphs:
        name = raw.css
        while COUNT_SUFFIX.search(name):
            base = strip_count_suffix(name)
            if base not in known:
                break
            name = base
        fixed.append(raw if name == raw.css else replace(raw, css=name))
    return fixed


class IdAllocator:
    """Hands out ids, suffixing repeated names with -2, -3, ..."""

    def __init__(self) -> None:
        self._issued: Set[str] = set()
        self._counters: Dict[str, int] = {}

    def allocate(self, name: str) -> str:
        if name not in self._issued:
            self._issued.add(name)
            return name
        count = self._counters.get(name, 1)
        while True:
            count += 1
            candidate = f"{name}-{count}"
            if candidate not in self._issued:
                break
        self._counters[name] = count
        self._issued.add(candidate)
        return candidate

    __call__ = allocate

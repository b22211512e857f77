from __future__ import annotations

import re
from typing import Callable, Pattern, Sequence, Tuple, Union


Replacement = Union[str, Callable[[str], str]]
CollectionFilter = Tuple[Pattern[str], Replacement]

SVG_URL_TEMPLATE = "https://raw.github.com/fontello/{repo}/master/src/svg/{name}.svg"

# Fontello collections whose source repository name differs from the
# collection name. Evaluated in order, first match wins.
COLLECTION_FILTERS: Tuple[CollectionFilter, ...] = (
    (re.compile(r"^fontawesome$"), "awesome-uni.font"),
    (re.compile(r"^entypo$"), "entypo"),
    (re.compile(r"^iconic$"), "iconic-uni.font"),
    (re.compile(r"^websymbols$"), "websymbols-uni.font"),
    (re.compile(r".*"), lambda collection: f"{collection}.font"),
)


def source_repo(collection: str, filters: Sequence[CollectionFilter] = COLLECTION_FILTERS) -> str:
    for pattern, replacement in filters:
        if pattern.search(collection):
            return replacement(collection) if callable(replacement) else replacement
    return collection


def svg_url(name: str, collection: str, filters: Sequence[CollectionFilter] = COLLECTION_FILTERS) -> str:
    """Return the URL of the source SVG of a Fontello glyph."""
    return SVG_URL_TEMPLATE.format(repo=source_repo(collection, filters), name=name)

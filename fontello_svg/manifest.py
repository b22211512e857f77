from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import jsonschema


SCHEMA_PATH = Path(__file__).resolve().parent / "schema" / "config.schema.json"
CUSTOM_ICONS = "custom_icons"
DEFAULT_CSS_PREFIX = "icon-"


@dataclass(frozen=True)
class InlineSvg:
    width: float
    path: str


@dataclass(frozen=True)
class RawGlyph:
    """One entry of the ``glyphs`` list of a Fontello config.json."""

    css: str
    src: str
    selected: Optional[bool] = None
    uid: Optional[str] = None
    code: Optional[int] = None
    svg: Optional[InlineSvg] = None

    @property
    def is_custom(self) -> bool:
        return self.src == CUSTOM_ICONS

    @classmethod
    def from_dict(cls, data: dict) -> "RawGlyph":
        svg = data.get("svg")
        inline = None
        if isinstance(svg, dict):
            inline = InlineSvg(width=svg.get("width"), path=svg.get("path"))
        return cls(
            css=data["css"],
            src=data["src"],
            selected=data.get("selected"),
            uid=data.get("uid"),
            code=data.get("code"),
            svg=inline,
        )


def load_schema() -> dict:
    if not SCHEMA_PATH.exists():
        raise FileNotFoundError(f"Schema not found: {SCHEMA_PATH}")
    return json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))


def validate_manifest(data: dict, schema: dict | None = None) -> None:
    if schema is None:
        schema = load_schema()
    jsonschema.Draft202012Validator(schema).validate(data)


def load_manifest(path: Path) -> dict:
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {path}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc
    validate_manifest(data)
    return data


def raw_glyphs(config: dict) -> List[RawGlyph]:
    return [RawGlyph.from_dict(item) for item in config["glyphs"]]


def css_prefix(config: dict) -> str:
    prefix = config.get("css_prefix_text")
    return DEFAULT_CSS_PREFIX if prefix is None else prefix

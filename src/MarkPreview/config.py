from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml


@dataclass(frozen=True)
class RenderConfig:
    page_width_mm: float = 210
    page_height_mm: float = 297
    margin_left_cm: float = 2.5
    margin_right_cm: float = 2.5
    margin_top_cm: float = 2.0
    margin_bottom_cm: float = 2.0

    font_name: str = "Arial"
    font_size_pt: float = 11
    code_font_name: str = "Courier New"
    line_spacing_pt: float = 16

    footnotes_heading: str = "References & Footnotes"

    html_title: str = "Converted Document"


# YAML section -> {yaml key: RenderConfig field}
_SECTIONS: dict[str, dict[str, str]] = {
    "page": {
        "width_mm": "page_width_mm",
        "height_mm": "page_height_mm",
        "margin_left_cm": "margin_left_cm",
        "margin_right_cm": "margin_right_cm",
        "margin_top_cm": "margin_top_cm",
        "margin_bottom_cm": "margin_bottom_cm",
    },
    "fonts": {
        "name": "font_name",
        "size_pt": "font_size_pt",
        "code_name": "code_font_name",
        "line_spacing_pt": "line_spacing_pt",
    },
    "footnotes": {"heading": "footnotes_heading"},
    "html": {"title": "html_title"},
}


def parse_config(text: str) -> RenderConfig:
    """Parse a YAML render configuration; missing keys keep their defaults."""
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError("Config root must be a mapping of sections.")

    overrides: dict[str, Any] = {}
    for section, values in data.items():
        keys = _SECTIONS.get(section)
        if keys is None:
            raise ValueError(f"Unknown config section: {section!r}")
        if values is None:
            continue
        if not isinstance(values, dict):
            raise ValueError(f"Config section {section!r} must be a mapping.")
        for key, value in values.items():
            if key not in keys:
                raise ValueError(f"Unknown key {key!r} in config section {section!r}")
            overrides[keys[key]] = _coerce(keys[key], value)
    return replace(RenderConfig(), **overrides)


def load_config(path: str | Path | None) -> RenderConfig:
    if path is None:
        return RenderConfig()
    return parse_config(Path(path).read_text(encoding="utf-8"))


def _coerce(name: str, value: Any) -> Any:
    default = next(f.default for f in fields(RenderConfig) if f.name == name)
    if isinstance(default, str):
        return str(value)
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Config value for {name!r} must be a number, got {value!r}") from exc

"""JSON-compatible view of a converted document.

Every node becomes a dict with a ``"type"`` key naming its class plus one key
per dataclass field; list items stay nested span lists. Output of
:func:`to_json` uses sorted keys so identical input gives identical text.
"""

from __future__ import annotations

import json
from dataclasses import fields
from typing import Any

from .footnotes import FootnoteRegistry
from .model import Document, ListBlock


def node_to_dict(node: Any) -> dict[str, Any]:
    data: dict[str, Any] = {"type": type(node).__name__}
    for f in fields(node):
        value = getattr(node, f.name)
        if isinstance(node, ListBlock) and f.name == "items":
            value = [[node_to_dict(span) for span in item] for item in value]
        elif isinstance(value, tuple):
            value = [node_to_dict(child) for child in value]
        data[f.name] = value
    return data


def registry_to_list(registry: FootnoteRegistry) -> list[dict[str, Any]]:
    return [
        {"index": index, "url": entry.url, "title": entry.title}
        for index, entry in enumerate(registry.entries(), start=1)
    ]


def to_dict(document: Document, registry: FootnoteRegistry) -> dict[str, Any]:
    return {
        "blocks": [node_to_dict(block) for block in document.blocks],
        "footnotes": registry_to_list(registry),
    }


def to_json(document: Document, registry: FootnoteRegistry, indent: int | None = 2) -> str:
    return json.dumps(to_dict(document, registry), indent=indent, sort_keys=True, ensure_ascii=False)

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True)
class PlainText:
    text: str


@dataclass(frozen=True)
class Bold:
    text: str


@dataclass(frozen=True)
class Italic:
    text: str


@dataclass(frozen=True)
class Strikethrough:
    text: str


@dataclass(frozen=True)
class InlineCode:
    text: str


@dataclass(frozen=True)
class Link:
    url: str
    label: str
    footnote_index: int


@dataclass(frozen=True)
class Image:
    url: str
    alt: str


InlineSpan = Union[PlainText, Bold, Italic, Strikethrough, InlineCode, Link, Image]
Spans = Tuple[InlineSpan, ...]


@dataclass(frozen=True)
class Block:
    """Base class for block-level nodes."""


@dataclass(frozen=True)
class Heading(Block):
    level: int
    spans: Spans


@dataclass(frozen=True)
class Paragraph(Block):
    spans: Spans


@dataclass(frozen=True)
class ListBlock(Block):
    ordered: bool
    items: Tuple[Spans, ...]


@dataclass(frozen=True)
class Blockquote(Block):
    spans: Spans


@dataclass(frozen=True)
class CodeBlock(Block):
    language: str
    content: str


@dataclass(frozen=True)
class HorizontalRule(Block):
    """Horizontal rule / thematic break."""


@dataclass(frozen=True)
class Document:
    blocks: Tuple[Block, ...] = ()


def spans_to_text(spans: Spans) -> str:
    """Flatten inline spans to their visible text."""
    parts: list[str] = []
    for span in spans:
        if isinstance(span, Link):
            parts.append(span.label)
        elif isinstance(span, Image):
            parts.append(span.alt)
        else:
            parts.append(span.text)
    return "".join(parts)

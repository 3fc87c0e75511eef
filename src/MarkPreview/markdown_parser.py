from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional

from .footnotes import FootnoteRegistry
from .inline_parser import format_inline
from .model import (
    Block,
    Blockquote,
    CodeBlock,
    Document,
    Heading,
    HorizontalRule,
    ListBlock,
    Paragraph,
    Spans,
)

logger = logging.getLogger(__name__)

FENCE = "```"
HORIZONTAL_RULES = frozenset({"***", "---", "___"})

_HEADING_RE = re.compile(r"(?P<marks>#{1,6}) (?P<text>.*)")
_UNORDERED_RE = re.compile(r"\s*[-*+]\s")
_ORDERED_RE = re.compile(r"\s*\d+\.\s")


@dataclass
class _SegmentState:
    registry: FootnoteRegistry
    blocks: List[Block] = field(default_factory=list)
    list_ordered: Optional[bool] = None
    list_items: List[Spans] = field(default_factory=list)
    code_language: Optional[str] = None
    code_lines: List[str] = field(default_factory=list)

    @property
    def in_code_block(self) -> bool:
        return self.code_language is not None

    def inline(self, text: str) -> Spans:
        return tuple(format_inline(text, self.registry))

    def add_list_item(self, ordered: bool, text: str) -> None:
        if self.list_ordered is not ordered:
            self.close_list()
            self.list_ordered = ordered
        self.list_items.append(self.inline(text))

    def close_list(self) -> None:
        if self.list_ordered is None:
            return
        self.blocks.append(ListBlock(ordered=self.list_ordered, items=tuple(self.list_items)))
        self.list_ordered = None
        self.list_items = []

    def open_code_block(self, language: str) -> None:
        self.close_list()
        self.code_language = language
        self.code_lines = []

    def close_code_block(self) -> None:
        if self.code_language is None:
            return
        self.blocks.append(CodeBlock(language=self.code_language, content="".join(self.code_lines)))
        self.code_language = None
        self.code_lines = []


def segment(text: str) -> tuple[Document, FootnoteRegistry]:
    """Convert markdown text into a Document and its footnote registry.

    Lines are classified one at a time by prefix. Inline formatting of each
    block's text goes through :func:`format_inline`, which fills the registry
    as links are found. Malformed syntax falls back to plain paragraphs, so any
    string converts.
    """
    state = _SegmentState(registry=FootnoteRegistry())
    lines = _split_lines(text)
    for line in lines:
        _consume_line(state, line)
    state.close_list()
    state.close_code_block()

    logger.debug(
        "Segmented %d lines into %d blocks with %d footnotes",
        len(lines),
        len(state.blocks),
        len(state.registry),
    )
    return Document(blocks=tuple(state.blocks)), state.registry.freeze()


def _consume_line(state: _SegmentState, line: str) -> None:
    stripped = line.strip()

    if stripped.startswith(FENCE):
        if state.in_code_block:
            state.close_code_block()
        else:
            state.open_code_block(stripped[len(FENCE) :].strip())
        return
    if state.in_code_block:
        state.code_lines.append(line + "\n")
        return

    heading = _HEADING_RE.match(line)
    if heading:
        state.close_list()
        level = len(heading.group("marks"))
        state.blocks.append(Heading(level=level, spans=state.inline(heading.group("text"))))
        return

    unordered = _UNORDERED_RE.match(line)
    if unordered:
        state.add_list_item(False, line[unordered.end() :])
        return
    ordered = _ORDERED_RE.match(line)
    if ordered:
        state.add_list_item(True, line[ordered.end() :])
        return

    state.close_list()

    if line.startswith("> "):
        state.blocks.append(Blockquote(spans=state.inline(line[2:])))
    elif stripped in HORIZONTAL_RULES:
        state.blocks.append(HorizontalRule())
    elif stripped:
        state.blocks.append(Paragraph(spans=state.inline(line)))


def _split_lines(text: str) -> List[str]:
    # only "\n" ends a line; other separators belong to the line's text
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]

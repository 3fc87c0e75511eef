from __future__ import annotations

from typing import Callable, List, Optional, Tuple

from .footnotes import FootnoteRegistry
from .model import (
    Bold,
    Image,
    InlineCode,
    InlineSpan,
    Italic,
    Link,
    PlainText,
    Strikethrough,
)

# (opening marker, span type); the closing marker equals the opening one.
_DELIMITED = (
    ("**", Bold),
    ("__", Bold),
    ("*", Italic),
    ("_", Italic),
    ("~~", Strikethrough),
    ("`", InlineCode),
)

_Match = Optional[Tuple[InlineSpan, int]]


def format_inline(text: str, registry: FootnoteRegistry) -> List[InlineSpan]:
    """Scan one block's text into inline spans, registering link URLs."""
    spans: List[InlineSpan] = []
    plain: list[str] = []
    pos = 0
    while pos < len(text):
        match = _match_at(text, pos, registry)
        if match is None:
            plain.append(text[pos])
            pos += 1
            continue
        span, pos = match
        if plain:
            spans.append(PlainText("".join(plain)))
            plain = []
        spans.append(span)
    if plain:
        spans.append(PlainText("".join(plain)))
    return spans


def _match_at(text: str, pos: int, registry: FootnoteRegistry) -> _Match:
    for marker, span_type in _DELIMITED:
        match = _match_delimited(text, pos, marker, span_type)
        if match is not None:
            return match
    if text.startswith("[", pos):
        return _match_link(text, pos, registry)
    if text.startswith("![", pos):
        return _match_image(text, pos)
    return None


def _match_delimited(text: str, pos: int, marker: str, span_type: Callable[[str], InlineSpan]) -> _Match:
    if not text.startswith(marker, pos):
        return None
    start = pos + len(marker)
    # at least one character of content before the closer
    close = text.find(marker, start + 1)
    if close == -1:
        return None
    return span_type(text[start:close]), close + len(marker)


def _split_target(text: str, pos: int) -> Optional[Tuple[str, str, int]]:
    """Split ``[label](url)`` starting at the ``[`` in ``pos``."""
    label_end = text.find("](", pos + 1)
    if label_end == -1:
        return None
    url_end = text.find(")", label_end + 2)
    if url_end == -1:
        return None
    return text[pos + 1 : label_end], text[label_end + 2 : url_end], url_end + 1


def _match_link(text: str, pos: int, registry: FootnoteRegistry) -> _Match:
    target = _split_target(text, pos)
    if target is None:
        return None
    label, url, end = target
    index = registry.resolve(url, label if label != url else None)
    return Link(url=url, label=label, footnote_index=index), end


def _match_image(text: str, pos: int) -> _Match:
    target = _split_target(text, pos + 1)
    if target is None:
        return None
    alt, url, end = target
    return Image(url=url, alt=alt), end

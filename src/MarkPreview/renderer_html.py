"""HTML preview renderer.

Walks a converted Document with one fixed template per block and span type.
Text and attribute values are entity-escaped; nothing else is filtered.
Links carry a trailing ``[n]`` marker pointing at the footnotes section that
closes the fragment whenever the registry has entries.
"""

from __future__ import annotations

import logging
from typing import Iterable

from markdown_it.common.utils import escapeHtml

from .config import RenderConfig
from .footnotes import FootnoteRegistry
from .model import (
    Block,
    Blockquote,
    Bold,
    CodeBlock,
    Document,
    Heading,
    HorizontalRule,
    Image,
    InlineCode,
    InlineSpan,
    Italic,
    Link,
    ListBlock,
    Paragraph,
    PlainText,
    Strikethrough,
)

logger = logging.getLogger(__name__)

PAGE_STYLE = """\
body { font-family: Arial, sans-serif; line-height: 1.6; max-width: 800px; margin: 0 auto; padding: 20px; }
h1 { font-size: 28px; margin-top: 20px; }
h2 { font-size: 24px; margin-top: 18px; }
h3 { font-size: 20px; margin-top: 16px; }
h4 { font-size: 18px; margin-top: 14px; }
h5 { font-size: 16px; margin-top: 12px; }
h6 { font-size: 14px; margin-top: 10px; }
ul, ol { padding-left: 20px; }
blockquote { border-left: 4px solid #ccc; padding-left: 16px; margin-left: 0; }
pre { background-color: #f5f5f5; padding: 12px; border-radius: 4px; overflow-x: auto; }
code { background-color: #f5f5f5; padding: 2px 4px; border-radius: 4px; }
img { max-width: 100%; }
.footnotes { margin-top: 30px; padding-top: 20px; border-top: 1px solid #eee; }
.footnotes ol { padding-left: 20px; }
.footnotes li { margin-bottom: 8px; }
sup { vertical-align: super; font-size: smaller; }
"""

_SIMPLE_SPAN_TAGS = {Bold: "strong", Italic: "em", Strikethrough: "del", InlineCode: "code"}


def render_html(doc: Document, registry: FootnoteRegistry, config: RenderConfig | None = None) -> str:
    config = config or RenderConfig()
    parts = [_render_block(block) for block in doc.blocks]
    if registry:
        parts.append(_render_footnotes(registry, config))
    logger.debug("Rendered %d blocks to HTML", len(doc.blocks))
    return "".join(parts)


def render_html_page(doc: Document, registry: FootnoteRegistry, config: RenderConfig | None = None) -> str:
    """Standalone HTML page around :func:`render_html`, used for export."""
    config = config or RenderConfig()
    body = render_html(doc, registry, config)
    return (
        "<!DOCTYPE html>\n"
        "<html>\n"
        "<head>\n"
        '<meta charset="utf-8">\n'
        f"<title>{escapeHtml(config.html_title)}</title>\n"
        f"<style>\n{PAGE_STYLE}</style>\n"
        "</head>\n"
        "<body>\n"
        f"{body}\n"
        "</body>\n"
        "</html>\n"
    )


def _render_block(block: Block) -> str:
    if isinstance(block, Heading):
        return f"<h{block.level}>{render_spans(block.spans)}</h{block.level}>\n"
    if isinstance(block, Paragraph):
        return f"<p>{render_spans(block.spans)}</p>\n"
    if isinstance(block, ListBlock):
        tag = "ol" if block.ordered else "ul"
        items = "".join(f"<li>{render_spans(item)}</li>\n" for item in block.items)
        return f"<{tag}>\n{items}</{tag}>\n"
    if isinstance(block, Blockquote):
        return f"<blockquote>{render_spans(block.spans)}</blockquote>\n"
    if isinstance(block, CodeBlock):
        css_class = f' class="language-{escapeHtml(block.language)}"' if block.language else ""
        return f"<pre><code{css_class}>{escapeHtml(block.content)}</code></pre>\n"
    if isinstance(block, HorizontalRule):
        return "<hr>\n"
    raise TypeError(f"Unsupported block type: {type(block).__name__}")


def render_spans(spans: Iterable[InlineSpan]) -> str:
    return "".join(_render_span(span) for span in spans)


def _render_span(span: InlineSpan) -> str:
    if isinstance(span, PlainText):
        return escapeHtml(span.text)
    tag = _SIMPLE_SPAN_TAGS.get(type(span))
    if tag is not None:
        return f"<{tag}>{escapeHtml(span.text)}</{tag}>"
    if isinstance(span, Link):
        url = escapeHtml(span.url)
        return (
            f'<a href="{url}" title="{url}" target="_blank">{escapeHtml(span.label)}'
            f"<sup>[{span.footnote_index}]</sup></a>"
        )
    if isinstance(span, Image):
        return f'<img src="{escapeHtml(span.url)}" alt="{escapeHtml(span.alt)}">'
    raise TypeError(f"Unsupported inline type: {type(span).__name__}")


def _render_footnotes(registry: FootnoteRegistry, config: RenderConfig) -> str:
    items = []
    for index, entry in enumerate(registry, start=1):
        url = escapeHtml(entry.url)
        label = escapeHtml(entry.title or entry.url)
        items.append(f'<li id="footnote-{index}"><a href="{url}" target="_blank">{label}</a></li>\n')
    return (
        "<hr>\n"
        f"<h2>{escapeHtml(config.footnotes_heading)}</h2>\n"
        '<div class="footnotes">\n'
        "<ol>\n"
        f"{''.join(items)}"
        "</ol>\n"
        "</div>\n"
    )

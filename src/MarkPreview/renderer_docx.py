from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from docx import Document as DocxDocument
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.image.exceptions import UnrecognizedImageError
from docx.shared import Cm, Pt

from . import page_format
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


@dataclass
class RenderState:
    config: RenderConfig
    asset_root: Path | None = None


def render_document(
    doc: Document,
    registry: FootnoteRegistry,
    output_path: str | Path,
    config: RenderConfig | None = None,
    asset_root: Path | None = None,
) -> None:
    output_path = Path(output_path)
    state = RenderState(config=config or RenderConfig(), asset_root=asset_root)
    docx = DocxDocument()
    page_format.apply_page_layout(docx, state.config)

    for block in doc.blocks:
        _dispatch_block(docx, block, state)
    if registry:
        _render_footnotes(docx, registry, state)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    docx.save(output_path)
    logger.debug("Wrote %d blocks and %d footnotes to %s", len(doc.blocks), len(registry), output_path)


def _dispatch_block(docx: DocxDocument, block: Block, state: RenderState) -> None:
    if isinstance(block, Heading):
        _render_heading(docx, block, state)
    elif isinstance(block, Paragraph):
        paragraph = docx.add_paragraph()
        _add_spans(paragraph, block.spans, state)
        page_format.apply_body_paragraph_format(paragraph, state.config)
    elif isinstance(block, ListBlock):
        _render_list(docx, block, state)
    elif isinstance(block, Blockquote):
        paragraph = docx.add_paragraph()
        _add_spans(paragraph, block.spans, state)
        page_format.apply_quote_format(paragraph, state.config)
    elif isinstance(block, CodeBlock):
        _render_code_block(docx, block, state)
    elif isinstance(block, HorizontalRule):
        _render_horizontal_rule(docx, state)


def _render_heading(docx: DocxDocument, heading: Heading, state: RenderState) -> None:
    paragraph = docx.add_paragraph()
    size = page_format.heading_size_pt(heading.level, state.config)
    _add_spans(paragraph, heading.spans, state, bold=True, size_pt=size)
    page_format.apply_heading_format(paragraph, heading.level, state.config)


def _add_spans(
    paragraph,
    spans: Iterable[InlineSpan],
    state: RenderState,
    bold: bool = False,
    size_pt: float | None = None,
) -> None:
    config = state.config
    for span in spans:
        if isinstance(span, PlainText):
            run = paragraph.add_run(span.text)
            page_format.set_run_font(run, config, bold=bold, size_pt=size_pt)
        elif isinstance(span, Bold):
            run = paragraph.add_run(span.text)
            page_format.set_run_font(run, config, bold=True, size_pt=size_pt)
        elif isinstance(span, Italic):
            run = paragraph.add_run(span.text)
            page_format.set_run_font(run, config, bold=bold, italic=True, size_pt=size_pt)
        elif isinstance(span, Strikethrough):
            run = paragraph.add_run(span.text)
            page_format.set_run_font(run, config, bold=bold, strike=True, size_pt=size_pt)
        elif isinstance(span, InlineCode):
            run = paragraph.add_run(span.text)
            page_format.set_run_font(run, config, bold=bold, code=True, size_pt=size_pt)
        elif isinstance(span, Link):
            run = paragraph.add_run(span.label)
            page_format.set_run_font(run, config, bold=bold, size_pt=size_pt)
            run.font.underline = True
            marker = paragraph.add_run(f"[{span.footnote_index}]")
            page_format.set_run_font(marker, config, size_pt=size_pt)
            marker.font.superscript = True
        elif isinstance(span, Image):
            _add_image(paragraph, span, state)


def _add_image(paragraph, image: Image, state: RenderState) -> None:
    run = paragraph.add_run()
    image_path = Path(image.url)
    if state.asset_root:
        image_path = state.asset_root / image.url
    if image_path.is_file():
        try:
            run.add_picture(str(image_path))
            return
        except UnrecognizedImageError:
            logger.debug("Image %s has an unsupported format, rendering placeholder", image_path)
    else:
        logger.debug("Image %s not found, rendering placeholder", image_path)
    run.add_text(f"[Image: {image.alt or image.url}]")
    page_format.set_run_font(run, state.config, italic=True)


def _render_list(docx: DocxDocument, block: ListBlock, state: RenderState) -> None:
    for idx, item in enumerate(block.items, start=1):
        paragraph = docx.add_paragraph()
        prefix = paragraph.add_run(f"{idx}. " if block.ordered else "– ")
        page_format.set_run_font(prefix, state.config)
        _add_spans(paragraph, item, state)
        page_format.apply_body_paragraph_format(paragraph, state.config)
        paragraph.paragraph_format.left_indent = Cm(0.75)
        paragraph.paragraph_format.first_line_indent = Cm(-0.5)
        paragraph.paragraph_format.space_after = Pt(0)


def _render_code_block(docx: DocxDocument, block: CodeBlock, state: RenderState) -> None:
    paragraph = docx.add_paragraph()
    # python-docx turns "\n" into line breaks inside a single run
    run = paragraph.add_run(block.content.rstrip("\n"))
    page_format.set_run_font(run, state.config, code=True)
    paragraph.paragraph_format.first_line_indent = Cm(0)
    paragraph.paragraph_format.left_indent = Cm(0.5)
    paragraph.paragraph_format.space_before = Pt(0)
    paragraph.paragraph_format.space_after = Pt(state.config.line_spacing_pt)
    paragraph.alignment = WD_ALIGN_PARAGRAPH.LEFT


def _render_horizontal_rule(docx: DocxDocument, state: RenderState) -> None:
    paragraph = docx.add_paragraph()
    run = paragraph.add_run("-" * 20)
    page_format.set_run_font(run, state.config)
    paragraph.alignment = WD_ALIGN_PARAGRAPH.CENTER
    paragraph.paragraph_format.first_line_indent = Cm(0)
    paragraph.paragraph_format.line_spacing = Pt(state.config.line_spacing_pt)


def _render_footnotes(docx: DocxDocument, registry: FootnoteRegistry, state: RenderState) -> None:
    _render_horizontal_rule(docx, state)
    heading = Heading(level=2, spans=(PlainText(state.config.footnotes_heading),))
    _render_heading(docx, heading, state)
    for index, entry in enumerate(registry, start=1):
        paragraph = docx.add_paragraph()
        text = f"{index}. {entry.title} – {entry.url}" if entry.title else f"{index}. {entry.url}"
        run = paragraph.add_run(text)
        page_format.set_run_font(run, state.config)
        page_format.apply_body_paragraph_format(paragraph, state.config)

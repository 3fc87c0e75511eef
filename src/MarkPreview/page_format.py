from __future__ import annotations

from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Cm, Pt

from .config import RenderConfig

# Heading font size relative to body text, by level.
HEADING_SCALE = {1: 2.0, 2: 1.7, 3: 1.4, 4: 1.25, 5: 1.1, 6: 1.0}


def apply_page_layout(doc, config: RenderConfig) -> None:
    """Apply page size and margins."""
    section = doc.sections[0]
    section.page_height = Cm(config.page_height_mm / 10)
    section.page_width = Cm(config.page_width_mm / 10)
    section.left_margin = Cm(config.margin_left_cm)
    section.right_margin = Cm(config.margin_right_cm)
    section.top_margin = Cm(config.margin_top_cm)
    section.bottom_margin = Cm(config.margin_bottom_cm)


def set_run_font(
    run,
    config: RenderConfig,
    bold: bool = False,
    italic: bool = False,
    code: bool = False,
    strike: bool = False,
    size_pt: float | None = None,
) -> None:
    run.font.name = config.code_font_name if code else config.font_name
    run.font.size = Pt(size_pt or config.font_size_pt)
    run.bold = bold
    run.italic = italic
    run.font.strike = strike


def apply_body_paragraph_format(paragraph, config: RenderConfig) -> None:
    paragraph.alignment = WD_ALIGN_PARAGRAPH.LEFT
    paragraph.paragraph_format.space_after = Pt(config.line_spacing_pt / 2)
    paragraph.paragraph_format.space_before = Pt(0)
    paragraph.paragraph_format.line_spacing = Pt(config.line_spacing_pt)
    paragraph.paragraph_format.first_line_indent = Cm(0)


def heading_size_pt(level: int, config: RenderConfig) -> float:
    return config.font_size_pt * HEADING_SCALE.get(level, 1.0)


def apply_heading_format(paragraph, level: int, config: RenderConfig) -> None:
    size = heading_size_pt(level, config)
    paragraph.alignment = WD_ALIGN_PARAGRAPH.LEFT
    paragraph.paragraph_format.space_before = Pt(size * 0.75)
    paragraph.paragraph_format.space_after = Pt(size / 2)
    paragraph.paragraph_format.first_line_indent = Cm(0)
    paragraph.paragraph_format.keep_with_next = True


def apply_quote_format(paragraph, config: RenderConfig) -> None:
    apply_body_paragraph_format(paragraph, config)
    paragraph.paragraph_format.left_indent = Cm(1)
    for run in paragraph.runs:
        run.italic = True

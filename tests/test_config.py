import textwrap

import pytest

from MarkPreview.config import RenderConfig, load_config, parse_config


def test_defaults_when_no_path():
    assert load_config(None) == RenderConfig()


def test_empty_document_gives_defaults():
    assert parse_config("") == RenderConfig()


def test_sections_override_fields(tmp_path):
    path = tmp_path / "render.yaml"
    path.write_text(
        textwrap.dedent(
            """
            page:
              margin_left_cm: 3
              width_mm: 216
            fonts:
              name: Georgia
              size_pt: 12
            footnotes:
              heading: Sources
            html:
              title: Report
            """
        ),
        encoding="utf-8",
    )
    config = load_config(path)
    assert config.margin_left_cm == 3.0
    assert config.page_width_mm == 216.0
    assert config.font_name == "Georgia"
    assert config.font_size_pt == 12.0
    assert config.footnotes_heading == "Sources"
    assert config.html_title == "Report"
    assert config.code_font_name == RenderConfig().code_font_name


@pytest.mark.parametrize(
    "text",
    [
        "- just\n- a list\n",
        "colors: {}\n",
        "page: 3\n",
        "page:\n  depth_mm: 1\n",
        "fonts:\n  size_pt: large\n",
    ],
)
def test_invalid_config_raises(text):
    with pytest.raises(ValueError):
        parse_config(text)

import json
from pathlib import Path

import pytest
from docx import Document as DocxReader

from MarkPreview import cli


def _write_input(tmp_path: Path) -> Path:
    path = tmp_path / "notes.md"
    path.write_text("# Notes\n\nSee [site](http://site).\n", encoding="utf-8")
    return path


def test_default_output_is_html(tmp_path: Path):
    source = _write_input(tmp_path)
    cli.main([str(source)])
    html = (tmp_path / "notes.html").read_text(encoding="utf-8")
    assert "<h1>Notes</h1>" in html
    assert 'id="footnote-1"' in html


def test_format_from_output_suffix(tmp_path: Path):
    source = _write_input(tmp_path)
    target = tmp_path / "out" / "notes.docx"
    cli.main([str(source), "-o", str(target)])
    texts = [p.text for p in DocxReader(target).paragraphs]
    assert "Notes" in texts


def test_json_into_directory(tmp_path: Path):
    source = _write_input(tmp_path)
    out_dir = tmp_path / "build"
    out_dir.mkdir()
    cli.main([str(source), "-o", str(out_dir), "--format", "json"])
    data = json.loads((out_dir / "notes.json").read_text(encoding="utf-8"))
    assert data["footnotes"] == [{"index": 1, "url": "http://site", "title": "site"}]


def test_config_file_is_applied(tmp_path: Path):
    source = _write_input(tmp_path)
    config = tmp_path / "render.yaml"
    config.write_text("footnotes:\n  heading: Sources\n", encoding="utf-8")
    cli.main([str(source), "--config", str(config)])
    assert "<h2>Sources</h2>" in (tmp_path / "notes.html").read_text(encoding="utf-8")


def test_missing_input_raises(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        cli.main([str(tmp_path / "absent.md")])

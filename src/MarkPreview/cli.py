from __future__ import annotations

import argparse
import logging
from pathlib import Path

from . import markdown_parser, renderer_docx, renderer_html, serialization
from .config import load_config
from .utils import (
    INPUT_SUFFIXES,
    OUTPUT_SUFFIXES,
    configure_logging,
    detect_format,
    read_markdown,
    resolve_output_path,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="markpreview",
        description="Convert Markdown into an HTML preview, a DOCX document or a JSON document tree.",
    )
    parser.add_argument("input", type=str, help="Path to Markdown file")
    parser.add_argument("-o", "--output", type=str, help="Output file or directory")
    parser.add_argument("-f", "--format", choices=sorted(OUTPUT_SUFFIXES), help="Output format (default: from output suffix, else html)")
    parser.add_argument("--config", type=str, help="YAML render configuration")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose)
    input_path = Path(args.input).expanduser()
    if not input_path.exists():
        raise FileNotFoundError(f"Input file not found: {input_path}")
    if input_path.suffix.lower() not in INPUT_SUFFIXES:
        logging.warning("Unexpected input suffix %r, reading as Markdown", input_path.suffix)
    fmt = detect_format(args.output, args.format)
    output_path = resolve_output_path(input_path, args.output, fmt)
    config = load_config(args.config)

    logging.info("Reading %s", input_path)
    markdown_text = read_markdown(input_path)
    logging.debug("Markdown length: %d chars", len(markdown_text))

    logging.info("Parsing markdown...")
    document, registry = markdown_parser.segment(markdown_text)

    logging.info("Rendering %s to %s", fmt.upper(), output_path)
    if fmt == "docx":
        renderer_docx.render_document(
            document, registry, output_path=output_path, config=config, asset_root=input_path.parent
        )
    else:
        if fmt == "html":
            content = renderer_html.render_html_page(document, registry, config)
        else:
            content = serialization.to_json(document, registry)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(content, encoding="utf-8")

    logging.info("Done. Saved to %s", output_path)


if __name__ == "__main__":
    main()

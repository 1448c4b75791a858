from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from . import adf, markdown_parser
from .config import BuilderOptions, load_options
from .utils import configure_logging, read_markdown, resolve_output_path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="MarkdownADF",
        description="Convert Markdown into Atlassian Document Format JSON.",
    )
    parser.add_argument("input", type=str, help="Path to Markdown file, or - for stdin")
    parser.add_argument("-o", "--output", type=str, help="Output JSON path (default: stdout)")
    parser.add_argument("--config", type=str, help="YAML file with builder options")
    parser.add_argument("--nested-lists", action="store_true", help="Attach nested lists to their parent item")
    parser.add_argument("--comment", action="store_true", help="Wrap the document as a comment body")
    parser.add_argument("--indent", type=int, default=None, help="Indent JSON output")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose)

    input_path = None if args.input == "-" else Path(args.input).expanduser()
    if input_path is not None and not input_path.exists():
        raise FileNotFoundError(f"Input file not found: {input_path}")
    output_path = resolve_output_path(input_path, args.output)

    options = load_options(Path(args.config).expanduser()) if args.config else BuilderOptions()
    if args.nested_lists:
        options = replace(options, nested_lists=True)

    logging.info("Reading %s", input_path or "stdin")
    markdown_text = read_markdown(input_path)
    logging.debug("Markdown length: %d chars", len(markdown_text))

    logging.info("Converting markdown...")
    document = markdown_parser.parse_markdown(markdown_text, options)
    payload = adf.to_adf(document)
    if args.comment:
        payload = adf.as_comment(payload)
    text = adf.dumps(payload, indent=args.indent)

    if output_path is None:
        sys.stdout.write(text + "\n")
        return
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(text + "\n", encoding="utf-8")
    logging.info("Done. Saved to %s", output_path)


if __name__ == "__main__":
    main()

"""CLI helpers for story configuration JSON workflows."""

from __future__ import annotations

import argparse
from pathlib import Path

from pydantic import ValidationError

from live_book.api.contracts import load_book_config_json, save_book_config_json
from live_book.stories import default_book_config


def build_arg_parser() -> argparse.ArgumentParser:
    """Define CLI flags for story configuration validation and export."""
    parser = argparse.ArgumentParser(description="Validate, normalize, or export story JSON.")
    parser.add_argument("--input", default="", help="Path to source story configuration JSON.")
    parser.add_argument(
        "--output",
        default="",
        help="Optional path to write normalized JSON. Defaults to in-place.",
    )
    parser.add_argument(
        "--export-default",
        default="",
        help="Write the bundled default story to this path and exit.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Validate story JSON and optionally rewrite it in canonical form."""
    parser = build_arg_parser()
    parsed = parser.parse_args(argv)

    export_path = str(parsed.export_default).strip()
    if export_path:
        save_book_config_json(Path(export_path), default_book_config())
        print(f"Wrote default story: {export_path}")
        return

    raw_input = str(parsed.input).strip()
    if not raw_input:
        parser.error("one of --input or --export-default is required")

    input_path = Path(raw_input)
    try:
        config = load_book_config_json(input_path)
    except (OSError, UnicodeDecodeError, ValidationError) as exc:
        raise SystemExit(f"Invalid story configuration {input_path}: {exc}") from exc
    output_path = Path(str(parsed.output)) if str(parsed.output).strip() else input_path
    save_book_config_json(output_path, config)
    print(f"Validated story: {input_path} ({len(config.characters)} characters)")
    if output_path != input_path:
        print(f"Wrote normalized JSON: {output_path}")


if __name__ == "__main__":
    main()

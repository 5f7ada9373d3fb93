"""Command-line entry: python -m mercado [input] [output]"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import settings
from .loader import CategorizerError, process_file


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mercado",
        description="Group supermarket listings that describe the same product",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=settings.input_path,
        help=f"JSON list of products (default: {settings.input_path})",
    )
    parser.add_argument(
        "output",
        nargs="?",
        default=settings.output_path,
        help=f"where to write the categories (default: {settings.output_path})",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    input_path = Path(args.input)
    if not input_path.exists():
        print(f"ERROR: input file {input_path} not found.", file=sys.stderr)
        parser.print_usage(sys.stderr)
        return 1

    print(f"Processing file: {input_path}")
    try:
        categories = process_file(input_path, args.output)
    except (CategorizerError, OSError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    print(f"Result saved to {args.output}")
    print(f"Total categories found: {len(categories)}")
    print("Categories:")
    for category in categories:
        print(f"- {category.category}: {category.count} products")
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""JSON file boundary: read product listings, write the categorized result."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from .aggregator import categorize_products
from .config import settings
from .schemas import Category, ProductRecord

logger = logging.getLogger(__name__)

_records_adapter = TypeAdapter(list[ProductRecord])
_categories_adapter = TypeAdapter(list[Category])


class CategorizerError(Exception):
    """Base error for the file-processing boundary."""


class InputNotFoundError(CategorizerError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Input file not found: {path}")


class MalformedInputError(CategorizerError):
    pass


def load_products(path: str | Path) -> list[ProductRecord]:
    """Read a JSON list of {title, supermarket} objects."""
    path = Path(path)
    if not path.exists():
        raise InputNotFoundError(path)

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise MalformedInputError(f"{path} is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise MalformedInputError(
            f"{path} must contain a list of products, got {type(data).__name__}"
        )

    try:
        return _records_adapter.validate_python(data)
    except ValidationError as e:
        raise MalformedInputError(f"{path} has invalid product entries: {e}") from e


def write_categories(path: str | Path, categories: list[Category]) -> None:
    """Write categories as pretty-printed JSON.

    The file is first written next to the target and then moved into place,
    so a failed run never leaves a half-written result behind.
    """
    path = Path(path)
    payload = json.dumps(
        _categories_adapter.dump_python(categories, mode="json"),
        indent=settings.json_indent,
        ensure_ascii=False,
    )
    tmp_path = path.with_name(f".{path.name}.tmp")
    try:
        tmp_path.write_text(payload, encoding="utf-8")
        os.replace(tmp_path, path)
    finally:
        tmp_path.unlink(missing_ok=True)


def process_file(
    input_path: str | Path,
    output_path: str | Path | None = None,
) -> list[Category]:
    """Load products, categorize them and save the result."""
    output_path = Path(output_path or settings.output_path)
    try:
        products = load_products(input_path)
        categories = categorize_products(products)
        write_categories(output_path, categories)
    except (CategorizerError, OSError) as e:
        logger.error("Error processing file: %s", e)
        raise

    logger.info("Categorization finished, result saved to %s", output_path)
    return categories

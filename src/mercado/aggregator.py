"""Category assembly: buckets product records by grouping key, in input order."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from .matcher import extract_key
from .normalizer import normalize
from .schemas import Category, ProductRecord

logger = logging.getLogger(__name__)


def _as_record(item: ProductRecord | Mapping[str, Any]) -> ProductRecord:
    if isinstance(item, ProductRecord):
        return item
    return ProductRecord.model_validate(item)


def categorize_products(records: Iterable[ProductRecord | Mapping[str, Any]]) -> list[Category]:
    """Group records that share a grouping key.

    Categories come out in the order their key was first seen, and members
    keep input order. The first record of a key gives the category its title.
    """
    categories: dict[str, Category] = {}
    total = 0

    for item in records:
        record = _as_record(item)
        total += 1
        key = str(extract_key(normalize(record.title)))

        category = categories.get(key)
        if category is None:
            category = Category(category=record.title)
            categories[key] = category
            logger.debug("New category %r (key=%s)", record.title, key)
        category.add(record)

    logger.info("Categorized %d products into %d categories", total, len(categories))
    return list(categories.values())


aggregate = categorize_products

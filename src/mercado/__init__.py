"""Groups supermarket listings that describe the same product."""

from .aggregator import aggregate, categorize_products
from .matcher import GroupingKey, extract_key, generate_product_key, same_product
from .normalizer import normalize

__all__ = [
    "GroupingKey",
    "aggregate",
    "categorize_products",
    "extract_key",
    "generate_product_key",
    "normalize",
    "same_product",
]

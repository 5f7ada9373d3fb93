"""Grouping keys: decides whether two supermarket listings are the same product.

A normalized title is reduced to four fields:
  product type  → first matching rule in RULES (priority chain, no scoring)
  brand         → first matching brand marker of that rule
  variant       → first matching variant marker of that rule
  size          → first "<digits><k|g|l>" in the title, for any type

Listings whose keys are equal are treated as the same product. The key is
deliberately coarse: text outside the known markers and the size is ignored,
and titles with no known marker at all share the key "---".

To support a new product type, add a CategoryRule to RULES.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from .normalizer import normalize

KEY_SEPARATOR = "-"

# ---------------------------------------------------------------------------
# Category rules
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CategoryRule:
    """One product type and the vocabulary recognized inside it."""

    product_type: str
    markers: tuple[str, ...]
    # (token, markers) pairs, checked in order; first hit wins
    variants: tuple[tuple[str, tuple[str, ...]], ...] = ()
    brands: tuple[tuple[str, tuple[str, ...]], ...] = ()


RULES: tuple[CategoryRule, ...] = (
    CategoryRule(
        product_type="leite",
        markers=("leite",),
        variants=(
            ("integral", ("integral",)),
            # Before plain "desnatado", which it contains
            ("semi desnatado", ("semi desnatado", "semi-desnatado")),
            ("desnatado", ("desnatado",)),
        ),
        brands=(
            ("piracanjuba", ("piracanjuba",)),
            ("italac", ("italac",)),
            ("parmalat", ("parmalat",)),
        ),
    ),
    CategoryRule(
        product_type="arroz",
        markers=("arroz",),
        variants=(
            ("branco", ("branco",)),
            ("integral", ("integral",)),
        ),
        brands=(
            ("tio joao", ("tio joao",)),
        ),
    ),
    CategoryRule(
        product_type="feijao",
        # Accented form kept for callers passing titles that skipped normalize()
        markers=("feijao", "feijão"),
        variants=(
            ("carioca", ("carioca",)),
        ),
        brands=(
            ("camil", ("camil",)),
        ),
    ),
)

# ---------------------------------------------------------------------------
# Size
# ---------------------------------------------------------------------------

# First occurrence only. A pack count followed by a k/g/l word
# ("6 garrafas leite 1l") wins over the real size; accepted.
# "kg" is tried before "k" so "1kg" and "1 quilo" both read as "1kg".
_SIZE_RE = re.compile(r"(\d+)\s*(kg|[kgl])", re.IGNORECASE)


def _extract_size(text: str) -> str:
    m = _SIZE_RE.search(text)
    if not m:
        return ""
    return m.group(1) + m.group(2).lower()


def _first_marker(text: str, entries: tuple[tuple[str, tuple[str, ...]], ...]) -> str:
    """Return the token of the first entry with a marker contained in text."""
    for token, markers in entries:
        if any(marker in text for marker in markers):
            return token
    return ""


def _match_rule(text: str, rules: tuple[CategoryRule, ...]) -> CategoryRule | None:
    for rule in rules:
        if any(marker in text for marker in rule.markers):
            return rule
    return None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class GroupingKey:
    """Composite product identity. Empty fields mean "not recognized"."""

    product_type: str = ""
    brand: str = ""
    variant: str = ""
    size: str = ""

    def __str__(self) -> str:
        return KEY_SEPARATOR.join((self.product_type, self.brand, self.variant, self.size))

    @property
    def is_classified(self) -> bool:
        return bool(self.product_type)


def extract_key(normalized_title: str, rules: tuple[CategoryRule, ...] = RULES) -> GroupingKey:
    """Build the grouping key of an already normalized title.

    Never fails: anything not recognized is left as an empty field.
    """
    product_type = brand = variant = ""
    rule = _match_rule(normalized_title, rules)
    if rule is not None:
        product_type = rule.product_type
        variant = _first_marker(normalized_title, rule.variants)
        brand = _first_marker(normalized_title, rule.brands)

    return GroupingKey(
        product_type=product_type,
        brand=brand,
        variant=variant,
        size=_extract_size(normalized_title),
    )


def generate_product_key(title: str) -> str:
    """Normalize a raw title and return its key string, e.g. "leite-piracanjuba-integral-1l"."""
    return str(extract_key(normalize(title)))


def same_product(title_a: str, title_b: str) -> bool:
    """Check whether two raw titles fall into the same category."""
    return generate_product_key(title_a) == generate_product_key(title_b)

"""Title normalization for supermarket listings.

Turns differently-written titles into one comparable form:
- Case differences (LEITE / Leite / leite)
- Accents and cedilla (feijão → feijao, joão → joao)
- Hyphens (semi-desnatado → semi desnatado)
- Spelled-out units (1 litro → 1 l, 5 quilos → 5 kgs)
"""

from __future__ import annotations

import re
import unicodedata

# Substring replacements, applied in order. Not word-boundary aware:
# "litros" becomes "ls", which the size pattern still reads as "l".
_UNIT_WORDS: tuple[tuple[str, str], ...] = (
    ("litro", "l"),
    ("quilo", "kg"),
)


def _strip_accents(text: str) -> str:
    """Decompose to base letter + combining mark (NFD) and drop the marks."""
    text = unicodedata.normalize("NFD", text)
    return "".join(ch for ch in text if not unicodedata.combining(ch))


def _abbreviate_units(text: str) -> str:
    # Repeat until stable: "litroitro" → "litro" → "l" keeps normalize idempotent
    while True:
        replaced = text
        for word, unit in _UNIT_WORDS:
            replaced = replaced.replace(word, unit)
        if replaced == text:
            return text
        text = replaced


def normalize(title: str) -> str:
    """Normalize a title: lowercase → strip accents → hyphens to spaces → unit words → whitespace."""
    text = title.lower()
    text = _strip_accents(text)
    text = text.replace("-", " ")
    text = _abbreviate_units(text)
    text = re.sub(r"\s+", " ", text).strip()
    return text

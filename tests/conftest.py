"""Test fixtures: sample listings and temporary files."""

import json
from pathlib import Path

import pytest

from mercado.schemas import ProductRecord

SAMPLES_DIR = Path(__file__).resolve().parent.parent / "samples"


@pytest.fixture()
def sample_path() -> Path:
    return SAMPLES_DIR / "data01.json"


@pytest.fixture()
def scenario_records() -> list[ProductRecord]:
    return [
        ProductRecord(title="Leite Integral Piracanjuba 1L", supermarket="X"),
        ProductRecord(title="LEITE INTEGRAL PIRACANJUBA 1l", supermarket="Y"),
        ProductRecord(title="Arroz Branco Tio João 5kg", supermarket="X"),
    ]


@pytest.fixture()
def write_json(tmp_path):
    """Write any JSON-serializable value to a temp file and return its path."""

    def _write(data, name: str = "input.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
        return path

    return _write

"""Shared fixtures for unitbasis tests."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Callable

import pytest

from unitbasis.core.units import Unit, UnitCatalog

MECHANICS = {
    "si_units": ["length", "mass", "time"],
    "units": [
        {"name": "l", "exponents": [1, 0, 0]},
        {"name": "m", "exponents": [0, 1, 0]},
        {"name": "t", "exponents": [0, 0, 1]},
        {"name": "v", "exponents": [1, 0, -1]},
        {"name": "p", "exponents": [1, 1, -1]},
        {"name": "L", "exponents": [2, 1, -1]},
    ],
}


@pytest.fixture()
def mechanics() -> UnitCatalog:
    return UnitCatalog(
        dimensions=tuple(MECHANICS["si_units"]),
        units=tuple(Unit(u["name"], tuple(u["exponents"])) for u in MECHANICS["units"]),
    )


@pytest.fixture()
def write_catalog(tmp_path: Path) -> Callable[[object], Path]:
    def _write(payload: object, name: str = "units.json") -> Path:
        path = tmp_path / name
        text = payload if isinstance(payload, str) else json.dumps(payload)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def mechanics_file(write_catalog) -> Path:
    return write_catalog(MECHANICS)


@pytest.fixture(autouse=True)
def _reset_root_logging():
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        # handlers installed by the CLI point at CliRunner streams that are closed by now
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(logging.WARNING)

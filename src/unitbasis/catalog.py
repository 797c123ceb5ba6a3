"""Load unit catalogs from JSON documents.

Expected shape::

    {
      "si_units": ["length", "mass", "time"],
      "units": [
        {"name": "l", "exponents": [1, 0, 0]},
        {"name": "v", "coeffs": [1, 0, -1]}
      ]
    }

``coeffs`` is accepted as a legacy spelling of ``exponents``.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from .core.units import CatalogError, Unit, UnitCatalog

logger = logging.getLogger(__name__)


class UnitModel(BaseModel):
    name: str = Field(min_length=1)
    exponents: List[float] = Field(validation_alias=AliasChoices("exponents", "coeffs"))

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    @field_validator("name", mode="before")
    @classmethod
    def _strip_name(cls, value):
        return value.strip() if isinstance(value, str) else value


class CatalogModel(BaseModel):
    si_units: List[str] = Field(min_length=1)
    units: List[UnitModel]

    @model_validator(mode="after")
    def _check_shapes(self) -> "CatalogModel":
        size = len(self.si_units)
        for unit in self.units:
            if len(unit.exponents) != size:
                raise ValueError(
                    f"unit {unit.name} should have {size} exponents, "
                    f"but has {len(unit.exponents)}"
                )
        if len(self.units) < size:
            raise ValueError(
                f"there should be at least as many units as SI units ({size}), "
                f"but there are {len(self.units)}"
            )
        return self

    def to_catalog(self) -> UnitCatalog:
        return UnitCatalog(
            dimensions=tuple(self.si_units),
            units=tuple(Unit(u.name, tuple(u.exponents)) for u in self.units),
        )


def _describe(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()))
        message = error.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts)


def catalog_from_dict(data: Dict[str, Any]) -> UnitCatalog:
    """Validate a parsed document and build a :class:`UnitCatalog`."""
    if not isinstance(data, dict):
        raise CatalogError("Unit catalog must be a JSON object")
    try:
        model = CatalogModel.model_validate(data)
    except ValidationError as exc:
        raise CatalogError(f"Invalid unit catalog: {_describe(exc)}") from exc
    return model.to_catalog()


def parse_catalog(text: str) -> UnitCatalog:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise CatalogError(f"Unit catalog is not valid JSON: {exc}") from exc
    return catalog_from_dict(data)


def load_catalog(path: Union[str, Path]) -> UnitCatalog:
    """Read and validate the catalog stored at ``path``."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise CatalogError(f"Cannot read unit catalog {path}: {exc}") from exc
    catalog = parse_catalog(text)
    logger.info(
        "Loaded %d units over %d dimensions from %s",
        len(catalog),
        catalog.dimension_count,
        path,
    )
    return catalog

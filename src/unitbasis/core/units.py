"""Unit and catalog primitives for the basis search.

A :class:`Unit` models a physical unit as a real exponent vector over the
fundamental dimensions declared by its :class:`UnitCatalog`. Both types are
immutable once built and validate their invariants on construction, so the
search never has to re-check vector lengths.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple

import numpy as np


class UnitBasisError(Exception):
    """Base class for fatal errors raised by the unitbasis package."""


class CatalogError(UnitBasisError, ValueError):
    """Raised when a unit catalog is malformed or cannot be loaded."""


@dataclass(frozen=True)
class Unit:
    """A named unit expressed as powers of the fundamental dimensions."""

    name: str
    exponents: Tuple[float, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise CatalogError("Unit name must be a non-empty string")
        try:
            normalized = tuple(float(value) for value in self.exponents)
        except (TypeError, ValueError) as exc:
            raise CatalogError(f"Unit {self.name} has non-numeric exponents") from exc
        if not all(math.isfinite(value) for value in normalized):
            raise CatalogError(f"Unit {self.name} has non-finite exponents")
        object.__setattr__(self, "exponents", normalized)

    @property
    def size(self) -> int:
        return len(self.exponents)

    def vector(self) -> np.ndarray:
        """Return the exponent vector as a float array."""
        return np.asarray(self.exponents, dtype=float)

    def __str__(self) -> str:  # pragma: no cover - simple formatting
        return self.name


@dataclass(frozen=True)
class UnitCatalog:
    """Ordered unit list plus the names of the fundamental dimensions.

    The dimension names are only used for display; their count ``d`` fixes the
    length of every exponent vector and the size of every candidate basis.
    """

    dimensions: Tuple[str, ...]
    units: Tuple[Unit, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "dimensions", tuple(self.dimensions))
        object.__setattr__(self, "units", tuple(self.units))
        if not self.dimensions:
            raise CatalogError("At least one fundamental dimension is required")

        size = len(self.dimensions)
        for unit in self.units:
            if unit.size != size:
                raise CatalogError(
                    f"unit {unit.name} should have {size} exponents, but has {unit.size}"
                )
        if len(self.units) < size:
            raise CatalogError(
                f"there should be at least as many units as SI units ({size}), "
                f"but there are {len(self.units)}"
            )

    @property
    def dimension_count(self) -> int:
        return len(self.dimensions)

    def __len__(self) -> int:
        return len(self.units)

    def __iter__(self) -> Iterator[Unit]:
        return iter(self.units)

    def get(self, name: str) -> Unit:
        """Return the first unit called ``name``."""
        for unit in self.units:
            if unit.name == name:
                return unit
        raise CatalogError(f"Unknown unit '{name}'")

    def select(self, indices: Sequence[int]) -> Tuple[Unit, ...]:
        """Return the units at ``indices``, preserving the given order."""
        return tuple(self.units[ix] for ix in indices)

    def names(self, indices: Sequence[int]) -> Tuple[str, ...]:
        return tuple(self.units[ix].name for ix in indices)


def make_units(rows: Sequence[Tuple[str, Sequence[float]]]) -> Tuple[Unit, ...]:
    """Build units from ``(name, exponents)`` pairs."""
    return tuple(Unit(name, tuple(exponents)) for name, exponents in rows)

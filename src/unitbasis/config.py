"""Run settings for the basis search."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Optional

from .core.solver import DEFAULT_TOLERANCE
from .core.units import UnitBasisError

TOLERANCE_ENV = "UNITBASIS_TOLERANCE"
INCLUDE_BASIS_ENV = "UNITBASIS_INCLUDE_BASIS"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


class ConfigError(UnitBasisError, ValueError):
    """Raised when a setting has an invalid value."""


def _parse_tolerance(raw: str) -> float:
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigError(f"{TOLERANCE_ENV} must be a number, got {raw!r}") from exc


def _parse_bool(name: str, raw: str) -> bool:
    lowered = raw.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ConfigError(f"{name} must be a boolean flag, got {raw!r}")


@dataclass(frozen=True)
class SearchSettings:
    """Knobs shared by the CLI commands.

    ``tolerance`` is the magnitude above which a solved exponent counts
    towards a score. ``include_basis_units`` controls whether the basis units
    themselves are scored (each contributes exactly one exponent).
    """

    tolerance: float = DEFAULT_TOLERANCE
    include_basis_units: bool = True

    def __post_init__(self) -> None:
        if not self.tolerance > 0:
            raise ConfigError(f"tolerance must be positive, got {self.tolerance}")

    @classmethod
    def from_env(cls) -> "SearchSettings":
        tolerance = os.getenv(TOLERANCE_ENV)
        include = os.getenv(INCLUDE_BASIS_ENV)
        return cls(
            tolerance=_parse_tolerance(tolerance) if tolerance else DEFAULT_TOLERANCE,
            include_basis_units=_parse_bool(INCLUDE_BASIS_ENV, include) if include else True,
        )

    def override(
        self,
        *,
        tolerance: Optional[float] = None,
        include_basis_units: Optional[bool] = None,
    ) -> "SearchSettings":
        """Return a copy with any non-``None`` values replaced."""
        changes = {}
        if tolerance is not None:
            changes["tolerance"] = tolerance
        if include_basis_units is not None:
            changes["include_basis_units"] = include_basis_units
        return replace(self, **changes) if changes else self

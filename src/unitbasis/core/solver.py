"""Express a unit as a product of powers of candidate basis units.

Writing ``target = Π basis[i] ** x[i]`` in exponent space gives the linear
system ``M · x = c`` where column ``i`` of ``M`` is the exponent vector of
``basis[i]`` and ``c`` is the exponent vector of ``target``. A basis whose
matrix is singular (or numerically indistinguishable from singular) is
reported as not independent instead of raising.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import numpy as np

from .units import Unit, UnitBasisError

logger = logging.getLogger(__name__)

DEFAULT_TOLERANCE = 1e-4
# Matrices conditioned worse than this are treated as singular.
CONDITION_LIMIT = 1e16


class BasisShapeError(UnitBasisError, ValueError):
    """Raised when a basis or target does not match the dimension count."""


@dataclass(frozen=True)
class ExpressionResult:
    """Exponents of a target unit over a basis, or the not-independent marker."""

    exponents: Optional[Tuple[float, ...]]

    @property
    def independent(self) -> bool:
        return self.exponents is not None

    def nonzero_count(self, tolerance: float = DEFAULT_TOLERANCE) -> int:
        """Count exponents whose magnitude exceeds ``tolerance``."""
        if self.exponents is None:
            raise ValueError("A not-independent result has no exponents")
        return sum(1 for value in self.exponents if abs(value) > tolerance)

    def as_array(self) -> np.ndarray:
        if self.exponents is None:
            raise ValueError("A not-independent result has no exponents")
        return np.asarray(self.exponents, dtype=float)


NOT_INDEPENDENT = ExpressionResult(None)


def basis_matrix(basis: Sequence[Unit], size: Optional[int] = None) -> np.ndarray:
    """Stack basis exponent vectors as the columns of a square matrix."""
    size = len(basis) if size is None else size
    if len(basis) != size:
        raise BasisShapeError(f"Expected {size} base units, got {len(basis)}")
    matrix = np.zeros((size, size), dtype=float)
    for column, unit in enumerate(basis):
        if unit.size != size:
            raise BasisShapeError(
                f"Expected {size} exponents for unit {unit.name}, got {unit.size}"
            )
        matrix[:, column] = unit.exponents
    return matrix


def is_singular(matrix: np.ndarray) -> bool:
    """Return ``True`` when ``matrix`` has no usable inverse."""
    if np.linalg.matrix_rank(matrix) < matrix.shape[0]:
        return True
    condition = np.linalg.cond(matrix)
    return not np.isfinite(condition) or condition > CONDITION_LIMIT


class BasisSolver:
    """Solver bound to one candidate basis.

    The matrix is built and checked for singularity once, then reused for
    every target unit expressed over the basis.
    """

    def __init__(self, basis: Sequence[Unit]) -> None:
        self.basis: Tuple[Unit, ...] = tuple(basis)
        self.size = len(self.basis)
        if self.size == 0:
            raise BasisShapeError("A basis needs at least one unit")
        self.matrix = basis_matrix(self.basis, self.size)
        self.independent = not is_singular(self.matrix)

    def express(self, target: Unit) -> ExpressionResult:
        if target.size != self.size:
            raise BasisShapeError(
                f"Expected {self.size} exponents for unit {target.name}, got {target.size}"
            )
        if not self.independent:
            return NOT_INDEPENDENT
        try:
            solution = np.linalg.solve(self.matrix, target.vector())
        except np.linalg.LinAlgError:
            logger.debug("Solve failed for %s over %s", target.name, self.names)
            return NOT_INDEPENDENT
        return ExpressionResult(tuple(float(value) for value in solution))

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(unit.name for unit in self.basis)


def express(target: Unit, basis: Sequence[Unit]) -> ExpressionResult:
    """Express ``target`` over ``basis``.

    ``basis`` must hold exactly as many units as ``target`` has exponents.
    Returns :data:`NOT_INDEPENDENT` when the basis units are linearly
    dependent; shape mismatches raise :class:`BasisShapeError`.
    """

    if len(basis) != target.size:
        raise BasisShapeError(f"Expected {target.size} base units, got {len(basis)}")
    return BasisSolver(basis).express(target)

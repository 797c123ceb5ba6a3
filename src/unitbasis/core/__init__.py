"""Core primitives for unitbasis."""

from .search import (
    BestBases,
    CandidateBasis,
    ScoreRecord,
    SearchResult,
    iter_candidates,
    iter_scores,
    rank,
    score_basis,
    search,
)
from .solver import (
    DEFAULT_TOLERANCE,
    NOT_INDEPENDENT,
    BasisShapeError,
    BasisSolver,
    ExpressionResult,
    basis_matrix,
    express,
    is_singular,
)
from .units import CatalogError, Unit, UnitBasisError, UnitCatalog, make_units

__all__ = [
    "BestBases",
    "CandidateBasis",
    "ScoreRecord",
    "SearchResult",
    "iter_candidates",
    "iter_scores",
    "rank",
    "score_basis",
    "search",
    "DEFAULT_TOLERANCE",
    "NOT_INDEPENDENT",
    "BasisShapeError",
    "BasisSolver",
    "ExpressionResult",
    "basis_matrix",
    "express",
    "is_singular",
    "CatalogError",
    "Unit",
    "UnitBasisError",
    "UnitCatalog",
    "make_units",
]

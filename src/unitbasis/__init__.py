"""Find the sparsest basis of a set of physical units."""

from .catalog import catalog_from_dict, load_catalog, parse_catalog
from .config import ConfigError, SearchSettings
from .core import (
    DEFAULT_TOLERANCE,
    NOT_INDEPENDENT,
    BasisShapeError,
    BasisSolver,
    BestBases,
    CatalogError,
    ExpressionResult,
    ScoreRecord,
    SearchResult,
    Unit,
    UnitBasisError,
    UnitCatalog,
    express,
    rank,
    score_basis,
    search,
)

from .version import __version__

__all__ = [
    "catalog_from_dict",
    "load_catalog",
    "parse_catalog",
    "ConfigError",
    "SearchSettings",
    "DEFAULT_TOLERANCE",
    "NOT_INDEPENDENT",
    "BasisShapeError",
    "BasisSolver",
    "BestBases",
    "CatalogError",
    "ExpressionResult",
    "ScoreRecord",
    "SearchResult",
    "Unit",
    "UnitBasisError",
    "UnitCatalog",
    "express",
    "rank",
    "score_basis",
    "search",
    "__version__",
]

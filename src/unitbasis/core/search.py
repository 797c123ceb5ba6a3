"""Exhaustive search for the sparsest basis of a unit catalog.

Every ``d``-subset of the catalog is tried as a basis. A candidate is rejected
as soon as one unit cannot be expressed over it; otherwise its score is the
total number of non-negligible exponents needed to express every unit. The
minimum score and every basis that reaches it are reported.
"""

from __future__ import annotations

import heapq
import logging
from dataclasses import dataclass
from itertools import combinations
from typing import Iterator, List, Optional, Tuple

from .solver import DEFAULT_TOLERANCE, BasisSolver
from .units import UnitCatalog

logger = logging.getLogger(__name__)

CandidateBasis = Tuple[int, ...]


@dataclass(frozen=True, order=True)
class ScoreRecord:
    score: int
    basis: CandidateBasis


@dataclass(frozen=True)
class BestBases:
    """Running tie-aware optimum over scored candidates.

    ``offer`` and ``merge`` return new values, so partial optima computed over
    disjoint slices of the candidate space can be combined in any order.
    """

    bases: Tuple[CandidateBasis, ...] = ()
    score: Optional[int] = None

    @property
    def empty(self) -> bool:
        return self.score is None

    def offer(self, record: ScoreRecord) -> "BestBases":
        if self.score is None or record.score < self.score:
            return BestBases((record.basis,), record.score)
        if record.score == self.score:
            return BestBases(self.bases + (record.basis,), self.score)
        return self

    def merge(self, other: "BestBases") -> "BestBases":
        if other.score is None:
            return self
        if self.score is None or other.score < self.score:
            return other
        if other.score == self.score:
            return BestBases(tuple(sorted(set(self.bases) | set(other.bases))), self.score)
        return self


@dataclass(frozen=True)
class SearchResult:
    """Outcome of a full search over a catalog."""

    catalog: UnitCatalog
    best: BestBases
    candidates: int = 0
    rejected: int = 0
    tolerance: float = DEFAULT_TOLERANCE
    include_basis_units: bool = True
    ranking: Tuple[ScoreRecord, ...] = ()

    @property
    def score(self) -> Optional[int]:
        return self.best.score

    @property
    def bases(self) -> Tuple[CandidateBasis, ...]:
        return self.best.bases

    @property
    def found(self) -> bool:
        return not self.best.empty

    def basis_names(self) -> List[List[str]]:
        return [list(self.catalog.names(basis)) for basis in self.best.bases]

    def to_dict(self) -> dict:
        return {
            "dimensions": list(self.catalog.dimensions),
            "best_units": self.basis_names(),
            "best_indices": [list(basis) for basis in self.best.bases],
            "score": self.best.score,
            "candidates": self.candidates,
            "rejected": self.rejected,
            "tolerance": self.tolerance,
            "include_basis_units": self.include_basis_units,
            "ranking": [
                {"units": list(self.catalog.names(record.basis)), "score": record.score}
                for record in self.ranking
            ],
        }


@dataclass
class _Counters:
    candidates: int = 0
    rejected: int = 0


def iter_candidates(catalog: UnitCatalog) -> Iterator[CandidateBasis]:
    """Yield every ``d``-combination of catalog indices in index order."""
    return combinations(range(len(catalog)), catalog.dimension_count)


def score_basis(
    catalog: UnitCatalog,
    basis: CandidateBasis,
    *,
    tolerance: float = DEFAULT_TOLERANCE,
    include_basis_units: bool = True,
) -> Optional[int]:
    """Score one candidate, or return ``None`` when it is not independent."""

    solver = BasisSolver(catalog.select(basis))
    names = solver.names
    if not solver.independent:
        logger.info("Units %s are not independent", list(names))
        return None

    logger.debug("Scoring units %s", list(names))
    members = set(basis)
    score = 0
    for index, unit in enumerate(catalog.units):
        if not include_basis_units and index in members:
            continue
        result = solver.express(unit)
        # only when np.linalg.solve raises LinAlgError on a matrix that passed is_singular
        if not result.independent:
            logger.info("Units %s are not independent", list(names))
            return None
        partial = result.nonzero_count(tolerance)
        score += partial
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "  +%d, %s = %s ⋅ %s",
                partial,
                unit.name,
                list(names),
                [round(value, 6) for value in result.exponents],
            )
    logger.info("Score for units %s is %d", list(names), score)
    return score


def _scored(
    catalog: UnitCatalog,
    counters: _Counters,
    tolerance: float,
    include_basis_units: bool,
) -> Iterator[ScoreRecord]:
    for basis in iter_candidates(catalog):
        counters.candidates += 1
        score = score_basis(
            catalog, basis, tolerance=tolerance, include_basis_units=include_basis_units
        )
        if score is None:
            counters.rejected += 1
            continue
        yield ScoreRecord(score, basis)


def iter_scores(
    catalog: UnitCatalog,
    *,
    tolerance: float = DEFAULT_TOLERANCE,
    include_basis_units: bool = True,
) -> Iterator[ScoreRecord]:
    """Yield a :class:`ScoreRecord` for every independent candidate."""
    return _scored(catalog, _Counters(), tolerance, include_basis_units)


def search(
    catalog: UnitCatalog,
    *,
    tolerance: float = DEFAULT_TOLERANCE,
    include_basis_units: bool = True,
    top: Optional[int] = None,
) -> SearchResult:
    """Find every minimal-score basis of ``catalog``.

    With ``top``, the ``top`` lowest-scoring candidates from the same pass are
    kept as well, ordered by ``(score, basis)``.
    """

    logger.info(
        "Searching %d units over %d dimensions", len(catalog), catalog.dimension_count
    )
    counters = _Counters()
    best = BestBases()
    records = _scored(catalog, counters, tolerance, include_basis_units)
    ranking: List[ScoreRecord] = []
    if top:
        records = list(records)
        ranking = heapq.nsmallest(top, records)
    for record in records:
        best = best.offer(record)

    if best.empty:
        logger.warning("No independent basis found among %d candidates", counters.candidates)
    else:
        logger.info(
            "Best score %d reached by %d of %d candidates (%d rejected)",
            best.score,
            len(best.bases),
            counters.candidates,
            counters.rejected,
        )
    return SearchResult(
        catalog=catalog,
        best=best,
        candidates=counters.candidates,
        rejected=counters.rejected,
        tolerance=tolerance,
        include_basis_units=include_basis_units,
        ranking=tuple(ranking),
    )


def rank(
    catalog: UnitCatalog,
    limit: int,
    *,
    tolerance: float = DEFAULT_TOLERANCE,
    include_basis_units: bool = True,
) -> List[ScoreRecord]:
    """Return the ``limit`` lowest-scoring candidates ordered by ``(score, basis)``."""
    if limit < 1:
        return []
    records = iter_scores(
        catalog, tolerance=tolerance, include_basis_units=include_basis_units
    )
    return heapq.nsmallest(limit, records)

"""Human readable rendering of expressions and search results."""

from __future__ import annotations

import math
from fractions import Fraction
from typing import List, Sequence

from .core.search import ScoreRecord, SearchResult
from .core.solver import DEFAULT_TOLERANCE, ExpressionResult
from .core.units import Unit, UnitCatalog

# Exponents within this distance of a small rational are printed as one.
_RATIONAL_TOLERANCE = 1e-6
_MAX_DENOMINATOR = 12


def format_exponent(value: float) -> str:
    """Render ``value`` as ``n`` or ``n/m`` when it is a small rational."""
    fraction = Fraction(value).limit_denominator(_MAX_DENOMINATOR)
    if not math.isclose(float(fraction), value, rel_tol=0, abs_tol=_RATIONAL_TOLERANCE):
        return f"{value:.6g}"
    if fraction.denominator == 1:
        return str(fraction.numerator)
    return f"{fraction.numerator}/{fraction.denominator}"


def format_product(
    names: Sequence[str],
    exponents: Sequence[float],
    *,
    tolerance: float = DEFAULT_TOLERANCE,
) -> str:
    """Render ``Π names[i] ** exponents[i]`` as ``a*b^2/(c*d^1/2)``."""

    numerator: List[str] = []
    denominator: List[str] = []
    for name, exponent in zip(names, exponents):
        if abs(exponent) <= tolerance:
            continue
        target = numerator if exponent > 0 else denominator
        formatted = format_exponent(abs(exponent))
        if formatted == "1":
            target.append(name)
        else:
            target.append(f"{name}^{formatted}")

    text = "*".join(numerator) if numerator else "1"
    if len(denominator) == 1:
        text = f"{text}/{denominator[0]}"
    elif denominator:
        text = f"{text}/(" + "*".join(denominator) + ")"
    return text


def format_expression(
    target: Unit,
    basis: Sequence[Unit],
    result: ExpressionResult,
    *,
    tolerance: float = DEFAULT_TOLERANCE,
) -> str:
    if not result.independent:
        return f"{target.name}: not independent"
    names = [unit.name for unit in basis]
    product = format_product(names, result.exponents, tolerance=tolerance)
    return f"{target.name} = {product}  (+{result.nonzero_count(tolerance)})"


def format_unit(unit: Unit, dimensions: Sequence[str]) -> str:
    """Render a unit as its exponent vector and as a product of dimensions."""
    vector = ", ".join(format_exponent(value) for value in unit.exponents)
    return f"{unit.name}: [{vector}] = {format_product(dimensions, unit.exponents)}"


def format_catalog(catalog: UnitCatalog) -> str:
    lines = [f"Dimensions: {', '.join(catalog.dimensions)}"]
    lines.extend(f"  {format_unit(unit, catalog.dimensions)}" for unit in catalog)
    return "\n".join(lines)


def format_bases(names: Sequence[Sequence[str]]) -> str:
    return "[" + " ".join("[" + " ".join(group) + "]" for group in names) + "]"


def format_search_result(result: SearchResult) -> str:
    """Summarise the best bases the way the search reports them."""
    if not result.found:
        return (
            f"No independent basis found ({result.candidates} candidates, "
            f"{result.rejected} rejected)"
        )
    lines = [
        f"Best units: {format_bases(result.basis_names())} score: {result.score}",
        f"Candidates: {result.candidates}, rejected as not independent: {result.rejected}",
    ]
    return "\n".join(lines)


def format_ranking(catalog: UnitCatalog, records: Sequence[ScoreRecord]) -> str:
    lines = []
    for position, record in enumerate(records, start=1):
        names = " ".join(catalog.names(record.basis))
        lines.append(f"{position:>3}. [{names}] score: {record.score}")
    return "\n".join(lines)

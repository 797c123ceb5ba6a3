"""Command-line interface for unitbasis."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional, Tuple

import click

from ..catalog import load_catalog
from ..config import SearchSettings
from ..core.search import search
from ..core.solver import BasisSolver
from ..core.units import UnitBasisError, UnitCatalog
from ..formatting import (
    format_catalog,
    format_expression,
    format_ranking,
    format_search_result,
)

_LOG_FORMAT = "[%(levelname)s] %(message)s"

input_option = click.option(
    "-i",
    "--input",
    "input_path",
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to JSON file with description of units.",
)


def _configure_logging(verbosity: int) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format=_LOG_FORMAT, force=True)


def _settings(tolerance: Optional[float], include_basis: Optional[bool]) -> SearchSettings:
    try:
        return SearchSettings.from_env().override(
            tolerance=tolerance, include_basis_units=include_basis
        )
    except UnitBasisError as exc:
        raise click.ClickException(str(exc)) from exc


def _load(path: Path) -> UnitCatalog:
    try:
        return load_catalog(path)
    except UnitBasisError as exc:
        raise click.ClickException(str(exc)) from exc


@click.group()
def cli() -> None:
    """Find the set of units that expresses all the others most simply."""


@cli.command("search")
@input_option
@click.option(
    "-v",
    "--verbose",
    "verbosity",
    count=True,
    help="-v prints the score of every candidate set, -vv also the partial scores.",
)
@click.option(
    "--tolerance",
    type=float,
    default=None,
    help="Exponents with a larger magnitude count towards the score [default: 1e-4].",
)
@click.option(
    "--include-basis/--exclude-basis",
    "include_basis",
    default=None,
    help="Whether the candidate units themselves are scored [default: include].",
)
@click.option(
    "--top",
    type=click.IntRange(min=1),
    default=None,
    help="Also list the N best candidate sets.",
)
@click.option("--json", "as_json", is_flag=True, help="Emit the result as JSON.")
def search_command(
    input_path: Path,
    verbosity: int,
    tolerance: Optional[float],
    include_basis: Optional[bool],
    top: Optional[int],
    as_json: bool,
) -> None:
    """Score every candidate set of base units and print the best ones."""

    _configure_logging(verbosity)
    settings = _settings(tolerance, include_basis)
    catalog = _load(input_path)

    result = search(
        catalog,
        tolerance=settings.tolerance,
        include_basis_units=settings.include_basis_units,
        top=top,
    )

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    click.echo(format_search_result(result))
    if result.ranking:
        click.echo(f"Top {len(result.ranking)} candidate sets:")
        click.echo(format_ranking(catalog, result.ranking))


@cli.command("express")
@input_option
@click.option(
    "-b",
    "--basis",
    "basis_names",
    multiple=True,
    required=True,
    help="Name of a base unit. Repeat once per fundamental dimension.",
)
@click.option("--tolerance", type=float, default=None, help="Exponents below this are omitted.")
@click.argument("unit_names", nargs=-1)
def express_command(
    input_path: Path,
    basis_names: Tuple[str, ...],
    tolerance: Optional[float],
    unit_names: Tuple[str, ...],
) -> None:
    """Express units (default: all) as products of powers of the given base units."""

    _configure_logging(0)
    settings = _settings(tolerance, None)
    catalog = _load(input_path)
    try:
        basis = [catalog.get(name) for name in basis_names]
        targets = [catalog.get(name) for name in unit_names] if unit_names else list(catalog)
        if len(basis) != catalog.dimension_count:
            raise click.ClickException(
                f"Expected {catalog.dimension_count} base units, got {len(basis)}"
            )
        solver = BasisSolver(basis)
        if not solver.independent:
            click.echo(f"Units {list(solver.names)} are not independent")
            return
        for target in targets:
            result = solver.express(target)
            click.echo(format_expression(target, basis, result, tolerance=settings.tolerance))
    except UnitBasisError as exc:
        raise click.ClickException(str(exc)) from exc


@cli.command("list")
@input_option
def list_command(input_path: Path) -> None:
    """Print the fundamental dimensions and every unit of the catalog."""

    _configure_logging(0)
    click.echo(format_catalog(_load(input_path)))


if __name__ == "__main__":
    cli()

"""Tests for loading unit catalogs from JSON."""

import pytest

from unitbasis.catalog import catalog_from_dict, load_catalog, parse_catalog
from unitbasis.core.units import CatalogError


def test_load_catalog_reads_units(mechanics_file, mechanics):
    catalog = load_catalog(mechanics_file)
    assert catalog == mechanics
    assert catalog.dimensions == ("length", "mass", "time")


def test_legacy_coeffs_key_is_accepted():
    catalog = catalog_from_dict(
        {"si_units": ["x", "y"], "units": [{"name": "a", "coeffs": [1, 0]}, {"name": "b", "coeffs": [0, 1]}]}
    )
    assert [unit.exponents for unit in catalog] == [(1.0, 0.0), (0.0, 1.0)]


def test_length_mismatch_is_fatal():
    with pytest.raises(CatalogError, match="unit b should have 2 exponents, but has 3"):
        catalog_from_dict(
            {
                "si_units": ["x", "y"],
                "units": [{"name": "a", "exponents": [1, 0]}, {"name": "b", "exponents": [0, 1, 0]}],
            }
        )


def test_too_few_units_is_fatal():
    with pytest.raises(CatalogError, match="at least as many units as SI units \\(2\\)"):
        catalog_from_dict({"si_units": ["x", "y"], "units": [{"name": "a", "exponents": [1, 0]}]})


@pytest.mark.parametrize(
    "payload",
    [
        {"units": []},
        {"si_units": [], "units": []},
        {"si_units": ["x"], "units": [{"name": "a"}]},
        {"si_units": ["x"], "units": [{"name": "", "exponents": [1]}]},
        {"si_units": ["x"], "units": [{"name": "a", "exponents": ["one"]}]},
        {"si_units": ["x"], "units": [{"name": "a", "exponents": [1], "scale": 2}]},
        ["not", "an", "object"],
    ],
)
def test_malformed_documents_are_rejected(payload):
    with pytest.raises(CatalogError):
        catalog_from_dict(payload)


def test_invalid_json_is_rejected():
    with pytest.raises(CatalogError, match="not valid JSON"):
        parse_catalog("{not json")


def test_missing_file_is_rejected(tmp_path):
    with pytest.raises(CatalogError, match="Cannot read unit catalog"):
        load_catalog(tmp_path / "missing.json")


@pytest.mark.parametrize("literal", ["NaN", "Infinity", "-Infinity"])
def test_non_finite_exponents_are_rejected(literal):
    text = (
        '{"si_units": ["x", "y"], "units": ['
        f'{{"name": "a", "exponents": [{literal}, 0]}}, {{"name": "b", "exponents": [0, 1]}}]}}'
    )
    with pytest.raises(CatalogError, match="Invalid unit catalog"):
        parse_catalog(text)

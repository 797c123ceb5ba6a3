"""Tests for search settings."""

import pytest

from unitbasis.config import INCLUDE_BASIS_ENV, TOLERANCE_ENV, ConfigError, SearchSettings
from unitbasis.core.solver import DEFAULT_TOLERANCE


def test_defaults(monkeypatch):
    monkeypatch.delenv(TOLERANCE_ENV, raising=False)
    monkeypatch.delenv(INCLUDE_BASIS_ENV, raising=False)
    settings = SearchSettings.from_env()
    assert settings.tolerance == DEFAULT_TOLERANCE == 1e-4
    assert settings.include_basis_units is True


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv(TOLERANCE_ENV, "0.01")
    monkeypatch.setenv(INCLUDE_BASIS_ENV, "no")
    settings = SearchSettings.from_env()
    assert settings.tolerance == 0.01
    assert settings.include_basis_units is False


@pytest.mark.parametrize("name, value", [(TOLERANCE_ENV, "abc"), (TOLERANCE_ENV, "-1"), (INCLUDE_BASIS_ENV, "maybe")])
def test_invalid_environment_values(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ConfigError):
        SearchSettings.from_env()


def test_override_keeps_unset_values():
    settings = SearchSettings(tolerance=0.5)
    assert settings.override() is settings
    changed = settings.override(include_basis_units=False)
    assert changed.tolerance == 0.5
    assert changed.include_basis_units is False
    with pytest.raises(ConfigError):
        settings.override(tolerance=0.0)

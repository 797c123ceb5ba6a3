"""Command-line entry points for unitbasis."""

from .main import cli

__all__ = ["cli"]

#!/usr/bin/env python3
"""Run the unitbasis test suite deterministically, with coverage when available."""

from __future__ import annotations

import importlib.util
import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent


def _has_module(name: str) -> bool:
    return importlib.util.find_spec(name) is not None


def main(argv: list[str]) -> int:
    cmd = [sys.executable, "-m", "pytest", "-q", "--maxfail=1", "--disable-warnings"]
    if _has_module("hypothesis"):
        cmd.append("--hypothesis-seed=0")
    if _has_module("pytest_cov"):
        cmd.extend(["--cov=src/unitbasis", "--cov-report=term-missing"])
    cmd.extend(argv)

    result = subprocess.run(cmd, cwd=ROOT, check=False)
    return result.returncode


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))

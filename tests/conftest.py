"""Shared pytest fixtures for Axiom tests."""

from collections.abc import Callable
from pathlib import Path

import pytest
from typer.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a CLI test runner."""
    return CliRunner()


@pytest.fixture
def write_program(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that writes source text to an .axi file."""

    def _write(source: str, name: str = "prog.axi") -> Path:
        path = tmp_path / name
        path.write_text(source, encoding="utf-8")
        return path

    return _write

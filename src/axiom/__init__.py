"""
Axiom - a tiny typed expression language.

Integer arithmetic, rebindable let bindings and a deterministic logical
clock (``now``), compiled and run in a single batch pass.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version

from .core import ir
from .core.errors import AxiomError, EvalError, FaultKind, ParseError, TokenizeError, TypeCheckError
from .core.pipeline import RunResult, check_source, run_source


def _get_version() -> str:
    """Get version from installed package metadata."""
    try:
        return _metadata_version("axiom-lang")
    except PackageNotFoundError:
        # Not installed: keep in step with pyproject.toml
        return "0.1.0"


__version__ = _get_version()

__all__ = [
    "__version__",
    "ir",
    "AxiomError",
    "EvalError",
    "FaultKind",
    "ParseError",
    "TokenizeError",
    "TypeCheckError",
    "RunResult",
    "check_source",
    "run_source",
]

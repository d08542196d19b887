"""Core Axiom functionality: IR, tokenizer, parser, type checker, interpreter, pipeline."""

from . import ir
from .errors import (
    AxiomError,
    ErrorContext,
    EvalError,
    FaultKind,
    ParseError,
    TokenizeError,
    TypeCheckError,
)
from .pipeline import RunResult, check_source, compile_source, run_source

__all__ = [
    "ir",
    "AxiomError",
    "ErrorContext",
    "EvalError",
    "FaultKind",
    "ParseError",
    "TokenizeError",
    "TypeCheckError",
    "RunResult",
    "check_source",
    "compile_source",
    "run_source",
]

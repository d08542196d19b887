"""
Pipeline entry points.

Runs source text through tokenize → parse → type check → interpret and
returns a ``RunResult``. Every stage's fault arrives here as an
``AxiomError`` and leaves as a ``Diagnostic``; nothing is printed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from axiom.core.errors import AxiomError
from axiom.core.ir import Diagnostic, Program, Value
from axiom.core.lang.interpreter import Interpreter
from axiom.core.lang.parser import parse_program
from axiom.core.lang.type_checker import TypeChecker

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunResult:
    """Outcome of one pipeline run.

    Attributes:
        value: Value of the last bare expression, or None if there was none
        diagnostic: Set when any stage failed
        error: The underlying error, for callers that need its kind
    """

    value: Value | None = None
    diagnostic: Diagnostic | None = None
    error: AxiomError | None = None

    @property
    def ok(self) -> bool:
        return self.diagnostic is None


def _failed(error: AxiomError, source: str) -> RunResult:
    error.attach_source(source)
    logger.info("%s: %s", error.kind, error)
    return RunResult(diagnostic=error.diagnostic, error=error)


def compile_source(source: str) -> Program:
    """Parse and type check source text.

    Raises:
        AxiomError: On the first tokenize, parse, or type error.
    """
    program = parse_program(source)
    TypeChecker().check(program)
    return program


def check_source(source: str) -> RunResult:
    """Parse and type check only; ``value`` is always None."""
    try:
        compile_source(source)
    except AxiomError as e:
        return _failed(e, source)
    return RunResult()


def run_source(source: str) -> RunResult:
    """Compile and run source text.

    The interpreter only runs if type checking succeeded.
    """
    try:
        program = compile_source(source)
        value = Interpreter().execute(program)
    except AxiomError as e:
        return _failed(e, source)
    logger.debug("Program result: %s", value)
    return RunResult(value=value)

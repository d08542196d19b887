"""
Static type checking for the Axiom language.

One forward pass over the program with a flat type environment. The first
failing statement stops the pass; its diagnostic is raised as a
``TypeCheckError``.

If checking succeeds, interpreting the same program cannot hit an undefined
variable or Time arithmetic. Division by zero is still a runtime fault.
"""

from __future__ import annotations

import logging

from axiom.core.errors import FaultKind, TypeCheckError
from axiom.core.ir import (
    BinaryExpr,
    Diagnostic,
    Expr,
    ExprStmt,
    ExprType,
    IntLiteral,
    LetStmt,
    Now,
    Program,
    VarRef,
)

logger = logging.getLogger(__name__)

# Type environment maps variable names to their types
TypeEnv = dict[str, ExprType]


def unproven_variable(name: str) -> Diagnostic:
    return Diagnostic(
        title="Unproven Variable",
        message=(
            f"The variable '{name}' is used here, but no proof exists "
            "that it has been defined."
        ),
    ).with_help("Define the variable before using it, or pass it as an argument.")


def type_mismatch() -> Diagnostic:
    return Diagnostic(
        title="Type Mismatch",
        message="Both sides of this operation must have the same numeric type.",
    )


class TypeChecker:
    """Single-use checker; owns its TypeEnv for the duration of one pass."""

    def __init__(self) -> None:
        self.env: TypeEnv = {}

    def check_expr(self, expr: Expr) -> ExprType:
        """Infer the type of an expression.

        Operator chains are left-leaning, so the left spine is walked with a
        loop and folded outward; only right operands recurse.

        Raises:
            TypeCheckError: If a variable is unbound or an operand is not Int.
        """
        spine: list[BinaryExpr] = []
        while isinstance(expr, BinaryExpr):
            spine.append(expr)
            expr = expr.left

        result = self._check_operand(expr)
        for node in reversed(spine):
            right_t = self.check_expr(node.right)
            # Time is opaque: no operator accepts it, not even Time with Time
            if result != ExprType.INT or right_t != ExprType.INT:
                raise TypeCheckError(type_mismatch(), FaultKind.TYPE_MISMATCH)
            result = ExprType.INT
        return result

    def _check_operand(self, expr: Expr) -> ExprType:
        if isinstance(expr, IntLiteral):
            return ExprType.INT

        if isinstance(expr, Now):
            return ExprType.TIME

        if isinstance(expr, VarRef):
            ty = self.env.get(expr.name)
            if ty is None:
                raise TypeCheckError(
                    unproven_variable(expr.name), FaultKind.UNDEFINED_VARIABLE
                )
            return ty

        raise TypeError(f"Unknown expression type: {type(expr).__name__}")

    def check(self, program: Program) -> None:
        """Check every statement in order, recording let-bound types."""
        for stmt in program.statements:
            if isinstance(stmt, LetStmt):
                ty = self.check_expr(stmt.value)
                self.env[stmt.name] = ty
                logger.debug("Bound %s: %s", stmt.name, ty)
            elif isinstance(stmt, ExprStmt):
                self.check_expr(stmt.expr)
            else:
                raise TypeError(f"Unknown statement type: {type(stmt).__name__}")


def check_program(program: Program) -> Diagnostic | None:
    """Type check a program.

    Returns:
        None if the program is well typed, otherwise the diagnostic for
        the first failing statement.
    """
    try:
        TypeChecker().check(program)
    except TypeCheckError as e:
        return e.diagnostic
    return None

"""
Tree-walking interpreter for the Axiom language.

Evaluates a Program statement by statement against a variable store and a
logical clock. Does NOT use Python's eval(). Integer arithmetic follows
signed 64-bit semantics: division truncates toward zero and results outside
the 64-bit range are a fault.
"""

from __future__ import annotations

import logging

from axiom.core.errors import EvalError, FaultKind
from axiom.core.ir import (
    BinaryExpr,
    BinaryOp,
    Expr,
    ExprStmt,
    IntLiteral,
    IntValue,
    LetStmt,
    Now,
    Program,
    TimeValue,
    Value,
    VarRef,
)
from axiom.core.lang.tokenizer import INT64_MAX, INT64_MIN

logger = logging.getLogger(__name__)

# Runtime environment maps variable names to their current values
Env = dict[str, Value]


class Interpreter:
    """Single-use evaluator; owns its Env and clock for one run."""

    def __init__(self) -> None:
        self.env: Env = {}
        self.time = 0

    def eval_expr(self, expr: Expr) -> Value:
        """Evaluate an expression.

        Raises:
            EvalError: On division by zero, 64-bit overflow, or (for
                programs that skipped type checking) an unbound variable
                or Time arithmetic.
        """
        # Walk the left spine iteratively; folding outward keeps
        # left-before-right evaluation order for clock ticks.
        spine: list[BinaryExpr] = []
        while isinstance(expr, BinaryExpr):
            spine.append(expr)
            expr = expr.left

        left = self._eval_operand(expr)
        for node in reversed(spine):
            right = self.eval_expr(node.right)
            if not (isinstance(left, IntValue) and isinstance(right, IntValue)):
                raise EvalError(
                    f"Cannot apply '{node.op.value}' to {left} and {right}",
                    FaultKind.TYPE_MISMATCH,
                )
            left = IntValue(value=_apply(node.op, left.value, right.value))
        return left

    def _eval_operand(self, expr: Expr) -> Value:
        if isinstance(expr, IntLiteral):
            return IntValue(value=expr.value)

        if isinstance(expr, Now):
            tick = self.time
            self.time += 1
            logger.debug("Clock tick %d", tick)
            return TimeValue(tick=tick)

        if isinstance(expr, VarRef):
            value = self.env.get(expr.name)
            if value is None:
                raise EvalError(
                    f"Undefined variable '{expr.name}'",
                    FaultKind.UNDEFINED_VARIABLE,
                )
            return value

        raise TypeError(f"Unknown expression type: {type(expr).__name__}")

    def execute(self, program: Program) -> Value | None:
        """Run all statements; return the last bare expression's value, if any."""
        last: Value | None = None
        for stmt in program.statements:
            if isinstance(stmt, LetStmt):
                self.env[stmt.name] = self.eval_expr(stmt.value)
            elif isinstance(stmt, ExprStmt):
                last = self.eval_expr(stmt.expr)
            else:
                raise TypeError(f"Unknown statement type: {type(stmt).__name__}")
        return last


def _apply(op: BinaryOp, a: int, b: int) -> int:
    """Apply an integer operator with signed 64-bit semantics."""
    if op == BinaryOp.ADD:
        result = a + b
    elif op == BinaryOp.SUB:
        result = a - b
    elif op == BinaryOp.MUL:
        result = a * b
    elif op == BinaryOp.DIV:
        if b == 0:
            raise EvalError("Division by zero", FaultKind.DIVISION_BY_ZERO)
        result = abs(a) // abs(b)
        if (a < 0) != (b < 0):
            result = -result
    else:
        raise TypeError(f"Unknown binary op: {op}")

    if not INT64_MIN <= result <= INT64_MAX:
        raise EvalError(
            f"Result of {a} {op.value} {b} does not fit in a signed 64-bit integer",
            FaultKind.NUMBER_OVERFLOW,
        )
    return result


def execute(program: Program) -> Value | None:
    """Interpret a program with a fresh environment and clock at 0."""
    return Interpreter().execute(program)

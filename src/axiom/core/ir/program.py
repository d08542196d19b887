"""
Program types for the Axiom IR.

This module defines the closed data model shared by every pipeline stage:

- AST: integer literals, variable references, the ``now`` clock primitive,
  binary operations, ``let`` bindings and bare expression statements
- Type tags: Int and Time
- Runtime values: Int(n) and Time(tick), mirroring the type tags
- Diagnostics: the user-facing error record handed to the CLI

All models are frozen: the parser builds the tree once and the type checker
and interpreter only read it.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Type system
# ---------------------------------------------------------------------------


class ExprType(StrEnum):
    """Types that expressions can evaluate to. No subtyping."""

    INT = "Int"
    TIME = "Time"


# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


class BinaryOp(StrEnum):
    """Binary arithmetic operators."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"


# ---------------------------------------------------------------------------
# Expression nodes
# ---------------------------------------------------------------------------


class IntLiteral(BaseModel):
    """A 64-bit signed integer literal."""

    value: int = Field(description="The literal value")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.value)


class VarRef(BaseModel):
    """Reference to a bound variable by name."""

    name: str = Field(description="Variable name")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return self.name


class Now(BaseModel):
    """
    The logical clock primitive.

    Each evaluation observes the current tick and advances the clock by one.
    """

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return "now"


class BinaryExpr(BaseModel):
    """Binary operation: left op right."""

    op: BinaryOp
    left: Expr
    right: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"({self.left} {self.op.value} {self.right})"


# ---------------------------------------------------------------------------
# Statements
# ---------------------------------------------------------------------------


class LetStmt(BaseModel):
    """Binding statement: let name = value. Rebinding overwrites."""

    name: str = Field(description="Bound variable name")
    value: Expr = Field(description="Bound expression")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"let {self.name} = {self.value}"


class ExprStmt(BaseModel):
    """Bare expression statement."""

    expr: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.expr)


class Program(BaseModel):
    """An ordered sequence of statements, executed top to bottom."""

    statements: list[Stmt] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return "\n".join(str(s) for s in self.statements)


# ---------------------------------------------------------------------------
# Runtime values
# ---------------------------------------------------------------------------


class IntValue(BaseModel):
    """Runtime integer."""

    value: int

    model_config = ConfigDict(frozen=True)

    @property
    def type(self) -> ExprType:
        return ExprType.INT

    def __str__(self) -> str:
        return f"Int({self.value})"


class TimeValue(BaseModel):
    """Runtime timestamp: an opaque logical-clock tick."""

    tick: int

    model_config = ConfigDict(frozen=True)

    @property
    def type(self) -> ExprType:
        return ExprType.TIME

    def __str__(self) -> str:
        return f"Time({self.tick})"


# ---------------------------------------------------------------------------
# Diagnostics
# ---------------------------------------------------------------------------


class Diagnostic(BaseModel):
    """
    A structured, user-facing error record.

    Rendering is left to the caller (see ``axiom.cli_ui``).
    """

    title: str = Field(description="Short headline, e.g. 'Type Mismatch'")
    message: str = Field(description="What went wrong")
    help: str | None = Field(default=None, description="Optional remediation hint")

    model_config = ConfigDict(frozen=True)

    def with_help(self, help: str) -> Diagnostic:
        """Return a copy carrying the given help text."""
        return self.model_copy(update={"help": help})


# ---------------------------------------------------------------------------
# Union types
# ---------------------------------------------------------------------------

Expr = IntLiteral | VarRef | Now | BinaryExpr
Stmt = LetStmt | ExprStmt
Value = IntValue | TimeValue

# Rebuild models for recursive forward references
BinaryExpr.model_rebuild()
LetStmt.model_rebuild()
ExprStmt.model_rebuild()
Program.model_rebuild()

"""
Axiom Intermediate Representation (IR) types.

All types are re-exported from this package.
"""

from .program import (
    BinaryExpr,
    BinaryOp,
    Diagnostic,
    Expr,
    ExprStmt,
    ExprType,
    IntLiteral,
    IntValue,
    LetStmt,
    Now,
    Program,
    Stmt,
    TimeValue,
    Value,
    VarRef,
)

__all__ = [
    # Types
    "ExprType",
    "BinaryOp",
    # Expressions
    "Expr",
    "IntLiteral",
    "VarRef",
    "Now",
    "BinaryExpr",
    # Statements
    "Stmt",
    "LetStmt",
    "ExprStmt",
    "Program",
    # Values
    "Value",
    "IntValue",
    "TimeValue",
    # Diagnostics
    "Diagnostic",
]

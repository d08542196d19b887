"""
Recursive descent parser for the Axiom language.

Grammar (precedence low to high):
    program   → stmt* EOF
    stmt      → "let" IDENT "=" expr | expr
    expr      → addition
    addition  → multiply (("+"|"-") multiply)*
    multiply  → primary (("*"|"/") primary)*
    primary   → INT | IDENT

The identifier ``now`` is the clock primitive; every other identifier is a
variable reference. There is no grouping production.
"""

from __future__ import annotations

import logging

from axiom.core.errors import FaultKind, ParseError
from axiom.core.ir import (
    BinaryExpr,
    BinaryOp,
    Expr,
    ExprStmt,
    IntLiteral,
    LetStmt,
    Now,
    Program,
    Stmt,
    VarRef,
)
from axiom.core.lang.tokenizer import Token, TokenKind, Tokenizer

logger = logging.getLogger(__name__)

_CLOCK_IDENT = "now"

_ADDITIVE_OPS: dict[TokenKind, BinaryOp] = {
    TokenKind.PLUS: BinaryOp.ADD,
    TokenKind.MINUS: BinaryOp.SUB,
}

_MULTIPLICATIVE_OPS: dict[TokenKind, BinaryOp] = {
    TokenKind.STAR: BinaryOp.MUL,
    TokenKind.SLASH: BinaryOp.DIV,
}


class Parser:
    """Single-token-lookahead parser. Owns its tokenizer exclusively."""

    def __init__(self, tokenizer: Tokenizer) -> None:
        self.tokenizer = tokenizer
        self.current: Token = tokenizer.next_token()

    def advance(self) -> Token:
        """Discard the current token and pull the next one."""
        tok = self.current
        self.current = self.tokenizer.next_token()
        return tok

    def expect(self, kind: TokenKind, what: str) -> Token:
        if self.current.kind != kind:
            raise self._error(f"Expected {what}")
        return self.advance()

    def _error(self, expected: str) -> ParseError:
        tok = self.current
        if tok.kind == TokenKind.EOF:
            return ParseError(
                f"{expected}, but the input ended",
                FaultKind.UNEXPECTED_END_OF_INPUT,
                pos=tok.pos,
            )
        return ParseError(
            f"{expected}, got {tok.kind} ({tok.value!r})",
            FaultKind.UNEXPECTED_TOKEN,
            pos=tok.pos,
        )

    # -- Grammar rules --

    def parse_program(self) -> Program:
        """stmt* EOF"""
        statements: list[Stmt] = []
        while self.current.kind != TokenKind.EOF:
            statements.append(self.parse_stmt())
        logger.debug("Parsed %d statements", len(statements))
        return Program(statements=statements)

    def parse_stmt(self) -> Stmt:
        """'let' IDENT '=' expr | expr"""
        if self.current.kind == TokenKind.LET:
            self.advance()
            name_tok = self.expect(TokenKind.IDENT, "identifier after 'let'")
            self.expect(TokenKind.ASSIGN, f"'=' after '{name_tok.value}'")
            value = self.parse_expr()
            return LetStmt(name=str(name_tok.value), value=value)
        return ExprStmt(expr=self.parse_expr())

    def parse_expr(self) -> Expr:
        return self.parse_addition()

    def parse_addition(self) -> Expr:
        """multiply (('+' | '-') multiply)*"""
        left = self.parse_multiply()
        while self.current.kind in _ADDITIVE_OPS:
            op = _ADDITIVE_OPS[self.advance().kind]
            right = self.parse_multiply()
            left = BinaryExpr(op=op, left=left, right=right)
        return left

    def parse_multiply(self) -> Expr:
        """primary (('*' | '/') primary)*"""
        left = self.parse_primary()
        while self.current.kind in _MULTIPLICATIVE_OPS:
            op = _MULTIPLICATIVE_OPS[self.advance().kind]
            right = self.parse_primary()
            left = BinaryExpr(op=op, left=left, right=right)
        return left

    def parse_primary(self) -> Expr:
        """INT | IDENT"""
        tok = self.current

        if tok.kind == TokenKind.INT:
            self.advance()
            return IntLiteral(value=int(tok.value))

        if tok.kind == TokenKind.IDENT:
            self.advance()
            if tok.value == _CLOCK_IDENT:
                return Now()
            return VarRef(name=str(tok.value))

        raise self._error("Expected a number or identifier")


def parse_program(source: str) -> Program:
    """Parse Axiom source text into a Program.

    Args:
        source: Program text (e.g., "let a = 10\\na * 2")

    Returns:
        Parsed Program AST.

    Raises:
        ParseError: If the token stream does not match the grammar.
        TokenizeError: If tokenization fails.
    """
    return Parser(Tokenizer(source)).parse_program()

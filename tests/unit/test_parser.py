"""Tests for the Axiom parser: statements, precedence, and parse faults."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from axiom.core.errors import FaultKind, ParseError, TokenizeError
from axiom.core.ir import (
    BinaryExpr,
    BinaryOp,
    ExprStmt,
    IntLiteral,
    LetStmt,
    Now,
    Program,
    VarRef,
)
from axiom.core.lang.parser import Parser, parse_program
from axiom.core.lang.tokenizer import TokenKind, Tokenizer


def parse_single_expr(source: str):
    program = parse_program(source)
    assert len(program.statements) == 1
    stmt = program.statements[0]
    assert isinstance(stmt, ExprStmt)
    return stmt.expr


class TestParserPrimary:
    def test_integer(self) -> None:
        expr = parse_single_expr("42")
        assert expr == IntLiteral(value=42)

    def test_variable(self) -> None:
        expr = parse_single_expr("amount")
        assert expr == VarRef(name="amount")

    def test_now_is_clock_primitive(self) -> None:
        expr = parse_single_expr("now")
        assert isinstance(expr, Now)

    def test_now_prefix_is_variable(self) -> None:
        expr = parse_single_expr("nowish")
        assert expr == VarRef(name="nowish")


class TestParserArithmetic:
    """Parser handles arithmetic with correct precedence."""

    @pytest.mark.parametrize(
        "source, op",
        [("a + b", BinaryOp.ADD), ("a - b", BinaryOp.SUB), ("a * b", BinaryOp.MUL), ("a / b", BinaryOp.DIV)],
    )
    def test_operators(self, source: str, op: BinaryOp) -> None:
        expr = parse_single_expr(source)
        assert isinstance(expr, BinaryExpr)
        assert expr.op == op

    def test_mul_before_add(self) -> None:
        # 1 + 2 * 3 should be 1 + (2 * 3)
        expr = parse_single_expr("1 + 2 * 3")
        assert isinstance(expr, BinaryExpr)
        assert expr.op == BinaryOp.ADD
        assert isinstance(expr.right, BinaryExpr)
        assert expr.right.op == BinaryOp.MUL

    def test_div_before_sub(self) -> None:
        expr = parse_single_expr("a / b - c")
        assert isinstance(expr, BinaryExpr)
        assert expr.op == BinaryOp.SUB
        assert isinstance(expr.left, BinaryExpr)
        assert expr.left.op == BinaryOp.DIV

    def test_subtraction_is_left_associative(self) -> None:
        # a - b - c is (a - b) - c
        expr = parse_single_expr("a - b - c")
        assert isinstance(expr, BinaryExpr)
        assert isinstance(expr.left, BinaryExpr)
        assert expr.right == VarRef(name="c")
        assert str(expr) == "((a - b) - c)"

    def test_division_is_left_associative(self) -> None:
        expr = parse_single_expr("8 / 4 / 2")
        assert str(expr) == "((8 / 4) / 2)"

    def test_mixed(self) -> None:
        expr = parse_single_expr("a + b * c - d / e")
        assert str(expr) == "((a + (b * c)) - (d / e))"


class TestParserStatements:
    def test_let(self) -> None:
        program = parse_program("let total = 1 + 2")
        stmt = program.statements[0]
        assert isinstance(stmt, LetStmt)
        assert stmt.name == "total"
        assert isinstance(stmt.value, BinaryExpr)

    def test_sequence_order_preserved(self) -> None:
        program = parse_program("let a = 10\nlet b = now\na")
        assert [type(s) for s in program.statements] == [LetStmt, LetStmt, ExprStmt]
        assert [str(s) for s in program.statements] == ["let a = 10", "let b = now", "a"]

    def test_statements_need_no_separator(self) -> None:
        program = parse_program("1 2 let x = 3 x")
        assert len(program.statements) == 4

    def test_empty_program(self) -> None:
        assert parse_program("") == Program(statements=[])

    def test_let_binding_named_now(self) -> None:
        # 'now' is only special in operand position
        program = parse_program("let now = 1")
        stmt = program.statements[0]
        assert isinstance(stmt, LetStmt)
        assert stmt.name == "now"


class TestParserErrors:
    def test_missing_identifier_after_let(self) -> None:
        with pytest.raises(ParseError, match="identifier after 'let'") as exc_info:
            parse_program("let = 5")
        assert exc_info.value.kind == FaultKind.UNEXPECTED_TOKEN

    def test_keyword_is_not_an_identifier(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_program("let let = 5")
        assert exc_info.value.kind == FaultKind.UNEXPECTED_TOKEN

    def test_missing_equals(self) -> None:
        with pytest.raises(ParseError, match="'=' after 'x'") as exc_info:
            parse_program("let x 5")
        assert exc_info.value.kind == FaultKind.UNEXPECTED_TOKEN
        assert exc_info.value.pos == 6

    def test_let_at_end_of_input(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_program("let")
        assert exc_info.value.kind == FaultKind.UNEXPECTED_END_OF_INPUT

    def test_missing_value(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_program("let x =")
        assert exc_info.value.kind == FaultKind.UNEXPECTED_END_OF_INPUT

    def test_end_of_input_mid_expression(self) -> None:
        with pytest.raises(ParseError, match="input ended") as exc_info:
            parse_program("1 +")
        assert exc_info.value.kind == FaultKind.UNEXPECTED_END_OF_INPUT

    def test_operator_in_primary_position(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_program("* 2")
        assert exc_info.value.kind == FaultKind.UNEXPECTED_TOKEN
        assert exc_info.value.pos == 0

    def test_no_unary_minus(self) -> None:
        with pytest.raises(ParseError):
            parse_program("-1")

    def test_let_in_expression(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_program("let x = let")
        assert exc_info.value.kind == FaultKind.UNEXPECTED_TOKEN

    def test_parentheses_are_not_supported(self) -> None:
        with pytest.raises(TokenizeError) as exc_info:
            parse_program("(1 + 2) * 3")
        assert exc_info.value.kind == FaultKind.UNEXPECTED_CHARACTER

    def test_tokenize_error_surfaces_mid_parse(self) -> None:
        with pytest.raises(TokenizeError):
            parse_program("let a = 1\nlet b = 99999999999999999999")


class TestParserCursor:
    def test_parser_holds_first_token(self) -> None:
        parser = Parser(Tokenizer("let a = 1"))
        assert parser.current.kind == TokenKind.LET

    def test_advance_returns_discarded_token(self) -> None:
        parser = Parser(Tokenizer("a b"))
        tok = parser.advance()
        assert tok.value == "a"
        assert parser.current.value == "b"


class TestAstIsReadOnly:
    def test_nodes_are_frozen(self) -> None:
        expr = parse_single_expr("1 + 2")
        with pytest.raises(ValidationError):
            expr.op = BinaryOp.SUB  # type: ignore[misc]

    def test_program_is_frozen(self) -> None:
        program = parse_program("1")
        with pytest.raises(ValidationError):
            program.statements = []  # type: ignore[misc]

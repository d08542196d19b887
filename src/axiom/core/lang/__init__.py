"""
Axiom language front end and evaluator.

Tokenizer, parser, type checker, and interpreter for Axiom programs.

Usage:
    from axiom.core.lang import parse_program, check_program, execute

    program = parse_program("let a = 10\na * 2")
    assert check_program(program) is None
    result = execute(program)
    # result == IntValue(value=20)
"""

from axiom.core.lang.interpreter import Interpreter, execute
from axiom.core.lang.parser import Parser, parse_program
from axiom.core.lang.tokenizer import Token, TokenKind, Tokenizer, tokenize
from axiom.core.lang.type_checker import TypeChecker, check_program

__all__ = [
    "Interpreter",
    "Parser",
    "Token",
    "TokenKind",
    "TypeChecker",
    "Tokenizer",
    "check_program",
    "execute",
    "parse_program",
    "tokenize",
]

"""
Tokenizer for the Axiom language.

Converts source text into a lazy stream of typed tokens. The parser pulls
tokens one at a time through ``Tokenizer.next_token()``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum, auto

from axiom.core.errors import FaultKind, TokenizeError

logger = logging.getLogger(__name__)

INT64_MAX = 2**63 - 1
INT64_MIN = -(2**63)


class TokenKind(StrEnum):
    """Token types for the Axiom language."""

    # Keywords
    LET = auto()

    # Identifiers and literals
    IDENT = auto()
    INT = auto()

    # Operators
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()
    ASSIGN = auto()

    # End of input
    EOF = auto()


@dataclass(frozen=True, slots=True)
class Token:
    """A single token. ``value`` is the name for IDENT, the integer for INT."""

    kind: TokenKind
    value: str | int
    pos: int

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.value!r}, pos={self.pos})"


_KEYWORDS: dict[str, TokenKind] = {
    "let": TokenKind.LET,
}

_OPERATORS: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "=": TokenKind.ASSIGN,
}


def _is_ascii_digit(c: str) -> bool:
    return "0" <= c <= "9"


def _is_ident_char(c: str) -> bool:
    return c.isalnum() or c == "_"


# Information separators: str.isspace() accepts them, Unicode White_Space does not
_NON_SPACE_SEPARATORS = frozenset("\x1c\x1d\x1e\x1f")


def _is_whitespace(c: str) -> bool:
    return c.isspace() and c not in _NON_SPACE_SEPARATORS


class Tokenizer:
    """Stateful cursor over source text. The position only moves forward."""

    def __init__(self, source: str) -> None:
        self.source = source
        self.pos = 0

    def next_token(self) -> Token:
        """Return the next token; keeps returning EOF once input is exhausted."""
        source = self.source
        n = len(source)

        while self.pos < n and _is_whitespace(source[self.pos]):
            self.pos += 1

        if self.pos >= n:
            return Token(TokenKind.EOF, "", n)

        start = self.pos
        c = source[start]

        if c in _OPERATORS:
            self.pos += 1
            return Token(_OPERATORS[c], c, start)

        if _is_ascii_digit(c):
            end = start
            while end < n and _is_ascii_digit(source[end]):
                end += 1
            digits = source[start:end]
            self.pos = end
            value = int(digits)
            if value > INT64_MAX:
                raise TokenizeError(
                    f"Integer literal {digits} does not fit in a signed 64-bit integer",
                    FaultKind.NUMBER_OVERFLOW,
                    pos=start,
                    help=f"Integer literals must be at most {INT64_MAX}.",
                )
            return Token(TokenKind.INT, value, start)

        if c.isalpha() or c == "_":
            end = start
            while end < n and _is_ident_char(source[end]):
                end += 1
            word = source[start:end]
            self.pos = end
            return Token(_KEYWORDS.get(word, TokenKind.IDENT), word, start)

        raise TokenizeError(
            f"Unexpected character: {c!r}",
            FaultKind.UNEXPECTED_CHARACTER,
            pos=start,
        )

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including EOF."""
        while True:
            tok = self.next_token()
            yield tok
            if tok.kind == TokenKind.EOF:
                return


def tokenize(source: str) -> list[Token]:
    """Tokenize a whole source string into a list ending with EOF."""
    tokens = list(Tokenizer(source))
    logger.debug("Tokenized %d characters into %d tokens", len(source), len(tokens))
    return tokens

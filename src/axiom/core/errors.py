"""
Error types for Axiom tokenizing, parsing, type checking and evaluation.

Every stage raises a subclass of ``AxiomError``. Each error carries a
``FaultKind`` and can be turned into a ``Diagnostic`` for reporting.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from axiom.core.ir import Diagnostic


class FaultKind(StrEnum):
    """Closed set of fault kinds across all pipeline stages."""

    UNEXPECTED_CHARACTER = "UnexpectedCharacter"
    NUMBER_OVERFLOW = "NumberOverflow"
    UNEXPECTED_TOKEN = "UnexpectedToken"
    UNEXPECTED_END_OF_INPUT = "UnexpectedEndOfInput"
    UNDEFINED_VARIABLE = "UndefinedVariable"
    DIVISION_BY_ZERO = "DivisionByZero"
    TYPE_MISMATCH = "TypeMismatch"

    @property
    def title(self) -> str:
        """Human-readable title, e.g. 'Division By Zero'."""
        return _TITLES[self]


_TITLES: dict[FaultKind, str] = {
    FaultKind.UNEXPECTED_CHARACTER: "Unexpected Character",
    FaultKind.NUMBER_OVERFLOW: "Number Overflow",
    FaultKind.UNEXPECTED_TOKEN: "Unexpected Token",
    FaultKind.UNEXPECTED_END_OF_INPUT: "Unexpected End Of Input",
    FaultKind.UNDEFINED_VARIABLE: "Undefined Variable",
    FaultKind.DIVISION_BY_ZERO: "Division By Zero",
    FaultKind.TYPE_MISMATCH: "Type Mismatch",
}


@dataclass
class ErrorContext:
    """
    Source location for an error.

    Attributes:
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        snippet: The offending source line, if known
    """

    line: int
    column: int
    snippet: str | None = None

    def format(self) -> str:
        """
        Format the location as a human-readable string.

        Returns:
            "line 2, column 5", followed by the snippet and a marker
            under the column when a snippet is present.
        """
        location = f"line {self.line}, column {self.column}"
        if self.snippet is None:
            return location
        prefix = f"{self.line:4d} | "
        marker = " " * (len(prefix) + self.column - 1) + "^"
        return f"{location}\n{prefix}{self.snippet}\n{marker}"


def locate(source: str, pos: int) -> ErrorContext:
    """Map a character offset in ``source`` to a line/column context."""
    pos = max(0, min(pos, len(source)))
    line = source.count("\n", 0, pos) + 1
    line_start = source.rfind("\n", 0, pos) + 1
    line_end = source.find("\n", pos)
    if line_end == -1:
        line_end = len(source)
    return ErrorContext(
        line=line,
        column=pos - line_start + 1,
        snippet=source[line_start:line_end],
    )


class AxiomError(Exception):
    """Base exception for all Axiom errors."""

    def __init__(
        self,
        message: str,
        kind: FaultKind,
        pos: int | None = None,
        help: str | None = None,
    ) -> None:
        self.message = message
        self.kind = kind
        self.pos = pos
        self.help = help
        self.context: ErrorContext | None = None
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.message} at {self.context.format()}"
        return self.message

    def attach_source(self, source: str) -> None:
        """Resolve ``pos`` against the source text the error came from."""
        if self.pos is None or self.context is not None:
            return
        self.context = locate(source, self.pos)
        self.args = (self._format_message(),)

    @property
    def diagnostic(self) -> Diagnostic:
        """The user-facing record for this error."""
        message = self.message
        if self.context:
            message = f"{message} (line {self.context.line}, column {self.context.column})"
        return Diagnostic(title=self.kind.title, message=message, help=self.help)


class TokenizeError(AxiomError):
    """
    Raised when source text cannot be tokenized.

    Examples:
    - A character outside the language alphabet
    - An integer literal outside the signed 64-bit range
    """

    pass


class ParseError(AxiomError):
    """
    Raised when the token stream does not match the grammar.

    Examples:
    - Missing identifier after 'let'
    - Missing '=' after the bound name
    - Unexpected token in operand position
    - Input ending mid-expression
    """

    pass


class TypeCheckError(AxiomError):
    """
    Raised by the type checker; carries the exact diagnostic to report.

    Examples:
    - Use of a variable with no prior binding ("Unproven Variable")
    - Arithmetic involving a Time value ("Type Mismatch")
    """

    def __init__(self, diagnostic: Diagnostic, kind: FaultKind) -> None:
        self._diagnostic = diagnostic
        super().__init__(diagnostic.message, kind, help=diagnostic.help)

    @property
    def diagnostic(self) -> Diagnostic:
        return self._diagnostic


class EvalError(AxiomError):
    """
    Raised when evaluation fails at runtime.

    Examples:
    - Division by zero
    - Integer result outside the signed 64-bit range
    - Undefined variable or Time arithmetic in an unchecked program
    """

    pass

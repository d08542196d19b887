"""
Rich console output for the Axiom CLI.

Renders diagnostics, results and token listings with colors and styling.
"""

from rich.console import Console
from rich.style import Style
from rich.table import Table
from rich.text import Text

from axiom.core.ir import Diagnostic, Value
from axiom.core.lang.tokenizer import Token

console = Console(highlight=False)

# Style definitions
STYLES = {
    "title": Style(color="red", bold=True),
    "message": Style(color="white"),
    "help": Style(color="cyan"),
    "result": Style(color="green", bold=True),
    "success": Style(color="green", bold=True),
    "muted": Style(color="bright_black"),
}


def print_diagnostic(diagnostic: Diagnostic) -> None:
    """Print a diagnostic as title, message and optional help."""
    console.print()
    console.print(Text(f"❌ {diagnostic.title}", style=STYLES["title"]))
    console.print(Text(f"→ {diagnostic.message}", style=STYLES["message"]))
    if diagnostic.help:
        console.print(Text(f"💡 {diagnostic.help}", style=STYLES["help"]))


def print_result(value: Value | None) -> None:
    """Print the program result, or 'none' if there was no bare expression."""
    rendered = str(value) if value is not None else "none"
    console.print(Text(f"Result: {rendered}", style=STYLES["result"]))


def print_success(message: str) -> None:
    console.print(Text(f"✓ {message}", style=STYLES["success"]))


def print_tokens(tokens: list[Token]) -> None:
    """Print a token stream as a table."""
    table = Table(show_header=True, header_style="bold")
    table.add_column("Pos", justify="right", style=STYLES["muted"])
    table.add_column("Kind")
    table.add_column("Value")
    for tok in tokens:
        table.add_row(str(tok.pos), tok.kind.value, str(tok.value))
    console.print(table)

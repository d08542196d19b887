"""
Axiom CLI.

Commands:
- run: type check and execute a program
- check: type check only
- tokens: show the token stream
"""

import logging
import platform
import sys
from pathlib import Path

import typer

from axiom import __version__
from axiom.cli_ui import print_diagnostic, print_result, print_success, print_tokens
from axiom.core.errors import AxiomError
from axiom.core.ir import Diagnostic
from axiom.core.lang.tokenizer import tokenize
from axiom.core.manifest import AxiomConfig, ManifestError, resolve_config
from axiom.core.pipeline import check_source, run_source

logger = logging.getLogger(__name__)


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"Axiom version {__version__}")
        typer.echo(
            f"Python {platform.python_implementation()} {platform.python_version()}"
        )
        raise typer.Exit()


app = typer.Typer(
    help="""Axiom – a tiny typed expression language

Programs are .axi files of let bindings and integer expressions.
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
    config_path: Path | None = typer.Option(
        None,
        "--config",
        help="Path to axiom.toml (default: ./axiom.toml if present)",
    ),
) -> None:
    """Axiom CLI main callback for global options."""
    try:
        config = resolve_config(config_path)
    except ManifestError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)

    level = "DEBUG" if verbose else config.logging.level
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = config


def _read_source(ctx: typer.Context, file: Path) -> str:
    """Validate the extension and read the source file, or exit with 1."""
    config: AxiomConfig = ctx.obj or AxiomConfig()
    extension = config.run.extension

    if config.run.enforce_extension and file.suffix != f".{extension}":
        print_diagnostic(
            Diagnostic(
                title="Invalid file type",
                message=f"'{file.name}' does not have the .{extension} extension.",
                help=f"Axiom programs must use the .{extension} extension",
            )
        )
        raise typer.Exit(code=1)

    try:
        return file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print_diagnostic(Diagnostic(title="Failed to read file", message=str(e)))
        raise typer.Exit(code=1)


@app.command("run")
def run_command(
    ctx: typer.Context,
    file: Path = typer.Argument(..., help="Program to run (.axi)"),
) -> None:
    """
    Type check and run a program, printing its result.

    The result is the value of the last bare expression, or 'none'.
    """
    source = _read_source(ctx, file)
    logger.debug("Running %s (%d characters)", file, len(source))

    result = run_source(source)
    if result.diagnostic is not None:
        print_diagnostic(result.diagnostic)
        raise typer.Exit(code=1)

    print_result(result.value)


@app.command("check")
def check_command(
    ctx: typer.Context,
    file: Path = typer.Argument(..., help="Program to check (.axi)"),
) -> None:
    """
    Type check a program without running it.
    """
    source = _read_source(ctx, file)

    result = check_source(source)
    if result.diagnostic is not None:
        print_diagnostic(result.diagnostic)
        raise typer.Exit(code=1)

    print_success(f"{file.name} is well typed")


@app.command("tokens")
def tokens_command(
    ctx: typer.Context,
    file: Path = typer.Argument(..., help="Program to tokenize (.axi)"),
) -> None:
    """
    Print the token stream of a program.
    """
    source = _read_source(ctx, file)

    try:
        tokens = tokenize(source)
    except AxiomError as e:
        e.attach_source(source)
        print_diagnostic(e.diagnostic)
        raise typer.Exit(code=1)

    print_tokens(tokens)


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


if __name__ == "__main__":
    main(sys.argv[1:])

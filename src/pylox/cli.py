"""
pylox CLI - Entry point.

Commands:
- run: evaluate the expression in a script file
- repl: evaluate one expression per line interactively
- tokens: print the scanner output for a file
- ast: print the parsed expression tree for a file
"""

import logging
import platform
import sys
from pathlib import Path

import typer
from rich.console import Console

from pylox._version import get_version
from pylox.core.config import LoxConfig, load_config
from pylox.core.errors import ConfigError, ParseError
from pylox.core.expression_lang.parser import parse
from pylox.core.expression_lang.scanner import Scanner
from pylox.core.runner import RunResult, run_source

# sysexits.h codes, as used by the reference Lox implementations
EXIT_DATAERR = 65
EXIT_NOINPUT = 66
EXIT_SOFTWARE = 70
EXIT_CONFIG = 78

err_console = Console(stderr=True, highlight=False)

app = typer.Typer(
    help="pylox - evaluate Lox expressions",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"pylox version {get_version()}")
        typer.echo(f"  Python:    {platform.python_implementation()} {platform.python_version()}")
        typer.echo(f"  Platform:  {platform.system()} {platform.release()}")
        raise typer.Exit()


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
    verbose: bool = typer.Option(False, "--verbose", "-V", help="Enable debug logging"),
    config_path: Path | None = typer.Option(
        None, "--config", "-c", help="Config file (default: ./pylox.toml or pyproject.toml)"
    ),
) -> None:
    """pylox main callback for global options."""
    try:
        config = load_config(config_path)
    except ConfigError as e:
        _print_error(str(e))
        raise typer.Exit(code=EXIT_CONFIG) from e

    level = logging.DEBUG if verbose else getattr(logging, config.log_level)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    ctx.obj = config


def _print_error(message: str) -> None:
    err_console.print(message, style="bold red", markup=False, soft_wrap=True)


def _read_source(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        _print_error(f"Error: cannot read {path}: {e.strerror or e}")
        raise typer.Exit(code=EXIT_NOINPUT) from e


def _config(ctx: typer.Context) -> LoxConfig:
    return ctx.obj if isinstance(ctx.obj, LoxConfig) else LoxConfig()


def _print_result(result: RunResult, config: LoxConfig) -> None:
    """Print diagnostics, requested dumps, and the value or errors."""
    if config.show_tokens:
        for token in result.tokens:
            typer.echo(str(token))
    if config.show_ast and result.expr is not None:
        typer.echo(str(result.expr))

    for error in result.errors:
        _print_error(error.report())
    if result.output is not None:
        typer.echo(result.output)


@app.command()
def run(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="Lox source file"),
) -> None:
    """Evaluate the expression in a source file and print its value."""
    config = _config(ctx)
    result = run_source(_read_source(path), config)
    _print_result(result, config)

    if result.has_static_error:
        raise typer.Exit(code=EXIT_DATAERR)
    if result.has_runtime_error:
        raise typer.Exit(code=EXIT_SOFTWARE)


@app.command()
def repl(ctx: typer.Context) -> None:
    """Read expressions line by line; an empty line or EOF exits."""
    config = _config(ctx)

    while True:
        typer.echo(config.prompt, nl=False)
        line = sys.stdin.readline()
        if not line.strip():
            if not line:
                typer.echo()
            return

        if config.echo:
            typer.echo(f"ECHO: {line.rstrip()}")
        _print_result(run_source(line, config), config)


@app.command()
def tokens(
    path: Path = typer.Argument(..., help="Lox source file"),
) -> None:
    """Print every token the scanner produces for a file."""
    scanner = Scanner(_read_source(path))
    for token in scanner.scan_tokens():
        typer.echo(str(token))

    for error in scanner.errors:
        _print_error(error.report())
    if scanner.errors:
        raise typer.Exit(code=EXIT_DATAERR)


@app.command()
def ast(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="Lox source file"),
) -> None:
    """Print the parsed expression in parenthesized prefix form."""
    config = _config(ctx)
    scanner = Scanner(_read_source(path))
    token_list = scanner.scan_tokens()
    for error in scanner.errors:
        _print_error(error.report())
    if scanner.errors:
        raise typer.Exit(code=EXIT_DATAERR)

    try:
        expr = parse(token_list, max_depth=config.max_depth)
    except ParseError as e:
        _print_error(e.report())
        raise typer.Exit(code=EXIT_DATAERR) from e

    typer.echo(str(expr))


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


if __name__ == "__main__":
    main(sys.argv[1:])

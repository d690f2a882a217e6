"""CLI for the acousticalc terminal calculator.

Usage:
    python -m acousticalc eval "2 + 3 * 4"       # One-shot: prints Result: 14
    python -m acousticalc eval -5 + 3            # Arguments are joined with spaces
    python -m acousticalc eval --json "10 / 4"   # Machine-readable output
    python -m acousticalc repl                   # Interactive session
    python -m acousticalc version
"""

from __future__ import annotations

import json
import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from acousticalc import __version__
from acousticalc.calculator import evaluate
from acousticalc.config import Settings, load_settings
from acousticalc.errors import CalculatorError
from acousticalc.formatting import format_result
from acousticalc.keypad import Keypad
from acousticalc.models import Calculation

app = typer.Typer(
    name="acousticalc",
    help="Terminal arithmetic calculator",
    no_args_is_help=True,
)
console = Console(stderr=True)
out = Console(highlight=False, soft_wrap=True)

QUIT_COMMANDS = ("q", "quit", "exit")
CLEAR_COMMANDS = ("c", "clear")
SIGN_COMMANDS = ("±", "neg")
PERCENT_COMMANDS = ("%",)


def setup_logging(verbose: bool = False) -> None:
    """Route log records through Rich on stderr."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
        force=True,
    )


def _resolve_settings(prompt: Optional[str] = None, verbose: bool = False) -> Settings:
    """Environment settings with command-line overrides applied."""
    settings = load_settings()
    if prompt is not None:
        settings.prompt = prompt
    if verbose:
        settings.verbose = True
    return settings


@app.command(
    "eval",
    context_settings={"ignore_unknown_options": True},
)
def cmd_evaluate(
    expression: Optional[list[str]] = typer.Argument(None, help="Expression, e.g. '2 + 3 * 4'"),
    as_json: bool = typer.Option(False, "--json", help="Print the calculation as JSON"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    """Evaluate a single expression and exit."""
    settings = _resolve_settings(verbose=verbose)
    setup_logging(settings.verbose)

    if not expression:
        out.print("Usage: acousticalc eval <expression>", markup=False)
        out.print('Example: acousticalc eval "2 + 3 * 4"', markup=False)
        raise typer.Exit(1)

    # Join all arguments to handle expressions with spaces
    text = " ".join(expression)

    try:
        result = evaluate(text)
    except CalculatorError as e:
        out.print(f"Error: {e}", markup=False)
        raise typer.Exit(1)

    if as_json:
        out.print(json.dumps(Calculation(expression=text, result=result).to_dict()), markup=False)
    else:
        out.print(f"Result: {format_result(result)}", markup=False)


def _handle_line(keypad: Keypad, line: str) -> bool:
    """Apply one REPL line to the keypad. Returns False to end the session."""
    command = line.lower()
    if command in QUIT_COMMANDS:
        return False

    if command in CLEAR_COMMANDS:
        keypad.clear()
    elif command in SIGN_COMMANDS:
        keypad.toggle_sign()
    elif command in PERCENT_COMMANDS:
        keypad.percentage()
    else:
        keypad.type(line)
        keypad.calculate()

    if keypad.has_error:
        out.print(f"Error: {keypad.error_message}", style="red", markup=False)
        keypad.clear()
    else:
        out.print(keypad.display, markup=False)
    return True


@app.command("repl")
def cmd_repl(
    prompt: Optional[str] = typer.Option(None, "--prompt", help="Prompt string (default: $ACOUSTICALC_PROMPT or 'calc> ')"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    """Interactive session. A line starting with an operator continues from the last result."""
    settings = _resolve_settings(prompt=prompt, verbose=verbose)
    setup_logging(settings.verbose)

    keypad = Keypad()
    console.print(f"[bold]acousticalc[/bold] {__version__} [dim](c clears, q quits)[/dim]")
    try:
        while True:
            line = out.input(settings.prompt, markup=False).strip()
            if not line:
                continue
            if not _handle_line(keypad, line):
                break
    except EOFError:
        console.print("\n[dim]caught EOF[/dim]")
    except KeyboardInterrupt:
        console.print("\n[dim]interrupted[/dim]")


@app.command("version")
def cmd_version() -> None:
    """Show the installed version."""
    out.print(f"acousticalc {__version__}", markup=False)


if __name__ == "__main__":
    app()

"""Shared utilities for rn-starter CLI modules."""
from __future__ import annotations

from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from rnstarter.core.errors import StarterError


def setup_file_logging(log_file: Optional[str] = None, verbose: bool = False) -> None:
    """Set up file logging for CLI commands.

    Args:
        log_file: Path to log file (optional)
        verbose: Enable verbose logging
    """
    from rnstarter.core.logger import setup_file_logging as _setup_file_logging
    _setup_file_logging(log_file=log_file, verbose=verbose)


def handle_cli_error(
    e: Exception,
    console: Console,
    verbose: bool = False,
    exit_code: int = 1
) -> None:
    """Handle CLI errors with consistent formatting.

    Args:
        e: Exception to handle
        console: Rich console for output
        verbose: Show exception traceback if True
        exit_code: Exit code to use
    """
    if isinstance(e, StarterError):
        print_error(console, escape(str(e)), prefix="❌")
        for line in e.remediation:
            console.print(f"   {line}", style="yellow", markup=False)
    else:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
    if verbose:
        console.print_exception()
    raise typer.Exit(exit_code)


def _print_status(console: Console, style: str, prefix: str, message: str) -> None:
    console.print(f"[{style}]{prefix}[/{style}] {message}")


def print_success(console: Console, message: str, prefix: str = "✓") -> None:
    """Report a finished step, e.g. "Project 'MyApp' is ready!".

    The message may contain rich markup; escape user-supplied text first.
    """
    _print_status(console, "green", prefix, message)


def print_error(console: Console, message: str, prefix: str = "✗") -> None:
    _print_status(console, "red", prefix, message)


def print_warning(console: Console, message: str, prefix: str = "⚠") -> None:
    _print_status(console, "yellow", prefix, message)


def print_info(console: Console, message: str, prefix: str = "ℹ") -> None:
    _print_status(console, "cyan", prefix, message)


def print_next_steps(console: Console, steps: List[str], title: str = "Next steps") -> None:
    """Print a numbered list of follow-up commands."""
    if not steps:
        return
    console.print(f"\n[bold]{title}:[/bold]")
    for index, step in enumerate(steps, 1):
        console.print(f"  {index}. {step}", markup=False)

"""Project bootstrap command: rn-starter <appName> [packageIdentifier] [--cli|--expo]."""
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from rnstarter.core.errors import ConflictingPlatformFlags, MissingAppNameError
from rnstarter.models.platform import Platform

# Module-level console instance (will be set by register function)
console: Console = Console()


def resolve_platform_flags(cli: bool, expo: bool) -> Optional[Platform]:
    """Map the mutually exclusive platform flags to a Platform, or None to ask."""
    if cli and expo:
        raise ConflictingPlatformFlags()
    if cli:
        return Platform.CLI
    if expo:
        return Platform.EXPO
    return None


def create(
    app_name: Optional[str] = typer.Argument(
        None, metavar="APP_NAME", help="App name: letter first, 3-50 letters, digits, - or _"
    ),
    package_name: Optional[str] = typer.Argument(
        None, metavar="[PACKAGE_IDENTIFIER]", help="Reverse-domain package id, e.g. com.company.appname"
    ),
    cli: bool = typer.Option(False, "--cli", help="Use React Native CLI (skip platform selection)"),
    expo: bool = typer.Option(False, "--expo", help="Use Expo (skip platform selection)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Path to log file"),
):
    """Create a React Native or Expo app with opinionated defaults.

    Examples:
      rn-starter MyApp
      rn-starter MyApp com.company.myapp --cli
      rn-starter MyApp com.company.myapp --expo
    """
    from rnstarter.cli_support import (
        handle_cli_error,
        print_info,
        print_next_steps,
        print_success,
        print_warning,
        setup_file_logging,
    )
    from rnstarter.core.config import get_config
    from rnstarter.core.pipeline import StarterPipeline
    from rnstarter.core.prompts import InteractiveSession

    setup_file_logging(log_file=log_file, verbose=verbose)

    try:
        platform = resolve_platform_flags(cli, expo)
        if not app_name:
            raise MissingAppNameError()

        config = get_config()
        if config.mock:
            print_warning(console, "MOCK mode: generator commands will only be logged")

        pipeline = StarterPipeline(
            config=config,
            session_factory=lambda: InteractiveSession(console=console),
        )
        result = pipeline.run(app_name, package_name, platform=platform, output_dir=Path.cwd())

    except typer.Exit:
        raise
    except Exception as e:
        handle_cli_error(e, console, verbose)

    console.print()
    result.summary.render(console)
    warnings = result.summary.warnings()
    if warnings:
        print_warning(console, f"{len(warnings)} optional step(s) need attention (see summary above)")

    print_success(console, f"Project '{result.identity.name}' is ready! 🚀")
    print_info(console, f"Location: {escape(str(result.project_path))}")
    print_next_steps(console, [f"cd {result.identity.name}", *result.profile.next_steps])


def register_create_commands(app: typer.Typer, shared_console: Console):
    """Register the bootstrap command with the main Typer app.

    Args:
        app: Main Typer application
        shared_console: Shared Rich console instance
    """
    global console
    console = shared_console

    app.command(name="create", context_settings={"help_option_names": ["-h", "--help"]})(create)

#!/usr/bin/env python3
"""rn-starter CLI - Bootstrap React Native and Expo apps with opinionated defaults."""

import typer
from rich.console import Console

from rnstarter.cli_create_commands import register_create_commands

app = typer.Typer(
    name="rn-starter",
    help="""rn-starter - React Native project bootstrapper

Generates a React Native CLI or Expo app, overlays the starter templates,
configures deep links and creates a single initial commit.

Quick start:
  rn-starter MyApp                             # Choose the platform interactively
  rn-starter MyApp com.company.myapp --cli     # React Native CLI
  rn-starter MyApp com.company.myapp --expo    # Expo
""",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)

console = Console()

register_create_commands(app, console)

if __name__ == "__main__":
    app()

#!/usr/bin/env python3
"""rn-version-bump - Bump semantic versions of the workspace's JS packages."""
from pathlib import Path
from typing import List, Optional, Tuple

import typer
from rich.console import Console
from rich.table import Table

from rnstarter.cli_support import print_error, print_info, print_next_steps, print_success, print_warning
from rnstarter.services.versioning import VALID_BUMPS, PackageInfo, PackageVersionManager, bump_version

app = typer.Typer(
    name="rn-version-bump",
    help="Bump package.json versions under a packages directory.",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)

console = Console()


def _list_packages(manager: PackageVersionManager) -> None:
    packages = manager.list_packages()
    if not packages:
        print_warning(console, f"No packages found in {manager.packages_dir}")
        return

    table = Table(title="Packages", show_header=True, header_style="bold cyan")
    table.add_column("Directory")
    table.add_column("Name")
    table.add_column("Version", justify="right")
    table.add_column("Status")
    for directory in packages:
        info = manager.get_package_info(directory)
        status = "[yellow]Modified[/yellow]" if manager.has_uncommitted_changes(directory) else "[green]Clean[/green]"
        table.add_row(info.directory, info.name, info.version, status)
    console.print(table)


def _plan_bumps(
    manager: PackageVersionManager, targets: List[str], bump_type: str
) -> List[Tuple[PackageInfo, str]]:
    """Compute every new version before any file is written."""
    return [
        (info, bump_version(info.version, bump_type))
        for info in (manager.get_package_info(directory) for directory in targets)
    ]


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def bump(
    package: Optional[str] = typer.Argument(None, help="Package directory name, or 'all'"),
    bump_type: Optional[str] = typer.Argument(None, help="patch, minor or major"),
    list_only: bool = typer.Option(False, "--list", "-l", help="List packages and their versions"),
    packages_dir: Path = typer.Option(Path("packages"), "--packages-dir", help="Directory holding the packages"),
):
    """Bump one package or all packages.

    Examples:
      rn-version-bump --list
      rn-version-bump ui-kit patch
      rn-version-bump all minor
    """
    manager = PackageVersionManager(packages_dir)

    if list_only:
        _list_packages(manager)
        return

    if not package or not bump_type:
        print_error(console, "Usage: rn-version-bump <package|all> <patch|minor|major>")
        print_info(console, "Use --list to see available packages")
        raise typer.Exit(1)

    if bump_type not in VALID_BUMPS:
        print_error(console, f"Invalid bump type: {bump_type}")
        print_info(console, f"Valid types: {', '.join(VALID_BUMPS)}")
        raise typer.Exit(1)

    packages = manager.list_packages()
    if package == "all":
        targets = packages
    elif package in packages:
        targets = [package]
    else:
        print_error(console, f"Package not found: {package}")
        if packages:
            print_info(console, f"Available packages: {', '.join(packages)}")
        raise typer.Exit(1)

    if not targets:
        print_warning(console, f"No packages found in {packages_dir}")
        raise typer.Exit(1)

    try:
        plan = _plan_bumps(manager, targets, bump_type)
    except ValueError as e:
        print_error(console, str(e))
        print_info(console, "No package.json was modified")
        raise typer.Exit(1)

    for info, new_version in plan:
        if manager.has_uncommitted_changes(info.directory):
            print_warning(console, f"{info.name} has uncommitted changes")
        manager.update_version(info.directory, new_version)
        print_success(console, f"{info.name}: {info.version} → {new_version}")

    print_success(console, f"Bumped {len(targets)} package(s)", prefix="🎉")
    print_next_steps(console, [
        f"Review the changes: git diff {packages_dir}/*/package.json",
        "Commit your changes: git add . && git commit -m \"bump: version updates\"",
        "Push to trigger auto-publish: git push",
    ])


if __name__ == "__main__":
    app()

"""Compound interactive flows built on InteractiveSession."""
from typing import Optional

from rnstarter.core.logger import get_logger
from rnstarter.core.prompts import InteractiveSession
from rnstarter.core.validator import (
    is_two_segment_package,
    suggest_package_name,
    validate_app_scheme,
    validate_domain,
    validate_package_name,
)
from rnstarter.models.app import DeepLinkConfig
from rnstarter.models.platform import Platform

logger = get_logger(__name__)

PLATFORM_CHOICES = {"1": Platform.CLI, "2": Platform.EXPO}


def choose_platform(session: InteractiveSession) -> Platform:
    """Numbered platform selection; loops until 1 or 2 is entered."""
    console = session.console
    console.print("[cyan]📱 Choose your React Native platform:[/cyan]")
    console.print("[yellow]1. React Native CLI (Bare React Native with full native access)[/yellow]")
    console.print("[yellow]2. Expo (Managed workflow with simplified development)[/yellow]")
    console.print()
    console.print("[dim]React Native CLI is recommended for apps requiring custom native modules,[/dim]")
    console.print("[dim]while Expo is great for rapid prototyping and apps using mostly standard features.[/dim]")
    console.print()

    while True:
        choice = session.ask_free_text("Enter your choice (1 for CLI, 2 for Expo): ")
        if choice in PLATFORM_CHOICES:
            platform = PLATFORM_CHOICES[choice]
            console.print(f"\n[green]✅ Selected: {platform.label}[/green]")
            return platform
        console.print("[red]❌ Invalid choice. Please enter 1 for CLI or 2 for Expo.[/red]")


def resolve_package_name(session: InteractiveSession, package_id: str) -> Optional[str]:
    """Run the two-segment package warning flow.

    Args:
        session: Open interactive session
        package_id: A valid package id with exactly two segments

    Returns:
        The package id to use (original or replacement), or None when the user
        cancelled the replacement by submitting an empty answer.
    """
    console = session.console
    console.print("\n[red]⚠️  CRITICAL WARNING: Two-segment package name detected![/red]")
    console.print(
        f"[yellow]Package name \"{package_id}\" may cause SERIOUS issues with iOS development and deployment.[/yellow]"
    )
    console.print("[yellow]Apple STRONGLY recommends using at least 3 segments (e.g., com.company.appname).[/yellow]")
    console.print("[cyan]Changing the package name after generation requires editing native Android/iOS files.[/cyan]")

    if not session.ask_yes_no("\nDo you want to update your package name NOW to avoid iOS issues? (y/N): "):
        console.print("\n[yellow]⚠️  Proceeding with 2-segment package name at your own risk.[/yellow]")
        console.print("[red]Remember: Changing this later requires manual native file modifications![/red]")
        return package_id

    suggestion = suggest_package_name(package_id)
    while True:
        candidate = session.ask_free_text(f"Enter a new package name (suggestion: {suggestion}): ")
        if not candidate:
            logger.debug("Package name replacement cancelled")
            return None

        if not validate_package_name(candidate):
            console.print("[red]❌ Invalid package name format![/red]")
            console.print("[yellow]Please use reverse domain notation (e.g., com.company.appname)[/yellow]")
            continue

        if is_two_segment_package(candidate):
            console.print("[yellow]⚠️  Still a 2-segment package name. Consider using 3+ segments.[/yellow]")
            if not session.ask_yes_no("Use this package name anyway? (y/N): "):
                continue

        console.print(f"[green]✅ Updated package name to: {candidate}[/green]")
        return candidate


def _ask_until_valid(session: InteractiveSession, question: str, validator, help_lines) -> Optional[str]:
    """Ask until validator accepts the answer; an empty answer returns None."""
    console = session.console
    while True:
        answer = session.ask_free_text(question)
        if not answer:
            return None
        if validator(answer):
            return answer
        for line in help_lines:
            console.print(line)
        console.print("[cyan]Press Enter to skip or try again:[/cyan]")


def collect_deep_link_config(session: InteractiveSession, app_name: str) -> DeepLinkConfig:
    """Ask for an optional URL scheme and, once accepted, an optional domain."""
    console = session.console
    example = app_name.lower()

    if not session.ask_yes_no("📱 Do you want to configure a custom app scheme for deep linking? (y/N): "):
        return DeepLinkConfig()

    scheme = _ask_until_valid(
        session,
        f"🔤 Enter your app scheme (e.g., \"{example}\", \"myapp\"): ",
        validate_app_scheme,
        [
            "[red]❌ Invalid app scheme![/red]",
            "[yellow]App scheme must:[/yellow]",
            "[yellow]  - Start with a letter[/yellow]",
            "[yellow]  - Be 3-20 characters long[/yellow]",
            "[yellow]  - Contain only lowercase letters, numbers, and hyphens[/yellow]",
            f"[dim]  Examples: {example}, myapp, my-app[/dim]",
        ],
    )
    if scheme is None:
        console.print("[yellow]Skipping app scheme configuration.[/yellow]")
        return DeepLinkConfig()

    domain = None
    if session.ask_yes_no("🌐 Do you want to configure universal links? (y/N): "):
        domain = _ask_until_valid(
            session,
            f"🔗 Enter your domain for universal links (e.g., \"{example}.com\", \"myapp.com\"): ",
            validate_domain,
            [
                "[red]❌ Invalid domain![/red]",
                "[yellow]Domain must:[/yellow]",
                "[yellow]  - Be a valid domain format[/yellow]",
                "[yellow]  - Include a top-level domain (.com, .org, etc.)[/yellow]",
                f"[dim]  Examples: {example}.com, mycompany.org, app.example.io[/dim]",
            ],
        )
        if domain is None:
            console.print("[yellow]Skipping universal links configuration.[/yellow]")

    return DeepLinkConfig(scheme=scheme, universal_domain=domain)


def confirm_pod_install(session: InteractiveSession) -> bool:
    session.console.print("\n[yellow]🍎 Detected macOS - iOS development available[/yellow]")
    return session.ask_yes_no("📱 Install CocoaPods dependencies now? (y/N): ")

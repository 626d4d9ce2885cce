"""Fatal error types raised by the rn-starter pipeline.

Every error carries a human-readable cause (the exception message) plus
remediation lines the CLI prints before exiting with status 1.
"""
from typing import List, Optional


class StarterError(Exception):
    """Base class for errors that abort the whole run."""

    def __init__(self, message: str, remediation: Optional[List[str]] = None):
        super().__init__(message)
        self.remediation = remediation or []


class InvalidAppNameError(StarterError):
    def __init__(self, app_name: str):
        super().__init__(
            f"Invalid app name: '{app_name}'",
            [
                "App name must:",
                "  - Start with a letter",
                "  - Be 3-50 characters long",
                "  - Contain only letters, numbers, hyphens, and underscores",
                "  Examples: MyApp, my-app, My_App_2024",
            ],
        )


class MissingAppNameError(StarterError):
    def __init__(self):
        super().__init__(
            "Please provide an app name.",
            [
                "Usage: rn-starter AppName [com.organization.appname] [--cli|--expo]",
                "Use --help for more information.",
            ],
        )


class InvalidPackageNameError(StarterError):
    def __init__(self, package_name: str):
        super().__init__(
            f"Invalid package name: '{package_name}'",
            [
                "Package name must:",
                "  - Use reverse domain notation",
                "  - Contain only lowercase letters, numbers, and dots",
                "  - Have at least 2 segments",
                "  Examples: com.company.appname, org.mycompany.myapp",
            ],
        )


class PackageNameCancelled(StarterError):
    def __init__(self):
        super().__init__(
            "Cancelled. Please provide a valid package name.",
            ["Re-run with a 3+ segment package name, e.g. com.company.appname"],
        )


class ConflictingPlatformFlags(StarterError):
    def __init__(self):
        super().__init__(
            "Cannot use both --cli and --expo flags together.",
            ["Please choose one platform or omit flags for interactive selection."],
        )


class GeneratorError(StarterError):
    """The external project generator failed or could not be launched."""

    def __init__(self, command: List[str], reason: str):
        self.command = command
        super().__init__(
            f"Project generator failed: {reason}",
            [
                f"Command: {' '.join(command)}",
                "Check that Node.js and npx are installed and that the target directory does not already exist.",
            ],
        )


class PromptAborted(StarterError):
    """Interactive input ended before a valid answer was given."""

    def __init__(self):
        super().__init__(
            "Input ended before the question was answered.",
            ["Run rn-starter from an interactive terminal, or pass --cli/--expo and pipe complete answers."],
        )

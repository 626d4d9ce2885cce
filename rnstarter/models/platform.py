"""Target platforms and their per-platform scaffolding profiles."""
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List


class Platform(str, Enum):
    """Project generator variant."""

    CLI = "cli"
    EXPO = "expo"

    @property
    def label(self) -> str:
        return "Expo" if self is Platform.EXPO else "React Native CLI"


@dataclass
class PlatformProfile:
    """Everything that differs between the CLI and Expo variants.

    Loaded from templates/platforms.yml by PlatformProfileLoader.
    """

    platform: Platform
    description: str
    generator: List[str]
    package_flag: str = ""
    remove: List[str] = field(default_factory=list)
    template_dir: Path = Path(".")
    exclude: List[str] = field(default_factory=list)
    reset_git_history: bool = False
    next_steps: List[str] = field(default_factory=list)

    def generator_command(self, npx_command: str, app_name: str, package_id: str = None) -> List[str]:
        """Build the generator invocation for an app."""
        command = [npx_command, *self.generator, app_name]
        if package_id and self.package_flag:
            command.extend([self.package_flag, package_id])
        return command

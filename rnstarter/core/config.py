"""rn-starter runtime configuration and settings."""
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

DEFAULT_TEMPLATES_DIR = Path(__file__).parent.parent / "templates"


@dataclass
class StarterConfig:
    """Runtime configuration for rn-starter runs.

    Attributes:
        npx_command: Executable used to launch the project generators (default: npx)
        git_command: Executable used by the repository finalizer (default: git)
        templates_dir: Directory holding platforms.yml and the override trees
        host_platform: Host platform indicator, compared against "darwin"
        mock: Skip external generator processes and only log them
    """

    npx_command: str = "npx"
    git_command: str = "git"
    templates_dir: Path = field(default_factory=lambda: DEFAULT_TEMPLATES_DIR)
    host_platform: str = field(default_factory=lambda: sys.platform)
    mock: bool = False

    @property
    def is_macos(self) -> bool:
        return self.host_platform == "darwin"

    @classmethod
    def from_env(cls) -> "StarterConfig":
        """Create config from environment variables.

        Environment variables:
            RN_STARTER_NPX: Generator launcher executable
            RN_STARTER_GIT: Git executable
            RN_STARTER_TEMPLATES_DIR: Alternate templates directory
            RN_STARTER_MOCK: Set to "1" to skip generator processes

        Returns:
            StarterConfig instance with values from environment or defaults
        """
        templates_dir = os.getenv("RN_STARTER_TEMPLATES_DIR")
        return cls(
            npx_command=os.getenv("RN_STARTER_NPX", cls.npx_command),
            git_command=os.getenv("RN_STARTER_GIT", cls.git_command),
            templates_dir=Path(templates_dir) if templates_dir else DEFAULT_TEMPLATES_DIR,
            mock=os.getenv("RN_STARTER_MOCK") == "1",
        )


# Global config instance (can be overridden)
_config: Optional[StarterConfig] = None


def get_config() -> StarterConfig:
    """Get the global rn-starter configuration.

    Returns:
        StarterConfig instance (creates from environment if not set)
    """
    global _config
    if _config is None:
        _config = StarterConfig.from_env()
    return _config


def set_config(config: Optional[StarterConfig]):
    """Set the global rn-starter configuration.

    Args:
        config: StarterConfig instance to use globally, or None to re-read
            the environment on next access
    """
    global _config
    _config = config

"""Optional post-generation steps run in the new project.

Currently CocoaPods installation for React Native CLI projects on macOS.
"""
import subprocess
from pathlib import Path
from typing import Optional

from rnstarter.core.config import StarterConfig, get_config
from rnstarter.core.logger import get_logger
from rnstarter.core.results import StageResult

logger = get_logger(__name__)

STAGE = "post-install"


class PostInstallManager:
    """Runs post-generation tooling with inherited stdio."""

    def __init__(self, config: Optional[StarterConfig] = None):
        self.config = config or get_config()

    def install_pods(self, project_path: Path) -> StageResult:
        """Run `npx pod-install` in the project. Failure is non-fatal."""
        command = [self.config.npx_command, "pod-install"]

        if self.config.mock:
            logger.info(f"MOCK: Would run {' '.join(command)} in {project_path}")
            return StageResult.skipped(STAGE, "pod-install", "mock mode")

        logger.info("📦 Installing CocoaPods dependencies...")
        try:
            subprocess.run(command, cwd=project_path, check=True)
        except (subprocess.CalledProcessError, FileNotFoundError) as e:
            logger.warning(f"CocoaPods installation failed: {e}")
            logger.info("You can run it manually later: npx pod-install")
            return StageResult.warning(STAGE, "pod-install", str(e))

        logger.info("✅ CocoaPods installation completed!")
        return StageResult.success(STAGE, "pod-install")

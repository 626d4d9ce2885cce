"""Project materialization: run the generator, prune defaults, overlay templates."""
import fnmatch
import shutil
import subprocess
from pathlib import Path
from typing import List, Optional

from rnstarter.core.config import StarterConfig, get_config
from rnstarter.core.errors import GeneratorError
from rnstarter.core.logger import get_logger
from rnstarter.core.results import StageResult
from rnstarter.models.app import AppIdentity
from rnstarter.models.platform import PlatformProfile

logger = get_logger(__name__)

STAGE = "materialize"
ENV_EXAMPLE = ".env.example"


class ProjectMaterializer:
    """Turns a generator run plus an override tree into the project workspace."""

    def __init__(self, config: Optional[StarterConfig] = None, mock: Optional[bool] = None):
        self.config = config or get_config()
        self.mock = self.config.mock if mock is None else mock

    def materialize(
        self,
        identity: AppIdentity,
        profile: PlatformProfile,
        output_dir: Optional[Path] = None,
    ) -> tuple:
        """Create the project for an app.

        Args:
            identity: Validated app identity (package id already resolved)
            profile: Platform profile with generator, removal list and template tree
            output_dir: Parent directory (defaults to current dir)

        Returns:
            Tuple of (project path, list of StageResult for best-effort steps)

        Raises:
            GeneratorError: If the generator exits non-zero or cannot be launched
        """
        output_dir = output_dir or Path.cwd()
        project_path = output_dir / identity.name

        logger.info(f"🚀 Initializing {profile.platform.label} app '{identity.name}'...")
        self.run_generator(identity, profile, output_dir)

        results: List[StageResult] = []
        logger.info("🧹 Cleaning up generator defaults...")
        results.extend(self.remove_defaults(project_path, profile.remove))

        logger.info("📋 Copying template files...")
        results.extend(self.overlay_templates(profile.template_dir, project_path, profile.exclude))

        env_result = self.create_env_file(profile.template_dir, project_path)
        if env_result:
            results.append(env_result)

        return project_path, results

    def run_generator(self, identity: AppIdentity, profile: PlatformProfile, cwd: Path) -> None:
        """Run the external generator with inherited stdio."""
        command = profile.generator_command(
            self.config.npx_command, identity.name, identity.package_id
        )

        if self.mock:
            logger.info(f"MOCK: Would run {' '.join(command)} in {cwd}")
            (cwd / identity.name).mkdir(parents=True, exist_ok=True)
            return

        logger.debug(f"Running generator: {' '.join(command)}")
        try:
            subprocess.run(command, cwd=cwd, check=True)
        except subprocess.CalledProcessError as e:
            raise GeneratorError(command, f"exit code {e.returncode}") from e
        except FileNotFoundError as e:
            raise GeneratorError(command, f"{command[0]} not found") from e

    def remove_defaults(self, project_path: Path, paths: List[str]) -> List[StageResult]:
        """Delete generator-default paths; missing paths are a no-op."""
        results = []
        for item in paths:
            target = project_path / item
            if not target.exists() and not target.is_symlink():
                continue
            try:
                if target.is_dir() and not target.is_symlink():
                    shutil.rmtree(target)
                else:
                    target.unlink()
                logger.debug(f"Removed {item}")
                results.append(StageResult.success(STAGE, f"remove {item}"))
            except OSError as e:
                logger.warning(f"Failed to remove {item}: {e}")
                results.append(StageResult.warning(STAGE, f"remove {item}", str(e)))
        return results

    def overlay_templates(
        self,
        template_dir: Path,
        project_path: Path,
        exclude: Optional[List[str]] = None,
    ) -> List[StageResult]:
        """Copy every template file over the project, overwriting same-named files.

        Files only present in the project are left untouched. Template files
        whose name matches an exclude pattern are not copied.
        """
        exclude = exclude or []
        if not template_dir.is_dir():
            logger.warning(f"Template directory not found: {template_dir}")
            return [StageResult.warning(STAGE, "overlay", f"missing template directory {template_dir}")]

        results = []
        copied = 0
        for source in sorted(template_dir.rglob("*")):
            if source.is_dir():
                continue
            relative = source.relative_to(template_dir)
            if any(fnmatch.fnmatch(source.name, pattern) for pattern in exclude):
                logger.debug(f"Skipping excluded template file {relative}")
                continue

            destination = project_path / relative
            try:
                destination.parent.mkdir(parents=True, exist_ok=True)
                shutil.copy2(source, destination)
                copied += 1
                logger.debug(f"Copied {relative}")
            except OSError as e:
                logger.warning(f"Failed to copy {relative}: {e}")
                results.append(StageResult.warning(STAGE, f"copy {relative}", str(e)))

        results.insert(0, StageResult.success(STAGE, "overlay", f"{copied} template files"))
        return results

    def create_env_file(self, template_dir: Path, project_path: Path) -> Optional[StageResult]:
        """Copy the template's .env.example to the project's .env."""
        env_example = template_dir / ENV_EXAMPLE
        if not env_example.exists():
            return None
        try:
            shutil.copy2(env_example, project_path / ".env")
        except OSError as e:
            logger.warning(f"Failed to create .env: {e}")
            return StageResult.warning(STAGE, ".env", str(e))
        logger.info("✅ Created .env file from .env.example template")
        return StageResult.success(STAGE, ".env", "from .env.example")

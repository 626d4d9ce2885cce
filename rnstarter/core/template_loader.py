"""Platform profile loading from the packaged templates directory."""
from pathlib import Path
from typing import Dict, List, Optional

import yaml

from rnstarter.models.platform import Platform, PlatformProfile


class PlatformProfileLoader:
    """Loads platform profiles and resolves their template trees."""

    MANIFEST_NAME = "platforms.yml"

    def __init__(self, templates_dir: Optional[Path] = None):
        """Initialize profile loader.

        Args:
            templates_dir: Path to templates directory. Defaults to rnstarter/templates/
        """
        if templates_dir is None:
            # Loader is in rnstarter/core/, templates are in rnstarter/templates/
            templates_dir = Path(__file__).parent.parent / "templates"
        self.templates_dir = Path(templates_dir)
        self._manifest: Optional[Dict[str, dict]] = None

    def _load_manifest(self) -> Dict[str, dict]:
        if self._manifest is None:
            manifest_path = self.templates_dir / self.MANIFEST_NAME
            if not manifest_path.exists():
                raise FileNotFoundError(
                    f"Platform manifest not found at {manifest_path}"
                )
            with open(manifest_path) as f:
                self._manifest = yaml.safe_load(f) or {}
        return self._manifest

    def list_platforms(self) -> List[Platform]:
        """List platforms defined in the manifest."""
        return [Platform(key) for key in self._load_manifest()]

    def load_profile(self, platform: Platform) -> PlatformProfile:
        """Load the profile for a platform.

        Args:
            platform: Platform to load

        Returns:
            PlatformProfile with template_dir resolved against templates_dir

        Raises:
            FileNotFoundError: If the manifest is missing
            ValueError: If the platform has no entry or the entry is malformed
        """
        platform = Platform(platform)
        data = self._load_manifest().get(platform.value)
        if not data:
            raise ValueError(f"No profile defined for platform '{platform.value}'")

        generator = data.get('generator')
        if not generator or not isinstance(generator, list):
            raise ValueError(f"Profile '{platform.value}' must define a generator command list")

        return PlatformProfile(
            platform=platform,
            description=data.get('description', platform.label),
            generator=[str(part) for part in generator],
            package_flag=data.get('package_flag') or "",
            remove=list(data.get('remove') or []),
            template_dir=self.templates_dir / data.get('template_dir', platform.value),
            exclude=list(data.get('exclude') or []),
            reset_git_history=bool(data.get('reset_git_history', False)),
            next_steps=list(data.get('next_steps') or []),
        )

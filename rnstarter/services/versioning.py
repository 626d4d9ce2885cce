"""Semantic version bumping for the workspace's JS packages."""
import json
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from rnstarter.core.config import StarterConfig, get_config
from rnstarter.core.logger import get_logger

logger = get_logger(__name__)

VALID_BUMPS = ("patch", "minor", "major")


@dataclass
class PackageInfo:
    """Name and version read from a package.json."""

    directory: str
    name: str
    version: str
    path: Path


def bump_version(version: str, bump_type: str) -> str:
    """Increment one component of a MAJOR.MINOR.PATCH version.

    Lower components are reset to zero.

    Raises:
        ValueError: If bump_type is unknown or version is not MAJOR.MINOR.PATCH
    """
    if bump_type not in VALID_BUMPS:
        raise ValueError(f"Invalid bump type: {bump_type}")

    parts = version.split(".")
    if len(parts) != 3 or not all(part.isdigit() for part in parts):
        raise ValueError(f"Invalid version '{version}': expected MAJOR.MINOR.PATCH")
    major, minor, patch = (int(part) for part in parts)

    if bump_type == "major":
        return f"{major + 1}.0.0"
    if bump_type == "minor":
        return f"{major}.{minor + 1}.0"
    return f"{major}.{minor}.{patch + 1}"


class PackageVersionManager:
    """Reads and rewrites package.json files under a packages directory."""

    def __init__(self, packages_dir: Path, config: Optional[StarterConfig] = None):
        self.packages_dir = Path(packages_dir)
        self.config = config or get_config()

    def list_packages(self) -> List[str]:
        """Directory names that contain a package.json."""
        if not self.packages_dir.is_dir():
            logger.warning(f"Packages directory not found: {self.packages_dir}")
            return []
        return sorted(
            entry.name
            for entry in self.packages_dir.iterdir()
            if entry.is_dir() and (entry / "package.json").exists()
        )

    def get_package_info(self, directory: str) -> PackageInfo:
        path = self.packages_dir / directory / "package.json"
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        return PackageInfo(
            directory=directory,
            name=data.get("name", directory),
            version=data.get("version", "0.0.0"),
            path=path,
        )

    def update_version(self, directory: str, new_version: str) -> None:
        path = self.packages_dir / directory / "package.json"
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        data["version"] = new_version
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
            f.write("\n")

    def has_uncommitted_changes(self, directory: str) -> bool:
        """True when git reports changes under the package; False if git fails."""
        try:
            result = subprocess.run(
                [self.config.git_command, "diff", "--name-only", str(self.packages_dir / directory)],
                capture_output=True,
                text=True,
                check=True,
            )
        except (subprocess.CalledProcessError, FileNotFoundError):
            return False
        return bool(result.stdout.strip())

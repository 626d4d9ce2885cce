"""Apply per-platform config edits to a materialized project.

Every target is independent: a failure in one is logged as a warning naming
the target and never stops the remaining targets or later pipeline stages.
"""
from pathlib import Path
from typing import Callable, List, Tuple

from rnstarter.core.logger import get_logger
from rnstarter.core.results import StageResult
from rnstarter.models.app import AppIdentity, DeepLinkConfig
from rnstarter.models.platform import Platform, PlatformProfile
from rnstarter.patching import app_json, gradle, manifest, package_json, plist

logger = get_logger(__name__)


class NativeConfigPatcher:
    """Resolves native config paths inside a project and patches them."""

    def __init__(self, project_path: Path, identity: AppIdentity):
        self.project_path = Path(project_path)
        self.identity = identity

    @property
    def manifest_path(self) -> Path:
        return self.project_path / "android" / "app" / "src" / "main" / "AndroidManifest.xml"

    @property
    def build_gradle_path(self) -> Path:
        return self.project_path / "android" / "app" / "build.gradle"

    @property
    def ios_app_dir(self) -> Path:
        return self.project_path / "ios" / self.identity.name

    @property
    def plist_path(self) -> Path:
        return self.ios_app_dir / "Info.plist"

    @property
    def entitlements_path(self) -> Path:
        return self.ios_app_dir / f"{self.identity.name}.entitlements"

    @property
    def app_json_path(self) -> Path:
        return self.project_path / "app.json"

    @property
    def package_json_path(self) -> Path:
        return self.project_path / "package.json"

    def _run(self, steps: List[Tuple[str, str, Callable[[], StageResult]]]) -> List[StageResult]:
        results = []
        for stage, target, step in steps:
            try:
                results.append(step())
            except Exception as e:
                logger.warning(f"Failed to configure {target}: {e}")
                results.append(StageResult.warning(stage, target, str(e)))
        return results

    def configure_project(self, profile: PlatformProfile) -> List[StageResult]:
        """Project settings that do not depend on deep linking."""
        is_expo = profile.platform is Platform.EXPO
        steps = [
            (package_json.STAGE, package_json.TARGET, lambda: package_json.merge_scripts(
                self.package_json_path,
                profile.template_dir / package_json.SCRIPTS_TEMPLATE,
                self.identity.name,
                include_expo=is_expo,
            )),
        ]

        if is_expo:
            if self.identity.package_id:
                steps.append((app_json.CONFIGURE_STAGE, f"{app_json.TARGET} package", lambda: app_json.apply_expo_package_name(
                    self.app_json_path, self.identity.package_id
                )))
        else:
            steps.append((gradle.STAGE, gradle.TARGET, lambda: gradle.append_fonts_gradle(self.build_gradle_path)))

        return self._run(steps)

    def apply_deep_links(self, profile: PlatformProfile, deep_link: DeepLinkConfig) -> List[StageResult]:
        """Write deep-link configuration; no-op when no scheme was accepted."""
        if not deep_link.is_configured:
            return []

        logger.info("⚙️  Configuring deep linking in native files...")
        if profile.platform is Platform.EXPO:
            steps = [
                (app_json.STAGE, app_json.TARGET, lambda: app_json.patch_expo_deep_links(self.app_json_path, deep_link)),
            ]
        else:
            steps = [
                (manifest.STAGE, manifest.TARGET, lambda: manifest.patch_android_manifest(self.manifest_path, deep_link)),
                (plist.STAGE, plist.TARGET, lambda: plist.patch_info_plist(
                    self.plist_path, deep_link, self.identity.url_name
                )),
            ]
            if deep_link.universal_domain:
                steps.append((plist.STAGE, self.entitlements_path.name, self._write_entitlements(deep_link)))

        return self._run(steps)

    def _write_entitlements(self, deep_link: DeepLinkConfig) -> Callable[[], StageResult]:
        def step() -> StageResult:
            if not self.ios_app_dir.is_dir():
                return StageResult.skipped(plist.STAGE, self.entitlements_path.name, "iOS project directory not found")
            return plist.write_entitlements(self.entitlements_path, deep_link)
        return step

"""End-to-end project bootstrap pipeline.

Stages run strictly in order, each completing before the next starts:
validate -> prompt -> materialize -> patch -> finalize. Fatal problems raise
StarterError; best-effort problems are collected as StageResult warnings.
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional

from pydantic import ValidationError

from rnstarter.core.config import StarterConfig, get_config
from rnstarter.core.errors import (
    InvalidAppNameError,
    InvalidPackageNameError,
    PackageNameCancelled,
    PromptAborted,
)
from rnstarter.core.logger import get_logger
from rnstarter.core.prompt_flows import (
    choose_platform,
    collect_deep_link_config,
    confirm_pod_install,
    resolve_package_name,
)
from rnstarter.core.prompts import InteractiveSession
from rnstarter.core.results import RunSummary, StageResult
from rnstarter.core.template_loader import PlatformProfileLoader
from rnstarter.core.validator import validate_app_name, validate_package_name
from rnstarter.models.app import AppIdentity, DeepLinkConfig
from rnstarter.models.platform import Platform, PlatformProfile
from rnstarter.patching import NativeConfigPatcher
from rnstarter.scaffold import ProjectMaterializer
from rnstarter.services.git_manager import GitManager, build_commit_message
from rnstarter.services.post_install import PostInstallManager

logger = get_logger(__name__)


@dataclass
class PipelineResult:
    """What a completed run produced."""

    identity: AppIdentity
    platform: Platform
    profile: PlatformProfile
    project_path: Path
    deep_link: DeepLinkConfig = field(default_factory=DeepLinkConfig)
    commit_message: str = ""
    summary: RunSummary = field(default_factory=RunSummary)


class StarterPipeline:
    """Runs one bootstrap for one app."""

    def __init__(
        self,
        config: Optional[StarterConfig] = None,
        session_factory: Optional[Callable[[], InteractiveSession]] = None,
        profile_loader: Optional[PlatformProfileLoader] = None,
        materializer: Optional[ProjectMaterializer] = None,
        git_manager: Optional[GitManager] = None,
        post_install: Optional[PostInstallManager] = None,
    ):
        self.config = config or get_config()
        self.session_factory = session_factory or InteractiveSession
        self.profile_loader = profile_loader or PlatformProfileLoader(self.config.templates_dir)
        self.materializer = materializer or ProjectMaterializer(self.config)
        self.git_manager = git_manager or GitManager(self.config)
        self.post_install = post_install or PostInstallManager(self.config)

    def build_identity(self, app_name: str, package_id: Optional[str] = None) -> AppIdentity:
        """Validate command-line identifiers.

        Raises:
            InvalidAppNameError: app name fails the naming rules
            InvalidPackageNameError: package id is not reverse-domain notation
        """
        if not validate_app_name(app_name):
            raise InvalidAppNameError(app_name)
        if package_id is not None and not validate_package_name(package_id):
            raise InvalidPackageNameError(package_id)
        try:
            return AppIdentity(name=app_name, package_id=package_id)
        except ValidationError as e:
            raise InvalidAppNameError(app_name) from e

    def resolve_identity(self, identity: AppIdentity) -> AppIdentity:
        """Run the two-segment warning flow when needed."""
        if not identity.has_two_segment_package:
            return identity

        with self.session_factory() as session:
            package_id = resolve_package_name(session, identity.package_id)
        if package_id is None:
            raise PackageNameCancelled()
        if package_id == identity.package_id:
            return identity
        return identity.with_package(package_id)

    def select_platform(self, platform: Optional[Platform]) -> Platform:
        if platform is not None:
            logger.info(f"✅ Using {platform.label} (--{platform.value} flag)")
            return platform
        with self.session_factory() as session:
            return choose_platform(session)

    def run(
        self,
        app_name: str,
        package_id: Optional[str] = None,
        platform: Optional[Platform] = None,
        output_dir: Optional[Path] = None,
    ) -> PipelineResult:
        """Bootstrap a project.

        Args:
            app_name: Positional app name
            package_id: Optional reverse-domain package id
            platform: Platform chosen by flag, or None to ask interactively
            output_dir: Parent directory for the project (defaults to cwd)

        Returns:
            PipelineResult with the structured run summary

        Raises:
            StarterError: On any fatal validation, prompt or generator failure
        """
        identity = self.build_identity(app_name, package_id)
        platform = self.select_platform(platform)
        identity = self.resolve_identity(identity)
        profile = self.profile_loader.load_profile(platform)

        summary = RunSummary()
        project_path, materialize_results = self.materializer.materialize(
            identity, profile, output_dir=output_dir
        )
        summary.extend(materialize_results)

        patcher = NativeConfigPatcher(project_path, identity)
        summary.extend(patcher.configure_project(profile))

        logger.info("🔗 Setting up deep linking configuration...")
        with self.session_factory() as session:
            deep_link = collect_deep_link_config(session, identity.name)
        summary.extend(patcher.apply_deep_links(profile, deep_link))
        if deep_link.is_configured:
            self._report_deep_link(deep_link)

        commit_message = build_commit_message(identity, platform, deep_link)
        summary.add(self.git_manager.finalize(
            project_path, commit_message, reset_history=profile.reset_git_history
        ))

        if platform is Platform.CLI and self.config.is_macos:
            summary.add(self._offer_pod_install(project_path))

        return PipelineResult(
            identity=identity,
            platform=platform,
            profile=profile,
            project_path=project_path,
            deep_link=deep_link,
            commit_message=commit_message,
            summary=summary,
        )

    def _offer_pod_install(self, project_path: Path) -> StageResult:
        try:
            with self.session_factory() as session:
                install = confirm_pod_install(session)
        except PromptAborted:
            return StageResult.skipped("post-install", "pod-install", "no answer")
        if not install:
            return StageResult.skipped("post-install", "pod-install", "declined")
        return self.post_install.install_pods(project_path)

    def _report_deep_link(self, deep_link: DeepLinkConfig) -> None:
        logger.info("✅ Deep linking configuration completed!")
        logger.info(f"   📱 App scheme: {deep_link.scheme}://")
        if deep_link.universal_domain:
            logger.info(f"   🌐 Universal links: https://{deep_link.universal_domain}")
            logger.info("   📝 Remember to upload apple-app-site-association file to your domain")

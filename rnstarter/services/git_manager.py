"""Git repository finalization for generated projects."""
import subprocess
from pathlib import Path
from typing import List, Optional, Tuple

from jinja2 import BaseLoader, Environment

from rnstarter.core.config import StarterConfig, get_config
from rnstarter.core.logger import get_logger
from rnstarter.core.results import StageResult
from rnstarter.models.app import AppIdentity, DeepLinkConfig
from rnstarter.models.platform import Platform

logger = get_logger(__name__)

STAGE = "finalize"

COMMIT_MESSAGE_TEMPLATE = """🎆 Initial commit: {{ app_name }}

🚀 Generated and configured with rn-starter
✨ Platform: {{ platform }}
✨ Includes: Navigation, Redux, UI components, build scripts, and more!
{% if details %}

⚙️ Configuration:
{% for line in details %}
{{ line }}
{% endfor %}
{% endif %}

💡 Use 'rn-starter --help' to bootstrap your next app"""

_jinja_env = Environment(
    loader=BaseLoader(),
    autoescape=False,
    trim_blocks=True,
    lstrip_blocks=True,
)


def build_commit_message(
    identity: AppIdentity,
    platform: Platform,
    deep_link: Optional[DeepLinkConfig] = None,
) -> str:
    """Render the deterministic initial commit message."""
    details = []
    if identity.package_id:
        details.append(f"📦 Package: {identity.package_id}")
    if deep_link and deep_link.scheme:
        details.append(f"🔗 App Scheme: {deep_link.scheme}://")
    if deep_link and deep_link.universal_domain:
        details.append(f"🌐 Universal Links: https://{deep_link.universal_domain}")

    template = _jinja_env.from_string(COMMIT_MESSAGE_TEMPLATE)
    return template.render(app_name=identity.name, platform=platform.label, details=details)


class GitManager:
    """Creates the single initial commit of a generated project."""

    def __init__(self, config: Optional[StarterConfig] = None):
        self.config = config or get_config()

    def _run_git_command(self, args: List[str], cwd: Path) -> Tuple[bool, str, str]:
        """Run a git command and return success, stdout, stderr."""
        try:
            result = subprocess.run(
                [self.config.git_command] + args,
                cwd=cwd,
                capture_output=True,
                text=True,
                check=True
            )
            return True, result.stdout.strip(), result.stderr.strip()
        except subprocess.CalledProcessError as e:
            return False, e.stdout.strip() if e.stdout else "", e.stderr.strip() if e.stderr else str(e)
        except FileNotFoundError:
            return False, "", "Git not found. Please install git first."

    def repo_exists(self, repo_path: Path) -> bool:
        return (repo_path / ".git").exists()

    def finalize(self, repo_path: Path, message: str, reset_history: bool = False) -> StageResult:
        """Initialize if needed, optionally clear history, stage all and commit once.

        Clearing history deletes the branch ref and empties the index. The
        working tree is left alone, so patched and pruned files stay as they are.

        Args:
            repo_path: Project root
            message: Commit message
            reset_history: Drop any commit seeded by the generator before committing

        Returns:
            StageResult; failures are reported as warnings and never raised
        """
        logger.info("📋 Setting up git repository...")

        steps = []
        if not self.repo_exists(repo_path):
            steps.append(("init", ["init"]))
        elif reset_history:
            steps.append(("update-ref", ["update-ref", "-d", "HEAD"]))
            steps.append(("read-tree", ["read-tree", "--empty"]))
        steps.append(("add", ["add", "."]))
        steps.append(("commit", ["commit", "-m", message]))

        for name, args in steps:
            success, _stdout, stderr = self._run_git_command(args, cwd=repo_path)
            if not success:
                logger.warning(f"⚠️  Git configuration failed (this is optional): git {name}: {stderr}")
                return StageResult.warning(STAGE, "git", f"git {name} failed: {stderr}")

        logger.info("✅ Git repository configured with custom initial commit")
        return StageResult.success(STAGE, "git", "initial commit created")

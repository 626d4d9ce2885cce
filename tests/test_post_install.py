"""Tests for post-generation tooling."""
import subprocess
from unittest.mock import Mock, patch

from rnstarter.core.results import Outcome
from rnstarter.services.post_install import PostInstallManager


class TestInstallPods:
    """CocoaPods installation."""

    def test_mock_mode_skips(self, tmp_path, mock_config):
        result = PostInstallManager(mock_config).install_pods(tmp_path)
        assert result.outcome == Outcome.SKIPPED

    @patch('subprocess.run')
    def test_runs_pod_install_in_project(self, mock_run, tmp_path, linux_config):
        mock_run.return_value = Mock(returncode=0)

        result = PostInstallManager(linux_config).install_pods(tmp_path)

        assert result.outcome == Outcome.SUCCESS
        mock_run.assert_called_once_with(["npx", "pod-install"], cwd=tmp_path, check=True)

    @patch('subprocess.run')
    def test_failure_is_warning(self, mock_run, tmp_path, linux_config):
        mock_run.side_effect = subprocess.CalledProcessError(1, ["npx", "pod-install"])

        result = PostInstallManager(linux_config).install_pods(tmp_path)

        assert result.outcome == Outcome.WARNING

"""Tests for project materialization."""
import subprocess
from unittest.mock import Mock, patch

import pytest

from rnstarter.core.errors import GeneratorError
from rnstarter.core.results import Outcome
from rnstarter.core.template_loader import PlatformProfileLoader
from rnstarter.models.app import AppIdentity
from rnstarter.models.platform import Platform, PlatformProfile
from rnstarter.scaffold import ProjectMaterializer


@pytest.fixture
def template_tree(tmp_path):
    """A small override tree."""
    root = tmp_path / "templates" / "cli"
    (root / "src" / "screens").mkdir(parents=True)
    (root / "App.tsx").write_text("export default function App() {}\n")
    (root / "src" / "screens" / "Home.tsx").write_text("home\n")
    (root / ".env.example").write_text("API_URL=https://api.example.com\n")
    (root / "local.env").write_text("SECRET=1\n")
    (root / "package.json.template").write_text('{"scripts": {}}')
    return root


@pytest.fixture
def profile(template_tree):
    return PlatformProfile(
        platform=Platform.CLI,
        description="test",
        generator=["@react-native-community/cli", "init"],
        package_flag="--package-name",
        remove=["App.tsx", "src", "missing-dir"],
        template_dir=template_tree,
        exclude=["*.env", "package.json.template"],
    )


class TestRunGenerator:
    """Generator invocation."""

    @patch('subprocess.run')
    def test_generator_command_includes_package(self, mock_run, tmp_path, linux_config, profile):
        mock_run.return_value = Mock(returncode=0)
        materializer = ProjectMaterializer(linux_config)

        materializer.run_generator(AppIdentity(name="MyApp", package_id="com.company.app"), profile, tmp_path)

        mock_run.assert_called_once_with(
            ["npx", "@react-native-community/cli", "init", "MyApp", "--package-name", "com.company.app"],
            cwd=tmp_path,
            check=True,
        )

    @patch('subprocess.run')
    def test_generator_without_package(self, mock_run, tmp_path, linux_config, profile):
        mock_run.return_value = Mock(returncode=0)
        ProjectMaterializer(linux_config).run_generator(AppIdentity(name="MyApp"), profile, tmp_path)
        assert mock_run.call_args[0][0] == ["npx", "@react-native-community/cli", "init", "MyApp"]

    def test_expo_generator_never_gets_package(self):
        profile = PlatformProfileLoader().load_profile(Platform.EXPO)
        command = profile.generator_command("npx", "MyApp", "com.company.app")
        assert command == ["npx", "create-expo-app", "MyApp"]

    @patch('subprocess.run')
    def test_nonzero_exit_is_fatal(self, mock_run, tmp_path, linux_config, profile):
        mock_run.side_effect = subprocess.CalledProcessError(1, "npx")

        with pytest.raises(GeneratorError) as exc_info:
            ProjectMaterializer(linux_config).run_generator(AppIdentity(name="MyApp"), profile, tmp_path)

        assert "exit code 1" in str(exc_info.value)
        assert exc_info.value.command[0] == "npx"

    @patch('subprocess.run')
    def test_missing_executable_is_fatal(self, mock_run, tmp_path, linux_config, profile):
        mock_run.side_effect = FileNotFoundError("npx")

        with pytest.raises(GeneratorError) as exc_info:
            ProjectMaterializer(linux_config).run_generator(AppIdentity(name="MyApp"), profile, tmp_path)

        assert "npx not found" in str(exc_info.value)

    @patch('subprocess.run')
    def test_mock_mode_only_creates_directory(self, mock_run, tmp_path, mock_config, profile):
        ProjectMaterializer(mock_config).run_generator(AppIdentity(name="MyApp"), profile, tmp_path)

        mock_run.assert_not_called()
        assert (tmp_path / "MyApp").is_dir()


class TestMaterialize:
    """Remove defaults, overlay templates, create .env."""

    def _generated(self, tmp_path):
        project = tmp_path / "out" / "MyApp"
        (project / "src").mkdir(parents=True)
        (project / "src" / "old.ts").write_text("old\n")
        (project / "App.tsx").write_text("generator default\n")
        (project / "index.js").write_text("generator entry\n")
        return project

    def test_full_materialization(self, tmp_path, mock_config, profile):
        project = self._generated(tmp_path)

        path, results = ProjectMaterializer(mock_config).materialize(
            AppIdentity(name="MyApp"), profile, output_dir=tmp_path / "out"
        )

        assert path == project
        assert (project / "App.tsx").read_text() == "export default function App() {}\n"
        assert (project / "src" / "screens" / "Home.tsx").exists()
        assert not (project / "src" / "old.ts").exists()
        assert (project / "index.js").read_text() == "generator entry\n"
        assert (project / ".env").read_text() == "API_URL=https://api.example.com\n"
        assert (project / ".env.example").exists()

        targets = [r.target for r in results]
        assert "remove App.tsx" in targets
        assert "remove src" in targets
        assert "remove missing-dir" not in targets

    def test_excluded_files_are_not_copied(self, tmp_path, mock_config, profile):
        self._generated(tmp_path)

        path, _ = ProjectMaterializer(mock_config).materialize(
            AppIdentity(name="MyApp"), profile, output_dir=tmp_path / "out"
        )

        assert not (path / "local.env").exists()
        assert not (path / "package.json.template").exists()

    def test_overlay_reports_file_count(self, tmp_path, mock_config, template_tree):
        project = tmp_path / "MyApp"
        project.mkdir()

        results = ProjectMaterializer(mock_config).overlay_templates(
            template_tree, project, ["*.env", "package.json.template"]
        )

        assert results[0].outcome == Outcome.SUCCESS
        assert results[0].detail == "3 template files"

    def test_missing_template_dir_is_warning(self, tmp_path, mock_config):
        results = ProjectMaterializer(mock_config).overlay_templates(tmp_path / "nope", tmp_path)
        assert results[0].outcome == Outcome.WARNING

    def test_packaged_templates_overlay(self, tmp_path, mock_config):
        profile = PlatformProfileLoader().load_profile(Platform.EXPO)

        path, results = ProjectMaterializer(mock_config).materialize(
            AppIdentity(name="MyApp"), profile, output_dir=tmp_path
        )

        assert (path / "App.tsx").exists()
        assert (path / "tsconfig.json").exists()
        assert (path / ".env").exists()
        assert not (path / "package.json.template").exists()
        assert not [r for r in results if r.outcome == Outcome.WARNING]

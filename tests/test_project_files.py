"""Tests for package.json script merging and the build.gradle font hook."""
import json

from rnstarter.core.results import Outcome
from rnstarter.core.template_loader import PlatformProfileLoader
from rnstarter.models.platform import Platform
from rnstarter.patching.gradle import FONTS_GRADLE_LINE, append_fonts_gradle
from rnstarter.patching.package_json import SCRIPTS_TEMPLATE, merge_scripts, render_scripts_template


def _template(tmp_path, scripts, expo=None):
    data = {"scripts": scripts}
    if expo is not None:
        data["expo"] = expo
    path = tmp_path / SCRIPTS_TEMPLATE
    path.write_text(json.dumps(data))
    return path


class TestRenderScriptsTemplate:
    def test_app_name_placeholder(self, tmp_path):
        path = _template(tmp_path, {"build:ios": "react-native run-ios --scheme {{APP_NAME}}"})
        assert render_scripts_template(path, "MyApp")["scripts"]["build:ios"].endswith("--scheme MyApp")

    def test_packaged_cli_template_renders(self):
        profile = PlatformProfileLoader().load_profile(Platform.CLI)
        rendered = render_scripts_template(profile.template_dir / SCRIPTS_TEMPLATE, "MyApp")
        assert "--scheme MyApp" in rendered["scripts"]["build:ios"]

    def test_packaged_expo_template_renders(self):
        profile = PlatformProfileLoader().load_profile(Platform.EXPO)
        rendered = render_scripts_template(profile.template_dir / SCRIPTS_TEMPLATE, "MyApp")
        assert rendered["expo"]["name"] == "MyApp"


class TestMergeScripts:
    """Template scripts overlay the generator's scripts."""

    def test_template_entries_win(self, tmp_path, cli_project):
        template = _template(tmp_path, {"start": "react-native start --reset-cache", "lint": "eslint ."})

        result = merge_scripts(cli_project / "package.json", template, "MyApp")

        assert result.outcome == Outcome.SUCCESS
        data = json.loads((cli_project / "package.json").read_text())
        assert data["scripts"] == {
            "start": "react-native start --reset-cache",
            "test": "jest",
            "lint": "eslint .",
        }
        assert data["name"] == "MyApp"

    def test_expo_section_merged_only_when_requested(self, tmp_path, expo_project):
        template = _template(tmp_path, {"ios": "expo start --ios"}, expo={"name": "{{APP_NAME}}"})

        merge_scripts(expo_project / "package.json", template, "MyApp")
        assert "expo" not in json.loads((expo_project / "package.json").read_text())

        merge_scripts(expo_project / "package.json", template, "MyApp", include_expo=True)
        assert json.loads((expo_project / "package.json").read_text())["expo"] == {"name": "MyApp"}

    def test_unchanged_scripts_skip_write(self, tmp_path, cli_project):
        template = _template(tmp_path, {"start": "react-native start"})
        result = merge_scripts(cli_project / "package.json", template, "MyApp")
        assert result.outcome == Outcome.SKIPPED

    def test_missing_package_json_is_skipped(self, tmp_path):
        template = _template(tmp_path, {"start": "x"})
        result = merge_scripts(tmp_path / "nope" / "package.json", template, "MyApp")
        assert result.outcome == Outcome.SKIPPED


class TestFontsGradle:
    def test_appends_line_once(self, cli_project):
        path = cli_project / "android" / "app" / "build.gradle"

        first = append_fonts_gradle(path)
        second = append_fonts_gradle(path)

        assert first.outcome == Outcome.SUCCESS
        assert second.outcome == Outcome.SKIPPED
        content = path.read_text()
        assert content.count(FONTS_GRADLE_LINE) == 1
        assert content == f"android {{\n}}\n\n{FONTS_GRADLE_LINE}\n"

    def test_missing_file_is_skipped(self, tmp_path):
        assert append_fonts_gradle(tmp_path / "build.gradle").outcome == Outcome.SKIPPED

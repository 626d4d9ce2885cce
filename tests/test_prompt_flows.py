"""Tests for compound prompt flows."""
import pytest

from rnstarter.core.errors import PromptAborted
from rnstarter.core.prompt_flows import (
    choose_platform,
    collect_deep_link_config,
    confirm_pod_install,
    resolve_package_name,
)
from rnstarter.models.platform import Platform


class TestChoosePlatform:
    """Numbered platform selection."""

    def test_choose_cli(self, scripted_session):
        assert choose_platform(scripted_session("1")) is Platform.CLI

    def test_choose_expo(self, scripted_session):
        assert choose_platform(scripted_session("2")) is Platform.EXPO

    def test_retries_until_valid(self, scripted_session, quiet_console):
        assert choose_platform(scripted_session("3", "", "expo", "2")) is Platform.EXPO
        assert quiet_console.file.getvalue().count("Invalid choice") == 3


class TestResolvePackageName:
    """Two-segment package warning flow."""

    def test_decline_keeps_original(self, scripted_session, quiet_console):
        assert resolve_package_name(scripted_session("n"), "com.app") == "com.app"
        assert "at your own risk" in quiet_console.file.getvalue()

    def test_empty_answer_keeps_original(self, scripted_session):
        assert resolve_package_name(scripted_session(""), "com.app") == "com.app"

    def test_accept_replacement(self, scripted_session):
        assert resolve_package_name(scripted_session("y", "com.company.app"), "com.app") == "com.company.app"

    def test_suggestion_is_shown(self, scripted_session, quiet_console):
        resolve_package_name(scripted_session("y", "com.company.app"), "com.app")
        assert "suggestion: com.company.app" in quiet_console.file.getvalue()

    def test_invalid_replacement_reprompts(self, scripted_session, quiet_console):
        session = scripted_session("y", "Com.Company", "com.acme.app")
        assert resolve_package_name(session, "com.app") == "com.acme.app"
        assert "Invalid package name format" in quiet_console.file.getvalue()

    def test_empty_replacement_cancels(self, scripted_session):
        assert resolve_package_name(scripted_session("y", ""), "com.app") is None

    def test_two_segment_replacement_confirmed(self, scripted_session):
        session = scripted_session("y", "org.app", "y")
        assert resolve_package_name(session, "com.app") == "org.app"

    def test_two_segment_replacement_declined_asks_again(self, scripted_session):
        session = scripted_session("y", "org.app", "n", "org.acme.app")
        assert resolve_package_name(session, "com.app") == "org.acme.app"


class TestCollectDeepLinkConfig:
    """Deep-link questions."""

    def test_decline(self, scripted_session):
        config = collect_deep_link_config(scripted_session("n"), "MyApp")
        assert config.is_configured is False
        assert config.universal_domain is None

    def test_scheme_only(self, scripted_session):
        config = collect_deep_link_config(scripted_session("y", "myapp", "n"), "MyApp")
        assert config.scheme == "myapp"
        assert config.universal_domain is None

    def test_scheme_and_domain(self, scripted_session):
        config = collect_deep_link_config(scripted_session("y", "myapp", "y", "myapp.com"), "MyApp")
        assert config.scheme == "myapp"
        assert config.universal_domain == "myapp.com"
        assert config.associated_domain == "applinks:myapp.com"

    def test_invalid_scheme_reprompts(self, scripted_session, quiet_console):
        config = collect_deep_link_config(scripted_session("y", "My App", "myapp", "n"), "MyApp")
        assert config.scheme == "myapp"
        assert "Invalid app scheme" in quiet_console.file.getvalue()

    def test_empty_scheme_skips_everything(self, scripted_session):
        """No domain question is asked once the scheme is skipped."""
        config = collect_deep_link_config(scripted_session("y", ""), "MyApp")
        assert config.is_configured is False

    def test_invalid_domain_then_skip(self, scripted_session, quiet_console):
        config = collect_deep_link_config(scripted_session("y", "myapp", "y", "localhost", ""), "MyApp")
        assert config.scheme == "myapp"
        assert config.universal_domain is None
        assert "Invalid domain" in quiet_console.file.getvalue()

    def test_example_uses_lowercased_app_name(self, scripted_session, quiet_console):
        collect_deep_link_config(scripted_session("y", "myapp", "n"), "CoolApp")
        assert '"coolapp"' in quiet_console.file.getvalue()

    def test_end_of_input_aborts(self, scripted_session):
        with pytest.raises(PromptAborted):
            collect_deep_link_config(scripted_session("y"), "MyApp")


class TestConfirmPodInstall:
    def test_yes(self, scripted_session):
        assert confirm_pod_install(scripted_session("yes")) is True

    def test_default_no(self, scripted_session):
        assert confirm_pod_install(scripted_session("")) is False

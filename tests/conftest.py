"""Shared test fixtures for rn-starter tests."""
import io
import json

import pytest
from rich.console import Console

from rnstarter.core import logger as starter_logger
from rnstarter.core.config import StarterConfig, set_config
from rnstarter.core.prompts import InteractiveSession

ANDROID_MANIFEST = """<manifest xmlns:android="http://schemas.android.com/apk/res/android">

    <uses-permission android:name="android.permission.INTERNET" />

    <application
      android:name=".MainApplication"
      android:label="@string/app_name"
      android:theme="@style/AppTheme">
      <activity
        android:name=".MainActivity"
        android:label="@string/app_name"
        android:configChanges="keyboard|keyboardHidden|orientation|screenLayout|screenSize|smallestScreenSize|uiMode"
        android:launchMode="singleTask"
        android:exported="true">
        <intent-filter>
            <action android:name="android.intent.action.MAIN" />
            <category android:name="android.intent.category.LAUNCHER" />
        </intent-filter>
      </activity>
    </application>
</manifest>
"""

INFO_PLIST = """<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE plist PUBLIC "-//Apple//DTD PLIST 1.0//EN" "http://www.apple.com/DTDs/PropertyList-1.0.dtd">
<plist version="1.0">
<dict>
\t<key>CFBundleDisplayName</key>
\t<string>MyApp</string>
\t<key>NSAppTransportSecurity</key>
\t<dict>
\t\t<key>NSAllowsArbitraryLoads</key>
\t\t<false/>
\t</dict>
</dict>
</plist>
"""


@pytest.fixture(autouse=True)
def isolate_global_state(monkeypatch):
    """Keep tests away from ~/.rn-starter and from each other's config."""
    monkeypatch.setattr(starter_logger, "_file_logging_configured", True)
    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def quiet_console():
    """Console writing to an in-memory buffer."""
    return Console(file=io.StringIO(), width=200)


@pytest.fixture
def scripted_session(quiet_console):
    """Build sessions that read scripted answers, one line per answer."""
    def _make(*answers):
        return InteractiveSession(io.StringIO("".join(f"{a}\n" for a in answers)), console=quiet_console)
    return _make


@pytest.fixture
def linux_config():
    """Non-mock config on a non-macOS host."""
    return StarterConfig(host_platform="linux")


@pytest.fixture
def mock_config():
    """Mock-mode config on a non-macOS host."""
    return StarterConfig(mock=True, host_platform="linux")


@pytest.fixture
def cli_project(tmp_path):
    """A generated React Native CLI project with the native files the patcher edits."""
    project = tmp_path / "MyApp"
    main = project / "android" / "app" / "src" / "main"
    main.mkdir(parents=True)
    (main / "AndroidManifest.xml").write_text(ANDROID_MANIFEST)
    (project / "android" / "app" / "build.gradle").write_text("android {\n}\n")

    ios = project / "ios" / "MyApp"
    ios.mkdir(parents=True)
    (ios / "Info.plist").write_text(INFO_PLIST)

    (project / "package.json").write_text(json.dumps({
        "name": "MyApp",
        "version": "0.0.1",
        "scripts": {"start": "react-native start", "test": "jest"},
    }, indent=2))
    return project


@pytest.fixture
def expo_project(tmp_path):
    """A generated Expo project with app.json and package.json."""
    project = tmp_path / "MyApp"
    project.mkdir()
    (project / "app.json").write_text(json.dumps({
        "expo": {"name": "MyApp", "slug": "MyApp", "ios": {"supportsTablet": True}},
    }, indent=2))
    (project / "package.json").write_text(json.dumps({
        "name": "myapp",
        "main": "expo-router/entry",
        "scripts": {"start": "expo start"},
    }, indent=2))
    return project


@pytest.fixture
def manifest_text():
    """AndroidManifest.xml as emitted by the React Native CLI template."""
    return ANDROID_MANIFEST


@pytest.fixture
def plist_text():
    """Info.plist with a nested dict before the root closing sequence."""
    return INFO_PLIST

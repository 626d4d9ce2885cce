"""AndroidManifest.xml deep-link intent filters."""
from pathlib import Path

from rnstarter.core.logger import get_logger
from rnstarter.core.results import StageResult
from rnstarter.models.app import DeepLinkConfig
from rnstarter.patching.regions import find_element

logger = get_logger(__name__)

STAGE = "patch"
TARGET = "AndroidManifest.xml"
MAIN_ACTIVITY = ".MainActivity"

UNIVERSAL_LINK_FILTER = """
        <intent-filter android:autoVerify="true">
            <action android:name="android.intent.action.VIEW" />
            <category android:name="android.intent.category.DEFAULT" />
            <category android:name="android.intent.category.BROWSABLE" />
            <data android:scheme="https" android:host="{domain}" />
        </intent-filter>"""

SCHEME_FILTER = """
        <intent-filter>
            <action android:name="android.intent.action.VIEW" />
            <category android:name="android.intent.category.DEFAULT" />
            <category android:name="android.intent.category.BROWSABLE" />
            <data android:scheme="{scheme}" />
        </intent-filter>"""


def build_intent_filters(deep_link: DeepLinkConfig) -> str:
    """Universal-link filter (if a domain is set) followed by the scheme filter."""
    fragments = ""
    if deep_link.universal_domain:
        fragments += UNIVERSAL_LINK_FILTER.format(domain=deep_link.universal_domain)
    fragments += SCHEME_FILTER.format(scheme=deep_link.scheme)
    return fragments


def patch_android_manifest(manifest_path: Path, deep_link: DeepLinkConfig) -> StageResult:
    """Append deep-link intent filters inside the main activity.

    Returns a skipped result when the file is missing or the scheme is already
    declared in the activity, and a warning when no main activity is found.
    """
    if not manifest_path.exists():
        logger.warning(f"{TARGET} not found, skipping Android configuration")
        return StageResult.skipped(STAGE, TARGET, "file not found")

    content = manifest_path.read_text(encoding="utf-8")
    region = find_element(content, "activity", "android:name", MAIN_ACTIVITY)
    if region is None:
        logger.warning(f"Could not find MainActivity in {TARGET}")
        return StageResult.warning(STAGE, TARGET, "MainActivity not found")

    if f'android:scheme="{deep_link.scheme}"' in region.inner:
        logger.info("✔ Android deep linking already configured")
        return StageResult.skipped(STAGE, TARGET, "already configured")

    # Keep the whitespace that indents </activity> after the new filters
    body = region.inner.rstrip()
    trailing = region.inner[len(body):]
    new_inner = body + build_intent_filters(deep_link) + trailing

    manifest_path.write_text(region.replace_inner(content, new_inner), encoding="utf-8")
    logger.info(f"✅ Android deep linking configured in {TARGET}")
    return StageResult.success(STAGE, TARGET, f"scheme {deep_link.scheme}")

"""Info.plist URL types and the associated-domains entitlements file."""
from pathlib import Path

from rnstarter.core.logger import get_logger
from rnstarter.core.results import StageResult
from rnstarter.models.app import DeepLinkConfig
from rnstarter.patching.regions import last_insertion_point, splice

logger = get_logger(__name__)

STAGE = "patch"
TARGET = "Info.plist"
URL_TYPES_KEY = "CFBundleURLTypes"

URL_TYPES_BLOCK = """\t<key>CFBundleURLTypes</key>
\t<array>
\t\t<dict>
\t\t\t<key>CFBundleURLName</key>
\t\t\t<string>{url_name}</string>
\t\t\t<key>CFBundleURLSchemes</key>
\t\t\t<array>
\t\t\t\t<string>{scheme}</string>
\t\t\t</array>
\t\t</dict>
\t</array>
"""

ASSOCIATED_DOMAINS_BLOCK = """\t<key>com.apple.developer.associated-domains</key>
\t<array>
\t\t<string>{associated_domain}</string>
\t</array>
"""

ENTITLEMENTS_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE plist PUBLIC "-//Apple//DTD PLIST 1.0//EN" "http://www.apple.com/DTDs/PropertyList-1.0.dtd">
<plist version="1.0">
<dict>
\t<key>com.apple.developer.associated-domains</key>
\t<array>
\t\t<string>{associated_domain}</string>
\t</array>
</dict>
</plist>
"""


def insert_deep_link_blocks(content: str, deep_link: DeepLinkConfig, url_name: str):
    """Splice URL types (and associated domains) before the root </dict></plist>.

    Returns the new content, or None when no closing root sequence exists.
    Both blocks land at the same insertion point, associated domains first.
    """
    insertion_point = last_insertion_point(content)
    if insertion_point is None:
        return None

    fragment = ""
    if deep_link.universal_domain:
        fragment += ASSOCIATED_DOMAINS_BLOCK.format(associated_domain=deep_link.associated_domain)
    fragment += URL_TYPES_BLOCK.format(url_name=url_name, scheme=deep_link.scheme)
    return splice(content, insertion_point, fragment)


def patch_info_plist(plist_path: Path, deep_link: DeepLinkConfig, url_name: str) -> StageResult:
    """Register the custom URL scheme in Info.plist unless URL types already exist."""
    if not plist_path.exists():
        logger.warning(f"{TARGET} not found, skipping iOS configuration")
        return StageResult.skipped(STAGE, TARGET, "file not found")

    content = plist_path.read_text(encoding="utf-8")
    if URL_TYPES_KEY in content:
        logger.info("✔ iOS URL schemes already configured")
        return StageResult.skipped(STAGE, TARGET, "already configured")

    patched = insert_deep_link_blocks(content, deep_link, url_name)
    if patched is None:
        logger.warning(f"Could not find insertion point in {TARGET}")
        return StageResult.warning(STAGE, TARGET, "no closing </dict></plist> found")

    plist_path.write_text(patched, encoding="utf-8")
    logger.info(f"✅ iOS deep linking configured in {TARGET}")
    return StageResult.success(STAGE, TARGET, f"scheme {deep_link.scheme}")


def write_entitlements(entitlements_path: Path, deep_link: DeepLinkConfig) -> StageResult:
    """(Re)write the entitlements file holding only the associated domains.

    The file is dedicated to this declaration, so it is always overwritten.
    """
    target = entitlements_path.name
    if not deep_link.universal_domain:
        return StageResult.skipped(STAGE, target, "no universal link domain")

    entitlements_path.parent.mkdir(parents=True, exist_ok=True)
    entitlements_path.write_text(
        ENTITLEMENTS_TEMPLATE.format(associated_domain=deep_link.associated_domain),
        encoding="utf-8",
    )
    logger.info("✅ iOS entitlements file created for universal links")
    return StageResult.success(STAGE, target, deep_link.associated_domain)

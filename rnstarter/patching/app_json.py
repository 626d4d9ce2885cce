"""Expo app.json deep-link and package identifier configuration."""
import json
from pathlib import Path
from typing import Any, Dict, List

from rnstarter.core.logger import get_logger
from rnstarter.core.results import StageResult
from rnstarter.models.app import DeepLinkConfig

logger = get_logger(__name__)

STAGE = "patch"
CONFIGURE_STAGE = "configure"
TARGET = "app.json"


def _read(path: Path) -> Dict[str, Any]:
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def _write(path: Path, data: Dict[str, Any]) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
        f.write("\n")


def _platform_section(expo: Dict[str, Any], name: str) -> Dict[str, Any]:
    if not isinstance(expo.get(name), dict):
        expo[name] = {}
    return expo[name]


def build_intent_filters(deep_link: DeepLinkConfig) -> List[Dict[str, Any]]:
    """Intent filters in evaluation order: verified https first, then the scheme."""
    filters = []
    if deep_link.universal_domain:
        filters.append({
            "action": "VIEW",
            "autoVerify": True,
            "data": [{"scheme": "https", "host": deep_link.universal_domain}],
            "category": ["BROWSABLE", "DEFAULT"],
        })
    filters.append({
        "action": "VIEW",
        "data": [{"scheme": deep_link.scheme}],
        "category": ["BROWSABLE", "DEFAULT"],
    })
    return filters


def apply_deep_links(app_json: Dict[str, Any], deep_link: DeepLinkConfig) -> Dict[str, Any]:
    """Set scheme, Android intent filters and iOS associated domains in place."""
    expo = app_json.setdefault("expo", {})
    expo["scheme"] = deep_link.scheme

    android = _platform_section(expo, "android")
    android["intentFilters"] = build_intent_filters(deep_link)

    if deep_link.universal_domain:
        ios = _platform_section(expo, "ios")
        ios["associatedDomains"] = [deep_link.associated_domain]

    return app_json


def patch_expo_deep_links(app_json_path: Path, deep_link: DeepLinkConfig) -> StageResult:
    if not app_json_path.exists():
        logger.warning(f"{TARGET} not found, skipping Expo deep linking")
        return StageResult.skipped(STAGE, TARGET, "file not found")

    _write(app_json_path, apply_deep_links(_read(app_json_path), deep_link))
    logger.info(f"✅ Deep linking configuration added to {TARGET}")
    return StageResult.success(STAGE, TARGET, f"scheme {deep_link.scheme}")


def apply_expo_package_name(app_json_path: Path, package_id: str) -> StageResult:
    """Set the iOS bundle identifier and Android package to the package id."""
    target = f"{TARGET} package"
    if not app_json_path.exists():
        logger.warning(f"{TARGET} not found, skipping bundle identifier")
        return StageResult.skipped(CONFIGURE_STAGE, target, "file not found")

    data = _read(app_json_path)
    expo = data.setdefault("expo", {})
    ios = _platform_section(expo, "ios")
    android = _platform_section(expo, "android")

    if ios.get("bundleIdentifier") == package_id and android.get("package") == package_id:
        return StageResult.skipped(CONFIGURE_STAGE, target, "already configured")

    ios["bundleIdentifier"] = package_id
    android["package"] = package_id
    _write(app_json_path, data)
    logger.info(f"✅ Updated bundle identifier and package to: {package_id}")
    return StageResult.success(CONFIGURE_STAGE, target, package_id)

"""android/app/build.gradle vector-icons font hook."""
from pathlib import Path

from rnstarter.core.logger import get_logger
from rnstarter.core.results import StageResult

logger = get_logger(__name__)

STAGE = "configure"
TARGET = "build.gradle"
FONTS_GRADLE_LINE = 'apply from: file("../../node_modules/react-native-vector-icons/fonts.gradle")'


def append_fonts_gradle(build_gradle_path: Path) -> StageResult:
    if not build_gradle_path.exists():
        logger.warning("android/app/build.gradle not found, skipping modification")
        return StageResult.skipped(STAGE, TARGET, "file not found")

    content = build_gradle_path.read_text(encoding="utf-8")
    if FONTS_GRADLE_LINE in content:
        logger.info("✔ fonts.gradle line already present")
        return StageResult.skipped(STAGE, TARGET, "already configured")

    build_gradle_path.write_text(f"{content.strip()}\n\n{FONTS_GRADLE_LINE}\n", encoding="utf-8")
    logger.info("➕ Added fonts.gradle line to android/app/build.gradle")
    return StageResult.success(STAGE, TARGET, "fonts.gradle applied")

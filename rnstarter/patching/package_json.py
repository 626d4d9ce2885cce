"""Merge the template's npm scripts into the generated package.json."""
import json
from pathlib import Path

from jinja2 import BaseLoader, Environment

from rnstarter.core.logger import get_logger
from rnstarter.core.results import StageResult

logger = get_logger(__name__)

STAGE = "configure"
TARGET = "package.json"
SCRIPTS_TEMPLATE = "package.json.template"

jinja_env = Environment(
    loader=BaseLoader(),
    autoescape=False,
    keep_trailing_newline=True,
)


def render_scripts_template(template_path: Path, app_name: str) -> dict:
    """Render {{APP_NAME}} placeholders and parse the result as JSON."""
    template = jinja_env.from_string(template_path.read_text(encoding="utf-8"))
    return json.loads(template.render(APP_NAME=app_name))


def merge_scripts(
    package_json_path: Path,
    template_path: Path,
    app_name: str,
    include_expo: bool = False,
) -> StageResult:
    """Overlay template scripts on existing ones; template entries win.

    With include_expo the template's "expo" section is merged as well.
    """
    if not package_json_path.exists() or not template_path.exists():
        return StageResult.skipped(STAGE, TARGET, "package.json or scripts template missing")

    with open(package_json_path, encoding="utf-8") as f:
        package_json = json.load(f)
    rendered = render_scripts_template(template_path, app_name)

    merged = dict(package_json)
    merged["scripts"] = {**package_json.get("scripts", {}), **rendered.get("scripts", {})}
    if include_expo and rendered.get("expo"):
        merged["expo"] = {**package_json.get("expo", {}), **rendered["expo"]}

    if merged == package_json:
        return StageResult.skipped(STAGE, TARGET, "scripts already present")

    with open(package_json_path, "w", encoding="utf-8") as f:
        json.dump(merged, f, indent=2, ensure_ascii=False)
        f.write("\n")

    logger.info(f"✅ Added npm scripts to {TARGET}")
    return StageResult.success(STAGE, TARGET, f"{len(rendered.get('scripts', {}))} scripts")

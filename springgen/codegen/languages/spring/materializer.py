"""
Spring project template materialization.

Copies the static project tree and renders the files that carry project
placeholders (``{{project_name}}`` and friends).
"""

import shutil
from pathlib import Path
from typing import Dict, List, Optional

from ...core.naming import to_kebab_case
from ...core.templates import TemplateEngine, create_template_engine
from ...writer import write_generated_file
from ....logging_config import get_logger

logger = get_logger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"

# Files rendered with project placeholders, relative to the template dir
RENDERED_FILES = ["pom.xml"]

# Directory trees copied verbatim
COPIED_TREES = ["src"]


class TemplateMaterializer:
    """Writes the Spring Boot project skeleton into an output root."""

    def __init__(
        self, template_dir: Path = TEMPLATE_DIR, engine: Optional[TemplateEngine] = None
    ):
        self.template_dir = template_dir
        self.engine = engine or create_template_engine(template_dir)

    @staticmethod
    def build_context(name: str, version: str, package: str) -> Dict[str, str]:
        """Placeholder values substituted into rendered files."""
        return {
            "project_name": to_kebab_case(name),
            "project_version": version,
            "project_package": package,
            "project_description": "",
        }

    def materialize(self, root: str | Path, context: Dict[str, str]) -> List[Path]:
        """Render placeholder files and copy static trees below ``root``.

        Returns:
            Paths of the rendered files that were written.
        """
        root = Path(root)
        written = []

        for name in RENDERED_FILES:
            content = self.engine.render_template(name, context)
            target = root / name
            if write_generated_file(target, content):
                written.append(target)

        for tree in COPIED_TREES:
            src = self.template_dir / tree
            if not src.is_dir():
                logger.warning("Template tree missing: %s", src)
                continue
            shutil.copytree(src, root / tree, dirs_exist_ok=True)
            logger.info("Copied template tree %s -> %s", src, root / tree)

        return written

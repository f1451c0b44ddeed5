"""
Jinja2 rendering for project skeleton files.

Templates are loaded from a directory when one is given; otherwise the
engine starts empty and templates can be registered in memory. Undefined
variables are errors so a missing placeholder never renders as blank text.
"""

from pathlib import Path
from typing import Any, Dict, Optional

from jinja2 import (
    DictLoader,
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateNotFound,
    select_autoescape,
)

from .naming import to_camel_case, to_kebab_case, to_pascal_case, to_snake_case


class TemplateError(Exception):
    """Exception raised when a template cannot be loaded or rendered."""

    pass


NAMING_FILTERS = {
    "snake_case": to_snake_case,
    "camel_case": to_camel_case,
    "pascal_case": to_pascal_case,
    "kebab_case": to_kebab_case,
}


class TemplateEngine:
    """Jinja2 environment with the naming filters registered."""

    def __init__(self, template_dir: Optional[Path] = None):
        self.template_dir = template_dir
        if template_dir is not None and Path(template_dir).is_dir():
            loader = FileSystemLoader(str(template_dir))
        else:
            loader = DictLoader({})

        self._env = Environment(
            loader=loader,
            autoescape=select_autoescape(["html", "xml"], default_for_string=False),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
        )
        self._env.filters.update(NAMING_FILTERS)

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render a named template.

        Raises:
            TemplateError: If the template is missing or fails to render
        """
        try:
            return self._env.get_template(template_name).render(**context)
        except Exception as e:
            raise TemplateError(f"Cannot render template {template_name}: {e}") from e

    def render_string(self, source: str, context: Dict[str, Any]) -> str:
        try:
            return self._env.from_string(source).render(**context)
        except Exception as e:
            raise TemplateError(f"Cannot render template string: {e}") from e

    def add_template(self, name: str, content: str):
        """Register an in-memory template, replacing a directory loader."""
        if not isinstance(self._env.loader, DictLoader):
            self._env.loader = DictLoader({})
        self._env.loader.mapping[name] = content

    def template_exists(self, template_name: str) -> bool:
        try:
            self._env.get_template(template_name)
        except TemplateNotFound:
            return False
        return True


def create_template_engine(template_dir: Optional[Path] = None) -> TemplateEngine:
    return TemplateEngine(template_dir)

"""Jinja2 environment for the project templates."""

from pathlib import Path
from typing import Any

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateError,
)

from create_v1_app.errors import TemplateNotFoundError, TemplateRenderError

TEMPLATE_SUFFIX = ".jinja2"

BUNDLED_TEMPLATES = Path(__file__).resolve().parent / "templates"


def resolve_templates_root(templates_dir: str | Path | None = None) -> Path:
    """Return the template root: templates_dir when given, else the bundled one."""
    root = Path(templates_dir).expanduser() if templates_dir else BUNDLED_TEMPLATES
    if not root.is_dir():
        raise TemplateNotFoundError(f"Templates directory not found: {root}")
    return root


def template_name(templates_root: Path, path: Path) -> str:
    """Loader name for a file: its POSIX path relative to the template root."""
    return path.relative_to(templates_root).as_posix()


class TemplateRenderer:
    """Renders templates by name relative to a single template root.

    Templates can extend each other, e.g. package.json.pnpm.jinja2 extends
    package.json.base.jinja2.
    """

    def __init__(self, templates_root: Path) -> None:
        self.root = templates_root
        self._env = Environment(
            loader=FileSystemLoader(str(templates_root)),
            autoescape=False,
            undefined=StrictUndefined,
            keep_trailing_newline=True,
        )

    def render(self, name: str, context: dict[str, Any]) -> str:
        try:
            return self._env.get_template(name).render(**context)
        except TemplateError as e:
            raise TemplateRenderError(name, str(e)) from e

    def render_path(self, path: Path, context: dict[str, Any]) -> str:
        return self.render(template_name(self.root, path), context)

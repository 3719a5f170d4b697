"""Render one template directory into one workspace of the generated monorepo."""

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterator

from create_v1_app.templates import TEMPLATE_SUFFIX, TemplateRenderer

logger = logging.getLogger(__name__)

PACKAGE_JSON_PREFIX = "package.json."
PNPM_WORKSPACE_TEMPLATE = "pnpm-workspace.yaml" + TEMPLATE_SUFFIX
BASE_VARIANT = "base"


@dataclass(frozen=True)
class Workspace:
    name: str
    source_path: Path
    dest_path: Path
    is_root: bool = False


def get_workspaces(templates_root: Path, project_dir: Path) -> list[Workspace]:
    """Baseline workspaces every V1 app gets."""
    workspaces = [Workspace("root", templates_root, project_dir, is_root=True)]
    for rel in ("apps/web", "apps/api", "apps/app", "packages/ui", "packages/logger"):
        workspaces.append(
            Workspace(rel.split("/")[-1], templates_root / rel, project_dir / rel)
        )
    return workspaces


def service_workspace(templates_root: Path, project_dir: Path, service: str) -> Workspace:
    return Workspace(
        service,
        templates_root / "services" / service,
        project_dir / "packages" / service,
    )


def package_json_variant(file_name: str) -> str | None:
    """'package.json.pnpm.jinja2' -> 'pnpm'. None for anything else.

    A plain 'package.json.jinja2' is an ordinary template, not a variant.
    """
    if "/" in file_name or not file_name.startswith(PACKAGE_JSON_PREFIX):
        return None
    if not file_name.endswith(TEMPLATE_SUFFIX):
        return None
    middle = file_name[len(PACKAGE_JSON_PREFIX):-len(TEMPLATE_SUFFIX)]
    if not middle or "." in middle:
        return None
    return middle


def _iter_files(workspace: Workspace) -> Iterator[Path]:
    if workspace.is_root:
        yield from sorted(p for p in workspace.source_path.iterdir() if p.is_file())
    else:
        yield from sorted(p for p in workspace.source_path.rglob("*") if p.is_file())


def process_workspace(
    workspace: Workspace,
    renderer: TemplateRenderer,
    context: dict[str, Any],
    package_manager: str,
) -> list[Path]:
    """Render templates and copy plain files of one workspace. Returns written paths."""
    logger.debug("Processing workspace: %s", workspace.name)
    written: list[Path] = []
    ctx = {**context, "workspace": workspace.name}
    for path in _iter_files(workspace):
        rel = path.relative_to(workspace.source_path).as_posix()
        if rel.endswith(TEMPLATE_SUFFIX):
            dest = _process_template(workspace, renderer, ctx, package_manager, path, rel)
        else:
            dest = _copy_file(workspace, path, rel)
        if dest is not None:
            written.append(dest)
    return written


def _process_template(
    workspace: Workspace,
    renderer: TemplateRenderer,
    context: dict[str, Any],
    package_manager: str,
    path: Path,
    rel: str,
) -> Path | None:
    logger.debug("Processing template: %s", rel)

    if rel == PNPM_WORKSPACE_TEMPLATE and package_manager != "pnpm":
        logger.debug("Skipping pnpm-workspace.yaml for non-pnpm project")
        return None

    dest = workspace.dest_path / rel[: -len(TEMPLATE_SUFFIX)]
    variant = package_json_variant(rel)
    if variant is not None:
        if not workspace.is_root:
            logger.debug("Skipping package.json variant in non-root workspace: %s", rel)
            return None
        if variant == BASE_VARIANT or variant != package_manager:
            logger.debug("Skipping non-matching package.json template: %s", rel)
            return None
        dest = workspace.dest_path / "package.json"

    rendered = renderer.render_path(path, context)
    if not rendered.strip():
        logger.debug("Skipping empty template: %s", rel)
        return None

    dest.parent.mkdir(parents=True, exist_ok=True)
    dest.write_text(rendered, encoding="utf-8")
    logger.debug("Rendered template: %s -> %s", rel, dest)
    return dest


def _copy_file(workspace: Workspace, path: Path, rel: str) -> Path:
    dest = workspace.dest_path / rel
    dest.parent.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(path, dest)
    logger.debug("Copied file: %s -> %s", path, dest)
    return dest

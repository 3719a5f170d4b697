"""Create a new V1 app from the templates."""

import logging
import subprocess
import time
from pathlib import Path

from create_v1_app.cleanup import CLEANUP_MANAGER, EmptyDirectory, RemoveDirectory
from create_v1_app.errors import InstallError, ProjectExistsError, TemplateNotFoundError
from create_v1_app.formatting import human_duration
from create_v1_app.package_manager import confirm_package_manager
from create_v1_app.project_name import check_project_name
from create_v1_app.services import Service
from create_v1_app.templates import TemplateRenderer, resolve_templates_root
from create_v1_app.workspace import get_workspaces, process_workspace, service_workspace

logger = logging.getLogger(__name__)


def create_new_app(
    name: str,
    services: list[Service],
    package_manager: str | None,
    *,
    templates_root: Path | None = None,
    install: bool = False,
    cwd: Path | None = None,
) -> Path:
    """Generate the monorepo <cwd>/<name>. Returns the project directory."""
    start = time.monotonic()
    name = check_project_name(name)

    package_manager = confirm_package_manager(package_manager)
    logger.info("Using package manager: %s", package_manager)

    root = templates_root or resolve_templates_root()
    project_dir = (cwd or Path.cwd()) / name
    if project_dir.exists() and any(project_dir.iterdir()):
        raise ProjectExistsError(project_dir)

    logger.debug(
        "Creating new app: %s with %d service(s) by %s",
        name,
        len(services),
        package_manager,
    )

    workspaces = get_workspaces(root, project_dir)
    for service in services:
        workspace = service_workspace(root, project_dir, service.value)
        if not workspace.source_path.is_dir():
            raise TemplateNotFoundError(f"Service template not found for: {service}")
        workspaces.append(workspace)

    if project_dir.exists():
        CLEANUP_MANAGER.add_task(EmptyDirectory(project_dir))
    else:
        CLEANUP_MANAGER.add_task(RemoveDirectory(project_dir))
    (project_dir / "apps").mkdir(parents=True, exist_ok=True)
    (project_dir / "packages").mkdir(parents=True, exist_ok=True)

    renderer = TemplateRenderer(root)
    context = {
        "project_name": name,
        "package_manager": package_manager,
        "services": [s.value for s in services],
    }

    total_steps = len(workspaces) + 1
    for step, workspace in enumerate(workspaces, start=1):
        logger.info("[%d/%d] Processing workspace: %s", step, total_steps, workspace.name)
        process_workspace(workspace, renderer, context, package_manager)

    if install:
        logger.info("[%d/%d] Installing dependencies...", total_steps, total_steps)
        install_dependencies(project_dir, package_manager)
    else:
        logger.info(
            "[%d/%d] Skipping dependency install (run `%s install` in %s)",
            total_steps,
            total_steps,
            package_manager,
            name,
        )

    print(f"V1 app created successfully! in {human_duration(time.monotonic() - start)}")
    return project_dir


def install_dependencies(project_dir: Path, package_manager: str) -> None:
    """Run `<package_manager> install` in the project root."""
    cmd = [package_manager, "install"]
    logger.debug("Running command: %s in %s", " ".join(cmd), project_dir)
    try:
        result = subprocess.run(
            cmd,
            cwd=str(project_dir),
            capture_output=True,
            text=True,
        )
    except FileNotFoundError as e:
        raise InstallError(f"{package_manager} not found on PATH") from e

    if result.returncode != 0:
        raise InstallError(
            f"Installation failed in {project_dir}:\n"
            f"Stdout: {result.stdout}\nStderr: {result.stderr}"
        )
    if not (project_dir / "node_modules").exists():
        raise InstallError(f"node_modules not created in {project_dir}")
    logger.debug("Installation command completed for %s", project_dir)

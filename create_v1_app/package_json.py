"""Read and update the root package.json of a generated project."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from create_v1_app.errors import PackageJsonError
from create_v1_app.package_manager import parse_package_manager_field

logger = logging.getLogger(__name__)


@dataclass
class PackageJson:
    """The parts of a project's package.json the generator needs."""

    name: str
    package_manager: str


def _read(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise PackageJsonError(f"package.json not found in {path.parent}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise PackageJsonError(f"Invalid package.json at {path}: {e}") from e
    if not isinstance(data, dict):
        raise PackageJsonError(f"Invalid package.json at {path}: expected an object")
    return data


def _write(path: Path, data: dict[str, Any]) -> None:
    path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")


def get_package_json(project_dir: Path) -> PackageJson:
    """Load name and package manager from <project_dir>/package.json."""
    data = _read(project_dir / "package.json")
    name = data.get("name")
    if not isinstance(name, str) or not name:
        raise PackageJsonError(f"package.json in {project_dir} has no name")
    return PackageJson(
        name=name,
        package_manager=parse_package_manager_field(data.get("packageManager")),
    )


def _covers(patterns: list[Any], workspace: str) -> bool:
    parent = workspace.rsplit("/", 1)[0]
    return workspace in patterns or f"{parent}/*" in patterns


def add_workspace(project_dir: Path, workspace: str) -> bool:
    """Ensure the root workspaces array includes workspace. Returns True if changed.

    A glob such as "packages/*" already covers "packages/<name>".
    """
    path = project_dir / "package.json"
    data = _read(path)
    workspaces = data.get("workspaces")
    if not isinstance(workspaces, list):
        return False
    if _covers(workspaces, workspace):
        return False
    workspaces.append(workspace)
    _write(path, data)
    logger.debug("Added %s to root package.json workspaces", workspace)
    return True


def remove_workspace(project_dir: Path, workspace: str) -> bool:
    """Drop workspace from the root workspaces array. Returns True if changed."""
    path = project_dir / "package.json"
    data = _read(path)
    workspaces = data.get("workspaces")
    if not isinstance(workspaces, list) or workspace not in workspaces:
        return False
    data["workspaces"] = [w for w in workspaces if w != workspace]
    _write(path, data)
    logger.debug("Updated root package.json")
    return True

"""Undo partially generated output after a failed or interrupted command."""

import logging
import os
import re
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from create_v1_app.package_json import remove_workspace

logger = logging.getLogger(__name__)

SOURCE_EXTENSIONS = {".ts", ".tsx", ".js", ".jsx"}

# Never descended into when stripping service imports
SKIP_DIRS = {"node_modules", ".next", ".turbo", ".git", "dist"}


@dataclass(frozen=True)
class RemoveDirectory:
    path: Path


@dataclass(frozen=True)
class EmptyDirectory:
    """Remove the contents of a directory that existed before the command ran."""

    path: Path


@dataclass(frozen=True)
class RemoveService:
    project_dir: Path
    service_name: str


CleanupTask = RemoveDirectory | EmptyDirectory | RemoveService


class CleanupManager:
    """Collects undo tasks while a command runs; executes them on failure."""

    def __init__(self) -> None:
        self.tasks: list[CleanupTask] = []

    def add_task(self, task: CleanupTask) -> None:
        self.tasks.append(task)

    def clear(self) -> None:
        self.tasks.clear()

    def cleanup(self) -> None:
        """Run every task. Failures are logged, never raised."""
        logger.debug("Starting cleanup...")
        for task in self.tasks:
            try:
                _run_task(task)
            except Exception as e:
                logger.error("Cleanup task %s failed: %s", task, e)
        self.tasks.clear()
        logger.debug("Cleanup completed.")


CLEANUP_MANAGER = CleanupManager()


def _run_task(task: CleanupTask) -> None:
    if isinstance(task, RemoveDirectory):
        _remove_directory(task.path)
    elif isinstance(task, EmptyDirectory):
        _empty_directory(task.path)
    else:
        remove_service(task.project_dir, task.service_name)


def _remove_directory(path: Path) -> None:
    if not path.exists():
        return
    shutil.rmtree(path)
    logger.debug("Removed directory: %s", path)


def _empty_directory(path: Path) -> None:
    if not path.is_dir():
        return
    for child in path.iterdir():
        if child.is_dir() and not child.is_symlink():
            shutil.rmtree(child)
        else:
            child.unlink()
    logger.debug("Emptied directory: %s", path)


def remove_service(project_dir: Path, service_name: str) -> None:
    """Delete packages/<service> and every reference to it in the project."""
    logger.debug("Removing service %s from %s", service_name, project_dir)

    service_dir = project_dir / "packages" / service_name
    if service_dir.exists():
        shutil.rmtree(service_dir)
        logger.debug("Removed service directory: %s", service_dir)

    if (project_dir / "package.json").exists():
        remove_workspace(project_dir, f"packages/{service_name}")
    remove_service_references(project_dir, service_name)


def _service_import_re(service_name: str) -> re.Pattern[str]:
    name = re.escape(service_name)
    return re.compile(
        rf"""^[ \t]*import\b[^\n]*\bfrom[ \t]*["']@v1/{name}(?:/[^"'\n]*)?["'][^\n]*(?:\n|$)""",
        re.MULTILINE,
    )


def _iter_sources(project_dir: Path) -> Iterator[Path]:
    for dirpath, dirnames, filenames in os.walk(project_dir):
        dirnames[:] = [d for d in dirnames if d not in SKIP_DIRS]
        for filename in filenames:
            path = Path(dirpath) / filename
            if path.suffix in SOURCE_EXTENSIONS:
                yield path


def remove_service_references(project_dir: Path, service_name: str) -> list[Path]:
    """Strip `import ... from "@v1/<service>"` lines from JS/TS sources. Returns changed files.

    Files that are not valid UTF-8 are left untouched.
    """
    pattern = _service_import_re(service_name)
    changed: list[Path] = []
    for path in _iter_sources(project_dir):
        try:
            content = path.read_text(encoding="utf-8")
        except UnicodeDecodeError:
            logger.warning("Skipping non-UTF-8 file: %s", path)
            continue
        new_content = pattern.sub("", content)
        if new_content != content:
            path.write_text(new_content, encoding="utf-8")
            logger.debug("Updated file: %s", path)
            changed.append(path)
    return changed

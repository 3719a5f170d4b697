"""Dialogue orchestration for `create-v1-app` without arguments."""

import logging
from dataclasses import dataclass
from pathlib import Path

from create_v1_app.app import create_new_app
from create_v1_app.terminal import reset_terminal_for_input
from interactive.state import DialogueState
from interactive.steps.package_manager_step import run_package_manager_step
from interactive.steps.project_step import run_project_step
from interactive.steps.services_step import run_services_step

logger = logging.getLogger(__name__)


@dataclass
class DialogueResult:
    """Result of running the dialogue."""

    success: bool
    project_dir: Path | None = None


def run_dialogue(
    templates_root: Path | None = None,
    default_package_manager: str | None = None,
    install: bool = False,
    cwd: Path | None = None,
) -> DialogueResult:
    """Collect project name, package manager and services, then create the app.

    Returns DialogueResult(success=False) when any prompt was cancelled;
    nothing is created in that case.
    """
    state = DialogueState()
    try:
        completed = (
            run_project_step(state)
            and run_package_manager_step(state, default_package_manager)
            and run_services_step(state)
        )
    finally:
        reset_terminal_for_input()

    if not completed:
        logger.info("Cancelled.")
        return DialogueResult(success=False)

    project_dir = create_new_app(
        state.project_name,
        state.services,
        state.package_manager,
        templates_root=templates_root,
        install=install,
        cwd=cwd,
    )
    return DialogueResult(success=True, project_dir=project_dir)

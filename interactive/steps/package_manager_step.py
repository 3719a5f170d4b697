"""Package manager selection step."""

import questionary

from create_v1_app.package_manager import DEFAULT_PACKAGE_MANAGER, PACKAGE_MANAGERS
from interactive.state import DialogueState
from interactive.ui import STYLE


def ask_package_manager(default: str | None = None) -> str | None:
    """Select a package manager. Returns None if cancelled."""
    if default not in PACKAGE_MANAGERS:
        default = DEFAULT_PACKAGE_MANAGER
    return questionary.select(
        "Select a package manager:",
        choices=list(PACKAGE_MANAGERS),
        default=default,
        style=STYLE,
    ).ask()


def run_package_manager_step(state: DialogueState, default: str | None = None) -> bool:
    """Returns False if cancelled."""
    selected = ask_package_manager(default)
    if selected is None:
        return False
    state.package_manager = selected
    return True

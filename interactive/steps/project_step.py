"""Project name step."""

import questionary

from create_v1_app.project_name import validate_project_name
from interactive.state import DialogueState
from interactive.ui import STYLE

DEFAULT_PROJECT_NAME = "my-v1-app"

def run_project_step(state: DialogueState) -> bool:
    """Ask for the project name. Returns False if cancelled."""
    print("\nWelcome to create-v1-app!\n")

    while True:
        name = questionary.text(
            "Project name:",
            default=DEFAULT_PROJECT_NAME,
            style=STYLE,
        ).ask()
        if name is None:
            return False
        error = validate_project_name(name)
        if error is None:
            state.project_name = name.strip()
            return True
        print(f"{error}\n")

"""Optional services step: confirm, then pick from a checklist."""

import questionary
from questionary import Choice

from create_v1_app.services import Service
from interactive.state import DialogueState
from interactive.ui import STYLE


def run_services_step(state: DialogueState) -> bool:
    """Ask which services to add. Returns False if cancelled."""
    add_services = questionary.confirm(
        "Do you want to add any services?",
        default=True,
        style=STYLE,
    ).ask()
    if add_services is None:
        return False
    if not add_services:
        state.services = []
        return True

    choices = [Choice(f"{s.value}: {s.help}", s.value) for s in Service]
    selected = questionary.checkbox(
        "Select services to add",
        choices=choices,
        style=STYLE,
    ).ask()
    if selected is None:
        return False
    state.services = [Service(value) for value in selected]
    return True

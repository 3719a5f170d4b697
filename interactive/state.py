"""Shared dialogue state."""

from dataclasses import dataclass, field

from create_v1_app.services import Service


@dataclass
class DialogueState:
    """Mutable answers collected during the dialogue."""

    project_name: str | None = None
    package_manager: str | None = None
    services: list[Service] = field(default_factory=list)

"""Generator for V1 app monorepos."""

from create_v1_app.runner import run

__all__ = ["run"]

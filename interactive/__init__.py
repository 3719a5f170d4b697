"""Interactive dialogue used when create-v1-app runs without a command."""

from interactive.wizard import DialogueResult, run_dialogue

__all__ = ["DialogueResult", "run_dialogue"]

"""Terminal utilities. Resets terminal state after questionary/prompt_toolkit prompts exit."""

import subprocess
import sys


def reset_terminal_for_input() -> None:
    """Restore a sane terminal after TUI prompts, which can leave echo off or raw mode on.

    No-op when stdin is not a TTY or on Windows, where prompt_toolkit restores
    the console mode itself.
    """
    if not sys.stdin.isatty() or sys.platform == "win32":
        return
    try:
        subprocess.run(
            ["stty", "sane"],
            stdin=sys.stdin,
            capture_output=True,
            timeout=2,
        )
    except (OSError, subprocess.SubprocessError):
        pass

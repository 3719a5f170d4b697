"""Console entry point: `create-v1-app ...` or `python -m launcher <script> ...`."""

import sys

from launcher.shim import forward


def launcher_argv(argv: list[str] | None = None) -> list[str]:
    """Return argv shaped as [interpreter, script, *user_args].

    sys.argv from a console script or `python -m` holds only the program path
    in front of the user arguments, so the interpreter is prepended.
    """
    if argv is None:
        argv = [sys.executable, *sys.argv]
    return argv


def main(argv: list[str] | None = None) -> int:
    result = forward(launcher_argv(argv))
    if result.success:
        return 0
    return 1


if __name__ == "__main__":
    sys.exit(main())

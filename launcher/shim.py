"""Forward process arguments to the generator and report its failures."""

import logging
import sys
from dataclasses import dataclass
from typing import Callable, Sequence

logger = logging.getLogger(__name__)

# argv[0] is the interpreter, argv[1] the launched script.
LAUNCHER_ARGC = 2

Delegate = Callable[[list[str]], object]


@dataclass
class ForwardResult:
    """Outcome of one forwarded invocation."""

    success: bool
    args: list[str]
    error: Exception | None = None


def strip_launcher_args(argv: Sequence[str]) -> list[str]:
    """Drop the interpreter and script path. Shorter vectors yield []."""
    return list(argv[LAUNCHER_ARGC:])


def forward(argv: Sequence[str], run: Delegate | None = None) -> ForwardResult:
    """Strip argv, print it, call run(args), and report any Exception on stderr.

    Only Exception subclasses count as delegate failures; KeyboardInterrupt
    and SystemExit propagate.
    """
    if run is None:
        from create_v1_app import run

    args = strip_launcher_args(argv)
    print(f"Forwarding arguments: {args}", flush=True)

    try:
        run(args)
    except Exception as e:
        print(f"Error running create-v1-app: {e}", file=sys.stderr, flush=True)
        logger.debug("Delegate failure", exc_info=True)
        return ForwardResult(success=False, args=args, error=e)
    return ForwardResult(success=True, args=args)

"""Entry point behind the launcher: parse arguments and run one command."""

import logging
from pathlib import Path
from typing import Sequence

from dotenv import load_dotenv

from create_v1_app.cleanup import CLEANUP_MANAGER
from create_v1_app.cli import dispatch, parse_cli
from create_v1_app.errors import ScaffoldError
from create_v1_app.logging_config import setup_logging
from create_v1_app.settings import load_settings

logger = logging.getLogger(__name__)


def run(args: Sequence[str]) -> None:
    """Run create-v1-app with already-stripped arguments.

    Any failure undoes the partial output registered with CLEANUP_MANAGER
    before it propagates. Ctrl+C is reported as ScaffoldError("Interrupted").
    """
    load_dotenv(Path.cwd() / ".env")
    settings = load_settings()
    ns = parse_cli(args)
    setup_logging(settings, verbose=ns.verbose)

    try:
        dispatch(ns, settings)
    except KeyboardInterrupt:
        logger.warning("Interrupted, cleaning up...")
        CLEANUP_MANAGER.cleanup()
        raise ScaffoldError("Interrupted") from None
    except Exception:
        CLEANUP_MANAGER.cleanup()
        raise
    else:
        CLEANUP_MANAGER.clear()

"""Centralized logging configuration for the generator process."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Any

_LEVEL_BADGES = {
    logging.CRITICAL: "🚨 ERROR",
    logging.ERROR: "🚨 ERROR",
    logging.WARNING: "🚧 WARN ",
    logging.INFO: "🚀 INFO ",
    logging.DEBUG: "🔍 DEBUG",
}

_FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class BadgeFormatter(logging.Formatter):
    """Console formatter: '<badge> - <message>'."""

    def format(self, record: logging.LogRecord) -> str:
        badge = _LEVEL_BADGES.get(record.levelno, record.levelname)
        message = record.getMessage()
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        return f"{badge} - {message}"


def _file_handler(cfg: dict[str, Any], level: int) -> logging.Handler:
    log_path = Path(cfg["file"]).expanduser()
    max_bytes = int(cfg.get("max_bytes", 10 * 1024 * 1024))
    backup_count = int(cfg.get("backup_count", 3))
    log_path.parent.mkdir(parents=True, exist_ok=True)
    h = logging.handlers.RotatingFileHandler(
        log_path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
    )
    h.setLevel(level)
    h.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    return h


def _console_handler(level: int) -> logging.Handler:
    h = logging.StreamHandler(sys.stdout)
    h.setLevel(level)
    h.setFormatter(BadgeFormatter())
    return h


def setup_logging(settings: dict[str, Any], verbose: bool = False) -> None:
    """Configure the root logger from settings.get("logging", {}).

    Console output goes to stdout with a level badge per line. A rotating
    log file is added only when logging.file is set. verbose forces DEBUG.
    """
    cfg = settings.get("logging", {})
    level_name = "DEBUG" if verbose else str(cfg.get("level", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)
    root = logging.getLogger()
    root.setLevel(level)
    for h in root.handlers[:]:
        root.removeHandler(h)
    if cfg.get("log_to_console", True):
        root.addHandler(_console_handler(level))
    if cfg.get("file"):
        root.addHandler(_file_handler(cfg, level))

"""Load generator settings from the user config file and environment."""

import copy
import logging
import os
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "CREATE_V1_APP_CONFIG"

_MISSING = object()

_DEFAULTS: dict[str, Any] = {
    "package_manager": None,
    "templates_dir": None,  # None: templates bundled with the package
    "install_dependencies": False,
    "logging": {
        "file": None,
        "level": "INFO",
        "log_to_console": True,
        "max_bytes": 10485760,  # 10 MB
        "backup_count": 3,
    },
}

# Environment variable -> dot path
_ENV_OVERRIDES: dict[str, str] = {
    "CREATE_V1_APP_LOG_LEVEL": "logging.level",
    "CREATE_V1_APP_PACKAGE_MANAGER": "package_manager",
}

_cached: dict[str, Any] | None = None


def _merge_overrides(target: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    """Fold user overrides into target in place.

    Nested tables are merged key by key so a config file that only sets
    ``logging.level`` keeps the other logging defaults. A null value in the
    file means "use the default" and is ignored.
    """
    for key, value in overrides.items():
        if value is None:
            continue
        current = target.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            _merge_overrides(current, value)
        else:
            target[key] = value
    return target


def _set_path(settings: dict[str, Any], path: str, value: Any) -> None:
    *parents, leaf = path.split(".")
    node = settings
    for part in parents:
        node = node.setdefault(part, {})
    node[leaf] = value


def default_config_path() -> Path:
    """Return $CREATE_V1_APP_CONFIG or ~/.config/create-v1-app/settings.yaml."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "create-v1-app" / "settings.yaml"


def get_default_settings() -> dict[str, Any]:
    """Fresh copy of the built-in defaults, safe to mutate."""
    return copy.deepcopy(_DEFAULTS)


def get_setting(settings: dict[str, Any], path: str, default: Any = None) -> Any:
    """Look up a dotted key such as ``logging.level`` or ``package_manager``.

    Returns ``default`` when any segment is missing or a parent is not a table.
    """
    node: Any = settings
    for part in path.split("."):
        if not isinstance(node, dict):
            return default
        node = node.get(part, _MISSING)
        if node is _MISSING:
            return default
    return node


def reload_settings() -> None:
    """Forget the loaded settings so the next load_settings() rereads the config file."""
    global _cached
    _cached = None


def load_settings(path: Path | None = None) -> dict[str, Any]:
    """Load settings. Returns defaults merged with the config file and env overrides."""
    global _cached
    if _cached is not None:
        return _cached

    if path is None:
        path = default_config_path()

    result = get_default_settings()

    if path.exists():
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (yaml.YAMLError, OSError) as e:
            logger.warning("Ignoring unreadable config %s: %s", path, e)
            data = None
        if isinstance(data, dict):
            _merge_overrides(result, data)

    for env_name, dot_path in _ENV_OVERRIDES.items():
        value = os.environ.get(env_name)
        if value:
            _set_path(result, dot_path, value)

    _cached = result
    return result

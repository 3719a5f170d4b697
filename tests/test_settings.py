"""Tests for create_v1_app.settings: defaults, YAML merge, env overrides, cache."""

from pathlib import Path

import pytest

from create_v1_app.settings import (
    default_config_path,
    get_default_settings,
    get_setting,
    load_settings,
    reload_settings,
)


@pytest.fixture(autouse=True)
def _clear_settings_cache(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure clean settings cache and no env overrides for each test."""
    for name in (
        "CREATE_V1_APP_CONFIG",
        "CREATE_V1_APP_LOG_LEVEL",
        "CREATE_V1_APP_PACKAGE_MANAGER",
    ):
        monkeypatch.delenv(name, raising=False)
    reload_settings()
    yield
    reload_settings()


def test_defaults_when_file_missing(tmp_path: Path) -> None:
    settings = load_settings(tmp_path / "missing.yaml")

    assert settings["package_manager"] is None
    assert settings["install_dependencies"] is False
    assert get_setting(settings, "logging.level") == "INFO"
    assert get_setting(settings, "logging.log_to_console") is True


def test_yaml_values_merge_over_defaults(tmp_path: Path) -> None:
    path = tmp_path / "settings.yaml"
    path.write_text(
        "package_manager: pnpm\nlogging:\n  level: DEBUG\n  file: null\n",
        encoding="utf-8",
    )

    settings = load_settings(path)

    assert settings["package_manager"] == "pnpm"
    assert get_setting(settings, "logging.level") == "DEBUG"
    # Untouched nested defaults survive the merge
    assert get_setting(settings, "logging.backup_count") == 3


def test_invalid_yaml_falls_back_to_defaults(tmp_path: Path) -> None:
    path = tmp_path / "settings.yaml"
    path.write_text("logging: [unclosed\n", encoding="utf-8")

    settings = load_settings(path)

    assert settings == get_default_settings()


def test_invalid_yaml_is_logged(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    path = tmp_path / "settings.yaml"
    path.write_text("logging: [unclosed\n", encoding="utf-8")

    with caplog.at_level("WARNING", logger="create_v1_app.settings"):
        load_settings(path)

    assert "Ignoring unreadable config" in caplog.text


def test_get_setting_stops_at_non_table() -> None:
    settings = {"logging": "off"}

    assert get_setting(settings, "logging.level", "INFO") == "INFO"
    assert get_setting(settings, "logging") == "off"


def test_env_overrides(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CREATE_V1_APP_LOG_LEVEL", "WARNING")
    monkeypatch.setenv("CREATE_V1_APP_PACKAGE_MANAGER", "bun")

    settings = load_settings(tmp_path / "missing.yaml")

    assert get_setting(settings, "logging.level") == "WARNING"
    assert settings["package_manager"] == "bun"


def test_config_path_from_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "custom.yaml"
    path.write_text("install_dependencies: true\n", encoding="utf-8")
    monkeypatch.setenv("CREATE_V1_APP_CONFIG", str(path))

    assert default_config_path() == path
    assert load_settings()["install_dependencies"] is True


def test_settings_are_cached_until_reload(tmp_path: Path) -> None:
    path = tmp_path / "settings.yaml"
    path.write_text("package_manager: yarn\n", encoding="utf-8")
    assert load_settings(path)["package_manager"] == "yarn"

    path.write_text("package_manager: bun\n", encoding="utf-8")
    assert load_settings(path)["package_manager"] == "yarn"

    reload_settings()
    assert load_settings(path)["package_manager"] == "bun"


def test_get_setting_missing_path_returns_default() -> None:
    settings = get_default_settings()
    assert get_setting(settings, "logging.nope", "x") == "x"
    assert get_setting(settings, "package_manager.deeper", 1) == 1


def test_default_settings_are_a_copy() -> None:
    first = get_default_settings()
    first["logging"]["level"] = "DEBUG"
    assert get_default_settings()["logging"]["level"] == "INFO"

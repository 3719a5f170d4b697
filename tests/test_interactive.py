"""Tests for the interactive dialogue (questionary prompts mocked)."""

from pathlib import Path
from unittest.mock import patch

import pytest

from create_v1_app.cleanup import CLEANUP_MANAGER
from create_v1_app.package_manager import confirm_package_manager
from create_v1_app.errors import UnsupportedPackageManagerError
from create_v1_app.services import Service
from interactive.state import DialogueState
from interactive.steps.package_manager_step import ask_package_manager
from interactive.steps.project_step import run_project_step, validate_project_name
from interactive.steps.services_step import run_services_step
from interactive.wizard import DialogueResult, run_dialogue


class _Prompt:
    """Stand-in for a questionary Question: returns queued answers from ask()."""

    def __init__(self, *answers: object) -> None:
        self._answers = list(answers)

    def ask(self, *args: object, **kwargs: object) -> object:
        return self._answers.pop(0)


@pytest.fixture(autouse=True)
def _clear_cleanup_manager() -> None:
    CLEANUP_MANAGER.clear()
    yield
    CLEANUP_MANAGER.clear()


class TestProjectStep:
    def test_validate_project_name(self) -> None:
        assert validate_project_name("my-v1-app") is None
        assert validate_project_name("app_2.0") is None
        assert validate_project_name("   ") is not None
        assert validate_project_name("a/b") is not None
        assert validate_project_name("../up") is not None
        assert validate_project_name("has space") is not None

    def test_reprompts_until_valid(self, capsys: pytest.CaptureFixture[str]) -> None:
        state = DialogueState()
        prompt = _Prompt("", "bad/name", " demo ")

        with patch("questionary.text", return_value=prompt) as text:
            assert run_project_step(state) is True

        assert state.project_name == "demo"
        assert text.call_count == 3
        assert "cannot be empty" in capsys.readouterr().out

    def test_cancel(self) -> None:
        state = DialogueState()
        with patch("questionary.text", return_value=_Prompt(None)):
            assert run_project_step(state) is False
        assert state.project_name is None


class TestPackageManagerStep:
    def test_default_choice(self) -> None:
        with patch("questionary.select", return_value=_Prompt("npm")) as select:
            assert ask_package_manager() == "npm"
        assert select.call_args.kwargs["default"] == "npm"
        assert select.call_args.kwargs["choices"] == ["npm", "yarn", "pnpm", "bun"]

    def test_configured_default(self) -> None:
        with patch("questionary.select", return_value=_Prompt("pnpm")) as select:
            ask_package_manager("pnpm")
        assert select.call_args.kwargs["default"] == "pnpm"

    def test_confirm_cancelled_raises(self) -> None:
        with patch("questionary.select", return_value=_Prompt(None)):
            with pytest.raises(UnsupportedPackageManagerError):
                confirm_package_manager(None)


class TestServicesStep:
    def test_decline(self) -> None:
        state = DialogueState(services=[Service.KV])
        with patch("questionary.confirm", return_value=_Prompt(False)):
            assert run_services_step(state) is True
        assert state.services == []

    def test_select(self) -> None:
        state = DialogueState()
        with (
            patch("questionary.confirm", return_value=_Prompt(True)),
            patch("questionary.checkbox", return_value=_Prompt(["kv", "analytics"])) as checkbox,
        ):
            assert run_services_step(state) is True

        assert state.services == [Service.KV, Service.ANALYTICS]
        titles = [c.title for c in checkbox.call_args.kwargs["choices"]]
        assert titles[0].startswith("analytics: ")

    def test_cancel_checkbox(self) -> None:
        state = DialogueState()
        with (
            patch("questionary.confirm", return_value=_Prompt(True)),
            patch("questionary.checkbox", return_value=_Prompt(None)),
        ):
            assert run_services_step(state) is False


def test_run_dialogue_creates_app(tmp_path: Path) -> None:
    with (
        patch("questionary.text", return_value=_Prompt("demo")),
        patch("questionary.select", return_value=_Prompt("pnpm")),
        patch("questionary.confirm", return_value=_Prompt(True)),
        patch("questionary.checkbox", return_value=_Prompt(["jobs"])),
    ):
        result = run_dialogue(cwd=tmp_path)

    assert result == DialogueResult(success=True, project_dir=tmp_path / "demo")
    assert (tmp_path / "demo" / "pnpm-workspace.yaml").exists()
    assert (tmp_path / "demo" / "packages" / "jobs" / "package.json").exists()


def test_run_dialogue_cancelled_creates_nothing(tmp_path: Path) -> None:
    with (
        patch("questionary.text", return_value=_Prompt("demo")),
        patch("questionary.select", return_value=_Prompt(None)),
        patch("interactive.wizard.create_new_app") as create,
    ):
        result = run_dialogue(cwd=tmp_path)

    assert result == DialogueResult(success=False)
    create.assert_not_called()
    assert not (tmp_path / "demo").exists()


def test_run_dialogue_resets_terminal() -> None:
    with (
        patch("questionary.text", return_value=_Prompt(None)),
        patch("interactive.wizard.reset_terminal_for_input") as reset,
    ):
        run_dialogue()
    reset.assert_called_once_with()

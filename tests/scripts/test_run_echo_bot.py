"""Testes do CLI do bot de eco (sem conectar a nenhum backend)."""

from __future__ import annotations

import importlib.util
from pathlib import Path
from unittest.mock import MagicMock

import pytest

SCRIPT_PATH = Path(__file__).resolve().parents[2] / "scripts" / "run_echo_bot.py"


@pytest.fixture
def echo_script():
    spec = importlib.util.spec_from_file_location("run_echo_bot", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_explicit_backend_wins_over_env(echo_script, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BOT_TYPE", "slack")
    assert echo_script.parse_args(["discord"]).bot_type == "discord"


def test_backend_defaults_to_bot_type_env(echo_script, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BOT_TYPE", "Slack")
    assert echo_script.parse_args([]).bot_type == "slack"


def test_missing_backend_and_env_exits(echo_script, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("BOT_TYPE", raising=False)
    with pytest.raises(SystemExit):
        echo_script.parse_args([])


def test_main_validates_settings_before_connecting(
    echo_script, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.setenv("SHUTDOWN_DRAIN_TIMEOUT_SECONDS", "-1")
    monkeypatch.setattr("sys.argv", ["run_echo_bot.py", "slack"])
    build = MagicMock()
    monkeypatch.setattr(echo_script, "build_echo_bot", build)

    with pytest.raises(RuntimeError, match="SHUTDOWN_DRAIN_TIMEOUT_SECONDS"):
        echo_script.main()
    build.assert_not_called()

"""Tests for the console script entry point."""

import sys
from pathlib import Path
from unittest.mock import patch

import pytest
from pytest import MonkeyPatch

from startup_manager import main as main_module


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: MonkeyPatch) -> Path:
    """Keep settings and autostart directories inside tmp_path."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.delenv("STARTUP_MANAGER_CONFIG_DIR", raising=False)
    return tmp_path / "xdg"


def test_main_exits_with_runner_status(
    monkeypatch: MonkeyPatch, isolated_config: Path
) -> None:
    """Test main creates settings and exits with the command status."""
    monkeypatch.setattr(sys, "argv", ["startup-manager", "list"])

    with pytest.raises(SystemExit) as exc_info:
        main_module.main()

    assert exc_info.value.code == 0
    assert (isolated_config / "startup-manager" / "settings.conf").exists()


def test_main_handles_keyboard_interrupt(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Test Ctrl+C exits with status 1."""
    with (
        patch.object(main_module, "CLIRunner", side_effect=KeyboardInterrupt),
        pytest.raises(SystemExit) as exc_info,
    ):
        main_module.main()

    assert exc_info.value.code == 1
    assert "cancelled" in capsys.readouterr().out

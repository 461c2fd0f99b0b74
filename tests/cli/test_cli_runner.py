"""End-to-end tests for the CLI runner and command handlers."""

import logging
from pathlib import Path

import orjson
import pytest

from startup_manager import __version__
from startup_manager.cli import CLIParser, CLIRunner
from startup_manager.config import GlobalConfigManager
from startup_manager.core.desktop_entry.parser import load_desktop_file
from startup_manager.domain.entry import EntrySource
from startup_manager.logger import set_console_level


@pytest.fixture
def config_manager(
    tmp_path: Path, user_dir: Path, system_dir: Path
) -> GlobalConfigManager:
    """Settings pointing at temporary autostart directories."""
    manager = GlobalConfigManager(tmp_path / "settings")
    manager.config_dir.mkdir()
    manager.settings_file.write_text(
        "[directory]\n"
        f"user_autostart = {user_dir}\n"
        f"system_autostart = {system_dir}\n",
        encoding="utf-8",
    )
    return manager


@pytest.fixture
def populated(user_dir: Path, system_dir: Path, write_desktop) -> None:
    """One enabled and one disabled user entry plus a system entry."""
    write_desktop(
        user_dir,
        "sync.desktop",
        "[Desktop Entry]\nName=Sync\nExec=syncthing\nX-Keep=1\n",
    )
    write_desktop(
        user_dir,
        "notes.desktop",
        "[Desktop Entry]\nName=Notes\nExec=notes\nHidden=true\n",
    )
    write_desktop(
        system_dir,
        "tracker.desktop",
        "[Desktop Entry]\nName=Tracker\nExec=tracker\n",
    )


@pytest.fixture
def run(config_manager: GlobalConfigManager, caplog: pytest.LogCaptureFixture):
    """Return a helper running the CLI and returning its exit status."""
    caplog.set_level(logging.INFO)

    def _run(*argv: str) -> int:
        return CLIRunner(config_manager).run(list(argv))

    yield _run
    set_console_level("INFO")


def _output(caplog: pytest.LogCaptureFixture) -> list[str]:
    return [
        record.getMessage()
        for record in caplog.records
        if record.levelno == logging.INFO
    ]


@pytest.mark.usefixtures("populated")
class TestListCommand:
    """Tests for the list command."""

    def test_lists_all_by_name(
        self, run, caplog: pytest.LogCaptureFixture
    ) -> None:
        assert run("list") == 0
        rows = [line for line in _output(caplog) if ". " in line]
        assert len(rows) == 3
        assert "Notes" in rows[0]
        assert "Sync" in rows[1]
        assert "Tracker" in rows[2]

    def test_filter_flags(self, run, caplog: pytest.LogCaptureFixture) -> None:
        assert run("list", "--enabled", "--user") == 0
        rows = [line for line in _output(caplog) if ". " in line]
        assert len(rows) == 1
        assert "Sync" in rows[0]

    def test_json_output(self, run, caplog: pytest.LogCaptureFixture) -> None:
        assert run("list", "--json", "--sort", "source_system_first") == 0

        rows = orjson.loads(_output(caplog)[-1])

        assert [row["name"] for row in rows] == ["Tracker", "Notes", "Sync"]
        assert [row["mutable"] for row in rows] == [False, True, True]

    def test_empty_filter_message(
        self, run, caplog: pytest.LogCaptureFixture
    ) -> None:
        assert run("list", "--disabled", "--system") == 0
        assert "No entries match the current filter" in caplog.text


@pytest.mark.usefixtures("populated")
class TestMutatingCommands:
    """Tests for enable, disable, toggle, add, edit and remove."""

    def test_disable_by_file_name(self, run, user_dir: Path) -> None:
        assert run("disable", "sync.desktop") == 0
        entry = load_desktop_file(user_dir / "sync.desktop", EntrySource.USER)
        assert entry.enabled is False
        assert entry.extra == [("X-Keep", "1")]

    def test_enable_by_position(self, run, user_dir: Path) -> None:
        # Default order is by name: Notes, Sync, Tracker
        assert run("enable", "1") == 0
        entry = load_desktop_file(
            user_dir / "notes.desktop", EntrySource.USER
        )
        assert entry.enabled is True

    def test_enable_already_enabled(
        self, run, caplog: pytest.LogCaptureFixture
    ) -> None:
        assert run("enable", "Sync") == 0
        assert "Sync is already enabled" in caplog.text

    def test_toggle_by_name(self, run, user_dir: Path) -> None:
        assert run("toggle", "sync") == 0
        entry = load_desktop_file(user_dir / "sync.desktop", EntrySource.USER)
        assert entry.enabled is False

    def test_system_entry_is_refused(
        self, run, system_dir: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        before = (system_dir / "tracker.desktop").read_text(encoding="utf-8")

        assert run("disable", "tracker") == 1

        out = capsys.readouterr().out
        assert out.startswith("❌ Invalid operation")
        assert len(out.strip().splitlines()) == 1
        after = (system_dir / "tracker.desktop").read_text(encoding="utf-8")
        assert after == before

    def test_unknown_id(self, run, capsys: pytest.CaptureFixture[str]) -> None:
        assert run("show", "nothing") == 1
        assert "Selection failed" in capsys.readouterr().out

    def test_add(self, run, user_dir: Path) -> None:
        assert run("add", "My App", "my-app --now") == 0
        entry = load_desktop_file(
            user_dir / "my-app.desktop", EntrySource.USER
        )
        assert entry.name == "My App"
        assert entry.command == "my-app --now"
        assert entry.enabled is True

    def test_add_existing_fails(
        self, run, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert run("add", "Sync", "other") == 1
        assert "already exists" in capsys.readouterr().out

    def test_edit_command_only(self, run, user_dir: Path) -> None:
        assert run("edit", "sync", "--command", "syncthing -v") == 0
        entry = load_desktop_file(user_dir / "sync.desktop", EntrySource.USER)
        assert entry.name == "Sync"
        assert entry.command == "syncthing -v"

    def test_edit_rename(
        self, run, user_dir: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        assert run("edit", "sync", "--name", "Sync Daemon", "--rename") == 0
        assert "Moved from sync.desktop" in caplog.text
        assert not (user_dir / "sync.desktop").exists()
        entry = load_desktop_file(
            user_dir / "sync-daemon.desktop", EntrySource.USER
        )
        assert entry.name == "Sync Daemon"
        assert entry.extra == [("X-Keep", "1")]

    def test_edit_without_changes_fails(
        self, run, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert run("edit", "sync") == 1
        assert "Nothing to change" in capsys.readouterr().out

    def test_remove(self, run, user_dir: Path) -> None:
        assert run("remove", "notes") == 0
        assert not (user_dir / "notes.desktop").exists()

    def test_show(self, run, caplog: pytest.LogCaptureFixture) -> None:
        assert run("show", "sync") == 0
        assert "X-Keep=1" in caplog.text
        assert "Editable: yes" in caplog.text


class TestGlobalOptions:
    """Tests for --version and missing commands."""

    def test_version(self, run, capsys: pytest.CaptureFixture[str]) -> None:
        assert run("--version") == 0
        assert capsys.readouterr().out.strip() == __version__

    def test_no_command(self, run, capsys: pytest.CaptureFixture[str]) -> None:
        assert run() == 1
        assert "No command specified" in capsys.readouterr().out

    def test_verbose_runs_command(self, run) -> None:
        assert run("--verbose", "list") == 0


class TestCLIParser:
    """Tests for argument parsing."""

    @pytest.fixture
    def parser(self, config_manager: GlobalConfigManager) -> CLIParser:
        return CLIParser(config_manager.load_global_config())

    def test_list_defaults(self, parser: CLIParser) -> None:
        args = parser.parse_args(["list"])
        assert args.command == "list"
        assert args.sort is None
        assert not (args.enabled or args.disabled or args.json)

    def test_add_arguments(self, parser: CLIParser) -> None:
        args = parser.parse_args(["add", "Name", "cmd --flag"])
        assert args.name == "Name"
        assert args.exec_command == "cmd --flag"

    def test_edit_arguments(self, parser: CLIParser) -> None:
        args = parser.parse_args(["edit", "3", "--command", "x", "--rename"])
        assert args.id == "3"
        assert args.name is None
        assert args.exec_command == "x"
        assert args.rename is True

    def test_invalid_sort_exits(self, parser: CLIParser) -> None:
        with pytest.raises(SystemExit):
            parser.parse_args(["list", "--sort", "random"])

"""Tests for the desktop entry parser."""

from pathlib import Path

import pytest

from startup_manager.core.desktop_entry.parser import (
    load_desktop_file,
    parse_desktop_entry,
    section_name,
    split_lines,
)
from startup_manager.domain.entry import EntrySource
from startup_manager.exceptions import EntryIOError, MalformedEntryError

SAMPLE = """# Written by hand
[Desktop Entry]
# keep me
Type=Application
Name=Syncthing
Name[de]=Syncthing DE
Exec=syncthing serve --no-browser
X-GNOME-Autostart-enabled=true
Comment=File sync
X-Test=1
X-Test=2

[Desktop Action Stop]
Name=Stop
Exec=syncthing stop
"""


class TestSectionName:
    """Tests for section header detection."""

    def test_plain_header(self) -> None:
        assert section_name("[Desktop Entry]") == "Desktop Entry"

    def test_header_with_surrounding_whitespace(self) -> None:
        assert section_name("  [Foo]  ") == "Foo"

    @pytest.mark.parametrize("line", ["Name=x", "# [x]", "[open", ""])
    def test_non_header_lines(self, line: str) -> None:
        assert section_name(line) is None

    def test_double_bracket_header_is_primary(self) -> None:
        assert section_name("[[Desktop Entry]]") == "Desktop Entry"


class TestSplitLines:
    """Tests for line splitting."""

    def test_lf_and_crlf(self) -> None:
        assert split_lines("a\r\nb\nc") == ["a", "b", "c"]

    def test_trailing_newline_adds_no_empty_line(self) -> None:
        assert split_lines("a\n") == ["a"]
        assert split_lines("") == []

    def test_blank_lines_kept(self) -> None:
        assert split_lines("a\n\nb\n") == ["a", "", "b"]

    def test_other_line_boundaries_stay_in_line(self) -> None:
        text = "a\x0bb\x0cc\x1cd\x85e\u2028f\u2029g\n"
        assert split_lines(text) == ["a\x0bb\x0cc\x1cd\x85e\u2028f\u2029g"]


class TestParseDesktopEntry:
    """Tests for parse_desktop_entry."""

    def test_dedicated_fields(self) -> None:
        entry = parse_desktop_entry(SAMPLE)
        assert entry.name == "Syncthing"
        assert entry.command == "syncthing serve --no-browser"
        assert entry.enabled is True
        assert entry.source is EntrySource.OTHER
        assert entry.path is None

    def test_side_tables(self) -> None:
        entry = parse_desktop_entry(SAMPLE)
        assert entry.preamble == ["# Written by hand"]
        assert entry.entry_comments == ["# keep me"]
        assert entry.localized_names == [("de", "Syncthing DE")]
        assert entry.extra == [
            ("Comment", "File sync"),
            ("X-Test", "1"),
            ("X-Test", "2"),
        ]
        assert entry.other_groups == [
            ["[Desktop Action Stop]", "Name=Stop", "Exec=syncthing stop"]
        ]

    def test_duplicate_unrecognized_keys_are_kept_in_order(self) -> None:
        entry = parse_desktop_entry(SAMPLE)
        values = [value for key, value in entry.extra if key == "X-Test"]
        assert values == ["1", "2"]

    def test_values_keep_form_feed_and_line_separator(self) -> None:
        entry = parse_desktop_entry(
            "[Desktop Entry]\nName=A\u2028B\nExec=run\x0cx\n"
        )
        assert entry.name == "A\u2028B"
        assert entry.command == "run\x0cx"
        assert entry.extra == []

    def test_type_key_is_never_stored(self) -> None:
        entry = parse_desktop_entry("[Desktop Entry]\nType=Link\nName=a\n")
        assert entry.extra == []

    def test_defaults_for_empty_input(self) -> None:
        entry = parse_desktop_entry("")
        assert entry.name == "Unnamed"
        assert entry.command == ""
        assert entry.enabled is True
        assert entry.preamble == []
        assert entry.other_groups == []

    def test_records_source_and_path(self, tmp_path: Path) -> None:
        path = tmp_path / "a.desktop"
        entry = parse_desktop_entry(
            "[Desktop Entry]\nName=a\n", EntrySource.USER, path
        )
        assert entry.source is EntrySource.USER
        assert entry.path == path

    def test_lines_without_separator_are_skipped(self) -> None:
        entry = parse_desktop_entry(
            "[Desktop Entry]\nName=a\ngarbage line\nExec=b\n"
        )
        assert entry.name == "a"
        assert entry.command == "b"
        assert entry.extra == []
        assert entry.entry_comments == []

    def test_splits_on_first_equals_and_strips(self) -> None:
        entry = parse_desktop_entry(
            "[Desktop Entry]\n Exec = env A=1 prog \n"
        )
        assert entry.command == "env A=1 prog"

    def test_localized_name_without_closing_bracket_is_dropped(self) -> None:
        entry = parse_desktop_entry(
            "[Desktop Entry]\nName[fr=Oops\nName[fr]=Bon\n"
        )
        assert entry.localized_names == [("fr", "Bon")]
        assert entry.extra == []

    @pytest.mark.parametrize(
        ("body", "expected"),
        [
            ("Hidden=true", False),
            ("Hidden=false", True),
            ("Hidden=yes", True),
            ("X-GNOME-Autostart-enabled=false", False),
            ("X-GNOME-Autostart-enabled=TRUE", False),
            ("Hidden=true\nX-GNOME-Autostart-enabled=true", True),
            ("X-GNOME-Autostart-enabled=true\nHidden=true", False),
        ],
    )
    def test_enabled_last_assignment_wins(
        self, body: str, expected: bool
    ) -> None:
        entry = parse_desktop_entry(f"[Desktop Entry]\n{body}\n")
        assert entry.enabled is expected

    def test_blank_lines_inside_primary_section_are_kept(self) -> None:
        entry = parse_desktop_entry(
            "[Desktop Entry]\nName=a\n\n# later\nExec=b\n\n\n"
        )
        assert entry.entry_comments == ["", "# later"]

    def test_trailing_blank_lines_are_not_stored(self) -> None:
        content = "# top\n\n\n[Desktop Entry]\nName=a\n\n[Other]\nk=v\n\n"
        entry = parse_desktop_entry(content)
        assert entry.preamble == ["# top"]
        assert entry.entry_comments == []
        assert entry.other_groups == [["[Other]", "k=v"]]

    def test_other_sections_are_verbatim(self) -> None:
        content = (
            "[Desktop Entry]\nName=a\n"
            "[One]\n  spaced = value \n# note\n"
            "[Two]\nName=not-primary\n"
        )
        entry = parse_desktop_entry(content)
        assert entry.name == "a"
        assert entry.other_groups == [
            ["[One]", "  spaced = value ", "# note"],
            ["[Two]", "Name=not-primary"],
        ]

    def test_section_before_primary(self) -> None:
        entry = parse_desktop_entry("[First]\nx=1\n[Desktop Entry]\nName=a\n")
        assert entry.preamble == []
        assert entry.other_groups == [["[First]", "x=1"]]
        assert entry.name == "a"

    def test_repeated_primary_section_keeps_assigning(self) -> None:
        entry = parse_desktop_entry(
            "[Desktop Entry]\nName=a\n[X]\nk=v\n[Desktop Entry]\nExec=b\n"
        )
        assert entry.name == "a"
        assert entry.command == "b"
        assert entry.other_groups == [["[X]", "k=v"]]

    def test_handles_crlf_line_endings(self) -> None:
        entry = parse_desktop_entry("[Desktop Entry]\r\nName=a\r\nExec=b\r\n")
        assert entry.name == "a"
        assert entry.command == "b"


class TestLoadDesktopFile:
    """Tests for load_desktop_file."""

    def test_loads_file(self, tmp_path: Path) -> None:
        path = tmp_path / "a.desktop"
        path.write_text(SAMPLE, encoding="utf-8")

        entry = load_desktop_file(path, EntrySource.SYSTEM)

        assert entry.name == "Syncthing"
        assert entry.source is EntrySource.SYSTEM
        assert entry.path == path

    def test_invalid_utf8_raises_malformed(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.desktop"
        path.write_bytes(b"[Desktop Entry]\nName=\xff\xfe\n")

        with pytest.raises(MalformedEntryError) as exc_info:
            load_desktop_file(path, EntrySource.USER)

        assert exc_info.value.target == str(path)

    def test_missing_file_raises_io_error(self, tmp_path: Path) -> None:
        path = tmp_path / "missing.desktop"

        with pytest.raises(EntryIOError) as exc_info:
            load_desktop_file(path, EntrySource.USER)

        assert exc_info.value.target == str(path)
        assert isinstance(exc_info.value.__cause__, OSError)

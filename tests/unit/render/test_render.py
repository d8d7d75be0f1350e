"""Tests for listing row and header formatting."""

from __future__ import annotations

import unittest
from datetime import datetime, timezone
from pathlib import Path
from unittest import mock

from dirlist.listing import EntryKind, ListingEntry
from dirlist.render import format_entry_line, format_subdirectory_header
from dirlist.ui_theme import DEFAULT_THEME, OCEAN_THEME, PLAIN_THEME, available_theme_names, resolve_theme


def make_entry(name: str, kind: EntryKind, size: int = 10) -> ListingEntry:
    return ListingEntry(
        name=name,
        path=Path("/x") / name,
        kind=kind,
        size=size,
        modified=datetime(2024, 3, 5, 12, 30, 0, tzinfo=timezone.utc),
    )


class FormatEntryLineTests(unittest.TestCase):
    def test_plain_line_has_indent_icon_name_and_size(self) -> None:
        self.assertEqual(format_entry_line(make_entry("a.txt", EntryKind.FILE), 0, PLAIN_THEME), "📄 a.txt (10 bytes)")
        self.assertEqual(format_entry_line(make_entry("sub", EntryKind.DIRECTORY, 4096), 2, PLAIN_THEME), "    📁 sub (4096 bytes)")
        self.assertEqual(format_entry_line(make_entry("sock", EntryKind.OTHER, 0), 1, PLAIN_THEME), "  🔗 sock (0 bytes)")

    def test_default_theme_colors_name_by_kind_and_size_in_neutral_color(self) -> None:
        line = format_entry_line(make_entry("sub", EntryKind.DIRECTORY), 0, DEFAULT_THEME)
        self.assertEqual(line, "📁 \033[34msub\033[0m\033[37m (10 bytes)\033[0m")
        self.assertIn("\033[32ma.txt\033[0m", format_entry_line(make_entry("a.txt", EntryKind.FILE), 0, DEFAULT_THEME))
        self.assertIn("\033[33mlink\033[0m", format_entry_line(make_entry("link", EntryKind.OTHER), 0, DEFAULT_THEME))

    def test_mtime_annotation_is_optional(self) -> None:
        entry = make_entry("a.txt", EntryKind.FILE)
        with mock.patch("dirlist.render.MTIME_FORMAT", "%Y"):
            line = format_entry_line(entry, 0, PLAIN_THEME, show_mtime=True)
        self.assertEqual(line, "📄 a.txt (10 bytes) (modified: 2024)")
        self.assertNotIn("modified", format_entry_line(entry, 0, PLAIN_THEME))


class FormatSubdirectoryHeaderTests(unittest.TestCase):
    def test_header_is_indented_to_parent_level(self) -> None:
        self.assertEqual(format_subdirectory_header("B", 0, PLAIN_THEME), "Subdirectory: B")
        self.assertEqual(format_subdirectory_header("C", 1, PLAIN_THEME), "  Subdirectory: C")


class ThemeResolutionTests(unittest.TestCase):
    def test_no_color_returns_plain_theme(self) -> None:
        self.assertIs(resolve_theme("ocean", no_color=True), PLAIN_THEME)

    def test_unknown_theme_falls_back_to_default(self) -> None:
        self.assertIs(resolve_theme(None), DEFAULT_THEME)
        self.assertIs(resolve_theme("no-such-theme"), DEFAULT_THEME)
        self.assertIs(resolve_theme(" Ocean "), OCEAN_THEME)

    def test_plain_theme_is_not_selectable_by_name(self) -> None:
        self.assertEqual(available_theme_names(), ("default", "ocean"))
        self.assertIs(resolve_theme("plain"), DEFAULT_THEME)


if __name__ == "__main__":
    unittest.main()

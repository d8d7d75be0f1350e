"""Format listing rows and subdirectory headers as ANSI text lines."""

from __future__ import annotations

from .listing.types import EntryKind, ListingEntry
from .ui_theme import UITheme

INDENT = "  "
KIND_ICONS: dict[EntryKind, str] = {
    EntryKind.DIRECTORY: "📁",
    EntryKind.FILE: "📄",
    EntryKind.OTHER: "🔗",
}
MTIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def indent_prefix(indent_level: int) -> str:
    return INDENT * max(0, indent_level)


def kind_color(kind: EntryKind, theme: UITheme) -> str:
    """Return the name color for ``kind``."""
    if kind is EntryKind.DIRECTORY:
        return theme.entry_dir
    if kind is EntryKind.FILE:
        return theme.entry_file
    return theme.entry_other


def _paint(text: str, color: str, theme: UITheme) -> str:
    if not color:
        return text
    return f"{color}{text}{theme.reset}"


def format_entry_line(
    entry: ListingEntry,
    indent_level: int,
    theme: UITheme,
    show_mtime: bool = False,
) -> str:
    """Render one entry as ``<indent><icon> <name> (<N> bytes)``.

    With ``show_mtime`` a local-time ``(modified: ...)`` annotation follows.
    """
    parts = [
        indent_prefix(indent_level),
        KIND_ICONS[entry.kind],
        " ",
        _paint(entry.name, kind_color(entry.kind, theme), theme),
        _paint(f" ({entry.size} bytes)", theme.entry_size, theme),
    ]
    if show_mtime:
        stamp = entry.modified.astimezone().strftime(MTIME_FORMAT)
        parts.append(_paint(f" (modified: {stamp})", theme.entry_mtime, theme))
    return "".join(parts)


def format_subdirectory_header(name: str, indent_level: int, theme: UITheme) -> str:
    """Render the header printed before descending into ``name``."""
    return indent_prefix(indent_level) + _paint(f"Subdirectory: {name}", theme.header, theme)


__all__ = [
    "INDENT",
    "KIND_ICONS",
    "indent_prefix",
    "kind_color",
    "format_entry_line",
    "format_subdirectory_header",
]

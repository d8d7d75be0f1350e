"""Depth-first directory walk that prints each level as it is scanned.

Pending subdirectories are kept on an explicit stack, so tree depth is not
limited by the interpreter's recursion limit.
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from ..render import format_entry_line, format_subdirectory_header
from ..ui_theme import PLAIN_THEME, UITheme
from .fs import scan_directory
from .ordering import entries_of_kind, kind_is_visible, printable_entries, sort_entries
from .types import DirectoryReadError, EntryKind, ListingEntry, ListingOptions

LOGGER_NAME = "dirlist"

_DirectoryIdentity = tuple[int, int]


@dataclass(frozen=True)
class _PendingDirectory:
    """Subdirectory waiting to be listed below its parent's rows."""

    entry: ListingEntry
    parent_indent: int
    ancestors: frozenset[_DirectoryIdentity]


def _directory_identity(path: Path) -> _DirectoryIdentity | None:
    try:
        stat = os.stat(path)
    except OSError:
        return None
    return (stat.st_dev, stat.st_ino)


def list_directory(
    path: Path,
    options: ListingOptions,
    indent_level: int = 0,
    *,
    theme: UITheme = PLAIN_THEME,
    out: TextIO | None = None,
    logger: logging.Logger | None = None,
) -> None:
    """Print the entries of ``path`` and, when recursive, of its subdirectories.

    Raises ``DirectoryReadError`` when ``path`` itself cannot be read. Nested
    directories that cannot be read are logged and skipped.
    """
    out = out if out is not None else sys.stdout
    logger = logger if logger is not None else logging.getLogger(LOGGER_NAME)
    show_headers = kind_is_visible(EntryKind.DIRECTORY, options)

    def print_level(directory: Path, level: int) -> list[ListingEntry]:
        entries = sort_entries(scan_directory(directory, options, logger), options.sort_key)
        logger.debug("listed %s: %d entries", directory, len(entries))
        for entry in printable_entries(entries, options):
            out.write(format_entry_line(entry, level, theme, options.show_mtime) + "\n")
        return entries

    def push_children(
        stack: list[_PendingDirectory],
        directory: Path,
        entries: list[ListingEntry],
        level: int,
        ancestors: frozenset[_DirectoryIdentity],
    ) -> None:
        if options.follow_symlinks:
            identity = _directory_identity(directory)
            if identity is not None:
                ancestors = ancestors | {identity}
        # reversed so the first subdirectory is popped first
        for child in reversed(entries_of_kind(entries, EntryKind.DIRECTORY)):
            stack.append(_PendingDirectory(entry=child, parent_indent=level, ancestors=ancestors))

    entries = print_level(path, indent_level)
    if not options.recursive:
        return

    stack: list[_PendingDirectory] = []
    push_children(stack, path, entries, indent_level, frozenset())
    while stack:
        pending = stack.pop()
        directory = pending.entry.path
        if options.follow_symlinks and _directory_identity(directory) in pending.ancestors:
            logger.warning("Skipping %s: directory cycle", directory)
            continue
        if show_headers:
            out.write("\n" + format_subdirectory_header(pending.entry.name, pending.parent_indent, theme) + "\n")
        level = pending.parent_indent + 1
        try:
            entries = print_level(directory, level)
        except DirectoryReadError as exc:
            logger.error("%s", exc)
            continue
        push_children(stack, directory, entries, level, pending.ancestors)


__all__ = ["list_directory"]

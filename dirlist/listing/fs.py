"""Filesystem scanning for one directory level."""

from __future__ import annotations

import logging
import os
from datetime import datetime, timezone
from pathlib import Path

from .types import EPOCH, HIDDEN_MARKER, DirectoryReadError, EntryKind, ListingEntry, ListingOptions


def is_hidden(name: str) -> bool:
    """Return whether ``name`` is a hidden entry excluded from every listing."""
    return name.startswith(HIDDEN_MARKER)


def safe_modified(st_mtime: float, logger: logging.Logger | None = None) -> datetime:
    """Convert ``st_mtime`` to an aware UTC datetime, falling back to the epoch."""
    try:
        return datetime.fromtimestamp(st_mtime, tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as exc:
        if logger is not None:
            logger.debug("modified time %r out of range, using epoch: %s", st_mtime, exc)
        return EPOCH


def classify_entry(child: os.DirEntry, follow_symlinks: bool) -> EntryKind:
    """Return the kind of ``child``.

    Without ``follow_symlinks`` every symlink is ``OTHER``. With it, links are
    classified by their target and broken links stay ``OTHER``.
    """
    if child.is_dir(follow_symlinks=follow_symlinks):
        return EntryKind.DIRECTORY
    if child.is_file(follow_symlinks=follow_symlinks):
        return EntryKind.FILE
    return EntryKind.OTHER


def _stat_child(child: os.DirEntry, kind: EntryKind, follow_symlinks: bool) -> os.stat_result:
    if follow_symlinks and kind is not EntryKind.OTHER:
        return child.stat(follow_symlinks=True)
    return child.stat(follow_symlinks=False)


def scan_directory(directory: Path, options: ListingOptions, logger: logging.Logger) -> list[ListingEntry]:
    """List visible children of ``directory`` in filesystem enumeration order.

    Raises ``DirectoryReadError`` when the directory itself cannot be opened.
    Children whose kind or metadata cannot be read are logged and skipped.
    """
    entries: list[ListingEntry] = []
    try:
        scanner = os.scandir(directory)
    except OSError as exc:
        raise DirectoryReadError(directory, exc) from exc

    with scanner:
        iterator = iter(scanner)
        while True:
            try:
                child = next(iterator)
            except StopIteration:
                break
            except OSError as exc:
                # scandir cannot resume after a failed read
                logger.error("Error reading entry in %s: %s", directory, exc)
                break

            name = child.name
            if is_hidden(name):
                continue

            try:
                kind = classify_entry(child, options.follow_symlinks)
                stat = _stat_child(child, kind, options.follow_symlinks)
            except OSError as exc:
                logger.error("Error reading entry %s: %s", child.path, exc)
                continue

            entries.append(
                ListingEntry(
                    name=name,
                    path=Path(child.path),
                    kind=kind,
                    size=int(stat.st_size),
                    modified=safe_modified(stat.st_mtime, logger),
                )
            )
    return entries


__all__ = [
    "is_hidden",
    "safe_modified",
    "classify_entry",
    "scan_directory",
]

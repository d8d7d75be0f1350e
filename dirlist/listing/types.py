"""Domain datatypes for one-level directory listings."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

HIDDEN_MARKER = "."
EPOCH = datetime.fromtimestamp(0, tz=timezone.utc)


class EntryKind(enum.Enum):
    """Kind discriminant used to group, filter, and color entries."""

    DIRECTORY = "directory"
    FILE = "file"
    OTHER = "other"


class SortKey(enum.Enum):
    """Single active sort criterion for a directory visit."""

    NAME = "name"
    SIZE = "size"
    DATE = "date"


@dataclass(frozen=True)
class ListingEntry:
    """One visible directory child with metadata observed during the scan."""

    name: str
    path: Path
    kind: EntryKind
    size: int
    modified: datetime = EPOCH


@dataclass(frozen=True)
class ListingOptions:
    """Immutable listing switches shared by every level of the walk.

    ``filter_files`` hides directories and ``filter_dirs`` hides files; the
    names follow the command-line flags they come from.
    """

    group_dirs_first: bool = False
    recursive: bool = False
    sort_by_name: bool = False
    sort_by_size: bool = False
    sort_by_date: bool = False
    filter_files: bool = False
    filter_dirs: bool = False
    follow_symlinks: bool = False
    show_mtime: bool = False

    @property
    def sort_key(self) -> SortKey | None:
        """Return the active sort criterion; name wins over size over date."""
        if self.sort_by_name:
            return SortKey.NAME
        if self.sort_by_size:
            return SortKey.SIZE
        if self.sort_by_date:
            return SortKey.DATE
        return None


class DirectoryReadError(Exception):
    """Raised when a directory cannot be opened for enumeration."""

    def __init__(self, path: Path, cause: OSError) -> None:
        super().__init__(f"Failed to read directory {path}: {cause}")
        self.path = path
        self.cause = cause


__all__ = [
    "HIDDEN_MARKER",
    "EPOCH",
    "EntryKind",
    "SortKey",
    "ListingEntry",
    "ListingOptions",
    "DirectoryReadError",
]

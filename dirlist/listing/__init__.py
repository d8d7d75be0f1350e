"""Domain model and filesystem scanning for directory listings.

This package contains non-UI listing primitives:
- entry/option datatypes with a kind discriminant
- one-level filesystem scanning with hidden-entry filtering
- single-criterion sorting and per-kind print rules

The printing walk lives in ``dirlist.listing.walk`` since it depends on the
renderer.
"""

from __future__ import annotations

from .types import (
    EPOCH,
    HIDDEN_MARKER,
    DirectoryReadError,
    EntryKind,
    ListingEntry,
    ListingOptions,
    SortKey,
)
from .fs import classify_entry, is_hidden, safe_modified, scan_directory
from .ordering import entries_of_kind, kind_is_visible, kind_print_order, printable_entries, sort_entries

__all__ = [
    "EPOCH",
    "HIDDEN_MARKER",
    "DirectoryReadError",
    "EntryKind",
    "ListingEntry",
    "ListingOptions",
    "SortKey",
    "classify_entry",
    "is_hidden",
    "safe_modified",
    "scan_directory",
    "entries_of_kind",
    "kind_is_visible",
    "kind_print_order",
    "printable_entries",
    "sort_entries",
]

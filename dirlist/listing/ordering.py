"""Sorting and print-order rules for scanned entries."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from .types import EntryKind, ListingEntry, ListingOptions, SortKey

_SORT_KEYS: dict[SortKey, Callable[[ListingEntry], object]] = {
    SortKey.NAME: lambda entry: entry.name,
    SortKey.SIZE: lambda entry: entry.size,
    SortKey.DATE: lambda entry: entry.modified,
}


def sort_entries(entries: Iterable[ListingEntry], sort_key: SortKey | None) -> list[ListingEntry]:
    """Return entries ordered by ``sort_key``, or unchanged when it is ``None``.

    The sort is stable, so selecting one kind afterwards yields that kind's
    entries in their own sorted order.
    """
    if sort_key is None:
        return list(entries)
    return sorted(entries, key=_SORT_KEYS[sort_key])


def kind_print_order(options: ListingOptions) -> tuple[EntryKind, ...]:
    """Return the order in which kinds are printed for one directory."""
    if options.group_dirs_first:
        return (EntryKind.DIRECTORY, EntryKind.FILE, EntryKind.OTHER)
    return (EntryKind.FILE, EntryKind.OTHER, EntryKind.DIRECTORY)


def kind_is_visible(kind: EntryKind, options: ListingOptions) -> bool:
    """Return whether lines of ``kind`` are printed under ``options``."""
    if kind is EntryKind.DIRECTORY:
        return not options.filter_files
    if kind is EntryKind.FILE:
        return not options.filter_dirs
    return True


def entries_of_kind(entries: Iterable[ListingEntry], kind: EntryKind) -> list[ListingEntry]:
    """Select one kind, keeping relative order."""
    return [entry for entry in entries if entry.kind is kind]


def printable_entries(entries: Iterable[ListingEntry], options: ListingOptions) -> list[ListingEntry]:
    """Return entries in printed order with suppressed kinds removed."""
    entries = list(entries)
    ordered: list[ListingEntry] = []
    for kind in kind_print_order(options):
        if kind_is_visible(kind, options):
            ordered.extend(entries_of_kind(entries, kind))
    return ordered


__all__ = [
    "sort_entries",
    "kind_print_order",
    "kind_is_visible",
    "entries_of_kind",
    "printable_entries",
]

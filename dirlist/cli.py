"""Command-line front door for dirlist.

Parses presence-only flags, merges config defaults, and lists the current
working directory. An unreadable root directory ends the run with a
diagnostic and a non-zero exit code.
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import TextIO

from . import config
from .listing import DirectoryReadError, ListingOptions
from .listing.walk import LOGGER_NAME, list_directory
from .log import setup_logger
from .ui_theme import available_theme_names, resolve_theme


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dirlist",
        allow_abbrev=False,
        description="List the current directory with type icons, sizes, and colors.",
    )
    parser.add_argument("--dir", dest="group_dirs_first", action="store_true", help="Print directories before files.")
    parser.add_argument("--recursive", action="store_true", help="Descend into subdirectories.")
    parser.add_argument("--sort-name", dest="sort_by_name", action="store_true", help="Sort by name.")
    parser.add_argument("--sort-size", dest="sort_by_size", action="store_true", help="Sort by size in bytes.")
    parser.add_argument("--sort-date", dest="sort_by_date", action="store_true", help="Sort by modification time.")
    parser.add_argument("--files", dest="filter_files", action="store_true", help="Hide directory rows.")
    parser.add_argument("--dirs", dest="filter_dirs", action="store_true", help="Hide file rows.")
    parser.add_argument(
        "--follow-symlinks",
        action="store_true",
        help="Classify symlinks by their target and descend into linked directories.",
    )
    parser.add_argument("--mtime", dest="show_mtime", action="store_true", help="Show modification times.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--verbose", action="store_true", help="Log debug diagnostics to stderr.")
    return parser


def resolve_options(args: argparse.Namespace) -> ListingOptions:
    """Build listing options from parsed flags with config defaults filled in."""
    return ListingOptions(
        group_dirs_first=args.group_dirs_first,
        recursive=args.recursive,
        sort_by_name=args.sort_by_name,
        sort_by_size=args.sort_by_size,
        sort_by_date=args.sort_by_date,
        filter_files=args.filter_files,
        filter_dirs=args.filter_dirs,
        follow_symlinks=args.follow_symlinks or config.load_follow_symlinks(),
        show_mtime=args.show_mtime or config.load_show_mtime(),
    )


def stream_supports_color(stream: TextIO) -> bool:
    """Return whether ``stream`` is a terminal and ``NO_COLOR`` is unset."""
    if os.environ.get("NO_COLOR"):
        return False
    try:
        return os.isatty(stream.fileno())
    except (AttributeError, OSError, ValueError):
        return False


def main(default_path: Path | None = None, argv: list[str] | None = None) -> None:
    """Parse CLI flags and list ``default_path``.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used. Unknown arguments are ignored.
    """
    args, unknown = build_parser().parse_known_args(argv)
    logger = setup_logger(LOGGER_NAME, args.verbose)
    if unknown:
        logger.debug("ignoring unrecognized arguments: %s", " ".join(unknown))

    options = resolve_options(args)
    no_color = args.no_color or config.load_no_color() or not stream_supports_color(sys.stdout)
    theme = resolve_theme(args.theme or config.load_theme_name(), no_color=no_color)

    if default_path is None:
        try:
            default_path = Path.cwd()
        except OSError as exc:
            raise SystemExit(f"Failed to resolve current directory: {exc}") from exc

    try:
        list_directory(default_path, options, theme=theme, out=sys.stdout, logger=logger)
    except DirectoryReadError as exc:
        raise SystemExit(str(exc)) from exc


if __name__ == "__main__":
    main()

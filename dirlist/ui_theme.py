"""UI theme definitions and selection helpers.

Themes are ANSI palettes for listing rows. The plain theme carries empty
escapes and is used whenever color output is off.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    entry_dir: str
    entry_file: str
    entry_other: str
    entry_size: str
    entry_mtime: str
    header: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    entry_dir="\033[34m",
    entry_file="\033[32m",
    entry_other="\033[33m",
    entry_size="\033[37m",
    entry_mtime="\033[35m",
    header="\033[1m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    entry_dir="\033[1;38;5;45m",
    entry_file="\033[38;5;117m",
    entry_other="\033[38;5;215m",
    entry_size="\033[38;5;73m",
    entry_mtime="\033[2;38;5;110m",
    header="\033[1;38;5;39m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    entry_dir="",
    entry_file="",
    entry_other="",
    entry_size="",
    entry_mtime="",
    header="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    return tuple(sorted(_THEMES))


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Pick the palette for listing rows.

    Color off always wins and yields the plain theme. Names are matched
    case-insensitively; unset or unknown names use the default palette, and
    ``plain`` cannot be requested by name.
    """
    if no_color:
        return PLAIN_THEME
    key = (name or "").strip().lower()
    return _THEMES.get(key, DEFAULT_THEME)


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "resolve_theme",
]

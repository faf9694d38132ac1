"""ANSI palettes for checkbox rows and their lookup by name."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Escape codes for each part of a rendered selection row."""

    name: str
    reset: str
    tree_dir: str
    tree_file: str
    check_enabled: str
    check_disabled: str
    check_mixed: str
    lines_added: str
    lines_removed: str
    status_changed: str
    status_untracked: str
    status_deleted: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    tree_dir="\033[1;34m",
    tree_file="\033[38;5;252m",
    check_enabled="\033[38;5;42m",
    check_disabled="\033[2;38;5;250m",
    check_mixed="\033[38;5;214m",
    lines_added="\033[38;5;42m",
    lines_removed="\033[38;5;203m",
    status_changed="\033[38;5;214m",
    status_untracked="\033[38;5;42m",
    status_deleted="\033[38;5;203m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    tree_dir="\033[1;38;5;45m",
    tree_file="\033[38;5;252m",
    check_enabled="\033[38;5;117m",
    check_disabled="\033[2;38;5;110m",
    check_mixed="\033[38;5;221m",
    lines_added="\033[38;5;79m",
    lines_removed="\033[38;5;210m",
    status_changed="\033[38;5;221m",
    status_untracked="\033[38;5;79m",
    status_deleted="\033[38;5;210m",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> list[str]:
    return sorted(_THEMES)


def resolve_theme(name: str | None) -> UITheme:
    """Return theme by case-insensitive name, falling back to the default."""
    if not name:
        return DEFAULT_THEME
    return _THEMES.get(name.strip().lower(), DEFAULT_THEME)

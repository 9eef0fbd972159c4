"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the listing, the status row, and the command
row.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    selected: str
    search_target: str
    directory: str
    file: str
    symlink: str
    synthetic: str
    mode_normal: str
    mode_search: str
    status_path: str
    command_text: str
    command_error: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    selected="\033[38;5;240;48;5;255m",
    search_target="\033[48;5;240m",
    directory="\033[1;34m",
    file="\033[38;5;252m",
    symlink="\033[36m",
    synthetic="\033[2m",
    mode_normal="\033[30;44m",
    mode_search="\033[30;43m",
    status_path="\033[48;5;240m",
    command_text="",
    command_error="\033[31m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    selected="\033[38;5;17;48;5;153m",
    search_target="\033[48;5;24m",
    directory="\033[1;38;5;45m",
    file="\033[38;5;252m",
    symlink="\033[38;5;117m",
    synthetic="\033[2;38;5;110m",
    mode_normal="\033[38;5;17;48;5;39m",
    mode_search="\033[38;5;17;48;5;215m",
    status_path="\033[48;5;24m",
    command_text="\033[38;5;153m",
    command_error="\033[38;5;203m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    selected="\033[7m",
    search_target="\033[4m",
    directory="",
    file="",
    symlink="",
    synthetic="",
    mode_normal="\033[7m",
    mode_search="\033[7m",
    status_path="",
    command_text="",
    command_error="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]

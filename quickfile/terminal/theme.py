"""ANSI palettes for the picker screen."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the picker renderer."""

    name: str
    reset: str
    prompt: str
    query: str
    placeholder: str
    selected_marker: str
    selected_row: str
    entry_up: str
    entry_directory: str
    entry_leaf: str
    status: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    prompt="\033[38;5;44m",
    query="\033[1;38;5;81m",
    placeholder="\033[2;38;5;250m",
    selected_marker="\033[38;5;81m",
    selected_row="\033[7m",
    entry_up="\033[2;38;5;250m",
    entry_directory="\033[1;34m",
    entry_leaf="\033[38;5;252m",
    status="\033[2m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    prompt="\033[38;5;39m",
    query="\033[1;38;5;45m",
    placeholder="\033[2;38;5;110m",
    selected_marker="\033[38;5;45m",
    selected_row="\033[7m",
    entry_up="\033[2;38;5;110m",
    entry_directory="\033[1;38;5;45m",
    entry_leaf="\033[38;5;153m",
    status="\033[2;38;5;31m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    prompt="",
    query="",
    placeholder="",
    selected_marker="",
    selected_row="",
    entry_up="",
    entry_directory="",
    entry_leaf="",
    status="",
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

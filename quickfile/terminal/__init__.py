"""Terminal plumbing for the picker host: raw mode, key decoding, ANSI output."""

from .ansi import clip_ansi_line, display_width, strip_ansi
from .controller import TerminalController
from .keys import read_key
from .theme import UITheme, available_theme_names, resolve_theme

__all__ = [
    "clip_ansi_line",
    "display_width",
    "strip_ansi",
    "TerminalController",
    "read_key",
    "UITheme",
    "available_theme_names",
    "resolve_theme",
]

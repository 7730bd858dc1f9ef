"""Interactive session loop wiring the terminal picker to the navigation core.

This module is wiring only: navigation rules live in
:mod:`quickfile.navigation`, matching and key handling in
:mod:`quickfile.picker`.
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Callable
from dataclasses import dataclass

from .commands import OPEN_QUICK_FILE_COMMAND, CommandRegistry, register_open_quick_file
from .errors import NoWorkspaceRootError, QuickFileError
from .location import Location
from .navigation import NavigationController, NavigationPhase
from .picker import PickerPanel, compose_screen, render_picker_rows
from .remote.scheduler import Scheduler
from .terminal import UITheme, read_key, resolve_theme

logger = logging.getLogger(__name__)

POLL_INTERVAL_MS = 50


@dataclass(frozen=True)
class SessionResult:
    """How an interactive session ended."""

    opened: Location | None
    error: QuickFileError | None
    open_message: str | None = None


class QuickFileSession:
    """Run one picker session in the terminal until a leaf is opened or it ends.

    The leaf is opened only after the terminal has left raw mode, so editors
    and printed output land on the normal screen.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        open_location: Callable[[Location], object],
        workspace_roots: list[Location],
        terminal,
        *,
        stdin_fd: int = 0,
        theme: UITheme | None = None,
        key_reader: Callable[..., str] = read_key,
        terminal_size: Callable[[], tuple[int, int]] | None = None,
    ) -> None:
        self.open_location = open_location
        self.workspace_roots = list(workspace_roots)
        self.terminal = terminal
        self.stdin_fd = stdin_fd
        self.theme = theme if theme is not None else resolve_theme(None)
        self.key_reader = key_reader
        self.terminal_size = terminal_size if terminal_size is not None else _current_terminal_size
        self.pending_open: Location | None = None
        self.error: QuickFileError | None = None
        self.panel = PickerPanel(activate=self._activate, dismiss=self._dismiss)
        self.controller = NavigationController(
            scheduler,
            self._defer_open,
            self.panel,
            notify=self._notify,
        )
        self.commands = register_open_quick_file(
            CommandRegistry(),
            lambda: self.workspace_roots,
            self.controller.start,
        )
        self._last_size: tuple[int, int] | None = None

    def _defer_open(self, location: Location) -> None:
        self.pending_open = location

    def _notify(self, error: QuickFileError) -> None:
        self.error = error

    def _activate(self, entry) -> None:
        self.controller.select(entry)

    def _dismiss(self) -> None:
        self.controller.dismiss()

    def status_text(self) -> str:
        """Return the status-row text: loading notice or location and match count."""
        state = self.controller.state
        location = state.current_location
        if state.phase is NavigationPhase.LISTING:
            return f"Loading {location} ..."
        total = len(state.entries or [])
        return f"{OPEN_QUICK_FILE_COMMAND.label}  {location}  {len(self.panel.matches)}/{total}"

    def visible_rows(self) -> int:
        _columns, lines = self.terminal_size()
        return max(1, lines - 2)

    def render(self) -> None:
        columns, lines = self.terminal_size()
        rows = render_picker_rows(self.panel, self.theme, columns, lines, self.status_text())
        self.terminal.write(compose_screen(rows))
        self.panel.dirty = False
        self._last_size = (columns, lines)

    def handle_key(self, key: str) -> None:
        if self.commands.dispatch_key(key):
            logger.debug("key %s restarted navigation", key)
            self.panel.dirty = True
            return
        self.panel.handle_key(key, self.visible_rows())

    def run(self) -> SessionResult:
        if not self.commands.is_enabled(OPEN_QUICK_FILE_COMMAND.id):
            raise NoWorkspaceRootError("no workspace root configured; pass ROOT or set workspace_roots")

        with self.terminal.raw_mode():
            self.commands.execute(OPEN_QUICK_FILE_COMMAND.id)
            while self.controller.state.active:
                if self.controller.poll():
                    self.panel.dirty = True
                if self.panel.dirty or self._last_size != self.terminal_size():
                    self.render()
                key = self.key_reader(self.stdin_fd, timeout_ms=POLL_INTERVAL_MS)
                if key:
                    self.handle_key(key)

        open_message = None
        if self.pending_open is not None:
            result = self.open_location(self.pending_open)
            open_message = result if isinstance(result, str) else None
        return SessionResult(opened=self.pending_open, error=self.error, open_message=open_message)


def _current_terminal_size() -> tuple[int, int]:
    term = shutil.get_terminal_size((80, 24))
    return term.columns, term.lines


__all__ = ["POLL_INTERVAL_MS", "SessionResult", "QuickFileSession"]

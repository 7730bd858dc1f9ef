"""Command and keybinding registry for the "Open Quick File..." entry point."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .errors import CommandUnavailableError, NoWorkspaceRootError
from .location import Location


@dataclass(frozen=True)
class Command:
    id: str
    label: str
    keybinding: str | None = None


@dataclass(frozen=True)
class CommandHandler:
    """Execution callback plus the enablement predicate gating it."""

    execute: Callable[[], object]
    is_enabled: Callable[[], bool] = lambda: True


OPEN_QUICK_FILE_COMMAND = Command(
    id="open.quick.file.command",
    label="Open Quick File...",
    keybinding="CTRL_K",
)


class CommandRegistry:
    """Commands by id plus a key-token to command-id dispatch table."""

    def __init__(self) -> None:
        self._commands: dict[str, tuple[Command, CommandHandler]] = {}
        self._keybindings: dict[str, str] = {}

    def register_command(self, command: Command, handler: CommandHandler) -> CommandRegistry:
        """Register ``command``, binding its key token when it has one."""
        self._commands[command.id] = (command, handler)
        if command.keybinding:
            self._keybindings[command.keybinding] = command.id
        return self

    def get(self, command_id: str) -> Command | None:
        registered = self._commands.get(command_id)
        return registered[0] if registered is not None else None

    def is_enabled(self, command_id: str) -> bool:
        registered = self._commands.get(command_id)
        if registered is None:
            return False
        return bool(registered[1].is_enabled())

    def enabled_commands(self) -> list[Command]:
        """Commands currently offered to the user, in registration order."""
        return [command for command, handler in self._commands.values() if handler.is_enabled()]

    def execute(self, command_id: str) -> object:
        registered = self._commands.get(command_id)
        if registered is None:
            raise CommandUnavailableError(f"unknown command: {command_id}")
        command, handler = registered
        if not handler.is_enabled():
            raise CommandUnavailableError(f"{command.label} is not available")
        return handler.execute()

    def dispatch_key(self, key: str) -> bool:
        """Execute the enabled command bound to ``key``; return whether one ran."""
        command_id = self._keybindings.get(key)
        if command_id is None or not self.is_enabled(command_id):
            return False
        self.execute(command_id)
        return True


def register_open_quick_file(
    registry: CommandRegistry,
    workspace_roots: Callable[[], list[Location]],
    start: Callable[[Location], object],
) -> CommandRegistry:
    """Register the entry point that starts navigation at the first workspace root.

    The command is only enabled while at least one root is available.
    """

    def execute() -> object:
        roots = workspace_roots()
        if not roots:
            raise NoWorkspaceRootError("no workspace root to open files from")
        return start(roots[0])

    return registry.register_command(
        OPEN_QUICK_FILE_COMMAND,
        CommandHandler(execute=execute, is_enabled=lambda: bool(workspace_roots())),
    )


__all__ = [
    "Command",
    "CommandHandler",
    "CommandRegistry",
    "OPEN_QUICK_FILE_COMMAND",
    "register_open_quick_file",
]

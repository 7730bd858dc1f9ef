"""Mutable per-session navigation state owned by the controller."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from ..errors import QuickFileError
from ..location import Location
from .entries import NavigationEntry
from .path_stack import PathStack


class NavigationPhase(enum.Enum):
    IDLE = "idle"
    LISTING = "listing"
    AWAITING_SELECTION = "awaiting_selection"


@dataclass
class NavigationState:
    """Where the session is, how it got there, and what is on screen."""

    current_location: Location | None = None
    stack: PathStack = field(default_factory=PathStack)
    phase: NavigationPhase = NavigationPhase.IDLE
    entries: list[NavigationEntry] | None = None
    pending_request_id: int | None = None
    last_error: QuickFileError | None = None
    opened: Location | None = None

    @property
    def active(self) -> bool:
        return self.phase is not NavigationPhase.IDLE


__all__ = ["NavigationPhase", "NavigationState"]

"""Navigation core: location history, entry building and the session controller."""

from .path_stack import PathStack
from .entries import UP_LABEL, EntryBuilder, EntryKind, NavigationEntry, classify_name
from .state import NavigationPhase, NavigationState
from .controller import NavigationController

__all__ = [
    "PathStack",
    "UP_LABEL",
    "EntryBuilder",
    "EntryKind",
    "NavigationEntry",
    "classify_name",
    "NavigationPhase",
    "NavigationState",
    "NavigationController",
]

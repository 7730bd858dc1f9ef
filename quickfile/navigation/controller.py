"""Navigation state machine driving listing, picker presentation and selection.

Phases run ``IDLE -> LISTING -> AWAITING_SELECTION`` and from there either
back to ``LISTING`` (descend or go up) or to ``IDLE`` (leaf opened, picker
dismissed, or listing failed). Each hop updates state and schedules exactly
one listing; nothing recurses per directory level.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from ..errors import QuickFileError
from ..location import Location
from ..picker.host import PickerHost, PickerOptions
from ..remote.scheduler import ListingOutcome, Scheduler
from .entries import EntryBuilder, NavigationEntry
from .path_stack import PathStack
from .state import NavigationPhase, NavigationState

logger = logging.getLogger(__name__)


def _log_failure(error: QuickFileError) -> None:
    logger.error("navigation aborted: %s", error)


class NavigationController:
    """Own one navigation session at a time and react to picker selections."""

    def __init__(
        self,
        scheduler: Scheduler,
        open_location: Callable[[Location], object],
        picker: PickerHost,
        *,
        notify: Callable[[QuickFileError], None] | None = None,
        options: PickerOptions | None = None,
    ) -> None:
        self.scheduler = scheduler
        self.open_location = open_location
        self.picker = picker
        self.notify = notify if notify is not None else _log_failure
        self.options = options if options is not None else PickerOptions()
        self.state = NavigationState()
        self._builder = EntryBuilder(self._descend, self._ascend, self._open_leaf)

    @property
    def phase(self) -> NavigationPhase:
        return self.state.phase

    @property
    def current_location(self) -> Location | None:
        return self.state.current_location

    @property
    def stack(self) -> PathStack:
        return self.state.stack

    @property
    def entries(self) -> list[NavigationEntry]:
        return list(self.state.entries or [])

    def start(self, root: Location) -> int:
        """Begin a fresh session at ``root`` and return the first request id.

        Starting while a session is active abandons it; its outstanding
        listing becomes stale.
        """
        if self.state.active:
            logger.debug("restarting session at %s", root)
        self.state = NavigationState(current_location=root)
        return self._request_listing()

    def provide_entries(self, query: str) -> Sequence[NavigationEntry]:
        """Picker provider: the full current entry list, whatever the query."""
        _ = query
        return self.entries

    def poll(self) -> bool:
        """Apply finished listings; return whether the state changed.

        Outcomes whose request id is not the most recently issued one are
        dropped without any transition.
        """
        changed = False
        for outcome in self.scheduler.drain_results():
            if outcome.request_id != self.state.pending_request_id:
                logger.debug("dropping stale listing %d for %s", outcome.request_id, outcome.location)
                continue
            self._apply_outcome(outcome)
            changed = True
        return changed

    def select(self, entry: NavigationEntry) -> bool:
        """Run ``entry`` if it belongs to the entries currently on offer."""
        if self.state.phase is not NavigationPhase.AWAITING_SELECTION:
            return False
        if not any(candidate is entry for candidate in self.state.entries or []):
            logger.debug("ignoring selection of %r outside the current listing", entry.label)
            return False
        entry.run()
        return True

    def dismiss(self) -> None:
        """End the session without opening anything."""
        if not self.state.active:
            return
        logger.debug("session dismissed at %s", self.state.current_location)
        self._finish()

    def _finish(self) -> None:
        self.state.phase = NavigationPhase.IDLE
        self.state.entries = None
        self.state.pending_request_id = None
        self.picker.close()

    def _request_listing(self) -> int:
        location = self.state.current_location
        assert location is not None
        self.state.phase = NavigationPhase.LISTING
        self.state.entries = None
        self.state.last_error = None
        request_id = self.scheduler.schedule(location)
        self.state.pending_request_id = request_id
        logger.debug("listing %s as request %d", location, request_id)
        # Inline schedulers have already finished by now.
        self.poll()
        return request_id

    def _apply_outcome(self, outcome: ListingOutcome) -> None:
        self.state.pending_request_id = None
        if outcome.error is not None:
            self.state.last_error = outcome.error
            self._finish()
            self.notify(outcome.error)
            return
        location = self.state.current_location
        assert location is not None
        stack = self.state.stack
        self.state.entries = self._builder.build(
            outcome.names or [], location, bool(stack), up_target=stack.peek()
        )
        self.state.phase = NavigationPhase.AWAITING_SELECTION
        self.picker.show(self.provide_entries, self.options)

    def _descend(self, child: Location) -> None:
        if self.state.phase is not NavigationPhase.AWAITING_SELECTION:
            return
        current = self.state.current_location
        assert current is not None
        self.state.stack.push(current)
        self.state.current_location = child
        self._request_listing()

    def _ascend(self) -> None:
        if self.state.phase is not NavigationPhase.AWAITING_SELECTION:
            return
        parent = self.state.stack.pop()
        if parent is None:
            return
        self.state.current_location = parent
        self._request_listing()

    def _open_leaf(self, child: Location) -> None:
        if self.state.phase is not NavigationPhase.AWAITING_SELECTION:
            return
        logger.info("opening %s", child)
        self.state.opened = child
        self._finish()
        self.open_location(child)


__all__ = ["NavigationController"]

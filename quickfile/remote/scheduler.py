"""Listing schedulers that tag every request with a monotonically increasing id.

The controller remembers the id of the last request it issued and ignores
outcomes carrying any other id, so a slow response can never overwrite a
newer location.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from queue import Empty, Queue
from typing import Protocol

from ..errors import QuickFileError
from ..location import Location

logger = logging.getLogger(__name__)

ListFunction = Callable[[Location], list[str]]


@dataclass(frozen=True)
class ListingRequest:
    """One scheduled listing job."""

    request_id: int
    location: Location


@dataclass(frozen=True)
class ListingOutcome:
    """Completed listing job: either ``names`` or ``error`` is set."""

    request: ListingRequest
    names: list[str] | None = None
    error: QuickFileError | None = None

    @property
    def request_id(self) -> int:
        return self.request.request_id

    @property
    def location(self) -> Location:
        return self.request.location


class Scheduler(Protocol):
    def schedule(self, location: Location) -> int: ...

    def drain_results(self) -> list[ListingOutcome]: ...


def _run_request(list_names: ListFunction, request: ListingRequest) -> ListingOutcome:
    try:
        names = list_names(request.location)
    except QuickFileError as exc:
        return ListingOutcome(request=request, error=exc)
    except Exception as exc:
        # Any other failure still reaches the controller as an error outcome.
        logger.exception("listing %s crashed", request.location)
        return ListingOutcome(
            request=request,
            error=QuickFileError(f"listing {request.location} failed: {exc}"),
        )
    return ListingOutcome(request=request, names=list(names))


class InlineListingScheduler:
    """Run each listing synchronously inside :meth:`schedule`."""

    def __init__(self, list_names: ListFunction) -> None:
        self._list_names = list_names
        self._next_request_id = 1
        self._results: list[ListingOutcome] = []

    def schedule(self, location: Location) -> int:
        request = ListingRequest(request_id=self._next_request_id, location=location)
        self._next_request_id += 1
        self._results.append(_run_request(self._list_names, request))
        return request.request_id

    def drain_results(self) -> list[ListingOutcome]:
        out = self._results
        self._results = []
        return out


class ListingScheduler:
    """Single-worker latest-request-wins listing scheduler.

    At most one request is in flight. A request scheduled while another is
    running replaces any request still waiting, so intermediate hops the user
    already moved past are never sent.
    """

    def __init__(self, list_names: ListFunction) -> None:
        self._list_names = list_names
        self._lock = threading.Lock()
        self._pending: ListingRequest | None = None
        self._running = False
        self._next_request_id = 1
        self._results: Queue[ListingOutcome] = Queue()

    def _worker(self) -> None:
        while True:
            with self._lock:
                request = self._pending
                self._pending = None
                if request is None:
                    self._running = False
                    return
            self._results.put(_run_request(self._list_names, request))

    def schedule(self, location: Location) -> int:
        """Queue or replace the pending listing and return its request id."""
        with self._lock:
            request_id = self._next_request_id
            self._next_request_id += 1
            if self._pending is not None:
                logger.debug("replacing queued listing %d for %s", self._pending.request_id, self._pending.location)
            self._pending = ListingRequest(request_id=request_id, location=location)
            if self._running:
                return request_id
            self._running = True

        worker = threading.Thread(
            target=self._worker,
            name="quickfile-listing",
            daemon=True,
        )
        worker.start()
        return request_id

    def drain_results(self) -> list[ListingOutcome]:
        """Drain all completed listing outcomes."""
        out: list[ListingOutcome] = []
        while True:
            try:
                out.append(self._results.get_nowait())
            except Empty:
                break
        return out


__all__ = [
    "ListingRequest",
    "ListingOutcome",
    "Scheduler",
    "InlineListingScheduler",
    "ListingScheduler",
]

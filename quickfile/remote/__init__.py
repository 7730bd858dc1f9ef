"""Remote listing access: the HTTP client and request schedulers."""

from .listing import DEFAULT_TIMEOUT_SECONDS, RemoteListingClient
from .scheduler import (
    InlineListingScheduler,
    ListingOutcome,
    ListingRequest,
    ListingScheduler,
    Scheduler,
)

__all__ = [
    "DEFAULT_TIMEOUT_SECONDS",
    "RemoteListingClient",
    "InlineListingScheduler",
    "ListingOutcome",
    "ListingRequest",
    "ListingScheduler",
    "Scheduler",
]

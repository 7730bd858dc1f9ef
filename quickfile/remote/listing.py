"""HTTP client for the read-only "list directory contents" endpoint.

The endpoint answers a GET carrying one location path with a JSON array of
child names. It has no pagination and no file/directory metadata.
"""

from __future__ import annotations

import logging
from urllib.parse import quote

import requests

from ..errors import MalformedResponseError, NetworkError
from ..location import Location

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0


def _validate_names(payload: object, location: Location) -> list[str]:
    if not isinstance(payload, list):
        raise MalformedResponseError(
            f"listing for {location} is not a JSON array (got {type(payload).__name__})"
        )
    for idx, item in enumerate(payload):
        if not isinstance(item, str):
            raise MalformedResponseError(
                f"listing for {location} has a non-string entry at index {idx}: {item!r}"
            )
        try:
            item.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise MalformedResponseError(
                f"listing for {location} has an unencodable name at index {idx}: {item!r}"
            ) from exc
    return payload


class RemoteListingClient:
    """Fetch the names directly under a location from the listing endpoint."""

    def __init__(
        self,
        endpoint: str,
        *,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        query_param: str | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.endpoint = endpoint.rstrip("?")
        self.timeout = timeout
        self.query_param = query_param
        self._session = session if session is not None else requests.Session()

    def request_url(self, location: Location) -> str:
        """Return the GET URL for ``location``.

        Without ``query_param`` the path is the whole query string
        (``/listFiles?/workspace/src``); otherwise it is sent as
        ``?<query_param>=<path>``.
        """
        encoded = quote(location.path, safe="/")
        if self.query_param is None:
            return f"{self.endpoint}?{encoded}"
        return f"{self.endpoint}?{quote(self.query_param, safe='')}={encoded}"

    def list(self, location: Location) -> list[str]:
        """Return child names of ``location`` in endpoint order.

        Raises :class:`NetworkError` for transport failures, timeouts and
        non-2xx responses, and :class:`MalformedResponseError` when the body is
        not a JSON array of strings.
        """
        try:
            url = self.request_url(location)
        except UnicodeEncodeError as exc:
            raise NetworkError(f"could not build a request for {location!r}: {exc}") from exc
        logger.debug("listing %s via %s", location, url)
        try:
            response = self._session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            logger.warning("listing request for %s failed: %s", location, exc)
            raise NetworkError(f"could not list {location}: {exc}") from exc

        try:
            payload = response.json()
        except ValueError as exc:
            logger.warning("listing for %s returned invalid JSON", location)
            raise MalformedResponseError(f"listing for {location} is not valid JSON") from exc

        names = _validate_names(payload, location)
        logger.debug("listing %s returned %d names", location, len(names))
        return names

    def close(self) -> None:
        self._session.close()


__all__ = ["DEFAULT_TIMEOUT_SECONDS", "RemoteListingClient"]

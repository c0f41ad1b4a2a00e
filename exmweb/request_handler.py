"""Base class for fetching and decoding documents from the extensions site."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

import httpx

logger = logging.getLogger(__name__)

BASE_URL = "https://extensions.gnome.org/"


class RequestError(Exception):
    """A request to the extensions site failed or its reply was unusable."""


class RequestHandler:
    """Fetches a URL and hands the body to :meth:`handle_response`.

    Subclasses override :meth:`handle_response` to turn the raw body into a
    result. A client passed in stays owned by the caller; otherwise the
    handler creates one and closes it in :meth:`aclose`.
    """

    def __init__(self, client: httpx.AsyncClient | None = None) -> None:
        self._owns_client = client is None
        self._client = (
            client if client is not None else httpx.AsyncClient(follow_redirects=True)
        )

    def handle_response(self, body: bytes) -> Any:
        """Decode a response body; the base implementation produces nothing."""
        logger.warning(
            "handle_response is not overridden in %s; nothing will happen",
            type(self).__name__,
        )
        return None

    async def request(self, url: str) -> Any:
        """Fetch ``url`` and return what :meth:`handle_response` makes of it."""
        try:
            response = await self._client.get(url)
        except (httpx.InvalidURL, httpx.UnsupportedProtocol) as exc:
            raise RequestError(f"Could not construct message for uri: {url}") from exc
        except httpx.HTTPError as exc:
            raise RequestError(f"Request to {url} failed: {exc}") from exc

        try:
            result = self.handle_response(response.content)
        except ValueError as exc:
            raise RequestError(f"Could not parse response from {url}: {exc}") from exc

        if result is None:
            raise RequestError(f"No result was produced for {url}")
        return result

    async def aclose(self) -> None:
        """Release the HTTP client if this handler created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> RequestHandler:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
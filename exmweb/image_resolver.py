"""Downloads images referenced by relative paths on the extensions site."""

from __future__ import annotations

import io
from types import TracebackType
from urllib.parse import urljoin

import httpx
from PIL import Image, UnidentifiedImageError

from .request_handler import BASE_URL, RequestError


def resolve_url(rel_path: str) -> str:
    """Return the absolute URL of ``rel_path`` on the extensions site."""
    return urljoin(BASE_URL, rel_path)


class ImageResolver:
    """Fetches icons and screenshots and decodes them into images."""

    def __init__(self, client: httpx.AsyncClient | None = None) -> None:
        self._owns_client = client is None
        self._client = (
            client if client is not None else httpx.AsyncClient(follow_redirects=True)
        )

    async def resolve(self, rel_path: str | None) -> Image.Image | None:
        """Download and decode the image at ``rel_path``; ``None`` gives ``None``."""
        if rel_path is None:
            return None

        url = resolve_url(rel_path)
        try:
            response = await self._client.get(url)
        except (httpx.InvalidURL, httpx.UnsupportedProtocol) as exc:
            raise RequestError(f"Could not construct message for uri: {url}") from exc
        except httpx.HTTPError as exc:
            raise RequestError(f"Request to {url} failed: {exc}") from exc

        try:
            image = Image.open(io.BytesIO(response.content))
            image.load()
        except (UnidentifiedImageError, OSError) as exc:
            raise RequestError(f"Could not decode image from {url}: {exc}") from exc
        return image

    async def aclose(self) -> None:
        """Release the HTTP client if this resolver created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> ImageResolver:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
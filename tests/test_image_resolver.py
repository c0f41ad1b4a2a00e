import io

import httpx
import pytest
from PIL import Image

from exmweb.image_resolver import ImageResolver, resolve_url
from exmweb.request_handler import RequestError


def _png_bytes(size):
    buffer = io.BytesIO()
    Image.new("RGB", size, (10, 20, 30)).save(buffer, format="PNG")
    return buffer.getvalue()


def test_resolve_url_joins_relative_path():
    assert (
        resolve_url("/extension-data/icons/icon.png")
        == "https://extensions.gnome.org/extension-data/icons/icon.png"
    )


def test_resolve_url_keeps_absolute_url():
    assert resolve_url("https://example.com/a.png") == "https://example.com/a.png"


@pytest.mark.asyncio
async def test_resolve_decodes_image():
    seen = []
    payload = _png_bytes((3, 2))

    def respond(request):
        seen.append(request)
        return httpx.Response(200, content=payload)

    client = httpx.AsyncClient(transport=httpx.MockTransport(respond))
    async with ImageResolver(client) as resolver:
        image = await resolver.resolve("/static/shot.png")
    assert image.size == (3, 2)
    assert image.getpixel((0, 0)) == (10, 20, 30)
    assert seen[0].url.path == "/static/shot.png"
    assert client.is_closed is False
    await client.aclose()


@pytest.mark.asyncio
async def test_resolve_none_returns_none():
    client = httpx.AsyncClient(
        transport=httpx.MockTransport(lambda request: httpx.Response(500))
    )
    resolver = ImageResolver(client)
    assert await resolver.resolve(None) is None
    await client.aclose()


@pytest.mark.asyncio
async def test_resolve_rejects_non_image():
    client = httpx.AsyncClient(
        transport=httpx.MockTransport(
            lambda request: httpx.Response(200, content=b"not an image")
        )
    )
    resolver = ImageResolver(client)
    with pytest.raises(RequestError):
        await resolver.resolve("/static/shot.png")
    await client.aclose()


@pytest.mark.asyncio
async def test_resolve_reports_transport_error():
    def respond(request):
        raise httpx.ConnectError("unreachable", request=request)

    client = httpx.AsyncClient(transport=httpx.MockTransport(respond))
    resolver = ImageResolver(client)
    with pytest.raises(RequestError):
        await resolver.resolve("/static/shot.png")
    await client.aclose()
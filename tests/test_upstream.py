import asyncio

import httpx
import pytest

from core.exceptions import UpstreamConnectionError, UpstreamTimeoutError
from services.upstream import UpstreamClient, build_http_client


def _request(handler, **kwargs):
    async def run():
        async with build_http_client(transport=httpx.MockTransport(handler)) as client:
            return await UpstreamClient(client).request(**kwargs)

    return asyncio.run(run())


def test_request_sent_and_read():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["url"] = str(request.url)
        seen["auth"] = request.headers.get("authorization")
        seen["body"] = request.content
        return httpx.Response(202, text="accepted", headers={"Content-Type": "text/plain"})

    response = _request(
        handler,
        url="https://api.example.com/items?x=1",
        method="PUT",
        headers={"Authorization": "Bearer t"},
        body="a=b",
    )
    assert seen == {
        "method": "PUT",
        "url": "https://api.example.com/items?x=1",
        "auth": "Bearer t",
        "body": b"a=b",
    }
    assert response.status_code == 202
    assert response.text == "accepted"
    assert response.content_type.startswith("text/plain")


def test_redirects_followed():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/old":
            return httpx.Response(302, headers={"Location": "https://example.com/new"})
        return httpx.Response(200, json={"moved": True})

    response = _request(handler, url="https://example.com/old", method="GET", headers={})
    assert response.status_code == 200
    assert response.content_type == "application/json"


def test_connection_error_wrapped():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Name or service not known", request=request)

    with pytest.raises(UpstreamConnectionError, match="Name or service not known") as exc:
        _request(handler, url="https://nowhere.invalid", method="GET", headers={})
    assert exc.value.url == "https://nowhere.invalid"


def test_timeout_wrapped():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(UpstreamTimeoutError, match="timed out"):
        _request(handler, url="https://slow.example.com", method="GET", headers={})

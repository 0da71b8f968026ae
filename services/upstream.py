"""HTTP client for the relay's outbound requests."""

import httpx

from core.exceptions import UpstreamConnectionError, UpstreamTimeoutError
from core.request_types import UpstreamResponse


class UpstreamClient:
    """Issue the outbound request with a shared httpx client."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def request(
        self,
        url: str,
        method: str,
        headers: dict[str, str],
        body: str | None = None,
    ) -> UpstreamResponse:
        """Send one request and read the whole body as text."""
        try:
            response = await self._client.request(
                method,
                url,
                headers=headers,
                content=body,
            )
        except httpx.TimeoutException as e:
            raise UpstreamTimeoutError(str(e) or "Upstream timeout", url=url) from e
        except httpx.RequestError as e:
            raise UpstreamConnectionError(
                str(e) or f"Upstream connection error: {type(e).__name__}", url=url
            ) from e

        return UpstreamResponse(
            status_code=response.status_code,
            headers=dict(response.headers),
            text=response.text,
        )


def build_http_client(
    timeout: float | None = 5.0,
    follow_redirects: bool = True,
    max_connections: int = 100,
    max_keepalive_connections: int = 20,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create the httpx client shared by all relays."""
    limits = httpx.Limits(
        max_connections=max_connections,
        max_keepalive_connections=max_keepalive_connections,
    )
    return httpx.AsyncClient(
        timeout=timeout,
        follow_redirects=follow_redirects,
        limits=limits,
        transport=transport,
    )

"""FastAPI route handlers."""

from fastapi import Request, Response

from core.classify import dumps
from core.config import Config
from core.headers import JSON_CONTENT_TYPE, HeaderBuilder
from core.request_types import InboundRequest, RelayResponse


async def _read_inbound(request: Request, max_body_size: int) -> InboundRequest | Response:
    """Read the raw body into an InboundRequest, or return an error Response."""
    raw_body = await request.body()
    if len(raw_body) > max_body_size:
        return Response(
            content=dumps({"error": "Request body too large"}),
            status_code=413,
            headers=HeaderBuilder().build_response_headers(JSON_CONTENT_TYPE),
        )

    return InboundRequest(
        method=request.method,
        body=raw_body.decode("utf-8", errors="replace") or None,
        path=request.url.path,
    )


def to_response(relayed: RelayResponse) -> Response:
    """Convert a RelayResponse into a Starlette Response."""
    return Response(
        content=relayed.body,
        status_code=relayed.status_code,
        headers=relayed.headers,
    )


async def handle_relay(request: Request, config: Config) -> Response:
    """Handle any method on any path through the relay."""
    result = await _read_inbound(request, config.limits.max_body_size)
    if isinstance(result, Response):
        return result

    relay = request.app.state.relay_handler
    return to_response(await relay.handle(result))

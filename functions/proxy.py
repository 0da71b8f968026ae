"""Serverless entry point: relay a request described in the POST body.

Client sends:
    {
        "url": "https://api.example.com/...",
        "method": "POST",
        "body": "a=b&c=d",
        "requestHeaders": {"Content-Type": "...", "User-Agent": "..."}
    }

``method``, ``body`` and ``requestHeaders`` are optional.
"""

import asyncio
import base64
from typing import Any

from core.config import Config
from core.relay import RelayHandler
from core.request_types import InboundRequest, RelayResponse
from services.upstream import UpstreamClient, build_http_client
from ui.console_logger import ConsoleLogger

config = Config()
logger = ConsoleLogger()


def handler(event: dict[str, Any], context: Any = None) -> dict[str, Any]:
    """Netlify/Lambda handler."""
    response = asyncio.run(_handle(_inbound_from_event(event)))
    return {
        "statusCode": response.status_code,
        "headers": response.headers,
        "body": response.body,
    }


async def _handle(inbound: InboundRequest) -> RelayResponse:
    async with build_http_client(
        timeout=config.upstream.timeout,
        follow_redirects=config.upstream.follow_redirects,
    ) as client:
        relay = RelayHandler(UpstreamClient(client), logger=logger)
        return await relay.handle(inbound)


def _inbound_from_event(event: dict[str, Any]) -> InboundRequest:
    body = event.get("body")
    if body and event.get("isBase64Encoded"):
        body = base64.b64decode(body).decode("utf-8", errors="replace")
    return InboundRequest(
        method=event.get("httpMethod") or "GET",
        body=body,
        path=event.get("path") or "/",
    )

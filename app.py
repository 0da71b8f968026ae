"""FastAPI application factory."""

from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request

from api.handlers import handle_relay
from core.config import Config
from core.headers import HeaderBuilder
from core.protocols import RequestLogger
from core.relay import RelayHandler
from services.upstream import UpstreamClient, build_http_client


def create_app(
    config: Config,
    logger: RequestLogger | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        client = build_http_client(
            timeout=config.upstream.timeout,
            follow_redirects=config.upstream.follow_redirects,
            max_connections=config.upstream.max_connections,
            max_keepalive_connections=config.upstream.max_keepalive_connections,
            transport=transport,
        )
        app.state.relay_handler = RelayHandler(
            http=UpstreamClient(client),
            logger=logger,
            header_builder=HeaderBuilder(),
        )
        try:
            yield
        finally:
            await client.aclose()

    app = FastAPI(title="CORS Relay", version="0.1.0", lifespan=lifespan)

    async def relay(request: Request):
        return await handle_relay(request, config)

    # No method filter: every verb reaches the relay, which answers 405 itself
    app.add_route("/{path:path}", relay, include_in_schema=False)

    return app

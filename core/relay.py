"""The relay handler: one inbound request, one outbound call."""

import time

from core.classify import classify_body, dumps
from core.exceptions import MethodNotAllowedError, RelayError, UpstreamError
from core.headers import JSON_CONTENT_TYPE, HeaderBuilder
from core.payload import parse_payload
from core.protocols import HttpCapability, RequestLogger
from core.request_types import InboundRequest, RelayRequest, RelayResponse


class RelayHandler:
    """Forward a client-described request and relay the answer with CORS headers.

    The handler holds no per-request state; the same instance serves every
    invocation. ``handle`` never raises.
    """

    def __init__(
        self,
        http: HttpCapability,
        logger: RequestLogger | None = None,
        header_builder: HeaderBuilder | None = None,
    ) -> None:
        self._http = http
        self._logger = logger
        self._headers = header_builder or HeaderBuilder()

    async def handle(self, inbound: InboundRequest) -> RelayResponse:
        """Map an inbound request to the relay response."""
        method = inbound.method.upper()
        if method == "OPTIONS":
            return RelayResponse(200, self._headers.build_response_headers(), "")
        if method != "POST":
            return self._error_response(MethodNotAllowedError(), inbound.path)

        try:
            request = parse_payload(inbound.body)
            return await self._relay(request)
        except Exception as e:
            return self._error_response(e, inbound.path)

    async def _relay(self, request: RelayRequest) -> RelayResponse:
        """Execute the outbound call and classify its body."""
        upstream_headers = self._headers.build_upstream_headers(request.request_headers)
        started = time.perf_counter()
        upstream = await self._http.request(
            request.target_url,
            request.method,
            upstream_headers,
            request.body,
        )
        if self._logger:
            self._logger.log_relay(
                request.method,
                request.target_url,
                upstream.status_code,
                duration_ms=(time.perf_counter() - started) * 1000,
                headers=upstream_headers,
            )

        body, content_type = classify_body(upstream.text, upstream.content_type)
        return RelayResponse(
            status_code=upstream.status_code,
            headers=self._headers.build_response_headers(content_type),
            body=body,
        )

    def _error_response(self, error: Exception, route: str) -> RelayResponse:
        """Build a JSON error response; unknown exceptions become a 500."""
        status = error.status_code if isinstance(error, RelayError) else 500
        if isinstance(error, UpstreamError) and error.url:
            route = error.url
        message = str(error) or type(error).__name__
        if self._logger:
            self._logger.log_error(route, status, message)
        return RelayResponse(
            status_code=status,
            headers=self._headers.build_response_headers(JSON_CONTENT_TYPE),
            body=dumps({"error": message}),
        )

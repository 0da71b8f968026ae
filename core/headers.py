"""Header construction for relayed requests and responses."""

from typing import Any

CORS_HEADERS: dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
}

JSON_CONTENT_TYPE = "application/json; charset=utf-8"

# Computed by the outbound transport, or would hand back a body we cannot decode
STRIPPED_HEADERS = frozenset({"host", "content-length", "accept-encoding"})


class HeaderBuilder:
    """Build forwarded request headers and relay response headers."""

    def build_upstream_headers(self, headers: dict[str, Any]) -> dict[str, str]:
        """Copy client-supplied headers minus the transport-owned ones."""
        return {
            key: str(value)
            for key, value in headers.items()
            if key.lower() not in STRIPPED_HEADERS
        }

    def build_response_headers(self, content_type: str | None = None) -> dict[str, str]:
        """Cross-origin headers, plus Content-Type when there is a body."""
        headers = dict(CORS_HEADERS)
        if content_type is not None:
            headers["Content-Type"] = content_type
        return headers

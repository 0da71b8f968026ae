"""Inbound payload parsing and validation."""

import json
import re
from typing import Any

from core.classify import dumps
from core.exceptions import InputValidationError, PayloadError
from core.request_types import RelayRequest

HTTP_URL = re.compile(r"^https?://", re.IGNORECASE)

MISSING_URL = "Missing 'url' in request body."
INVALID_URL = "Invalid url. Must start with http(s)://."


def parse_payload(text: str | None) -> RelayRequest:
    """Turn the inbound JSON body into a RelayRequest.

    An empty body counts as ``{}``. ``json.JSONDecodeError`` propagates to the
    caller unchanged.

    Raises:
        InputValidationError: ``url`` is missing, empty, not a string, or
            not an http(s) URL.
        PayloadError: another field has an unusable type.
    """
    payload = json.loads(text or "{}")
    if not isinstance(payload, dict):
        payload = {}

    target_url = payload.get("url")
    if not target_url or not isinstance(target_url, str):
        raise InputValidationError(MISSING_URL)
    # Scheme check only: private and internal hosts are still reachable
    if not HTTP_URL.match(target_url):
        raise InputValidationError(INVALID_URL)

    return RelayRequest(
        target_url=target_url,
        method=_method(payload.get("method")),
        body=_body(payload.get("body")),
        request_headers=_request_headers(payload.get("requestHeaders")),
    )


def _method(value: Any) -> str:
    if not value:
        return "POST"
    if not isinstance(value, str):
        raise PayloadError(f"'method' must be a string, got {type(value).__name__}.")
    return value.upper()


def _body(value: Any) -> str | None:
    if value is None or isinstance(value, str):
        return value
    return dumps(value)


def _request_headers(value: Any) -> dict[str, Any]:
    if not value:
        return {}
    if not isinstance(value, dict):
        raise PayloadError(
            f"'requestHeaders' must be an object, got {type(value).__name__}."
        )
    return value

"""Response body classification - every relayed body is JSON text."""

import json
from typing import Any

from core.headers import JSON_CONTENT_TYPE


def dumps(data: Any) -> str:
    """Compact JSON, non-ASCII left as-is."""
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


def is_json(text: str) -> bool:
    """Check whether text parses as strict JSON (no NaN/Infinity)."""
    try:
        json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        return False
    return True


def classify_body(text: str, content_type: str) -> tuple[str, str]:
    """Return (body, content_type) for an upstream body.

    JSON-labelled bodies pass through with their own content type. Other
    bodies that still parse as JSON pass through relabelled; everything else
    is wrapped as ``{"data": text}``.
    """
    if "application/json" in content_type:
        return text, content_type
    if is_json(text):
        return text, JSON_CONTENT_TYPE
    return dumps({"data": text}), JSON_CONTENT_TYPE


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")

import json

import pytest

from core.exceptions import InputValidationError, PayloadError
from core.payload import INVALID_URL, MISSING_URL, parse_payload


def test_full_payload():
    request = parse_payload(json.dumps({
        "url": "https://api.example.com/v1",
        "method": "patch",
        "body": "x=1",
        "requestHeaders": {"X-Trace": "abc"},
    }))
    assert request.target_url == "https://api.example.com/v1"
    assert request.method == "PATCH"
    assert request.body == "x=1"
    assert request.request_headers == {"X-Trace": "abc"}


def test_defaults():
    request = parse_payload('{"url": "http://example.com"}')
    assert request.method == "POST"
    assert request.body is None
    assert request.request_headers == {}


@pytest.mark.parametrize("payload", ['{"url": null}', '{"url": ["https://x"]}', "null", "{}"])
def test_missing_url(payload):
    with pytest.raises(InputValidationError, match="Missing"):
        parse_payload(payload)
    assert MISSING_URL == "Missing 'url' in request body."


@pytest.mark.parametrize("url", ["example.com", "ftp://example.com", "gopher://x", " https://x"])
def test_invalid_scheme(url):
    with pytest.raises(InputValidationError) as exc:
        parse_payload(json.dumps({"url": url}))
    assert str(exc.value) == INVALID_URL


def test_scheme_check_ignores_case():
    assert parse_payload('{"url": "HtTpS://example.com"}').target_url == "HtTpS://example.com"


def test_malformed_json_propagates():
    with pytest.raises(json.JSONDecodeError):
        parse_payload("{")


def test_non_string_method():
    with pytest.raises(PayloadError, match="'method' must be a string"):
        parse_payload('{"url": "https://x", "method": 5}')


def test_object_body_serialized():
    request = parse_payload('{"url": "https://x", "body": {"q": "caf\\u00e9"}}')
    assert request.body == '{"q":"café"}'

import pytest

from core.request_types import UpstreamResponse


class FakeHttp:
    """Test double for the outbound HTTP capability."""

    def __init__(self, response: UpstreamResponse | None = None, error: Exception | None = None):
        self.response = response or UpstreamResponse(200, {"content-type": "application/json"}, "{}")
        self.error = error
        self.calls: list[dict] = []

    async def request(self, url, method, headers, body=None):
        self.calls.append({"url": url, "method": method, "headers": headers, "body": body})
        if self.error:
            raise self.error
        return self.response


class RecordingLogger:
    def __init__(self):
        self.relays: list[tuple] = []
        self.errors: list[tuple] = []

    def log_relay(self, method, url, status, *, duration_ms, headers=None):
        self.relays.append((method, url, status))

    def log_error(self, route, status, message):
        self.errors.append((route, status, message))


@pytest.fixture
def fake_http():
    return FakeHttp()


@pytest.fixture
def recording_logger():
    return RecordingLogger()

"""Shared protocol definitions."""

from typing import Protocol

from core.request_types import UpstreamResponse


class HttpCapability(Protocol):
    """Protocol for the outbound HTTP client."""

    async def request(
        self,
        url: str,
        method: str,
        headers: dict[str, str],
        body: str | None = None,
    ) -> UpstreamResponse: ...


class RequestLogger(Protocol):
    """Protocol for relay logging (Dashboard, ConsoleLogger)."""

    def log_relay(
        self,
        method: str,
        url: str,
        status: int,
        *,
        duration_ms: float,
        headers: dict[str, str] | None = None,
    ) -> None: ...
    def log_error(self, route: str, status: int, message: str) -> None: ...

"""Shared request data types."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class InboundRequest:
    """Transport-neutral view of the request the relay received."""

    method: str
    body: str | None = None
    path: str = "/"


@dataclass(frozen=True)
class RelayRequest:
    """Validated description of the outbound request."""

    target_url: str
    method: str = "POST"
    body: str | None = None
    request_headers: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class UpstreamResponse:
    """Result of the outbound call."""

    status_code: int
    headers: dict[str, str]
    text: str

    @property
    def content_type(self) -> str:
        for key, value in self.headers.items():
            if key.lower() == "content-type":
                return value
        return ""


@dataclass(frozen=True)
class RelayResponse:
    """Response the relay hands back to its host."""

    status_code: int
    headers: dict[str, str]
    body: str = ""

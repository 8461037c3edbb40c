"""Observability – HttpRequestSnapshot, the HTTP fields attached to an event.

Fields are copied once when the snapshot is taken; later changes to the
originating request object do not leak into an already attached event.
"""
from __future__ import annotations

import dataclasses
from typing import Any


@dataclasses.dataclass(frozen=True, slots=True)
class HttpRequestSnapshot:
    """Read-only copy of the request fields understood by cloud logging.

    ``server_ip`` is never populated by the extractors below.
    """

    request_method: str = ""
    request_url: str = ""
    request_size: str = ""
    user_agent: str = ""
    remote_ip: str = ""
    server_ip: str = ""
    referer: str = ""
    protocol: str = ""

    def to_dict(self) -> dict[str, str]:
        """Render with the cloud-logging ``httpRequest`` key names, in order."""
        return {
            "requestMethod": self.request_method,
            "requestUrl": self.request_url,
            "requestSize": self.request_size,
            "userAgent": self.user_agent,
            "remoteIp": self.remote_ip,
            "serverIp": self.server_ip,
            "referer": self.referer,
            "protocol": self.protocol,
        }

    @classmethod
    def from_scope(cls, scope: dict[str, Any]) -> "HttpRequestSnapshot":
        """Build a snapshot from a raw ASGI HTTP ``scope``."""
        headers = _decode_headers(scope.get("headers") or [])
        host = headers.get("host", "")
        raw_path = scope.get("raw_path") or scope.get("path", "").encode()
        url = host + raw_path.decode("latin-1")
        query = scope.get("query_string") or b""
        if query:
            url += "?" + query.decode("latin-1")
        if host and scope.get("scheme"):
            url = f"{scope['scheme']}://{url}"
        client = scope.get("client")
        return cls(
            request_method=scope.get("method", ""),
            request_url=url,
            request_size=_content_length(headers.get("content-length")),
            user_agent=headers.get("user-agent", ""),
            remote_ip=client[0] if client else "",
            referer=headers.get("referer", ""),
            protocol=_protocol(scope.get("http_version")),
        )

    @classmethod
    def from_request(cls, request: Any) -> "HttpRequestSnapshot":
        """Build a snapshot from a Starlette / FastAPI ``Request``.

        The parsed ``request.url`` is preferred; objects without one fall
        back to the scope's host header plus raw path.
        """
        url = getattr(request, "url", None)
        if url is None:
            return cls.from_scope(request.scope)
        headers = request.headers
        client = getattr(request, "client", None)
        return cls(
            request_method=request.method,
            request_url=str(url),
            request_size=_content_length(headers.get("content-length")),
            user_agent=headers.get("user-agent", ""),
            remote_ip=client.host if client else "",
            referer=headers.get("referer", ""),
            protocol=_protocol(request.scope.get("http_version")),
        )


def _decode_headers(raw: list[tuple[bytes, bytes]]) -> dict[str, str]:
    return {k.decode("latin-1").lower(): v.decode("latin-1") for k, v in raw}


def _content_length(value: str | None) -> str:
    # -1 marks an unknown length
    if value is None:
        return "-1"
    try:
        return str(int(value.strip()))
    except ValueError:
        return "-1"


def _protocol(http_version: str | None) -> str:
    return f"HTTP/{http_version}" if http_version else ""


__all__ = ["HttpRequestSnapshot"]

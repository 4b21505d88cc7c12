"""Utilities for deriving navigator information from ASGI request scopes.

Browsers send a subset of their navigator fields as request headers. These
helpers read them back so a server can describe the client that called it.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from client_env.domain.models import NavigatorInfo

_MAX_USER_AGENT_LENGTH = 512


def _decode_header_value(value: Any) -> str:
    """Decode a header value into a readable string."""
    if isinstance(value, bytes):
        try:
            return value.decode("utf-8", errors="replace")
        except Exception:
            return value.decode("latin1", errors="replace")
    return str(value)


def _primary_language(accept_language: str) -> str:
    """Return the first language tag of an Accept-Language header."""
    first = accept_language.split(",")[0]
    return first.split(";")[0].strip()


def navigator_from_scope(scope: dict[str, Any] | None) -> NavigatorInfo | None:
    """Extract navigator fields from an ASGI scope-like mapping.

    Reads ``user-agent``, ``accept-language`` (first tag) and
    ``sec-ch-ua-platform`` (quotes stripped). ``product`` and ``vendor`` are
    not sent by browsers and stay unset.

    Returns:
        NavigatorInfo, or None when the scope is not a mapping.
    """
    if not isinstance(scope, dict):
        return None

    user_agent: str | None = None
    language: str | None = None
    platform: str | None = None

    headers = scope.get("headers") or []
    for name, value in headers:
        decoded_name = _decode_header_value(name).lower()
        if decoded_name == "user-agent":
            user_agent = _decode_header_value(value)[:_MAX_USER_AGENT_LENGTH]
        elif decoded_name == "accept-language":
            language = _primary_language(_decode_header_value(value)) or None
        elif decoded_name == "sec-ch-ua-platform":
            platform = _decode_header_value(value).strip().strip('"') or None

    return NavigatorInfo(user_agent=user_agent, language=language, platform=platform)


def navigator_from_socket(socket: Any) -> NavigatorInfo | None:
    """Convenience wrapper to extract navigator fields from a socket.

    The socket is expected to expose a ``scope`` attribute with the usual
    ASGI shape. When that attribute is missing or malformed, this function
    returns None rather than raising.
    """
    scope = getattr(socket, "scope", None)
    return navigator_from_scope(scope)


class RequestHostEnvironment:
    """Host environment describing the client behind an ASGI request."""

    def __init__(self, scope: dict[str, Any] | None, moment: datetime | None = None) -> None:
        """Initialize with the request scope and an optional fixed timestamp."""
        self._scope = scope
        self._moment = moment

    def navigator(self) -> NavigatorInfo | None:
        """Return navigator fields read from the request headers."""
        return navigator_from_scope(self._scope)

    def now(self) -> datetime:
        """Return the fixed timestamp, or the current server local time."""
        if self._moment is not None:
            return self._moment
        return datetime.now().astimezone()

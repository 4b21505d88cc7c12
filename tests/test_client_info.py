"""Tests for navigator extraction from request scopes."""

from datetime import datetime, timezone
from types import SimpleNamespace

from client_env.adapters.web.client_info import (
    RequestHostEnvironment,
    navigator_from_scope,
    navigator_from_socket,
)
from client_env.application import describe_client

MOMENT = datetime(2024, 1, 1, tzinfo=timezone.utc)


def test_navigator_from_scope_with_full_headers() -> None:
    """Given a scope with browser headers, then navigator fields are extracted."""
    scope = {
        "client": ("203.0.113.10", 54321),
        "headers": [
            (b"host", b"example.test"),
            (b"user-agent", b"TestBrowser/1.0 (TestOS)"),
            (b"accept-language", b"de-DE,de;q=0.9,en;q=0.8"),
            (b"sec-ch-ua-platform", b'"Windows"'),
        ],
    }

    navigator = navigator_from_scope(scope)

    assert navigator is not None
    assert navigator.user_agent == "TestBrowser/1.0 (TestOS)"
    assert navigator.language == "de-DE"
    assert navigator.platform == "Windows"
    assert navigator.product is None
    assert navigator.vendor is None


def test_navigator_from_scope_without_headers() -> None:
    """Given a scope without headers, then all navigator fields are unset."""
    navigator = navigator_from_scope({"client": ("198.51.100.42", 12345)})

    assert navigator is not None
    assert navigator.user_agent is None
    assert navigator.language is None
    assert navigator.platform is None


def test_navigator_from_scope_with_invalid_scope() -> None:
    """Given an invalid scope, then no navigator is available."""
    assert navigator_from_scope(None) is None


def test_navigator_from_scope_reads_language_with_quality() -> None:
    """Given a single weighted language, then the quality suffix is dropped."""
    navigator = navigator_from_scope({"headers": [(b"accept-language", b"fr;q=0.7")]})

    assert navigator is not None
    assert navigator.language == "fr"


def test_navigator_from_scope_decodes_string_headers() -> None:
    """Given headers that are already strings, then they are used as-is."""
    navigator = navigator_from_scope({"headers": [("User-Agent", "SomeBot/3.2")]})

    assert navigator is not None
    assert navigator.user_agent == "SomeBot/3.2"


def test_navigator_from_scope_truncates_long_user_agent() -> None:
    """Given an excessively long user agent, then it is truncated."""
    navigator = navigator_from_scope({"headers": [(b"user-agent", b"A" * 5000)]})

    assert navigator is not None
    assert navigator.user_agent is not None
    assert len(navigator.user_agent) == 512


def test_navigator_from_socket_uses_scope_attribute() -> None:
    """Given a socket with a scope attribute, then delegates to scope helper."""
    socket = SimpleNamespace(scope={"headers": [(b"user-agent", b"AnotherBrowser/2.0")]})

    navigator = navigator_from_socket(socket)

    assert navigator is not None
    assert navigator.user_agent == "AnotherBrowser/2.0"


def test_navigator_from_socket_without_scope() -> None:
    """Given a socket without a scope, then no navigator is available."""
    assert navigator_from_socket(object()) is None


def test_request_host_environment_describes_client() -> None:
    """Given a request host, when describing the client, then headers drive the descriptor."""
    scope = {
        "headers": [
            (
                b"user-agent",
                b"Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
                b"(KHTML, like Gecko) Chrome/114.0.0.0 Safari/537.36",
            ),
            (b"accept-language", b"en-US,en;q=0.5"),
            (b"sec-ch-ua-platform", b'"Linux"'),
        ],
    }

    payload = describe_client(RequestHostEnvironment(scope, MOMENT))

    assert payload == {
        "platform": "Linux",
        "make": "",
        "model": "Chrome",
        "version": "114.0.0.0",
        "language": "en-US",
        "timezone": "UTC",
        "appVersion": "Chrome/114.0.0.0",
    }


def test_request_host_environment_without_scope_is_empty() -> None:
    """Given no scope, when describing the client, then the payload is empty."""
    assert describe_client(RequestHostEnvironment(None)) == {}

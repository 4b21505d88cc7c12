"""Web adapters deriving navigator data from HTTP requests."""

from client_env.adapters.web.client_info import (
    RequestHostEnvironment,
    navigator_from_scope,
    navigator_from_socket,
)

__all__ = ["RequestHostEnvironment", "navigator_from_scope", "navigator_from_socket"]

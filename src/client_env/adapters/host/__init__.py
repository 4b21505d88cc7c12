"""Host environment adapters."""

from client_env.adapters.host.static_host import HeadlessHostEnvironment, StaticHostEnvironment

__all__ = ["HeadlessHostEnvironment", "StaticHostEnvironment"]

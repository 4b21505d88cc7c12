"""Adapters layer - configuration and host environment integrations.

Web adapters live in ``client_env.adapters.web`` and are imported from there,
so non-web entry points do not load them.
"""

from client_env.adapters.config import AppConfig
from client_env.adapters.host import HeadlessHostEnvironment, StaticHostEnvironment

__all__ = [
    "AppConfig",
    "HeadlessHostEnvironment",
    "StaticHostEnvironment",
]

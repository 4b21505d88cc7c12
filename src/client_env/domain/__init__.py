"""Domain layer - client environment models and contracts."""

from client_env.domain.contracts import BootstrapSettings, HostEnvironment, SeedSource
from client_env.domain.models import (
    BootstrapFlags,
    BrowserType,
    ClientDescriptor,
    NavigatorInfo,
)

__all__ = [
    "BootstrapFlags",
    "BootstrapSettings",
    "BrowserType",
    "ClientDescriptor",
    "HostEnvironment",
    "NavigatorInfo",
    "SeedSource",
]

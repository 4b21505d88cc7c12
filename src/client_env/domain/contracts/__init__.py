"""Contracts (protocols) for collaborators of the client environment core."""

from client_env.domain.contracts.bootstrap_settings import BootstrapSettings
from client_env.domain.contracts.host_environment import HostEnvironment
from client_env.domain.contracts.seed_source import SeedSource

__all__ = [
    "BootstrapSettings",
    "HostEnvironment",
    "SeedSource",
]

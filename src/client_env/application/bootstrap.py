"""Assembly of the initialization flags for the downstream application."""

import logging
import secrets
from typing import TYPE_CHECKING

from client_env.application.client_descriptor_builder import describe_client
from client_env.domain.models import BootstrapFlags

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from client_env.domain.contracts import BootstrapSettings, HostEnvironment, SeedSource


def secure_random_ints(count: int) -> list[int]:
    """Return ``count`` unsigned 32-bit integers from the OS secure generator."""
    return [secrets.randbits(32) for _ in range(count)]


def build_bootstrap_flags(
    settings: "BootstrapSettings",
    host: "HostEnvironment",
    seed_source: "SeedSource" = secure_random_ints,
) -> BootstrapFlags:
    """Build the flags passed to the application entry point.

    The seed is split into its first value and the remaining values.

    Raises:
        ValueError: If the seed source returned no values.
    """
    values = seed_source(settings.seed_size)
    if not values:
        raise ValueError("Seed source returned no values")

    client_info = describe_client(host)
    logger.info(
        f"Bootstrap flags assembled with {len(values)} seed value(s), "
        f"client info {'present' if client_info else 'absent'}"
    )

    return BootstrapFlags(
        seed=(values[0], tuple(values[1:])),
        app_id=settings.app_id,
        identity_pool_id=settings.identity_pool_id,
        region=settings.aws_region,
        project_id=settings.project_id,
        client_info=client_info,
    )

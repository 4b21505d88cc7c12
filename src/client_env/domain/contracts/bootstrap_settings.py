"""Bootstrap settings contract (protocol)."""

from typing import Protocol


class BootstrapSettings(Protocol):
    """Identifiers and sizes needed to assemble bootstrap flags."""

    app_id: str | None
    identity_pool_id: str | None
    aws_region: str | None
    project_id: str | None
    seed_size: int

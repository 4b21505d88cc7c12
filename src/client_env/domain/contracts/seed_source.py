"""Seed source contract (protocol)."""

from typing import Protocol


class SeedSource(Protocol):
    """Callable producing random unsigned 32-bit integers."""

    def __call__(self, count: int) -> list[int]:
        """Return ``count`` random integers in ``[0, 2**32)``."""
        ...

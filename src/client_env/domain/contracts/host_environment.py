"""Host environment contract (protocol)."""

from datetime import datetime
from typing import Protocol

from client_env.domain.models.navigator_info import NavigatorInfo


class HostEnvironment(Protocol):
    """Capability describing the host a client runs in."""

    def navigator(self) -> NavigatorInfo | None:
        """Return the host navigator.

        Returns:
            Navigator fields, or None when the host is not browser-like
            (for example a server or a test runner).
        """
        ...

    def now(self) -> datetime:
        """Return the current wall-clock time of the host."""
        ...

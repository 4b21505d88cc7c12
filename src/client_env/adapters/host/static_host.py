"""Host environments backed by fixed values."""

from datetime import datetime

from client_env.domain.models import NavigatorInfo


class StaticHostEnvironment:
    """Browser-like host with a fixed navigator and an optional fixed clock."""

    def __init__(self, navigator: NavigatorInfo, moment: datetime | None = None) -> None:
        """Initialize with navigator fields and an optional frozen timestamp."""
        self._navigator = navigator
        self._moment = moment

    def navigator(self) -> NavigatorInfo | None:
        """Return the configured navigator."""
        return self._navigator

    def now(self) -> datetime:
        """Return the frozen timestamp, or the current local time."""
        if self._moment is not None:
            return self._moment
        return datetime.now().astimezone()


class HeadlessHostEnvironment:
    """Non-browser host (server, worker, test runner) without a navigator."""

    def navigator(self) -> NavigatorInfo | None:
        """Return None: there is no navigator outside a browser."""
        return None

    def now(self) -> datetime:
        """Return the current local time."""
        return datetime.now().astimezone()

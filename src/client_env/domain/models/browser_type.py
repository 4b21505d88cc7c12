"""Browser type domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class BrowserType:
    """Browser family and version detected from a user agent.

    Empty strings mean the user agent matched no known pattern.
    """

    family: str = ""
    version: str = ""

"""Assembly of client descriptors from host navigator data."""

import logging
from datetime import datetime
from typing import TYPE_CHECKING, Any

from client_env.application.timezone_extractor import extract_timezone
from client_env.application.user_agent_classifier import classify
from client_env.domain.models import ClientDescriptor, NavigatorInfo

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from client_env.domain.contracts import HostEnvironment


def build_descriptor(navigator: Any, now: datetime | None = None) -> ClientDescriptor | None:
    """Build a client descriptor from navigator-like data.

    Args:
        navigator: NavigatorInfo, a mapping or an object exposing navigator
            attributes. None means there is no browser-like host.
        now: Timestamp used for the timezone label. Defaults to the current
            local time.

    Returns:
        The descriptor, or None when there is no navigator. Missing fields
        degrade to empty strings.
    """
    if navigator is None:
        return None

    info = NavigatorInfo.coerce(navigator)
    browser = classify(info.user_agent or "")
    moment = now if now is not None else datetime.now().astimezone()

    return ClientDescriptor(
        platform=info.platform or "",
        make=info.product or info.vendor or "",
        model=browser.family,
        version=browser.version,
        language=info.language or "",
        timezone=extract_timezone(moment),
    )


def describe_client(host: "HostEnvironment") -> dict[str, str]:
    """Describe the client of a host as a bootstrap payload.

    Returns:
        The camelCase descriptor payload, or an empty dict when the host has
        no navigator.
    """
    navigator = host.navigator()
    if navigator is None:
        logger.debug("No navigator available, client info left empty")
        return {}

    descriptor = build_descriptor(navigator, host.now())
    return descriptor.to_payload() if descriptor is not None else {}

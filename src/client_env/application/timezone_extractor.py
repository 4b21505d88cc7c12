"""Timezone label extraction from a browser-style timestamp rendering."""

import logging
import re
from datetime import datetime

logger = logging.getLogger(__name__)

_LABEL_PATTERN = re.compile(r"\(([A-Za-z\s][^()]*)\)")


def render_timestamp(moment: datetime) -> str:
    """Render a timestamp the way a browser prints a date.

    Naive datetimes are taken as host local time; aware ones keep their zone.
    Example: ``"Tue Jan 01 2024 00:00:00 GMT+0000 (UTC)"``.
    """
    local = moment.astimezone() if moment.tzinfo is None else moment
    rendered = f"{local:%a %b %d %Y %H:%M:%S} GMT{local:%z}"
    name = local.tzname()
    if name:
        rendered = f"{rendered} ({name})"
    return rendered


def timezone_label(rendered: str) -> str:
    """Return the last parenthesized label starting with a letter or whitespace."""
    labels = _LABEL_PATTERN.findall(rendered)
    return labels[-1] if labels else ""


def extract_timezone(moment: datetime) -> str:
    """Extract a free-text timezone label for a timestamp.

    Best effort: the label is whatever the host calls its zone (``CET``,
    ``Coordinated Universal Time``...), not an IANA identifier. Returns an
    empty string when no label is available.
    """
    try:
        rendered = render_timestamp(moment)
    except (OverflowError, OSError, ValueError) as e:
        logger.debug(f"Could not render timestamp {moment!r}: {e}")
        return ""
    return timezone_label(rendered)

"""User agent classification by ordered pattern precedence.

Real user agents satisfy several patterns at once (a Chrome user agent also
carries ``Safari`` and ``AppleWebKit`` tokens), so the rules below are tried in
order and the first match wins.
"""

import logging
import re

from client_env.domain.models import BrowserType

logger = logging.getLogger(__name__)

# Legacy quirk, kept on purpose: the class admits a literal backslash as well
# as digits and dots. Consumers rely on this extraction shape.
_VERSION = r"/([0-9\\.]+)"

_FLAGS = re.IGNORECASE | re.DOTALL

# Matching backtracks quadratically on pathological input, so only this many
# leading characters are classified.
MAX_USER_AGENT_LENGTH = 2048

# (rule name, pattern). The leading greedy wildcard makes the last occurrence
# of a rule's token win.
MATCH_RULES: tuple[tuple[str, re.Pattern[str]], ...] = (
    # The Opera alternative also admits "[" after the token, as the legacy pattern did.
    ("opera", re.compile(r".*(Opera[\s\[A-Z]*|OPR[\sA-Z]*)" + _VERSION, _FLAGS)),
    ("legacy-microsoft", re.compile(r".*(Trident|Edge)" + _VERSION, _FLAGS)),
    ("chrome-lineage", re.compile(r".*(Chrome|Firefox|FxiOS)" + _VERSION, _FLAGS)),
    ("safari", re.compile(r".*(Safari)" + _VERSION, _FLAGS)),
    ("webkit", re.compile(r".*(AppleWebKit)" + _VERSION, _FLAGS)),
    ("generic", re.compile(r".*(?<![A-Z])([A-Z]+)" + _VERSION, _FLAGS)),
)


def classify(user_agent: str) -> BrowserType:
    """Resolve a user agent into a browser family and version.

    Never raises. Non-string input is treated as an empty user agent. Only the
    first MAX_USER_AGENT_LENGTH characters are considered.

    Args:
        user_agent: Raw user agent string, possibly empty or malformed.

    Returns:
        The family as spelled in the user agent and its version token, or an
        empty BrowserType when no rule matches.
    """
    if not isinstance(user_agent, str) or not user_agent:
        return BrowserType()

    user_agent = user_agent[:MAX_USER_AGENT_LENGTH]
    for rule_name, pattern in MATCH_RULES:
        match = pattern.match(user_agent)
        if match:
            logger.debug(f"User agent matched rule '{rule_name}': {match.group(1)}")
            return BrowserType(family=match.group(1), version=match.group(2))

    logger.debug(f"User agent matched no rule: {user_agent[:200]}")
    return BrowserType()

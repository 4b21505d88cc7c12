"""Application layer - user agent classification and descriptor assembly."""

from client_env.application.bootstrap import build_bootstrap_flags, secure_random_ints
from client_env.application.client_descriptor_builder import build_descriptor, describe_client
from client_env.application.timezone_extractor import (
    extract_timezone,
    render_timestamp,
    timezone_label,
)
from client_env.application.user_agent_classifier import MATCH_RULES, classify

__all__ = [
    "MATCH_RULES",
    "build_bootstrap_flags",
    "build_descriptor",
    "classify",
    "describe_client",
    "extract_timezone",
    "render_timestamp",
    "secure_random_ints",
    "timezone_label",
]

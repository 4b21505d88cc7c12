"""Domain models for client environment detection."""

from client_env.domain.models.bootstrap_flags import BootstrapFlags
from client_env.domain.models.browser_type import BrowserType
from client_env.domain.models.client_descriptor import ClientDescriptor
from client_env.domain.models.navigator_info import NavigatorInfo

__all__ = [
    "BootstrapFlags",
    "BrowserType",
    "ClientDescriptor",
    "NavigatorInfo",
]

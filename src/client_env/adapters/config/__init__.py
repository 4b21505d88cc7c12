"""Configuration adapters."""

from client_env.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]

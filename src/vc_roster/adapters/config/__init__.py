"""Configuration adapters."""

from vc_roster.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]

"""Adapters layer - external system integrations."""

from vc_roster.adapters.config import AppConfig
from vc_roster.adapters.discord_bot import DiscordPresenceSource, RosterBot
from vc_roster.adapters.sheets import RosterSheet, ServiceAccountTokenProvider, SheetsHttpClient

__all__ = [
    "AppConfig",
    "DiscordPresenceSource",
    "RosterBot",
    "RosterSheet",
    "ServiceAccountTokenProvider",
    "SheetsHttpClient",
]

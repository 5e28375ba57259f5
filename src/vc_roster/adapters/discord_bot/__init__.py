"""Discord adapters."""

from vc_roster.adapters.discord_bot.bot import RosterBot, build_intents
from vc_roster.adapters.discord_bot.mapping import identity_from_member, voice_state_to_event
from vc_roster.adapters.discord_bot.presence_source import DiscordPresenceSource

__all__ = [
    "DiscordPresenceSource",
    "RosterBot",
    "build_intents",
    "identity_from_member",
    "voice_state_to_event",
]

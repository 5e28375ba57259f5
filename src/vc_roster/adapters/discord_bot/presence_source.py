"""Presence source backed by the Discord gateway cache and REST API."""

import logging

import discord

from vc_roster.adapters.discord_bot.mapping import identity_from_member
from vc_roster.domain.models import MemberIdentity
from vc_roster.domain.ports.presence_source import PresenceLookupError, PresenceSource

logger = logging.getLogger(__name__)


def _snowflake(value: str, kind: str) -> int:
    try:
        return int(value)
    except ValueError as e:
        raise PresenceLookupError(f"Invalid {kind} id '{value}'") from e


class DiscordPresenceSource(PresenceSource):
    """Answers presence queries from the client cache, falling back to REST."""

    def __init__(self, client: discord.Client) -> None:
        """Initialize with a (logged in) discord client."""
        self._client = client

    async def fetch_channel_members(self, channel_id: str) -> list[MemberIdentity]:
        """Get identities of everyone connected to a voice or stage channel."""
        snowflake = _snowflake(channel_id, "channel")
        channel = self._client.get_channel(snowflake)
        if channel is None:
            logger.debug(f"Channel {channel_id} not cached, fetching")
            try:
                channel = await self._client.fetch_channel(snowflake)
            except (discord.DiscordException, OSError, TimeoutError) as e:
                raise PresenceLookupError(f"Channel {channel_id} could not be fetched: {e}") from e

        if not isinstance(channel, discord.VoiceChannel | discord.StageChannel):
            raise PresenceLookupError(f"Channel {channel_id} is not a voice channel")

        return [identity_from_member(member) for member in channel.members]

    async def resolve_member(self, guild_id: str | None, member_id: str) -> MemberIdentity:
        """Look up a member by ID within a guild."""
        if guild_id is None:
            raise PresenceLookupError(f"No guild given to resolve member {member_id}")

        guild = self._client.get_guild(_snowflake(guild_id, "guild"))
        if guild is None:
            raise PresenceLookupError(f"Guild {guild_id} is not available")

        member_snowflake = _snowflake(member_id, "member")
        member = guild.get_member(member_snowflake)
        if member is None:
            try:
                member = await guild.fetch_member(member_snowflake)
            except (discord.DiscordException, OSError, TimeoutError) as e:
                raise PresenceLookupError(f"Member {member_id} could not be fetched: {e}") from e

        return identity_from_member(member)

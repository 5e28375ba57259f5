"""Presence source port."""

from typing import Protocol

from vc_roster.domain.models.member_identity import MemberIdentity


class PresenceLookupError(Exception):
    """Raised when the presence service cannot answer a lookup."""


class PresenceSource(Protocol):
    """Port for querying who is currently in a voice channel."""

    async def fetch_channel_members(self, channel_id: str) -> list[MemberIdentity]:
        """Get identities of everyone currently connected to a channel.

        Raises:
            PresenceLookupError: If the channel cannot be fetched or has no member list.
        """
        ...

    async def resolve_member(self, guild_id: str | None, member_id: str) -> MemberIdentity:
        """Look up a member that is no longer attached to a voice state.

        Raises:
            PresenceLookupError: If the member cannot be resolved.
        """
        ...

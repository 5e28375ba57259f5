"""Translate discord.py objects into domain models."""

from typing import TYPE_CHECKING

from vc_roster.domain.models import MemberEvent, MemberIdentity

if TYPE_CHECKING:
    import discord


def identity_from_member(member: "discord.Member") -> MemberIdentity:
    """Extract the identity fields used for labelling."""
    return MemberIdentity(
        account_handle=member.name,
        display_name=member.display_name,
        nickname=member.nick,
    )


def _channel_id(state: "discord.VoiceState") -> str | None:
    return str(state.channel.id) if state.channel is not None else None


def voice_state_to_event(
    member: "discord.Member",
    before: "discord.VoiceState",
    after: "discord.VoiceState",
) -> MemberEvent:
    """Build a membership event from a voice state update."""
    guild = getattr(member, "guild", None)
    return MemberEvent(
        member_id=str(member.id),
        previous_channel_id=_channel_id(before),
        new_channel_id=_channel_id(after),
        guild_id=str(guild.id) if guild is not None else None,
        member=identity_from_member(member),
    )

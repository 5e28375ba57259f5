"""Voice membership event domain model."""

from dataclasses import dataclass

from vc_roster.domain.models.member_identity import MemberIdentity


@dataclass(frozen=True)
class MemberEvent:
    """A member moved between channels (None means not in any channel)."""

    member_id: str
    previous_channel_id: str | None
    new_channel_id: str | None
    guild_id: str | None = None
    member: MemberIdentity | None = None  # None when the presence service could not supply it

"""Derives display labels for voice channel members."""

from vc_roster.domain.models.member_identity import MemberIdentity

DISCRIMINATOR_SEPARATOR = "#"


def resolve_label(identity: MemberIdentity) -> str:
    """Return the label a member is tracked under.

    Priority: display name override, nickname override, account handle with
    any ``#discriminator`` suffix removed. Falls back to the raw handle when
    stripping leaves nothing.
    """
    if identity.display_name:
        return identity.display_name
    if identity.nickname:
        return identity.nickname
    base_handle = identity.account_handle.split(DISCRIMINATOR_SEPARATOR, 1)[0]
    return base_handle or identity.account_handle


def unresolved_identity(member_id: str) -> MemberIdentity:
    """Build a best-effort identity for a member the presence service could not resolve."""
    return MemberIdentity(account_handle=member_id)

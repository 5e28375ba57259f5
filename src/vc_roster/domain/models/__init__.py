"""Domain models for the voice channel roster."""

from vc_roster.domain.models.member_event import MemberEvent
from vc_roster.domain.models.member_identity import MemberIdentity
from vc_roster.domain.models.sync_result import ErrorDetails, SyncResult

__all__ = [
    "ErrorDetails",
    "MemberEvent",
    "MemberIdentity",
    "SyncResult",
]

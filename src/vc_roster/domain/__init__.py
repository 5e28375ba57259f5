"""Domain layer - core models and interfaces."""

from vc_roster.domain.models import (
    ErrorDetails,
    MemberEvent,
    MemberIdentity,
    SyncResult,
)
from vc_roster.domain.ports import (
    PresenceLookupError,
    PresenceSource,
    RemoteStoreError,
    SheetTransport,
)

__all__ = [
    "ErrorDetails",
    "MemberEvent",
    "MemberIdentity",
    "PresenceLookupError",
    "PresenceSource",
    "RemoteStoreError",
    "SheetTransport",
    "SyncResult",
]

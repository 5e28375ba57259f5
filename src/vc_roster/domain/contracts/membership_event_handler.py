"""Protocol for consuming membership events."""

from typing import Protocol

from vc_roster.domain.models.member_event import MemberEvent


class MembershipEventHandlerProtocol(Protocol):
    """Protocol for reacting to presence service notifications."""

    async def snapshot_sync(self) -> int:
        """Rebuild membership from the presence service and request a write."""
        ...

    async def member_event(self, event: MemberEvent) -> None:
        """Apply one membership change."""
        ...

"""Maps voice membership events onto the membership store."""

import logging
from typing import TYPE_CHECKING

from vc_roster.application.services.identity_resolver import resolve_label, unresolved_identity
from vc_roster.domain.contracts.membership_event_handler import MembershipEventHandlerProtocol
from vc_roster.domain.models import MemberEvent, MemberIdentity
from vc_roster.domain.ports.presence_source import PresenceLookupError

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from vc_roster.application.services.membership_store import MembershipStore
    from vc_roster.domain.contracts.sync_requester import SyncRequesterProtocol
    from vc_roster.domain.ports import PresenceSource


class EventReconciler(MembershipEventHandlerProtocol):
    """Keeps the membership store in line with monitored channels.

    Store mutations happen synchronously inside each handler; the remote
    write is only requested and runs later on the write serializer.
    """

    def __init__(
        self,
        presence_source: "PresenceSource",
        store: "MembershipStore",
        sync_requester: "SyncRequesterProtocol",
        monitored_channel_ids: "Iterable[str]",
    ) -> None:
        """Initialize the reconciler.

        Args:
            presence_source: Source of channel snapshots and member lookups.
            store: Membership store to mutate.
            sync_requester: Write serializer to notify after each mutation.
            monitored_channel_ids: Channels whose occupants are tracked.
        """
        self._presence_source = presence_source
        self._store = store
        self._sync_requester = sync_requester
        # Configured order for snapshot iteration, set for lookups
        self._channel_order = tuple(dict.fromkeys(monitored_channel_ids))
        self._monitored = frozenset(self._channel_order)

    @property
    def monitored_channel_ids(self) -> frozenset[str]:
        """Channels whose occupants are tracked."""
        return self._monitored

    def is_monitored(self, channel_id: str | None) -> bool:
        """Check whether a channel is tracked. None (no channel) never is."""
        return channel_id is not None and channel_id in self._monitored

    async def snapshot_sync(self) -> int:
        """Rebuild membership from every monitored channel and force one write.

        A channel that cannot be fetched contributes no members; the sync
        still replaces the store and writes.

        Returns:
            Number of labels tracked after the sync.
        """
        self._sync_requester.request_header_check()

        # Clear up front and add per channel so joins handled while a later
        # fetch is awaited are kept
        self._store.replace_all(())
        for channel_id in self._channel_order:
            try:
                members = await self._presence_source.fetch_channel_members(channel_id)
            except PresenceLookupError as e:
                logger.warning(f"Could not fetch channel {channel_id}, skipping: {e}")
                continue
            except Exception as e:
                logger.warning(
                    f"Unexpected error fetching channel {channel_id}, skipping: {e!r}", exc_info=True
                )
                continue
            for identity in members:
                self._store.add(resolve_label(identity))
            logger.debug(f"Channel {channel_id}: {len(members)} member(s)")

        self._sync_requester.request_sync()
        logger.info(f"Initial sync complete: {len(self._store)} member(s) tracked")
        return len(self._store)

    async def member_event(self, event: MemberEvent) -> None:
        """Apply one voice state change.

        A move between two monitored channels runs both branches, join first;
        the leave branch then keeps the label since the member is still tracked.
        """
        if event.previous_channel_id == event.new_channel_id:
            return

        if self.is_monitored(event.new_channel_id):
            self._handle_join(event)

        if self.is_monitored(event.previous_channel_id):
            await self._handle_leave(event)

    def _handle_join(self, event: MemberEvent) -> None:
        if event.member is None:
            logger.warning(
                f"Join of {event.member_id} to channel {event.new_channel_id} has no member data, ignoring"
            )
            return

        label = resolve_label(event.member)
        if self._store.add(label):
            logger.info(f"'{label}' joined channel {event.new_channel_id}")
        self._sync_requester.request_sync()

    async def _handle_leave(self, event: MemberEvent) -> None:
        if self.is_monitored(event.new_channel_id):
            # Moved between monitored channels: still tracked, the join already covered it
            logger.debug(
                f"Member {event.member_id} moved {event.previous_channel_id} -> {event.new_channel_id}"
            )
            self._sync_requester.request_sync()
            return

        identity = event.member or await self._resolve_departed(event)
        label = resolve_label(identity)
        if self._store.remove(label):
            logger.info(f"'{label}' left channel {event.previous_channel_id}")
        else:
            logger.debug(f"'{label}' left channel {event.previous_channel_id} but was not tracked")
        self._sync_requester.request_sync()

    async def _resolve_departed(self, event: MemberEvent) -> MemberIdentity:
        try:
            return await self._presence_source.resolve_member(event.guild_id, event.member_id)
        except PresenceLookupError as e:
            logger.warning(f"Could not resolve departing member {event.member_id}: {e}")
            return unresolved_identity(event.member_id)
        except Exception as e:
            logger.warning(
                f"Unexpected error resolving departing member {event.member_id}: {e!r}", exc_info=True
            )
            return unresolved_identity(event.member_id)

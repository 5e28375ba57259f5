"""Contracts between core components."""

from vc_roster.domain.contracts.membership_event_handler import MembershipEventHandlerProtocol
from vc_roster.domain.contracts.roster_writer import RosterWriterProtocol
from vc_roster.domain.contracts.sync_requester import SyncRequesterProtocol

__all__ = [
    "MembershipEventHandlerProtocol",
    "RosterWriterProtocol",
    "SyncRequesterProtocol",
]

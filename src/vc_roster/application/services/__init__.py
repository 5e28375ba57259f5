"""Application services for roster reconciliation."""

from vc_roster.application.services.event_reconciler import EventReconciler
from vc_roster.application.services.identity_resolver import resolve_label, unresolved_identity
from vc_roster.application.services.membership_store import MembershipStore
from vc_roster.application.services.write_serializer import (
    SerializerState,
    WriteSerializer,
    WriteTask,
)

__all__ = [
    "EventReconciler",
    "MembershipStore",
    "SerializerState",
    "WriteSerializer",
    "WriteTask",
    "resolve_label",
    "unresolved_identity",
]

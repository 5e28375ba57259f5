"""Ports (interfaces) for the ports-and-adapters architecture."""

from vc_roster.domain.ports.presence_source import PresenceLookupError, PresenceSource
from vc_roster.domain.ports.sheet_transport import RemoteStoreError, SheetTransport

__all__ = [
    "PresenceLookupError",
    "PresenceSource",
    "RemoteStoreError",
    "SheetTransport",
]

"""Roster writer contract (protocol)."""

from collections.abc import Sequence
from typing import Protocol

from vc_roster.domain.models.sync_result import SyncResult


class RosterWriterProtocol(Protocol):
    """Protocol for maintaining the remote roster record."""

    async def ensure_header(self) -> SyncResult:
        """Write the header cell if it is missing."""
        ...

    async def read_data_rows(self) -> list[str]:
        """Read the labels currently stored below the header."""
        ...

    async def overwrite_all(self, labels: Sequence[str]) -> SyncResult:
        """Replace every data row with the given labels."""
        ...

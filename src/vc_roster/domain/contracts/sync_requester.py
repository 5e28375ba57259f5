"""Protocol for requesting roster writes."""

from typing import Protocol


class SyncRequesterProtocol(Protocol):
    """Protocol for scheduling writes to the remote roster."""

    def request_sync(self) -> bool:
        """Ask for the roster to be rewritten from current membership.

        Returns:
            True if a new write was scheduled, False if it was coalesced into a pending one.
        """
        ...

    def request_header_check(self) -> None:
        """Ask for the roster header to be verified and written if missing."""
        ...

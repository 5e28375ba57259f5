"""Sheet transport port."""

from typing import Protocol


class RemoteStoreError(Exception):
    """Raised when a remote tabular store call fails."""

    def __init__(self, reason: str, status_code: int | None = None) -> None:
        """Initialize with a human-readable reason and optional HTTP status."""
        super().__init__(reason)
        self.reason = reason
        self.status_code = status_code


class SheetTransport(Protocol):
    """Port for reading and writing cell ranges in a spreadsheet.

    Ranges use A1 notation including the sheet name, e.g. ``VC_Roster!A2:A``.
    """

    async def get_range(self, cell_range: str) -> list[list[str]]:
        """Read the values of a range, row by row."""
        ...

    async def update_range(self, cell_range: str, values: list[list[str]]) -> None:
        """Overwrite a range with the given rows."""
        ...

    async def clear_range(self, cell_range: str) -> None:
        """Clear all values in a range."""
        ...

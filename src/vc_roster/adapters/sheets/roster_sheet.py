"""Remote roster record kept in one column of a spreadsheet tab.

Layout: A1 holds the header, A2 downward holds one member label per row
with no gaps. Every sync rewrites the whole body.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from vc_roster.adapters.sheets.errors import error_details_from_exception
from vc_roster.domain.contracts.roster_writer import RosterWriterProtocol
from vc_roster.domain.models.sync_result import SyncResult
from vc_roster.domain.ports.sheet_transport import RemoteStoreError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from vc_roster.domain.ports.sheet_transport import SheetTransport

logger = logging.getLogger(__name__)

DEFAULT_HEADER = "Username"


def dedupe_labels(labels: Sequence[str]) -> list[str]:
    """Drop repeated labels, keeping the first occurrence of each."""
    return list(dict.fromkeys(labels))


class RosterSheet(RosterWriterProtocol):
    """Reads and writes the roster through a sheet transport."""

    def __init__(
        self,
        transport: SheetTransport,
        sheet_name: str = "VC_Roster",
        header: str = DEFAULT_HEADER,
    ) -> None:
        """Initialize the roster sheet.

        Args:
            transport: Transport performing the range calls.
            sheet_name: Name of the tab holding the roster.
            header: Literal written to the header cell.
        """
        self._transport = transport
        self.sheet_name = sheet_name
        self.header = header

    @property
    def header_range(self) -> str:
        return f"{self.sheet_name}!A1:A1"

    @property
    def data_range(self) -> str:
        return f"{self.sheet_name}!A2:A"

    @property
    def data_anchor(self) -> str:
        return f"{self.sheet_name}!A2"

    async def ensure_header(self) -> SyncResult:
        """Write the header cell if it is empty. A failed read counts as empty."""
        operation = "ensure header"
        try:
            rows = await self._transport.get_range(self.header_range)
        except RemoteStoreError as e:
            logger.warning(f"Could not read roster header, rewriting it: {e.reason}")
            rows = []

        if rows and rows[0] and rows[0][0]:
            return SyncResult.success(operation)

        try:
            await self._transport.update_range(self.header_range, [[self.header]])
        except RemoteStoreError as e:
            return SyncResult.failure(operation, error_details_from_exception(e))

        logger.info("Sheet header initialized.")
        return SyncResult.success(operation, rows_written=1)

    async def read_data_rows(self) -> list[str]:
        """Return the labels below the header, or [] if they cannot be read."""
        try:
            rows = await self._transport.get_range(self.data_range)
        except RemoteStoreError as e:
            logger.warning(f"Could not read roster rows: {e.reason}")
            return []
        return [row[0] for row in rows if row]

    async def overwrite_all(self, labels: Sequence[str]) -> SyncResult:
        """Clear the body and write the deduplicated labels from A2 down.

        No write call is made when there is nothing to write.
        """
        operation = "overwrite roster"
        unique = dedupe_labels(labels)
        if len(unique) != len(labels):
            logger.debug(f"Dropped {len(labels) - len(unique)} duplicate label(s) before writing")

        try:
            await self._transport.clear_range(self.data_range)
            if unique:
                await self._transport.update_range(
                    self.data_anchor, [[label] for label in unique]
                )
        except RemoteStoreError as e:
            return SyncResult.failure(operation, error_details_from_exception(e))

        logger.info(f"Sheet updated: {len(unique)} member(s).")
        return SyncResult.success(operation, rows_written=len(unique))

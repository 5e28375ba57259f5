"""HTTP client for the Google Sheets v4 values API.

API Documentation: https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets.values
"""

import asyncio
import logging
from typing import TYPE_CHECKING, Any, Protocol
from urllib.parse import quote, urlencode

import aiohttp

from vc_roster.adapters.sheets.request_logger import log_api_request
from vc_roster.domain.ports.sheet_transport import RemoteStoreError, SheetTransport

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession

SHEETS_API_BASE_URL = "https://sheets.googleapis.com/v4/spreadsheets"


class TokenProvider(Protocol):
    """Anything that can hand out a bearer token for the Sheets API."""

    async def get_token(self) -> str:
        """Return a valid access token."""
        ...


class SheetsHttpClient(SheetTransport):
    """Sheet transport backed by the Sheets REST API over aiohttp."""

    def __init__(
        self,
        session: "ClientSession",
        spreadsheet_id: str,
        token_provider: TokenProvider,
    ) -> None:
        """Initialize the client.

        Args:
            session: Shared aiohttp session (carries the request timeout).
            spreadsheet_id: ID of the target spreadsheet.
            token_provider: Source of OAuth bearer tokens.
        """
        self._session = session
        self._spreadsheet_id = spreadsheet_id
        self._token_provider = token_provider

    def _values_url(self, cell_range: str, suffix: str = "") -> str:
        spreadsheet = quote(self._spreadsheet_id, safe="")
        return f"{SHEETS_API_BASE_URL}/{spreadsheet}/values/{quote(cell_range, safe='')}{suffix}"

    async def _request(
        self,
        method: str,
        url: str,
        params: dict[str, str] | None = None,
        payload: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        token = await self._token_provider.get_token()
        headers = {"Authorization": f"Bearer {token}"}
        log_api_request(
            method, f"{url}?{urlencode(params)}" if params else url, headers, payload
        )

        try:
            async with self._session.request(
                method, url, params=params, json=payload, headers=headers
            ) as response:
                if not 200 <= response.status < 300:
                    response_text = await response.text()
                    raise RemoteStoreError(
                        f"Sheets API returned status {response.status}: {response_text[:200]}",
                        status_code=response.status,
                    )
                data = await response.json()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise RemoteStoreError(f"Sheets API request failed: {e!r}") from e

        return data if isinstance(data, dict) else {}

    async def get_range(self, cell_range: str) -> list[list[str]]:
        """Read the values of a range, row by row. Empty ranges return []."""
        data = await self._request("GET", self._values_url(cell_range))
        return [[str(cell) for cell in row] for row in data.get("values", [])]

    async def update_range(self, cell_range: str, values: list[list[str]]) -> None:
        """Overwrite a range, storing values as entered (no formula parsing)."""
        payload = {"range": cell_range, "majorDimension": "ROWS", "values": values}
        await self._request(
            "PUT",
            self._values_url(cell_range),
            params={"valueInputOption": "RAW"},
            payload=payload,
        )
        logger.debug(f"Updated {cell_range} with {len(values)} row(s)")

    async def clear_range(self, cell_range: str) -> None:
        """Clear all values in a range, keeping formatting."""
        await self._request("POST", self._values_url(cell_range, ":clear"), payload={})
        logger.debug(f"Cleared {cell_range}")

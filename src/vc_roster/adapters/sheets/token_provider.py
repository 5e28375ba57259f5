"""Bearer tokens for the Sheets API from a service account key file."""

from __future__ import annotations

import asyncio
import logging

import google.auth.exceptions
import google.auth.transport.requests
from google.oauth2 import service_account

from vc_roster.domain.ports.sheet_transport import RemoteStoreError

logger = logging.getLogger(__name__)

SHEETS_SCOPE = "https://www.googleapis.com/auth/spreadsheets"


class ServiceAccountTokenProvider:
    """Hands out access tokens, refreshing them when they expire.

    google-auth refreshes synchronously over ``requests``, so refreshes run in
    a worker thread to keep the event loop free.
    """

    def __init__(self, credentials: service_account.Credentials) -> None:
        """Initialize with loaded service account credentials."""
        self._credentials = credentials
        self._lock = asyncio.Lock()

    @classmethod
    def from_file(cls, path: str) -> ServiceAccountTokenProvider:
        """Load credentials from a service account JSON key file.

        Raises:
            OSError: If the file cannot be read.
            ValueError: If the file is not a valid service account key.
        """
        credentials = service_account.Credentials.from_service_account_file(
            path, scopes=[SHEETS_SCOPE]
        )
        logger.info(f"Loaded service account credentials for {credentials.service_account_email}")
        return cls(credentials)

    async def get_token(self) -> str:
        """Return a valid access token.

        Raises:
            RemoteStoreError: If the token cannot be refreshed.
        """
        async with self._lock:
            if not self._credentials.valid:
                try:
                    await asyncio.to_thread(
                        self._credentials.refresh, google.auth.transport.requests.Request()
                    )
                except google.auth.exceptions.GoogleAuthError as e:
                    raise RemoteStoreError(f"Token refresh failed: {e}") from e
                logger.debug("Refreshed Sheets API access token")
            return self._credentials.token

"""Google Sheets adapters."""

from vc_roster.adapters.sheets.http_client import SheetsHttpClient
from vc_roster.adapters.sheets.roster_sheet import RosterSheet, dedupe_labels
from vc_roster.adapters.sheets.token_provider import ServiceAccountTokenProvider

__all__ = [
    "RosterSheet",
    "ServiceAccountTokenProvider",
    "SheetsHttpClient",
    "dedupe_labels",
]

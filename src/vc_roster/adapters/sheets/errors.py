"""Translate remote store failures into error details."""

from vc_roster.domain.models.sync_result import ErrorDetails
from vc_roster.domain.ports.sheet_transport import RemoteStoreError


def describe_status(status_code: int | None) -> str:
    """Map an HTTP status code to a short operator-facing reason."""
    if status_code == 401:
        return "Unauthorized (check service account credentials)"
    if status_code == 403:
        return "Forbidden (is the sheet shared with the service account?)"
    if status_code == 404:
        return "Spreadsheet or range not found"
    if status_code == 429:
        return "Rate limit exceeded"
    if status_code == 502:
        return "Bad gateway (server error)"
    if status_code == 503:
        return "Service unavailable"
    if status_code == 504:
        return "Gateway timeout"
    if status_code is not None:
        return f"HTTP {status_code}"
    return "Unknown error"


def error_details_from_exception(error: Exception) -> ErrorDetails:
    """Extract status code and reason from a failed remote call."""
    if isinstance(error, RemoteStoreError):
        status_code = error.status_code
        reason = describe_status(status_code) if status_code is not None else error.reason
        return ErrorDetails(status_code=status_code, reason=reason)
    return ErrorDetails(status_code=None, reason=f"{type(error).__name__}: {error}")

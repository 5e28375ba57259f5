"""Utility for logging Sheets API requests when VC_ROSTER_LOG_REQUESTS is enabled."""

import json
import logging
import os
from typing import Any

logger = logging.getLogger(__name__)

SENSITIVE_HEADERS = {"authorization", "cookie", "x-goog-api-key"}


def should_log_requests() -> bool:
    """Check if request logging is enabled via VC_ROSTER_LOG_REQUESTS environment variable."""
    return os.getenv("VC_ROSTER_LOG_REQUESTS", "").lower() == "true"


def redact_headers(headers: dict[str, str]) -> dict[str, str]:
    """Redact credentials from headers before logging."""
    return {k: "***REDACTED***" if k.lower() in SENSITIVE_HEADERS else v for k, v in headers.items()}


def log_api_request(
    method: str,
    url: str,
    headers: dict[str, str] | None = None,
    payload: Any = None,
) -> None:
    """Log request details if VC_ROSTER_LOG_REQUESTS is enabled.

    Args:
        method: HTTP method.
        url: Request URL including query string.
        headers: Request headers (credentials are redacted).
        payload: JSON request body, if any.
    """
    if not should_log_requests():
        return

    log_parts = [f"{method} {url}"]
    if headers:
        log_parts.append(f"Headers: {json.dumps(redact_headers(headers), indent=2)}")
    if payload is not None:
        log_parts.append(f"Payload: {json.dumps(payload, indent=2)}")

    logger.info("Sheets API Request:\n" + "\n".join(log_parts))

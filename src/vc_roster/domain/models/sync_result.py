"""Outcome of a remote roster operation."""

from pydantic import BaseModel, ConfigDict


class ErrorDetails(BaseModel):
    """Why a remote call failed, with the HTTP status when there was one."""

    model_config = ConfigDict(frozen=True)

    status_code: int | None = None
    reason: str


class SyncResult(BaseModel):
    """Result of a single remote roster operation.

    Adapters return this instead of raising so that failures can be reported
    once, by whoever drains the write queue.
    """

    model_config = ConfigDict(frozen=True)

    operation: str
    ok: bool
    rows_written: int = 0
    error: ErrorDetails | None = None

    @classmethod
    def success(cls, operation: str, rows_written: int = 0) -> "SyncResult":
        """Build a successful result."""
        return cls(operation=operation, ok=True, rows_written=rows_written)

    @classmethod
    def failure(cls, operation: str, error: ErrorDetails) -> "SyncResult":
        """Build a failed result."""
        return cls(operation=operation, ok=False, error=error)

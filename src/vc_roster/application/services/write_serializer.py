"""Single-writer task queue for roster updates.

All remote writes go through one queue drained by one worker task, so at most
one write is in flight and writes apply in submission order. Sync requests
coalesce: while a sync is queued but not started, further requests are
no-ops, and the queued sync reads membership only when it starts running.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from vc_roster.domain.contracts.sync_requester import SyncRequesterProtocol

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable
    from types import TracebackType

    from vc_roster.application.services.membership_store import MembershipStore
    from vc_roster.domain.contracts.roster_writer import RosterWriterProtocol
    from vc_roster.domain.models.sync_result import SyncResult

logger = logging.getLogger(__name__)

SYNC_TASK_NAME = "overwrite roster"
HEADER_TASK_NAME = "ensure header"


class SerializerState(str, Enum):
    """Observable state of the write serializer."""

    IDLE = "idle"
    PENDING = "pending"  # Work queued, nothing executing yet
    RUNNING = "running"  # A task is executing against the remote store


@dataclass(frozen=True)
class WriteTask:
    """A named unit of remote work."""

    name: str
    operation: Callable[[], Awaitable[SyncResult]]


class WriteSerializer(SyncRequesterProtocol):
    """Serializes and coalesces writes to the remote roster."""

    def __init__(self, store: MembershipStore, roster: RosterWriterProtocol) -> None:
        """Initialize the serializer.

        Args:
            store: Membership store read at the moment each sync executes.
            roster: Remote roster the writes are applied to.
        """
        self._store = store
        self._roster = roster
        self._queue: asyncio.Queue[WriteTask] = asyncio.Queue()
        self._sync_pending = False
        self._current_task: str | None = None
        self._worker: asyncio.Task | None = None
        self.completed_tasks = 0
        self.failed_tasks = 0

    @property
    def state(self) -> SerializerState:
        """Current state of the writer."""
        if self._current_task is not None:
            return SerializerState.RUNNING
        if self._sync_pending or not self._queue.empty():
            return SerializerState.PENDING
        return SerializerState.IDLE

    @property
    def sync_pending(self) -> bool:
        """Whether a sync is queued and has not started yet."""
        return self._sync_pending

    async def start(self) -> None:
        """Start the worker task."""
        if self._worker is not None and not self._worker.done():
            logger.warning("Write serializer already running")
            return
        self._worker = asyncio.create_task(self._worker_loop())
        logger.info("Started write serializer")

    async def stop(self) -> None:
        """Stop the worker task. Queued tasks that have not started are dropped."""
        if self._worker and not self._worker.done():
            self._worker.cancel()
            try:
                await self._worker
            except asyncio.CancelledError:
                logger.info("Write serializer cancelled")
            if not self._queue.empty():
                logger.warning(f"Dropped {self._queue.qsize()} queued roster task(s) on stop")
            logger.info("Stopped write serializer")

    async def join(self) -> None:
        """Wait until every task enqueued so far has finished.

        Raises:
            RuntimeError: If tasks are queued but the worker is not running.
        """
        if (self._worker is None or self._worker.done()) and not self._queue.empty():
            raise RuntimeError(
                f"Write serializer is not running, {self._queue.qsize()} task(s) would never finish"
            )
        await self._queue.join()

    async def __aenter__(self) -> WriteSerializer:
        await self.start()
        return self

    async def __aexit__(
        self,
        _exc_type: type[BaseException] | None,
        _exc_val: BaseException | None,
        _exc_tb: TracebackType | None,
    ) -> None:
        await self.stop()

    def submit(self, name: str, operation: Callable[[], Awaitable[SyncResult]]) -> None:
        """Append a task to the write chain."""
        self._queue.put_nowait(WriteTask(name=name, operation=operation))
        logger.debug(f"Queued roster task '{name}' (queue size: {self._queue.qsize()})")

    def request_sync(self) -> bool:
        """Schedule a roster rewrite unless one is already waiting to start."""
        if self._sync_pending:
            logger.debug("Roster sync already pending, request coalesced")
            return False
        self._sync_pending = True
        self.submit(SYNC_TASK_NAME, self._run_sync)
        return True

    def request_header_check(self) -> None:
        """Schedule a header check on the same chain as data writes."""
        self.submit(HEADER_TASK_NAME, self._roster.ensure_header)

    async def _run_sync(self) -> SyncResult:
        # Clear before snapshotting: mutations from here on need a follow-up write
        self._sync_pending = False
        labels = self._store.snapshot()
        return await self._roster.overwrite_all(labels)

    async def _worker_loop(self) -> None:
        """Drain the queue one task at a time."""
        while True:
            task = await self._queue.get()
            self._current_task = task.name
            try:
                result = await task.operation()
            except Exception:
                self.failed_tasks += 1
                logger.exception(f"Roster task '{task.name}' raised unexpectedly")
            else:
                self._report(task, result)
            finally:
                self._current_task = None
                self._queue.task_done()

    def _report(self, task: WriteTask, result: SyncResult) -> None:
        if result.ok:
            self.completed_tasks += 1
            logger.debug(f"Roster task '{task.name}' completed ({result.rows_written} row(s))")
            return

        self.failed_tasks += 1
        error = result.error
        if error is None:
            logger.error(f"Roster task '{task.name}' failed")
        else:
            logger.error(
                f"Roster task '{task.name}' failed: {error.reason} (status: {error.status_code})"
            )

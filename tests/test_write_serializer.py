"""Tests for the single-writer roster queue."""

import asyncio
import logging
from collections.abc import Sequence

import pytest

from tests.fakes import RecordingRoster
from vc_roster.application.services import MembershipStore, SerializerState, WriteSerializer
from vc_roster.domain.models import SyncResult


class ConcurrencyProbeRoster(RecordingRoster):
    """Roster that tracks how many writes are in flight at once."""

    def __init__(self) -> None:
        super().__init__()
        self.in_flight = 0
        self.max_in_flight = 0
        self.order: list[str] = []

    async def ensure_header(self) -> SyncResult:
        self.order.append("header")
        return await super().ensure_header()

    async def overwrite_all(self, labels: Sequence[str]) -> SyncResult:
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(0.01)
            self.order.append("sync")
            return await super().overwrite_all(labels)
        finally:
            self.in_flight -= 1


@pytest.mark.asyncio
async def test_requests_before_execution_coalesce_into_one_write() -> None:
    """Given several requests before the worker runs, when draining, then one write with the latest state happens."""
    store = MembershipStore()
    roster = RecordingRoster()

    async with WriteSerializer(store, roster) as serializer:
        store.add("alice")
        assert serializer.request_sync() is True
        store.add("bob")
        assert serializer.request_sync() is False
        store.add("carol")
        assert serializer.request_sync() is False
        assert serializer.state is SerializerState.PENDING

        await serializer.join()

        assert serializer.state is SerializerState.IDLE

    assert roster.writes == [["alice", "bob", "carol"]]


@pytest.mark.asyncio
async def test_sequential_requests_write_in_order() -> None:
    """Given two requests each allowed to finish, when draining, then two writes apply in order."""
    store = MembershipStore()
    roster = RecordingRoster()

    async with WriteSerializer(store, roster) as serializer:
        store.add("alice")
        serializer.request_sync()
        await serializer.join()

        store.add("bob")
        store.remove("alice")
        serializer.request_sync()
        await serializer.join()

    assert roster.writes == [["alice"], ["bob"]]


@pytest.mark.asyncio
async def test_request_during_running_write_arms_one_follow_up() -> None:
    """Given a write in flight, when more requests arrive, then exactly one follow-up write runs with the latest state."""
    store = MembershipStore()
    roster = RecordingRoster()
    roster.gate = asyncio.Event()

    async with WriteSerializer(store, roster) as serializer:
        store.add("alice")
        serializer.request_sync()
        await roster.write_started.wait()

        assert serializer.state is SerializerState.RUNNING
        assert serializer.sync_pending is False

        store.add("bob")
        assert serializer.request_sync() is True
        store.add("carol")
        assert serializer.request_sync() is False

        roster.gate.set()
        await serializer.join()

    assert roster.writes == [["alice"], ["alice", "bob", "carol"]]


@pytest.mark.asyncio
async def test_at_most_one_write_in_flight() -> None:
    """Given requests interleaved with event loop turns, when draining, then writes never overlap."""
    store = MembershipStore()
    roster = ConcurrencyProbeRoster()

    async with WriteSerializer(store, roster) as serializer:
        for i in range(10):
            store.add(f"user{i}")
            serializer.request_sync()
            await asyncio.sleep(0.005)
        await serializer.join()

    assert roster.max_in_flight == 1
    assert roster.writes[-1] == [f"user{i}" for i in range(10)]


@pytest.mark.asyncio
async def test_header_check_runs_on_the_same_chain_before_later_syncs() -> None:
    """Given a header check queued before a sync, when draining, then the header runs first."""
    store = MembershipStore()
    roster = ConcurrencyProbeRoster()

    async with WriteSerializer(store, roster) as serializer:
        serializer.request_header_check()
        serializer.request_sync()
        await serializer.join()

    assert roster.order == ["header", "sync"]


@pytest.mark.asyncio
async def test_failed_write_is_logged_and_chain_continues(caplog: pytest.LogCaptureFixture) -> None:
    """Given a write that reports failure, when the next sync runs, then it still executes."""
    store = MembershipStore()
    roster = RecordingRoster()
    roster.fail_next_writes = 1

    with caplog.at_level(logging.ERROR):
        async with WriteSerializer(store, roster) as serializer:
            store.add("alice")
            serializer.request_sync()
            await serializer.join()
            store.add("bob")
            serializer.request_sync()
            await serializer.join()

            assert serializer.failed_tasks == 1
            assert serializer.completed_tasks == 1

    assert len(roster.writes) == 2
    assert "Service unavailable" in caplog.text
    assert "status: 503" in caplog.text


@pytest.mark.asyncio
async def test_raising_task_is_logged_and_chain_continues(caplog: pytest.LogCaptureFixture) -> None:
    """Given a write that raises, when the next sync runs, then the worker is still alive."""
    store = MembershipStore()
    roster = RecordingRoster()
    roster.raise_next_writes = 1

    with caplog.at_level(logging.ERROR):
        async with WriteSerializer(store, roster) as serializer:
            store.add("alice")
            serializer.request_sync()
            await serializer.join()
            serializer.request_sync()
            await serializer.join()

            assert serializer.failed_tasks == 1

    assert roster.writes == [["alice"]]
    assert "transport exploded" in caplog.text


@pytest.mark.asyncio
async def test_start_twice_keeps_single_worker(caplog: pytest.LogCaptureFixture) -> None:
    """Given a running serializer, when starting again, then a warning is logged and nothing changes."""
    serializer = WriteSerializer(MembershipStore(), RecordingRoster())

    await serializer.start()
    with caplog.at_level(logging.WARNING):
        await serializer.start()
    await serializer.stop()

    assert "already running" in caplog.text


@pytest.mark.asyncio
async def test_new_serializer_is_idle() -> None:
    """Given a new serializer, when inspecting it, then it is idle with no counters."""
    serializer = WriteSerializer(MembershipStore(), RecordingRoster())

    assert serializer.state is SerializerState.IDLE
    assert serializer.completed_tasks == 0
    assert serializer.failed_tasks == 0


@pytest.mark.asyncio
async def test_join_without_worker_raises_when_tasks_are_queued() -> None:
    """Given a queued sync and no running worker, when joining, then RuntimeError is raised instead of waiting forever."""
    serializer = WriteSerializer(MembershipStore(), RecordingRoster())
    serializer.request_sync()

    with pytest.raises(RuntimeError, match="not running"):
        await serializer.join()


@pytest.mark.asyncio
async def test_join_after_stop_with_empty_queue_returns() -> None:
    """Given a stopped serializer whose queue was drained, when joining, then it returns immediately."""
    serializer = WriteSerializer(MembershipStore(), RecordingRoster())
    async with serializer:
        serializer.request_sync()
        await serializer.join()

    await serializer.join()

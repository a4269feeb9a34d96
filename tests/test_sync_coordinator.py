"""Tests for ticket-ordered synchronization of the committed range."""

from __future__ import annotations

import asyncio
from datetime import date

import pytest

from custom_components.energy_period_selector.coordinator import (
    EnergyPeriodSyncCoordinator,
    SyncConfig,
    SyncOutcome,
)
from custom_components.energy_period_selector.exceptions import SyncFailure
from custom_components.energy_period_selector.period import DateRange, PeriodKind, PeriodState

START_HELPER = "input_datetime.energy_start_date"
END_HELPER = "input_datetime.energy_end_date"

MARCH = PeriodState(PeriodKind.MONTH, DateRange(date(2024, 3, 1), date(2024, 3, 31)))
APRIL = PeriodState(PeriodKind.MONTH, DateRange(date(2024, 4, 1), date(2024, 4, 30)))


class FakeWriter:
    """Records writes; optionally fails or blocks per entity/date."""

    def __init__(self) -> None:
        self.writes: list[tuple[str, date]] = []
        self.failing: set[str] = set()
        self.gates: dict[date, asyncio.Event] = {}

    async def async_set_entity_date(self, entity_id: str, value: date) -> None:
        if value in self.gates:
            await self.gates[value].wait()
        if entity_id in self.failing:
            raise SyncFailure(SyncFailure.ENTITY_NOT_FOUND.format(entity_id=entity_id))
        self.writes.append((entity_id, value))


class FakeCollection:
    """Records the window and refreshes."""

    def __init__(self) -> None:
        self.periods: list[tuple[date, date]] = []
        self.refreshes = 0
        self.fail_refresh = False

    def set_period(self, start: date, end: date) -> None:
        self.periods.append((start, end))

    async def async_refresh(self) -> None:
        if self.fail_refresh:
            raise SyncFailure(SyncFailure.REFRESH_FAILED.format(exception="boom"))
        self.refreshes += 1


class FakeProvider:
    """Hands out the collection (or None) and counts acquisitions."""

    def __init__(self, collection: FakeCollection | None) -> None:
        self.collection = collection
        self.calls = 0

    def get_or_create_collection(self) -> FakeCollection | None:
        self.calls += 1
        return self.collection


@pytest.fixture
def writer() -> FakeWriter:
    """Fake helper writer."""
    return FakeWriter()


@pytest.fixture
def collection() -> FakeCollection:
    """Fake energy collection."""
    return FakeCollection()


@pytest.fixture
def provider(collection: FakeCollection) -> FakeProvider:
    """Provider returning the fake collection."""
    return FakeProvider(collection)


def _sync(writer: FakeWriter, provider: FakeProvider, *, enabled: bool = True) -> EnergyPeriodSyncCoordinator:
    return EnergyPeriodSyncCoordinator(
        SyncConfig(START_HELPER, END_HELPER, auto_sync_enabled=enabled),
        writer,
        provider,
        log_prefix="[test]",
    )


@pytest.mark.unit
@pytest.mark.asyncio
async def test_sync_writes_helpers_and_collection(
    writer: FakeWriter,
    provider: FakeProvider,
    collection: FakeCollection,
) -> None:
    """A successful dispatch writes both helpers, sets the window and refreshes once."""
    sync = _sync(writer, provider)

    result = await sync.async_sync(MARCH, sync.issue_ticket())

    assert result.outcome is SyncOutcome.COMPLETED
    assert result.collection_updated is True
    assert sorted(writer.writes) == sorted([(START_HELPER, date(2024, 3, 1)), (END_HELPER, date(2024, 3, 31))])
    assert collection.periods == [(date(2024, 3, 1), date(2024, 3, 31))]
    assert collection.refreshes == 1
    assert sync.last_result == result


@pytest.mark.unit
@pytest.mark.asyncio
async def test_sync_disabled_touches_nothing(writer: FakeWriter, provider: FakeProvider) -> None:
    """With auto sync off no helper or collection is contacted."""
    sync = _sync(writer, provider, enabled=False)

    result = await sync.async_sync(MARCH)

    assert result.outcome is SyncOutcome.DISABLED
    assert writer.writes == []
    assert provider.calls == 0


@pytest.mark.unit
@pytest.mark.asyncio
async def test_missing_helper_is_partial_and_other_targets_still_updated(
    writer: FakeWriter,
    provider: FakeProvider,
    collection: FakeCollection,
) -> None:
    """One failing helper does not block the other helper or the collection."""
    writer.failing.add(END_HELPER)
    sync = _sync(writer, provider)

    result = await sync.async_sync(MARCH)

    assert result.outcome is SyncOutcome.PARTIAL
    assert result.failed_entities == (END_HELPER,)
    assert writer.writes == [(START_HELPER, date(2024, 3, 1))]
    assert collection.refreshes == 1


@pytest.mark.unit
@pytest.mark.asyncio
async def test_collection_unavailable_skips_collection(writer: FakeWriter) -> None:
    """Without an energy collection the helpers are still written."""
    provider = FakeProvider(None)
    sync = _sync(writer, provider)

    result = await sync.async_sync(MARCH)

    assert result.outcome is SyncOutcome.COMPLETED
    assert result.collection_updated is False
    assert len(writer.writes) == 2


@pytest.mark.unit
@pytest.mark.asyncio
async def test_collection_refresh_failure_is_reported_not_raised(
    writer: FakeWriter,
    provider: FakeProvider,
    collection: FakeCollection,
) -> None:
    """A failing refresh is logged and recorded, never propagated."""
    collection.fail_refresh = True
    sync = _sync(writer, provider)

    result = await sync.async_sync(MARCH)

    assert result.collection_updated is False
    assert result.outcome is SyncOutcome.COMPLETED


@pytest.mark.unit
@pytest.mark.asyncio
async def test_collection_handle_acquired_once(writer: FakeWriter, provider: FakeProvider) -> None:
    """The collection handle is cached across dispatches."""
    sync = _sync(writer, provider)

    await sync.async_sync(MARCH)
    await sync.async_sync(APRIL)

    assert provider.calls == 1


@pytest.mark.unit
@pytest.mark.asyncio
async def test_reset_collection_reacquires_handle(writer: FakeWriter, provider: FakeProvider) -> None:
    """After a reset the next dispatch asks the provider again."""
    sync = _sync(writer, provider)

    await sync.async_sync(MARCH)
    sync.reset_collection()
    await sync.async_sync(APRIL)

    assert provider.calls == 2


@pytest.mark.unit
@pytest.mark.asyncio
async def test_unavailable_collection_is_retried_on_next_dispatch(writer: FakeWriter) -> None:
    """A provider returning None is asked again next time."""
    provider = FakeProvider(None)
    sync = _sync(writer, provider)

    await sync.async_sync(MARCH)
    provider.collection = FakeCollection()
    result = await sync.async_sync(APRIL)

    assert result.collection_updated is True
    assert provider.calls == 2


@pytest.mark.unit
@pytest.mark.asyncio
async def test_unexpected_writer_error_is_partial_not_raised(
    provider: FakeProvider,
    collection: FakeCollection,
) -> None:
    """Any writer error is recorded as a failed entity; the collection is still updated."""

    class BrokenWriter:
        async def async_set_entity_date(self, entity_id: str, value: date) -> None:
            if entity_id == START_HELPER:
                msg = "handler crashed"
                raise RuntimeError(msg)

    sync = _sync(BrokenWriter(), provider)  # type: ignore[arg-type]

    result = await sync.async_sync(MARCH)

    assert result.outcome is SyncOutcome.PARTIAL
    assert result.failed_entities == (START_HELPER,)
    assert result.collection_updated is True
    assert collection.periods == [(MARCH.start, MARCH.end)]
    assert sync.last_result == result


@pytest.mark.unit
@pytest.mark.asyncio
async def test_unexpected_collection_error_is_reported_not_raised(
    writer: FakeWriter,
    provider: FakeProvider,
    collection: FakeCollection,
) -> None:
    """An unexpected refresh error marks the collection as not updated."""

    async def _broken_refresh() -> None:
        msg = "refresh crashed"
        raise RuntimeError(msg)

    collection.async_refresh = _broken_refresh  # type: ignore[method-assign]
    sync = _sync(writer, provider)

    result = await sync.async_sync(MARCH)

    assert result.outcome is SyncOutcome.COMPLETED
    assert result.collection_updated is False
    assert len(writer.writes) == 2


@pytest.mark.unit
def test_tickets_are_monotonic(writer: FakeWriter, provider: FakeProvider) -> None:
    """Each issued ticket supersedes all earlier ones."""
    sync = _sync(writer, provider)

    first = sync.issue_ticket()
    second = sync.issue_ticket()

    assert second > first
    assert sync.is_superseded(first)
    assert not sync.is_superseded(second)
    assert sync.latest_ticket == second


@pytest.mark.unit
@pytest.mark.asyncio
async def test_older_dispatch_finishing_last_is_discarded(
    writer: FakeWriter,
    provider: FakeProvider,
    collection: FakeCollection,
) -> None:
    """
    T1 is dispatched first and its start write is still pending when T2 is committed.

    T1 must report itself superseded and must not touch the collection. Both
    helpers and the collection end with T2's window.
    """
    gate = asyncio.Event()
    writer.gates[MARCH.start] = gate
    sync = _sync(writer, provider)

    ticket_1 = sync.issue_ticket()
    task_1 = asyncio.create_task(sync.async_sync(MARCH, ticket_1))
    await asyncio.sleep(0)

    ticket_2 = sync.issue_ticket()
    task_2 = asyncio.create_task(sync.async_sync(APRIL, ticket_2))
    await asyncio.sleep(0)

    gate.set()
    result_1 = await task_1
    result_2 = await task_2

    final = dict(writer.writes)

    assert result_2.outcome is SyncOutcome.COMPLETED
    assert result_1.outcome is SyncOutcome.SUPERSEDED
    assert final[START_HELPER] == APRIL.start
    assert final[END_HELPER] == APRIL.end
    assert writer.writes[-2:] == [(START_HELPER, APRIL.start), (END_HELPER, APRIL.end)]
    assert collection.periods == [(APRIL.start, APRIL.end)]
    assert sync.last_result == result_2


@pytest.mark.unit
@pytest.mark.asyncio
async def test_dispatch_superseded_before_start_writes_nothing(
    writer: FakeWriter,
    provider: FakeProvider,
    collection: FakeCollection,
) -> None:
    """A dispatch whose ticket is already stale skips every stage."""
    sync = _sync(writer, provider)

    ticket_1 = sync.issue_ticket()
    sync.issue_ticket()
    result = await sync.async_sync(MARCH, ticket_1)

    assert result.outcome is SyncOutcome.SUPERSEDED
    assert writer.writes == []
    assert collection.periods == []
    assert provider.calls == 0
    assert sync.last_result is None

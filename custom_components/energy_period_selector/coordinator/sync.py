"""
Synchronization of the committed range to external collaborators.

Pushes a committed PeriodState to:
1. The two helper entities holding the start and end date (written concurrently)
2. The energy collection (set period, then refresh)

Ordering:
- Every dispatch gets a monotonically increasing ticket
- Dispatches run one at a time under a lock, in ticket order, so the newest
  dispatch always writes last
- A dispatch that finds a newer ticket (before starting or after suspending)
  skips its remaining stages and reports itself as superseded
- In-flight calls are never cancelled; a superseded call runs to completion
  and its result is discarded

Failures are terminal at this boundary: logged, recorded in the SyncResult,
never retried and never propagated to the state machine.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING, Protocol

from custom_components.energy_period_selector.exceptions import (
    CollectionUnavailableError,
    SyncFailure,
)

if TYPE_CHECKING:
    from datetime import date

    from custom_components.energy_period_selector.period import PeriodState

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SyncConfig:
    """Sync settings, fixed for the lifetime of a config entry."""

    start_helper_id: str
    end_helper_id: str
    auto_sync_enabled: bool = True


class SyncOutcome(StrEnum):
    """How a single sync dispatch ended."""

    COMPLETED = "completed"
    PARTIAL = "partial"
    SUPERSEDED = "superseded"
    DISABLED = "disabled"


@dataclass(frozen=True, slots=True)
class SyncResult:
    """Result of one sync dispatch."""

    ticket: int
    outcome: SyncOutcome
    failed_entities: tuple[str, ...] = field(default_factory=tuple)
    collection_updated: bool = False

    def as_dict(self) -> dict[str, object]:
        """Serialize for attributes, diagnostics and service responses."""
        return {
            "ticket": self.ticket,
            "outcome": str(self.outcome),
            "failed_entities": list(self.failed_entities),
            "collection_updated": self.collection_updated,
        }


class DateEntityWriter(Protocol):
    """Writes a single date to a named external entity."""

    async def async_set_entity_date(self, entity_id: str, value: date) -> None:
        """Write value or raise SyncFailure."""


class EnergyCollection(Protocol):
    """Handle to the external energy data collection."""

    def set_period(self, start: date, end: date) -> None:
        """Set the collection's aggregation window."""

    async def async_refresh(self) -> None:
        """Ask the collection to recompute for its current window."""


class CollectionProvider(Protocol):
    """Obtains the energy collection handle."""

    def get_or_create_collection(self) -> EnergyCollection | None:
        """Return the handle, or None when no connection is available."""


class EnergyPeriodSyncCoordinator:
    """Dispatch committed ranges to helper entities and the energy collection."""

    def __init__(
        self,
        config: SyncConfig,
        writer: DateEntityWriter,
        collection_provider: CollectionProvider,
        *,
        log_prefix: str = "",
        verbose: bool = False,
    ) -> None:
        """
        Initialize the sync coordinator.

        Args:
            config: Helper entity ids and the auto sync flag
            writer: Adapter writing dates to helper entities
            collection_provider: Adapter obtaining the energy collection
            log_prefix: Prefix for log messages (entry title)
            verbose: Log completed syncs at info instead of debug

        """
        self._config = config
        self._writer = writer
        self._collection_provider = collection_provider
        self._log_prefix = log_prefix
        self._verbose = verbose

        self._collection: EnergyCollection | None = None
        self._sync_lock = asyncio.Lock()
        self._latest_ticket = 0
        self._last_result: SyncResult | None = None

    def _log(self, level: str, message: str, *args: object, **kwargs: object) -> None:
        """Log with entry-specific prefix."""
        prefixed_message = f"{self._log_prefix} {message}"
        getattr(_LOGGER, level)(prefixed_message, *args, **kwargs)

    @property
    def config(self) -> SyncConfig:
        """Return the sync configuration."""
        return self._config

    @property
    def latest_ticket(self) -> int:
        """Return the most recently issued ticket (0 before the first dispatch)."""
        return self._latest_ticket

    @property
    def last_result(self) -> SyncResult | None:
        """Return the result of the most recent non-superseded dispatch."""
        return self._last_result

    def issue_ticket(self) -> int:
        """
        Issue the ticket for a new dispatch.

        Must be called synchronously at commit time so ticket order equals
        commit order.
        """
        self._latest_ticket += 1
        return self._latest_ticket

    def is_superseded(self, ticket: int) -> bool:
        """Return True if a newer ticket has been issued since ticket."""
        return ticket < self._latest_ticket

    def reset_collection(self) -> None:
        """Drop the cached collection handle (connection lost)."""
        self._collection = None

    def _get_collection(self) -> EnergyCollection:
        """
        Get the energy collection, acquiring it at most once.

        Raises:
            CollectionUnavailableError: If no collection can be obtained

        """
        if self._collection is None:
            collection = self._collection_provider.get_or_create_collection()
            if collection is None:
                raise CollectionUnavailableError(CollectionUnavailableError.NOT_LOADED)
            self._collection = collection
        return self._collection

    async def async_sync(self, state: PeriodState, ticket: int | None = None) -> SyncResult:
        """
        Push a committed state to the external collaborators.

        Args:
            state: The committed period state
            ticket: Ticket issued at commit time; a new one is issued if omitted

        Returns:
            SyncResult describing how the dispatch ended

        """
        if ticket is None:
            ticket = self.issue_ticket()

        if not self._config.auto_sync_enabled:
            self._last_result = SyncResult(ticket, SyncOutcome.DISABLED)
            return self._last_result

        async with self._sync_lock:
            if self.is_superseded(ticket):
                return self._superseded(ticket, "before helper writes")

            failed_entities = await self._async_write_helpers(state, ticket)

            if self.is_superseded(ticket):
                return self._superseded(ticket, "after helper writes")

            collection_updated = await self._async_update_collection(state, ticket)

            if self.is_superseded(ticket):
                return self._superseded(ticket, "after collection update")

        outcome = SyncOutcome.PARTIAL if failed_entities else SyncOutcome.COMPLETED
        result = SyncResult(ticket, outcome, failed_entities, collection_updated)
        self._last_result = result
        self._log(
            "info" if self._verbose else "debug",
            "Sync #%d %s: %s to %s (collection updated: %s)",
            ticket,
            outcome,
            state.start.isoformat(),
            state.end.isoformat(),
            collection_updated,
        )
        return result

    def _superseded(self, ticket: int, stage: str) -> SyncResult:
        self._log(
            "debug",
            "Sync #%d superseded by #%d %s, discarding result",
            ticket,
            self._latest_ticket,
            stage,
        )
        return SyncResult(ticket, SyncOutcome.SUPERSEDED)

    async def _async_write_helpers(self, state: PeriodState, ticket: int) -> tuple[str, ...]:
        """Write start and end dates concurrently; return the entities that failed."""
        targets = (
            (self._config.start_helper_id, state.start),
            (self._config.end_helper_id, state.end),
        )
        results = await asyncio.gather(
            *(self._writer.async_set_entity_date(entity_id, value) for entity_id, value in targets),
            return_exceptions=True,
        )

        failed: list[str] = []
        for (entity_id, _value), result in zip(targets, results, strict=True):
            if isinstance(result, SyncFailure):
                self._log("warning", "Sync #%d: %s", ticket, result)
                failed.append(entity_id)
            elif isinstance(result, Exception):
                self._log("warning", "Sync #%d: unexpected error writing %s: %r", ticket, entity_id, result)
                failed.append(entity_id)
            elif isinstance(result, BaseException):
                # Cancellation and interpreter exits are not sync outcomes
                raise result
        return tuple(failed)

    async def _async_update_collection(self, state: PeriodState, ticket: int) -> bool:
        """Set the collection period and refresh it; return True on success."""
        try:
            collection = self._get_collection()
        except CollectionUnavailableError as err:
            self._log("debug", "Sync #%d: skipping energy collection (%s)", ticket, err)
            return False

        try:
            collection.set_period(state.start, state.end)
            await collection.async_refresh()
        except SyncFailure as err:
            self._log("warning", "Sync #%d: %s", ticket, err)
            return False
        except Exception as err:
            self._log("warning", "Sync #%d: unexpected error updating energy collection: %r", ticket, err)
            return False
        return True

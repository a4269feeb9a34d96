"""Tests for the Home Assistant adapters used by the sync coordinator."""

from __future__ import annotations

from datetime import date
from unittest.mock import AsyncMock, MagicMock

import pytest

from custom_components.energy_period_selector.const import (
    DATA_ENERGY_COLLECTION,
    DOMAIN,
    EVENT_COLLECTION_REFRESH,
)
from custom_components.energy_period_selector.coordinator.collection import (
    EnergyPeriodCollection,
    EnergyPeriodCollectionProvider,
    EnergyPeriodHelperWriter,
)
from custom_components.energy_period_selector.exceptions import SyncFailure
from homeassistant.exceptions import HomeAssistantError


def _hass(*, existing: bool = True) -> MagicMock:
    hass = MagicMock()
    hass.states.get = MagicMock(return_value=MagicMock() if existing else None)
    hass.services.async_call = AsyncMock()
    hass.data = {}
    hass.config.components = set()
    return hass


@pytest.mark.unit
@pytest.mark.asyncio
async def test_writer_uses_input_datetime_service() -> None:
    """input_datetime helpers are written with set_datetime."""
    hass = _hass()
    writer = EnergyPeriodHelperWriter(hass)

    await writer.async_set_entity_date("input_datetime.energy_start_date", date(2024, 3, 1))

    hass.services.async_call.assert_awaited_once_with(
        "input_datetime",
        "set_datetime",
        {"entity_id": "input_datetime.energy_start_date", "date": "2024-03-01"},
        blocking=True,
    )


@pytest.mark.unit
@pytest.mark.asyncio
async def test_writer_uses_date_service() -> None:
    """date entities are written with set_value."""
    hass = _hass()
    writer = EnergyPeriodHelperWriter(hass)

    await writer.async_set_entity_date("date.energy_end", date(2024, 3, 31))

    hass.services.async_call.assert_awaited_once_with(
        "date",
        "set_value",
        {"entity_id": "date.energy_end", "date": "2024-03-31"},
        blocking=True,
    )


@pytest.mark.unit
@pytest.mark.asyncio
async def test_writer_missing_entity_raises_sync_failure() -> None:
    """A helper that does not exist is a SyncFailure, no service is called."""
    hass = _hass(existing=False)
    writer = EnergyPeriodHelperWriter(hass)

    with pytest.raises(SyncFailure, match="not found"):
        await writer.async_set_entity_date("input_datetime.missing", date(2024, 3, 1))

    hass.services.async_call.assert_not_awaited()


@pytest.mark.unit
@pytest.mark.asyncio
async def test_writer_unsupported_domain_raises_sync_failure() -> None:
    """Entities outside the helper domains cannot be written."""
    writer = EnergyPeriodHelperWriter(_hass())

    with pytest.raises(SyncFailure, match="unsupported domain"):
        await writer.async_set_entity_date("sensor.energy", date(2024, 3, 1))


@pytest.mark.unit
@pytest.mark.asyncio
async def test_writer_service_error_becomes_sync_failure() -> None:
    """Service errors are wrapped so the sync layer handles them uniformly."""
    hass = _hass()
    hass.services.async_call.side_effect = HomeAssistantError("service down")
    writer = EnergyPeriodHelperWriter(hass)

    with pytest.raises(SyncFailure, match="service down"):
        await writer.async_set_entity_date("input_datetime.energy_start_date", date(2024, 3, 1))


@pytest.mark.unit
@pytest.mark.asyncio
async def test_writer_unexpected_error_becomes_sync_failure() -> None:
    """Errors of any type raised by a foreign service handler are wrapped too."""
    hass = _hass()
    hass.services.async_call.side_effect = RuntimeError("handler crashed")
    writer = EnergyPeriodHelperWriter(hass)

    with pytest.raises(SyncFailure, match="handler crashed") as exc_info:
        await writer.async_set_entity_date("date.energy_start", date(2024, 3, 1))

    assert isinstance(exc_info.value.__cause__, RuntimeError)


@pytest.mark.unit
def test_provider_returns_none_without_energy_integration() -> None:
    """No handle exists while the energy integration is not loaded."""
    hass = _hass()

    assert EnergyPeriodCollectionProvider(hass).get_or_create_collection() is None
    assert DOMAIN not in hass.data


@pytest.mark.unit
def test_provider_shares_one_handle() -> None:
    """All providers of one Home Assistant instance share the same handle."""
    hass = _hass()
    hass.config.components = {"energy"}

    first = EnergyPeriodCollectionProvider(hass).get_or_create_collection()
    second = EnergyPeriodCollectionProvider(hass).get_or_create_collection()

    assert first is second
    assert hass.data[DOMAIN][DATA_ENERGY_COLLECTION] is first


@pytest.mark.unit
@pytest.mark.asyncio
async def test_collection_refresh_fires_event() -> None:
    """Refreshing announces the window on the bus."""
    hass = _hass()
    collection = EnergyPeriodCollection(hass)
    collection.set_period(date(2024, 3, 1), date(2024, 3, 31))

    await collection.async_refresh()

    hass.bus.async_fire.assert_called_once_with(
        EVENT_COLLECTION_REFRESH,
        {"start": "2024-03-01", "end": "2024-03-31"},
    )
    assert collection.refresh_count == 1


@pytest.mark.unit
@pytest.mark.asyncio
async def test_collection_refresh_without_period_is_skipped() -> None:
    """Nothing is announced before a window was set."""
    hass = _hass()
    collection = EnergyPeriodCollection(hass)

    await collection.async_refresh()

    hass.bus.async_fire.assert_not_called()
    assert collection.refresh_count == 0

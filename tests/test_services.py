"""Tests for the service handlers."""

from __future__ import annotations

from datetime import date
from unittest.mock import MagicMock

import pytest
import voluptuous as vol

from custom_components.energy_period_selector.const import DOMAIN
from custom_components.energy_period_selector.exceptions import InvalidRangeError
from custom_components.energy_period_selector.services.get_period import handle_get_period
from custom_components.energy_period_selector.services.transitions import (
    APPLY_CUSTOM_RANGE_SERVICE_SCHEMA,
    NAVIGATE_SERVICE_SCHEMA,
    handle_apply_custom_range,
    handle_go_to_today,
    handle_navigate,
    handle_select_period,
)
from homeassistant.config_entries import ConfigEntryState
from homeassistant.exceptions import ServiceValidationError


def _call(data: dict, *, loaded: bool = True) -> tuple[MagicMock, MagicMock]:
    """Build a service call whose entry resolves to a mock coordinator."""
    coordinator = MagicMock()
    entry = MagicMock()
    entry.domain = DOMAIN
    entry.state = ConfigEntryState.LOADED if loaded else ConfigEntryState.NOT_LOADED
    entry.runtime_data.coordinator = coordinator

    call = MagicMock()
    call.data = {"entry_id": "abc", **data}
    call.hass.config_entries.async_get_entry = MagicMock(return_value=entry)
    return call, coordinator


@pytest.mark.unit
@pytest.mark.asyncio
async def test_select_period_delegates_to_coordinator() -> None:
    """select_period passes the kind through unchanged."""
    call, coordinator = _call({"period": "week"})

    await handle_select_period(call)

    coordinator.select_period.assert_called_once_with("week")


@pytest.mark.unit
@pytest.mark.asyncio
@pytest.mark.parametrize(("direction", "step"), [("previous", -1), ("next", 1)])
async def test_navigate_maps_direction(direction: str, step: int) -> None:
    """previous/next map to -1/+1."""
    call, coordinator = _call({"direction": direction})

    await handle_navigate(call)

    coordinator.navigate.assert_called_once_with(step)


@pytest.mark.unit
@pytest.mark.asyncio
async def test_go_to_today() -> None:
    """go_to_today delegates to the coordinator."""
    call, coordinator = _call({})

    await handle_go_to_today(call)

    coordinator.go_to_today.assert_called_once_with()


@pytest.mark.unit
@pytest.mark.asyncio
async def test_apply_custom_range_rejects_reversed_dates() -> None:
    """InvalidRangeError surfaces as a translated validation error."""
    call, coordinator = _call({"start_date": date(2024, 3, 10), "end_date": date(2024, 3, 1)})
    coordinator.apply_custom_range.side_effect = InvalidRangeError("start after end")

    with pytest.raises(ServiceValidationError) as exc_info:
        await handle_apply_custom_range(call)

    assert exc_info.value.translation_key == "invalid_range"
    assert exc_info.value.translation_placeholders == {"start": "2024-03-10", "end": "2024-03-01"}


@pytest.mark.unit
@pytest.mark.asyncio
async def test_get_period_returns_snapshot() -> None:
    """get_period responds with the coordinator snapshot."""
    call, coordinator = _call({})
    coordinator.get_period_snapshot.return_value = {"start": "2024-03-15", "end": "2024-03-15", "period": "day"}

    response = await handle_get_period(call)

    assert response == {"start": "2024-03-15", "end": "2024-03-15", "period": "day"}


@pytest.mark.unit
@pytest.mark.asyncio
async def test_unloaded_entry_rejected() -> None:
    """Services refuse entries that are not loaded."""
    call, coordinator = _call({}, loaded=False)

    with pytest.raises(ServiceValidationError) as exc_info:
        await handle_go_to_today(call)

    assert exc_info.value.translation_key == "invalid_entry_id"
    coordinator.go_to_today.assert_not_called()


@pytest.mark.unit
def test_schemas_validate_input() -> None:
    """Schemas coerce dates and reject unknown directions."""
    data = APPLY_CUSTOM_RANGE_SERVICE_SCHEMA({"entry_id": "abc", "start_date": "2024-03-01", "end_date": "2024-03-10"})
    assert data["start_date"] == date(2024, 3, 1)

    with pytest.raises(vol.Invalid, match="direction"):
        NAVIGATE_SERVICE_SCHEMA({"entry_id": "abc", "direction": "sideways"})

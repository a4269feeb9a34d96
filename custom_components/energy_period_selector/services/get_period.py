"""
Service handler for get_period service.

Returns the committed period of one selector in the change event format
({"start", "end", "period"} with ISO dates), extended with the latest sync
ticket, the compare flag and the last sync result.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from .helpers import ATTR_ENTRY_ID, ENTRY_SCHEMA, get_entry_and_coordinator

if TYPE_CHECKING:
    from homeassistant.core import ServiceCall, ServiceResponse

GET_PERIOD_SERVICE_NAME: Final = "get_period"
GET_PERIOD_SERVICE_SCHEMA: Final = ENTRY_SCHEMA


async def handle_get_period(call: ServiceCall) -> ServiceResponse:
    """Return a snapshot of the committed period."""
    _entry, coordinator = get_entry_and_coordinator(call.hass, call.data[ATTR_ENTRY_ID])
    return coordinator.get_period_snapshot()

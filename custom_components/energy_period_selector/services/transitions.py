"""
Service handlers for period transitions.

Each service mirrors one control of the selector and drives the same
transition as the corresponding entity:

Services:
    select_period: Switch period kind (re-anchors to today)
    navigate: Move the current period backward or forward
    go_to_today: Jump to today as a day period
    apply_custom_range: Commit a custom start/end range

"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Final

import voluptuous as vol

from custom_components.energy_period_selector.const import DOMAIN, PERIOD_ORDER
from custom_components.energy_period_selector.exceptions import InvalidRangeError
from homeassistant.exceptions import ServiceValidationError
from homeassistant.helpers import config_validation as cv

from .helpers import ATTR_ENTRY_ID, ENTRY_SCHEMA, get_entry_and_coordinator

if TYPE_CHECKING:
    from homeassistant.core import ServiceCall

_LOGGER = logging.getLogger(__name__)

ATTR_PERIOD: Final = "period"
ATTR_DIRECTION: Final = "direction"
ATTR_START_DATE: Final = "start_date"
ATTR_END_DATE: Final = "end_date"

DIRECTION_PREVIOUS: Final = "previous"
DIRECTION_NEXT: Final = "next"
_DIRECTIONS: Final = {DIRECTION_PREVIOUS: -1, DIRECTION_NEXT: 1}

SELECT_PERIOD_SERVICE_NAME: Final = "select_period"
SELECT_PERIOD_SERVICE_SCHEMA: Final = ENTRY_SCHEMA.extend(
    {
        vol.Required(ATTR_PERIOD): vol.In(PERIOD_ORDER),
    }
)

NAVIGATE_SERVICE_NAME: Final = "navigate"
NAVIGATE_SERVICE_SCHEMA: Final = ENTRY_SCHEMA.extend(
    {
        vol.Required(ATTR_DIRECTION): vol.In(list(_DIRECTIONS)),
    }
)

GO_TO_TODAY_SERVICE_NAME: Final = "go_to_today"
GO_TO_TODAY_SERVICE_SCHEMA: Final = ENTRY_SCHEMA

APPLY_CUSTOM_RANGE_SERVICE_NAME: Final = "apply_custom_range"
APPLY_CUSTOM_RANGE_SERVICE_SCHEMA: Final = ENTRY_SCHEMA.extend(
    {
        vol.Required(ATTR_START_DATE): cv.date,
        vol.Required(ATTR_END_DATE): cv.date,
    }
)


async def handle_select_period(call: ServiceCall) -> None:
    """Switch the selector of the given entry to another period kind."""
    _entry, coordinator = get_entry_and_coordinator(call.hass, call.data[ATTR_ENTRY_ID])
    coordinator.select_period(call.data[ATTR_PERIOD])


async def handle_navigate(call: ServiceCall) -> None:
    """
    Move the current period one unit.

    Ignored (no change, no event) while a custom range is active.
    """
    _entry, coordinator = get_entry_and_coordinator(call.hass, call.data[ATTR_ENTRY_ID])
    coordinator.navigate(_DIRECTIONS[call.data[ATTR_DIRECTION]])


async def handle_go_to_today(call: ServiceCall) -> None:
    """Jump to today as a day period."""
    _entry, coordinator = get_entry_and_coordinator(call.hass, call.data[ATTR_ENTRY_ID])
    coordinator.go_to_today()


async def handle_apply_custom_range(call: ServiceCall) -> None:
    """
    Commit a custom range.

    Raises:
        ServiceValidationError: If the start date lies after the end date

    """
    _entry, coordinator = get_entry_and_coordinator(call.hass, call.data[ATTR_ENTRY_ID])
    start = call.data[ATTR_START_DATE]
    end = call.data[ATTR_END_DATE]

    try:
        coordinator.apply_custom_range(start, end)
    except InvalidRangeError as err:
        _LOGGER.debug("Rejected custom range %s..%s: %s", start, end, err)
        raise ServiceValidationError(
            translation_domain=DOMAIN,
            translation_key="invalid_range",
            translation_placeholders={"start": start.isoformat(), "end": end.isoformat()},
        ) from err

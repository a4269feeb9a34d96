"""
Service handlers for Energy Period Selector integration.

This package exposes every selector control as a service, so automations and
scripts can drive the period without touching the entities:
- select_period, navigate, go_to_today, apply_custom_range (transitions.py)
- get_period: read the committed period (get_period.py)

Architecture:
- helpers.py: Common utilities (get_entry_and_coordinator, entry schema)
- transitions.py: Handlers delegating to the coordinator's transitions
- get_period.py: Response-only snapshot service

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from custom_components.energy_period_selector.const import DOMAIN
from homeassistant.core import SupportsResponse, callback

from .get_period import GET_PERIOD_SERVICE_NAME, GET_PERIOD_SERVICE_SCHEMA, handle_get_period
from .transitions import (
    APPLY_CUSTOM_RANGE_SERVICE_NAME,
    APPLY_CUSTOM_RANGE_SERVICE_SCHEMA,
    GO_TO_TODAY_SERVICE_NAME,
    GO_TO_TODAY_SERVICE_SCHEMA,
    NAVIGATE_SERVICE_NAME,
    NAVIGATE_SERVICE_SCHEMA,
    SELECT_PERIOD_SERVICE_NAME,
    SELECT_PERIOD_SERVICE_SCHEMA,
    handle_apply_custom_range,
    handle_go_to_today,
    handle_navigate,
    handle_select_period,
)

if TYPE_CHECKING:
    from homeassistant.core import HomeAssistant

__all__ = [
    "SERVICE_NAMES",
    "async_setup_services",
]

SERVICE_NAMES = (
    SELECT_PERIOD_SERVICE_NAME,
    NAVIGATE_SERVICE_NAME,
    GO_TO_TODAY_SERVICE_NAME,
    APPLY_CUSTOM_RANGE_SERVICE_NAME,
    GET_PERIOD_SERVICE_NAME,
)


@callback
def async_setup_services(hass: HomeAssistant) -> None:
    """Set up services for Energy Period Selector integration."""
    hass.services.async_register(
        DOMAIN,
        SELECT_PERIOD_SERVICE_NAME,
        handle_select_period,
        schema=SELECT_PERIOD_SERVICE_SCHEMA,
    )
    hass.services.async_register(
        DOMAIN,
        NAVIGATE_SERVICE_NAME,
        handle_navigate,
        schema=NAVIGATE_SERVICE_SCHEMA,
    )
    hass.services.async_register(
        DOMAIN,
        GO_TO_TODAY_SERVICE_NAME,
        handle_go_to_today,
        schema=GO_TO_TODAY_SERVICE_SCHEMA,
    )
    hass.services.async_register(
        DOMAIN,
        APPLY_CUSTOM_RANGE_SERVICE_NAME,
        handle_apply_custom_range,
        schema=APPLY_CUSTOM_RANGE_SERVICE_SCHEMA,
    )
    hass.services.async_register(
        DOMAIN,
        GET_PERIOD_SERVICE_NAME,
        handle_get_period,
        schema=GET_PERIOD_SERVICE_SCHEMA,
        supports_response=SupportsResponse.ONLY,
    )

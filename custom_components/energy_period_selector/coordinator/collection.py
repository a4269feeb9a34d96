"""
Home Assistant adapters for the sync collaborators.

- EnergyPeriodHelperWriter: writes dates to input_datetime/date helper entities
- EnergyPeriodCollection: shared handle describing the energy aggregation window
- EnergyPeriodCollectionProvider: lazily creates/reuses the shared handle

Every failure talking to Home Assistant is converted into SyncFailure so the
sync coordinator can treat all collaborators uniformly.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import voluptuous as vol

from custom_components.energy_period_selector.const import (
    DATA_ENERGY_COLLECTION,
    DOMAIN,
    ENERGY_DOMAIN,
    EVENT_COLLECTION_REFRESH,
    HELPER_DOMAIN_DATE,
    HELPER_DOMAIN_INPUT_DATETIME,
)
from custom_components.energy_period_selector.exceptions import SyncFailure
from homeassistant.core import split_entity_id
from homeassistant.exceptions import HomeAssistantError

if TYPE_CHECKING:
    from datetime import date

    from homeassistant.core import HomeAssistant

_LOGGER = logging.getLogger(__name__)

# Service used to write a date, per helper domain
_SET_DATE_SERVICES = {
    HELPER_DOMAIN_INPUT_DATETIME: "set_datetime",
    HELPER_DOMAIN_DATE: "set_value",
}


class EnergyPeriodHelperWriter:
    """Write a single date to a helper entity through its domain's service."""

    def __init__(self, hass: HomeAssistant) -> None:
        """Initialize the writer."""
        self.hass = hass

    async def async_set_entity_date(self, entity_id: str, value: date) -> None:
        """
        Write value to entity_id.

        Raises:
            SyncFailure: If the entity is missing, has an unsupported domain
                or the service call fails

        """
        if self.hass.states.get(entity_id) is None:
            raise SyncFailure(SyncFailure.ENTITY_NOT_FOUND.format(entity_id=entity_id))

        domain = split_entity_id(entity_id)[0]
        service = _SET_DATE_SERVICES.get(domain)
        if service is None:
            raise SyncFailure(SyncFailure.UNSUPPORTED_DOMAIN.format(entity_id=entity_id))

        try:
            await self.hass.services.async_call(
                domain,
                service,
                {"entity_id": entity_id, "date": value.isoformat()},
                blocking=True,
            )
        except (HomeAssistantError, vol.Invalid) as exception:
            raise SyncFailure(
                SyncFailure.WRITE_FAILED.format(date=value.isoformat(), entity_id=entity_id, exception=exception)
            ) from exception
        except Exception as exception:
            # Service handlers of other integrations may raise anything
            _LOGGER.debug("Unexpected error from %s.%s for %s", domain, service, entity_id, exc_info=True)
            raise SyncFailure(
                SyncFailure.WRITE_FAILED.format(date=value.isoformat(), entity_id=entity_id, exception=exception)
            ) from exception


class EnergyPeriodCollection:
    """
    Handle to the energy data collection window.

    One handle exists per Home Assistant instance. Setting the period only
    stores the window; refreshing announces it on the event bus so energy
    cards and automations recompute for the new range.
    """

    def __init__(self, hass: HomeAssistant) -> None:
        """Initialize the collection handle."""
        self.hass = hass
        self.start: date | None = None
        self.end: date | None = None
        self.refresh_count = 0

    def set_period(self, start: date, end: date) -> None:
        """Set the aggregation window."""
        self.start = start
        self.end = end

    async def async_refresh(self) -> None:
        """Request a recompute for the current window."""
        if self.start is None or self.end is None:
            return
        try:
            self.hass.bus.async_fire(EVENT_COLLECTION_REFRESH, self.as_dict())
        except HomeAssistantError as exception:
            raise SyncFailure(SyncFailure.REFRESH_FAILED.format(exception=exception)) from exception
        self.refresh_count += 1

    def as_dict(self) -> dict[str, Any]:
        """Serialize the window."""
        return {
            "start": self.start.isoformat() if self.start else None,
            "end": self.end.isoformat() if self.end else None,
        }


class EnergyPeriodCollectionProvider:
    """Create or reuse the shared EnergyPeriodCollection."""

    def __init__(self, hass: HomeAssistant) -> None:
        """Initialize the provider."""
        self.hass = hass

    def get_or_create_collection(self) -> EnergyPeriodCollection | None:
        """Return the shared handle, or None while the energy integration is not loaded."""
        if ENERGY_DOMAIN not in self.hass.config.components:
            return None

        domain_data = self.hass.data.setdefault(DOMAIN, {})
        collection = domain_data.get(DATA_ENERGY_COLLECTION)
        if collection is None:
            collection = EnergyPeriodCollection(self.hass)
            domain_data[DATA_ENERGY_COLLECTION] = collection
            _LOGGER.debug("Created energy collection handle")
        return collection

"""
Diagnostics support for energy_period_selector.

Learn more about diagnostics:
https://developers.home-assistant.io/docs/core/integration_diagnostics
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .const import DATA_ENERGY_COLLECTION, DOMAIN

if TYPE_CHECKING:
    from homeassistant.core import HomeAssistant

    from .data import EnergyPeriodSelectorConfigEntry


async def async_get_config_entry_diagnostics(
    hass: HomeAssistant,
    entry: EnergyPeriodSelectorConfigEntry,
) -> dict[str, Any]:
    """Return diagnostics for a config entry."""
    coordinator = entry.runtime_data.coordinator
    config = entry.runtime_data.config
    collection = hass.data.get(DOMAIN, {}).get(DATA_ENERGY_COLLECTION)
    last_event = coordinator.notifier.last_event

    return {
        "entry": {
            "entry_id": entry.entry_id,
            "version": entry.version,
            "minor_version": entry.minor_version,
            "domain": entry.domain,
            "title": entry.title,
            "state": str(entry.state),
        },
        "config": {
            "data": dict(entry.data),
            "options": dict(entry.options),
            "period_kinds": [str(kind) for kind in config.period_kinds],
            "start_date_helper": config.sync.start_helper_id,
            "end_date_helper": config.sync.end_helper_id,
            "auto_sync_helpers": config.sync.auto_sync_enabled,
        },
        "state": coordinator.get_period_snapshot(),
        "notifier": {
            "last_event": last_event.as_dict() if last_event else None,
        },
        "collection": collection.as_dict() if collection else None,
        "localization": {
            "language": coordinator.localization.language,
            "loaded_languages": coordinator.localization.loaded_languages,
        },
    }

"""Period sensor entities."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from custom_components.energy_period_selector.const import PERIOD_ICON_MAPPING
from custom_components.energy_period_selector.entity import EnergyPeriodSelectorEntity
from custom_components.energy_period_selector.entity_utils import (
    build_debug_attributes,
    build_period_attributes,
)
from homeassistant.components.sensor import SensorEntity

if TYPE_CHECKING:
    from datetime import date

    from custom_components.energy_period_selector.coordinator import EnergyPeriodCoordinator

    from .definitions import EnergyPeriodSensorEntityDescription


class EnergyPeriodSensor(EnergyPeriodSelectorEntity, SensorEntity):
    """Sensor rendering one aspect of the committed period."""

    entity_description: EnergyPeriodSensorEntityDescription

    # Labels and bookkeeping change with every transition; keep them out of history
    _unrecorded_attributes = frozenset(
        {
            "period_label",
            "range_label",
            "ticket",
            "last_sync",
            "last_sync_result",
            "language",
        }
    )

    def __init__(
        self,
        coordinator: EnergyPeriodCoordinator,
        entity_description: EnergyPeriodSensorEntityDescription,
    ) -> None:
        """Initialize the sensor."""
        super().__init__(coordinator, entity_description.key)
        self.entity_description = entity_description

    @property
    def native_value(self) -> str | date:
        """Return the rendered value of the committed period."""
        return self.entity_description.value_fn(self.coordinator)

    @property
    def icon(self) -> str | None:
        """Follow the committed period kind on the range sensor."""
        if self.entity_description.with_period_attributes:
            return PERIOD_ICON_MAPPING.get(str(self.coordinator.data.kind), self.entity_description.icon)
        return self.entity_description.icon

    @property
    def extra_state_attributes(self) -> dict[str, Any] | None:
        """Return the period attributes (range sensor only)."""
        if not self.entity_description.with_period_attributes:
            return None

        attributes = build_period_attributes(self.coordinator)
        if self.coordinator.selector_config.debug:
            attributes.update(build_debug_attributes(self.coordinator))
        return attributes

"""Period select entity."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from custom_components.energy_period_selector.const import PERIOD_ICON_MAPPING
from custom_components.energy_period_selector.entity import EnergyPeriodSelectorEntity
from custom_components.energy_period_selector.entity_utils import period_label
from homeassistant.components.select import SelectEntity

if TYPE_CHECKING:
    from custom_components.energy_period_selector.coordinator import EnergyPeriodCoordinator
    from homeassistant.components.select import SelectEntityDescription


class EnergyPeriodSelect(EnergyPeriodSelectorEntity, SelectEntity):
    """
    Select entity for the period kind.

    Options are the enabled period kinds in canonical order. The current
    option mirrors the committed state; a custom range applied through the
    service while "custom" is not enabled shows as unknown.
    """

    def __init__(
        self,
        coordinator: EnergyPeriodCoordinator,
        entity_description: SelectEntityDescription,
    ) -> None:
        """Initialize the select entity."""
        super().__init__(coordinator, entity_description.key)
        self.entity_description = entity_description
        self._attr_options = [str(kind) for kind in coordinator.selector_config.period_kinds]

    @property
    def current_option(self) -> str | None:
        """Return the committed period kind."""
        kind = str(self.coordinator.data.kind)
        return kind if kind in self.options else None

    @property
    def icon(self) -> str | None:
        """Return the icon of the committed period kind."""
        return PERIOD_ICON_MAPPING.get(str(self.coordinator.data.kind), self.entity_description.icon)

    @property
    def extra_state_attributes(self) -> dict[str, Any]:
        """Return the localized labels of all options."""
        config = self.coordinator.selector_config
        return {
            "period_labels": {
                str(kind): period_label(kind, self.localize, config.custom_period_label)
                for kind in config.period_kinds
            },
        }

    async def async_select_option(self, option: str) -> None:
        """Commit the selected period kind."""
        self.coordinator.select_period(option)

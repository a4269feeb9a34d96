"""Main config flow for energy_period_selector integration."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from custom_components.energy_period_selector.config_flow_handlers.options_flow import (
    EnergyPeriodSelectorOptionsFlowHandler,
)
from custom_components.energy_period_selector.config_flow_handlers.schemas import get_selector_schema
from custom_components.energy_period_selector.config_flow_handlers.validators import (
    normalize_selector_input,
    validate_selector_input,
)
from custom_components.energy_period_selector.const import CONF_TITLE, DEFAULT_NAME, DOMAIN
from homeassistant.config_entries import ConfigFlow, ConfigFlowResult, OptionsFlow
from homeassistant.core import callback

if TYPE_CHECKING:
    from homeassistant.config_entries import ConfigEntry


class EnergyPeriodSelectorFlowHandler(ConfigFlow, domain=DOMAIN):
    """
    Config flow for energy_period_selector.

    Several selectors may coexist (one per dashboard), so no unique id is set.
    """

    VERSION = 1
    MINOR_VERSION = 0

    @staticmethod
    @callback
    def async_get_options_flow(_config_entry: ConfigEntry) -> OptionsFlow:
        """Create an options flow for this configentry."""
        return EnergyPeriodSelectorOptionsFlowHandler()

    async def async_step_user(
        self,
        user_input: dict[str, Any] | None = None,
    ) -> ConfigFlowResult:
        """Handle a flow initialized by the user."""
        errors: dict[str, str] = {}

        if user_input is not None:
            data = normalize_selector_input(user_input)
            if error := validate_selector_input(data):
                errors["base"] = error
            else:
                return self.async_create_entry(
                    title=data[CONF_TITLE] or DEFAULT_NAME,
                    data=data,
                )

        return self.async_show_form(
            step_id="user",
            data_schema=get_selector_schema(user_input or {}),
            errors=errors,
        )

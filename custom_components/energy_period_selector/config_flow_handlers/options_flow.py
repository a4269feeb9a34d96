"""Options flow for energy_period_selector integration."""

from __future__ import annotations

import logging
from typing import Any

from custom_components.energy_period_selector.config_flow_handlers.schemas import get_selector_schema
from custom_components.energy_period_selector.config_flow_handlers.validators import (
    normalize_selector_input,
    validate_selector_input,
)
from homeassistant.config_entries import ConfigFlowResult, OptionsFlow

_LOGGER = logging.getLogger(__name__)


class EnergyPeriodSelectorOptionsFlowHandler(OptionsFlow):
    """
    Handle options for energy_period_selector entries.

    Options hold the complete selector configuration and take precedence over
    the entry data; saving them reloads the entry.
    """

    def _current_values(self) -> dict[str, Any]:
        return {**self.config_entry.data, **self.config_entry.options}

    async def async_step_init(self, user_input: dict[str, Any] | None = None) -> ConfigFlowResult:
        """Manage the selector options."""
        errors: dict[str, str] = {}

        if user_input is not None:
            options = normalize_selector_input(user_input)
            if error := validate_selector_input(options):
                errors["base"] = error
            else:
                _LOGGER.debug("Updating options of %s", self.config_entry.title)
                return self.async_create_entry(title="", data=options)

        return self.async_show_form(
            step_id="init",
            data_schema=get_selector_schema(user_input or self._current_values()),
            errors=errors,
        )

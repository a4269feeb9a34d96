"""Schema definitions for Energy Period Selector config flow."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import voluptuous as vol

from custom_components.energy_period_selector.const import (
    BUTTON_TYPES,
    CONF_AUTO_SYNC_HELPERS,
    CONF_BUTTON_ICON,
    CONF_BUTTON_SHOW,
    CONF_BUTTON_TEXT,
    CONF_BUTTON_TYPE,
    CONF_COMPARE_BUTTON,
    CONF_CUSTOM_PERIOD_LABEL,
    CONF_DEBUG,
    CONF_END_DATE_HELPER,
    CONF_PERIOD_BUTTONS,
    CONF_PREV_NEXT_BUTTONS,
    CONF_START_DATE_HELPER,
    CONF_TITLE,
    CONF_TODAY_BUTTON,
    DEFAULT_AUTO_SYNC_HELPERS,
    DEFAULT_COMPARE_BUTTON,
    DEFAULT_DEBUG,
    DEFAULT_END_DATE_HELPER,
    DEFAULT_PERIOD_BUTTONS,
    DEFAULT_PREV_NEXT_BUTTONS,
    DEFAULT_START_DATE_HELPER,
    DEFAULT_TODAY_BUTTON,
    HELPER_DOMAINS,
    PERIOD_ORDER,
)
from homeassistant.data_entry_flow import section
from homeassistant.helpers.selector import (
    BooleanSelector,
    EntitySelector,
    EntitySelectorConfig,
    IconSelector,
    SelectSelector,
    SelectSelectorConfig,
    SelectSelectorMode,
    TextSelector,
    TextSelectorConfig,
    TextSelectorType,
)

if TYPE_CHECKING:
    from collections.abc import Mapping


def _suggested(value: Any) -> dict[str, Any]:
    """Pre-fill an optional field without making its value sticky."""
    return {"suggested_value": value} if value else {}


def _button_section(values: Mapping[str, Any], defaults: Mapping[str, Any]) -> section:
    """Return a collapsible section for the today/compare button display options."""
    return section(
        vol.Schema(
            {
                vol.Optional(
                    CONF_BUTTON_SHOW,
                    default=bool(values.get(CONF_BUTTON_SHOW, defaults[CONF_BUTTON_SHOW])),
                ): BooleanSelector(),
                vol.Optional(
                    CONF_BUTTON_TYPE,
                    default=str(values.get(CONF_BUTTON_TYPE, defaults[CONF_BUTTON_TYPE])),
                ): SelectSelector(
                    SelectSelectorConfig(
                        options=BUTTON_TYPES,
                        mode=SelectSelectorMode.LIST,
                        translation_key="button_type",
                    ),
                ),
                vol.Optional(
                    CONF_BUTTON_TEXT,
                    description=_suggested(values.get(CONF_BUTTON_TEXT)),
                ): TextSelector(TextSelectorConfig(type=TextSelectorType.TEXT)),
                vol.Optional(
                    CONF_BUTTON_ICON,
                    default=str(values.get(CONF_BUTTON_ICON) or defaults[CONF_BUTTON_ICON]),
                ): IconSelector(),
            }
        ),
        {"collapsed": True},
    )


def get_selector_schema(values: Mapping[str, Any]) -> vol.Schema:
    """
    Return the selector schema shared by the user step and the options step.

    Args:
        values: Current configuration used for defaults (empty on first setup)

    """
    return vol.Schema(
        {
            vol.Optional(
                CONF_TITLE,
                description=_suggested(values.get(CONF_TITLE)),
            ): TextSelector(TextSelectorConfig(type=TextSelectorType.TEXT)),
            vol.Required(
                CONF_PERIOD_BUTTONS,
                default=list(values.get(CONF_PERIOD_BUTTONS, DEFAULT_PERIOD_BUTTONS)),
            ): SelectSelector(
                SelectSelectorConfig(
                    options=PERIOD_ORDER,
                    multiple=True,
                    mode=SelectSelectorMode.LIST,
                    translation_key="period_buttons",
                ),
            ),
            vol.Required(
                CONF_START_DATE_HELPER,
                default=str(values.get(CONF_START_DATE_HELPER, DEFAULT_START_DATE_HELPER)),
            ): EntitySelector(EntitySelectorConfig(domain=HELPER_DOMAINS)),
            vol.Required(
                CONF_END_DATE_HELPER,
                default=str(values.get(CONF_END_DATE_HELPER, DEFAULT_END_DATE_HELPER)),
            ): EntitySelector(EntitySelectorConfig(domain=HELPER_DOMAINS)),
            vol.Optional(
                CONF_AUTO_SYNC_HELPERS,
                default=bool(values.get(CONF_AUTO_SYNC_HELPERS, DEFAULT_AUTO_SYNC_HELPERS)),
            ): BooleanSelector(),
            vol.Optional(
                CONF_PREV_NEXT_BUTTONS,
                default=bool(values.get(CONF_PREV_NEXT_BUTTONS, DEFAULT_PREV_NEXT_BUTTONS)),
            ): BooleanSelector(),
            vol.Optional(
                CONF_CUSTOM_PERIOD_LABEL,
                description=_suggested(values.get(CONF_CUSTOM_PERIOD_LABEL)),
            ): TextSelector(TextSelectorConfig(type=TextSelectorType.TEXT)),
            vol.Optional(
                CONF_DEBUG,
                default=bool(values.get(CONF_DEBUG, DEFAULT_DEBUG)),
            ): BooleanSelector(),
            vol.Required(CONF_TODAY_BUTTON): _button_section(
                values.get(CONF_TODAY_BUTTON) or {},
                DEFAULT_TODAY_BUTTON,
            ),
            vol.Required(CONF_COMPARE_BUTTON): _button_section(
                values.get(CONF_COMPARE_BUTTON) or {},
                DEFAULT_COMPARE_BUTTON,
            ),
        }
    )

"""Validation functions for Energy Period Selector config flow."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from custom_components.energy_period_selector.const import (
    CONF_BUTTON_TEXT,
    CONF_COMPARE_BUTTON,
    CONF_CUSTOM_PERIOD_LABEL,
    CONF_TITLE,
    CONF_TODAY_BUTTON,
)
from custom_components.energy_period_selector.exceptions import ConfigurationError
from custom_components.energy_period_selector.selector_config import SelectorConfig

if TYPE_CHECKING:
    from collections.abc import Mapping

_LOGGER = logging.getLogger(__name__)

# Optional text fields; the frontend omits them when cleared
_OPTIONAL_TEXT_KEYS = (CONF_TITLE, CONF_CUSTOM_PERIOD_LABEL)


def normalize_selector_input(user_input: Mapping[str, Any]) -> dict[str, Any]:
    """
    Fill in cleared optional text fields with empty strings.

    Without this, clearing a field in the options flow would fall back to the
    value stored in the entry data.
    """
    normalized = dict(user_input)
    for key in _OPTIONAL_TEXT_KEYS:
        normalized[key] = (normalized.get(key) or "").strip()
    for key in (CONF_TODAY_BUTTON, CONF_COMPARE_BUTTON):
        button = dict(normalized.get(key) or {})
        button[CONF_BUTTON_TEXT] = (button.get(CONF_BUTTON_TEXT) or "").strip()
        normalized[key] = button
    return normalized


def validate_selector_input(user_input: Mapping[str, Any]) -> str | None:
    """
    Validate the selector form.

    Returns:
        The error key for errors["base"], or None when the input is valid

    """
    try:
        SelectorConfig.from_mapping(user_input)
    except ConfigurationError as err:
        _LOGGER.debug("Rejected selector configuration: %s", err)
        return err.reason
    return None

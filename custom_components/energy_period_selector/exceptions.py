"""Custom exceptions for the Energy Period Selector integration."""

from __future__ import annotations

from homeassistant.exceptions import HomeAssistantError


class EnergyPeriodSelectorError(HomeAssistantError):
    """Base exception for the integration."""


class ConfigurationError(EnergyPeriodSelectorError):
    """
    Exception to indicate missing or invalid setup configuration.

    Raised synchronously while building the selector configuration. The
    ``reason`` doubles as the config flow error key.
    """

    NO_PERIODS = "At least one period button must be enabled"
    UNKNOWN_PERIOD = "Unknown period kind: {period}"
    DUPLICATE_PERIOD = "Period kind listed more than once: {period}"
    INVALID_HELPER = "Invalid helper entity id for {key}: {entity_id}"
    SAME_HELPERS = "Start and end helper must be different entities"
    INVALID_BUTTON_TYPE = "Invalid button type for {key}: {value}"
    INVALID_VALUE = "Invalid value for {key}: {value}"

    def __init__(self, message: str, reason: str = "invalid_config") -> None:
        """Initialize with a human readable message and a translation reason."""
        super().__init__(message)
        self.reason = reason


class InvalidRangeError(EnergyPeriodSelectorError, ValueError):
    """Exception to indicate a date range whose start lies after its end."""

    START_AFTER_END = "Start date {start} is after end date {end}"


class SyncFailure(EnergyPeriodSelectorError):
    """Exception to indicate an external write or refresh failed."""

    ENTITY_NOT_FOUND = "Helper entity {entity_id} not found"
    UNSUPPORTED_DOMAIN = "Helper entity {entity_id} has unsupported domain"
    WRITE_FAILED = "Writing {date} to {entity_id} failed: {exception}"
    REFRESH_FAILED = "Refreshing energy collection failed: {exception}"


class CollectionUnavailableError(EnergyPeriodSelectorError):
    """Exception to indicate no energy collection is reachable."""

    NOT_LOADED = "Energy integration is not loaded"

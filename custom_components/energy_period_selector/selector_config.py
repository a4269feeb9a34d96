"""Validated, immutable selector configuration built from config entry data."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from homeassistant.core import split_entity_id, valid_entity_id

from .const import (
    BUTTON_TYPE_ICON,
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
    DEFAULT_TITLE,
    DEFAULT_TODAY_BUTTON,
    HELPER_DOMAINS,
    PERIOD_ORDER,
)
from .coordinator.sync import SyncConfig
from .exceptions import ConfigurationError
from .period import PeriodKind


@dataclass(frozen=True, slots=True)
class ButtonDisplayConfig:
    """Display options of the today/compare button."""

    show: bool
    type: str
    text: str
    icon: str

    @property
    def uses_icon(self) -> bool:
        return self.type == BUTTON_TYPE_ICON


@dataclass(frozen=True, slots=True)
class SelectorConfig:
    """Complete selector configuration."""

    title: str
    period_kinds: tuple[PeriodKind, ...]
    sync: SyncConfig
    prev_next_buttons: bool
    today_button: ButtonDisplayConfig
    compare_button: ButtonDisplayConfig
    custom_period_label: str | None
    debug: bool

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> SelectorConfig:
        """
        Build the configuration from entry data merged with options.

        Missing keys fall back to the defaults. Period kinds are normalized to
        canonical order (day, week, month, year, custom).

        Raises:
            ConfigurationError: If any value is invalid

        """
        start_helper = _helper_id(data, CONF_START_DATE_HELPER, DEFAULT_START_DATE_HELPER)
        end_helper = _helper_id(data, CONF_END_DATE_HELPER, DEFAULT_END_DATE_HELPER)
        if start_helper == end_helper:
            raise ConfigurationError(ConfigurationError.SAME_HELPERS, "same_helpers")

        custom_label = data.get(CONF_CUSTOM_PERIOD_LABEL)
        if custom_label is not None and not isinstance(custom_label, str):
            raise ConfigurationError(
                ConfigurationError.INVALID_VALUE.format(key=CONF_CUSTOM_PERIOD_LABEL, value=custom_label)
            )

        return cls(
            title=str(data.get(CONF_TITLE) or DEFAULT_TITLE),
            period_kinds=_period_kinds(data.get(CONF_PERIOD_BUTTONS, DEFAULT_PERIOD_BUTTONS)),
            sync=SyncConfig(
                start_helper_id=start_helper,
                end_helper_id=end_helper,
                auto_sync_enabled=_flag(data, CONF_AUTO_SYNC_HELPERS, default=DEFAULT_AUTO_SYNC_HELPERS),
            ),
            prev_next_buttons=_flag(data, CONF_PREV_NEXT_BUTTONS, default=DEFAULT_PREV_NEXT_BUTTONS),
            today_button=_button(data, CONF_TODAY_BUTTON, DEFAULT_TODAY_BUTTON),
            compare_button=_button(data, CONF_COMPARE_BUTTON, DEFAULT_COMPARE_BUTTON),
            custom_period_label=(custom_label or "").strip() or None,
            debug=_flag(data, CONF_DEBUG, default=DEFAULT_DEBUG),
        )


def _flag(data: Mapping[str, Any], key: str, *, default: bool) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise ConfigurationError(ConfigurationError.INVALID_VALUE.format(key=key, value=value))
    return value


def _helper_id(data: Mapping[str, Any], key: str, default: str) -> str:
    entity_id = data.get(key) or default
    if (
        not isinstance(entity_id, str)
        or not valid_entity_id(entity_id)
        or split_entity_id(entity_id)[0] not in HELPER_DOMAINS
    ):
        raise ConfigurationError(
            ConfigurationError.INVALID_HELPER.format(key=key, entity_id=entity_id),
            "invalid_helper",
        )
    return entity_id


def _period_kinds(value: Any) -> tuple[PeriodKind, ...]:
    if isinstance(value, str) or not isinstance(value, (list, tuple)):
        raise ConfigurationError(ConfigurationError.INVALID_VALUE.format(key=CONF_PERIOD_BUTTONS, value=value))
    if not value:
        raise ConfigurationError(ConfigurationError.NO_PERIODS, "no_periods")

    # Kinds are kept in the configured order; buttons render in that order
    kinds: list[PeriodKind] = []
    for period in value:
        if period not in PERIOD_ORDER:
            raise ConfigurationError(ConfigurationError.UNKNOWN_PERIOD.format(period=period), "unknown_period")
        if period in kinds:
            raise ConfigurationError(ConfigurationError.DUPLICATE_PERIOD.format(period=period), "duplicate_period")
        kinds.append(PeriodKind(period))

    return tuple(kinds)


def _button(data: Mapping[str, Any], key: str, defaults: Mapping[str, Any]) -> ButtonDisplayConfig:
    section = data.get(key) or {}
    if not isinstance(section, Mapping):
        raise ConfigurationError(ConfigurationError.INVALID_VALUE.format(key=key, value=section))

    merged = {**defaults, **{k: v for k, v in section.items() if v is not None}}
    if merged[CONF_BUTTON_TYPE] not in BUTTON_TYPES:
        raise ConfigurationError(
            ConfigurationError.INVALID_BUTTON_TYPE.format(key=key, value=merged[CONF_BUTTON_TYPE]),
            "invalid_button_type",
        )
    if not isinstance(merged[CONF_BUTTON_SHOW], bool):
        raise ConfigurationError(ConfigurationError.INVALID_VALUE.format(key=key, value=merged[CONF_BUTTON_SHOW]))

    return ButtonDisplayConfig(
        show=merged[CONF_BUTTON_SHOW],
        type=merged[CONF_BUTTON_TYPE],
        text=str(merged[CONF_BUTTON_TEXT]),
        icon=str(merged[CONF_BUTTON_ICON] or defaults[CONF_BUTTON_ICON]),
    )

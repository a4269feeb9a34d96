"""Constants for the Energy Period Selector integration."""

import logging
from pathlib import Path
from typing import Final

DOMAIN = "energy_period_selector"

# Integration name should match manifest.json
DEFAULT_NAME = "Energy Period Selector"

LOGGER = logging.getLogger(__package__)

# Configuration keys (entry data / options)
CONF_TITLE = "title"
CONF_PERIOD_BUTTONS = "period_buttons"
CONF_START_DATE_HELPER = "start_date_helper"
CONF_END_DATE_HELPER = "end_date_helper"
CONF_AUTO_SYNC_HELPERS = "auto_sync_helpers"
CONF_PREV_NEXT_BUTTONS = "prev_next_buttons"
CONF_TODAY_BUTTON = "today_button"
CONF_COMPARE_BUTTON = "compare_button"
CONF_CUSTOM_PERIOD_LABEL = "custom_period_label"
CONF_DEBUG = "debug"

# Keys inside the today_button / compare_button sections
CONF_BUTTON_SHOW = "show"
CONF_BUTTON_TYPE = "type"
CONF_BUTTON_TEXT = "text"
CONF_BUTTON_ICON = "icon"

BUTTON_TYPE_TEXT = "text"
BUTTON_TYPE_ICON = "icon"
BUTTON_TYPES = [BUTTON_TYPE_TEXT, BUTTON_TYPE_ICON]

# Period kind identifiers in canonical order (see period.types.PeriodKind)
PERIOD_DAY = "day"
PERIOD_WEEK = "week"
PERIOD_MONTH = "month"
PERIOD_YEAR = "year"
PERIOD_CUSTOM = "custom"
PERIOD_ORDER = [PERIOD_DAY, PERIOD_WEEK, PERIOD_MONTH, PERIOD_YEAR, PERIOD_CUSTOM]

# Helper entities may live in either of these domains
HELPER_DOMAIN_INPUT_DATETIME = "input_datetime"
HELPER_DOMAIN_DATE = "date"
HELPER_DOMAINS = [HELPER_DOMAIN_INPUT_DATETIME, HELPER_DOMAIN_DATE]

# Defaults mirror the stub configuration of the Lovelace card this integration replaces
DEFAULT_TITLE = ""
DEFAULT_PERIOD_BUTTONS = [PERIOD_DAY, PERIOD_WEEK, PERIOD_MONTH, PERIOD_YEAR]
DEFAULT_START_DATE_HELPER = "input_datetime.energy_start_date"
DEFAULT_END_DATE_HELPER = "input_datetime.energy_end_date"
DEFAULT_AUTO_SYNC_HELPERS = True
DEFAULT_PREV_NEXT_BUTTONS = True
DEFAULT_DEBUG = False

DEFAULT_TODAY_BUTTON = {
    CONF_BUTTON_SHOW: True,
    CONF_BUTTON_TYPE: BUTTON_TYPE_ICON,
    CONF_BUTTON_TEXT: "",
    CONF_BUTTON_ICON: "mdi:calendar-today",
}
DEFAULT_COMPARE_BUTTON = {
    CONF_BUTTON_SHOW: False,
    CONF_BUTTON_TYPE: BUTTON_TYPE_TEXT,
    CONF_BUTTON_TEXT: "",
    CONF_BUTTON_ICON: "mdi:compare",
}

# Bus events
EVENT_PERIOD_CHANGED: Final = f"{DOMAIN}_period_changed"
EVENT_COLLECTION_REFRESH: Final = f"{DOMAIN}_collection_refresh"

# hass.data keys
DATA_ENERGY_COLLECTION = "energy_collection"

# The energy collection is only reachable while this integration is loaded
ENERGY_DOMAIN = "energy"

# Icons for period kinds (select entity options, sensors)
PERIOD_ICON_MAPPING = {
    PERIOD_DAY: "mdi:calendar-today",
    PERIOD_WEEK: "mdi:calendar-week",
    PERIOD_MONTH: "mdi:calendar-month",
    PERIOD_YEAR: "mdi:calendar-blank-multiple",
    PERIOD_CUSTOM: "mdi:calendar-range",
}

# Path to the runtime (card) translations, loaded by EnergyPeriodLocalization
CUSTOM_TRANSLATIONS_DIR = Path(__file__).parent / "custom_translations"

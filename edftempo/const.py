"""Constants for the EDF Tempo price schedule."""

from __future__ import annotations

from zoneinfo import ZoneInfo

USER_AGENT = "edftempo/0.1.0"

# Tariff authority
DEFAULT_TIME_ZONE = "Europe/Paris"
FRANCE_TZ = ZoneInfo(DEFAULT_TIME_ZONE)
HOUR_OF_CHANGE = 6
OFF_PEAK_START = 22

# Day colour feed
DEFAULT_BASE_URL = "https://www.api-couleur-tempo.fr/api/joursTempo"
API_DEFAULT_TIMEOUT = 10
API_DATE_FORMAT = "%Y-%m-%d"
API_QUERY_DATE = "dateJour[]"
API_KEY_DATE = "dateJour"
API_KEY_CODE = "codeJour"
API_KEY_PERIOD = "periode"

# Config keys
CONF_BASE_URL = "base_url"
CONF_TIME_ZONE = "time_zone"
CONF_CLAMP_TO_WINDOW = "clamp_to_window"
CONF_BLUE_HC = "blue_hc"
CONF_BLUE_HP = "blue_hp"
CONF_WHITE_HC = "white_hc"
CONF_WHITE_HP = "white_hp"
CONF_RED_HC = "red_hc"
CONF_RED_HP = "red_hp"
